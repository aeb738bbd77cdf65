"""
Xcode 工程文档模块

对 pbxproj 的 XcodeProject 做一层薄封装。工程中的对象一律通过 UUID 查找，
BuildTarget / BuildConfiguration 只持有 UUID，不缓存 pbxproj 对象。
"""
import os
import shutil
import subprocess
import tempfile
import uuid
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from pbxproj import XcodeProject, PBXGenericObject
from pbxproj.PBXKey import PBXKey

from ..core.errors import ProjectValidationError
from ..lib.logger import get_logger
from .templates import FRAMEWORKS_GROUP_NAME, STATIC_LIBRARY_PATH_TEMPLATE


TARGET_ISAS = ('PBXNativeTarget', 'PBXAggregateTarget', 'PBXLegacyTarget')


def resolve_pbxproj_path(path: Union[str, Path]) -> Tuple[Path, Path]:
    """
    解析工程路径

    Args:
        path: .xcodeproj 目录或其中的 project.pbxproj

    Returns:
        (xcodeproj_path, pbxproj_path)
    """
    path = Path(path)
    if path.name == 'project.pbxproj':
        return path.parent, path
    return path, path / 'project.pbxproj'


class BuildConfiguration:
    """XCBuildConfiguration 视图"""

    def __init__(self, document: "ProjectDocument", uuid: str):
        self.document = document
        self.uuid = uuid

    @property
    def _object(self):
        return self.document.find_object_by_id(self.uuid)

    @property
    def name(self) -> str:
        return str(getattr(self._object, 'name', ''))

    def build_setting(self, key: str) -> Optional[str]:
        """读取 build setting，多值设置以空格拼接"""
        settings = getattr(self._object, 'buildSettings', None)
        if settings is None:
            return None
        value = getattr(settings, key, None)
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return ' '.join(str(v) for v in value)
        return str(value)

    @property
    def base_configuration_reference(self) -> Optional[str]:
        ref = getattr(self._object, 'baseConfigurationReference', None)
        return str(ref) if ref is not None else None

    @base_configuration_reference.setter
    def base_configuration_reference(self, file_ref_id: str):
        self._object.baseConfigurationReference = self.document.key(file_ref_id)


class BuildTarget:
    """PBXNativeTarget 等 Target 的视图"""

    def __init__(self, document: "ProjectDocument", uuid: str):
        self.document = document
        self.uuid = uuid

    def __repr__(self) -> str:
        return f"<BuildTarget {self.name} ({self.uuid})>"

    @property
    def _object(self):
        return self.document.find_object_by_id(self.uuid)

    @property
    def name(self) -> str:
        return str(getattr(self._object, 'name', ''))

    @property
    def build_configurations(self) -> List[BuildConfiguration]:
        config_list = self.document.find_object_by_id(
            getattr(self._object, 'buildConfigurationList', None)
        )
        if config_list is None:
            return []
        return [
            BuildConfiguration(self.document, str(config_id))
            for config_id in getattr(config_list, 'buildConfigurations', [])
        ]

    @property
    def build_phase_ids(self) -> List[str]:
        return [str(phase_id) for phase_id in getattr(self._object, 'buildPhases', [])]

    def build_phases(self) -> Iterator[Tuple[str, object]]:
        for phase_id in self.build_phase_ids:
            yield phase_id, self.document.find_object_by_id(phase_id)

    def frameworks_build_phase(self, create: bool = False):
        """获取 Frameworks Build Phase，create 为 True 时不存在则追加一个"""
        for _, phase in self.build_phases():
            if phase is not None and phase.isa == 'PBXFrameworksBuildPhase':
                return phase
        if not create:
            return None

        phase_id = self.document.new_object({
            'isa': 'PBXFrameworksBuildPhase',
            'buildActionMask': 2147483647,
            'files': [],
            'runOnlyForDeploymentPostprocessing': 0,
        })
        self.insert_build_phase(phase_id, len(self.build_phase_ids))
        return self.document.find_object_by_id(phase_id)

    def frameworks_file_references(self) -> Iterator[object]:
        """Frameworks Build Phase 中所有文件引用对象（不修改工程）"""
        phase = self.frameworks_build_phase()
        if phase is None:
            return
        for build_file_id in getattr(phase, 'files', []):
            build_file = self.document.find_object_by_id(build_file_id)
            if build_file is None:
                continue
            file_ref = self.document.find_object_by_id(getattr(build_file, 'fileRef', None))
            if file_ref is not None:
                yield file_ref

    def add_file_reference(self, file_ref_id: str) -> str:
        """为文件引用创建 PBXBuildFile 并加入 Frameworks Build Phase"""
        phase = self.frameworks_build_phase(create=True)
        build_file_id = self.document.new_object({'isa': 'PBXBuildFile'})
        build_file = self.document.find_object_by_id(build_file_id)
        build_file.fileRef = self.document.key(file_ref_id)

        files = list(getattr(phase, 'files', []))
        files.append(self.document.key(build_file_id))
        phase.files = files
        return build_file_id

    def insert_build_phase(self, phase_id: str, index: int):
        """在指定位置插入 Build Phase，0 表示最前面"""
        build_phases = list(getattr(self._object, 'buildPhases', []))

        # 确保 index 在有效范围内
        index = max(0, min(index, len(build_phases)))

        build_phases.insert(index, self.document.key(phase_id))
        self._object.buildPhases = build_phases
        self.document.logger.debug(f"Inserted phase {phase_id} into {self.name} at index {index}")

    def append_build_phase(self, phase_id: str):
        self.insert_build_phase(phase_id, len(self.build_phase_ids))


class ProjectDocument:
    """用户工程文档，一个集成器实例对应一次 open / save"""

    def __init__(self, xcodeproj_path: Path, pbxproj_path: Path, project: XcodeProject):
        self.xcodeproj_path = xcodeproj_path
        self.pbxproj_path = pbxproj_path
        self.project = project
        self.logger = get_logger("integrator")

    @classmethod
    def open(cls, path: Union[str, Path]) -> "ProjectDocument":
        """从磁盘读取工程，文件不存在或无法读取时直接抛出 OSError"""
        xcodeproj_path, pbxproj_path = resolve_pbxproj_path(path)
        get_logger("integrator").info(f"Loading project: {pbxproj_path}")
        project = XcodeProject.load(str(pbxproj_path))
        return cls(xcodeproj_path, pbxproj_path, project)

    # ==================== 查找 ====================

    def find_object_by_id(self, object_id) -> Optional[object]:
        if object_id is None:
            return None
        try:
            return self.project.objects[str(object_id)]
        except KeyError:
            return None

    def target(self, object_id: str) -> Optional[BuildTarget]:
        """按 UUID 查找 Target，对象不存在或不是 Target 时返回 None"""
        obj = self.find_object_by_id(object_id)
        if obj is None or obj.isa not in TARGET_ISAS:
            return None
        return BuildTarget(self, object_id)

    def objects_in_section(self, isa: str) -> List[object]:
        return list(self.project.objects.get_objects_in_section(isa))

    @staticmethod
    def display_name(obj) -> str:
        """name 优先，否则取 path 的最后一段"""
        name = getattr(obj, 'name', None)
        if name:
            return str(name)
        path = getattr(obj, 'path', None)
        if path:
            return os.path.basename(str(path))
        return ''

    def main_group(self):
        root = self.find_object_by_id(self.project.rootObject)
        return self.find_object_by_id(root.mainGroup)

    def _children(self, group) -> Iterator[Tuple[str, object]]:
        for child_id in getattr(group, 'children', []):
            yield str(child_id), self.find_object_by_id(child_id)

    def _add_child(self, group, child_id: str):
        children = list(getattr(group, 'children', []))
        children.append(self.key(child_id))
        group.children = children

    def frameworks_group(self) -> str:
        """主分组下的 Frameworks 分组，不存在则创建，返回其 UUID"""
        main_group = self.main_group()
        for child_id, child in self._children(main_group):
            if child is not None and child.isa == 'PBXGroup' \
                    and self.display_name(child) == FRAMEWORKS_GROUP_NAME:
                return child_id

        group_id = self.new_object({
            'isa': 'PBXGroup',
            'children': [],
            'name': FRAMEWORKS_GROUP_NAME,
            'sourceTree': '<group>',
        })
        self._add_child(main_group, group_id)
        self.logger.debug(f"Created {FRAMEWORKS_GROUP_NAME} group: {group_id}")
        return group_id

    def find_file_reference(self, path: str, group_id: Optional[str] = None) -> Optional[str]:
        """按 path 查找 PBXFileReference；指定 group_id 时只查该分组的直接子节点"""
        if group_id is not None:
            candidates = self._children(self.find_object_by_id(group_id))
        else:
            candidates = ((str(obj.get_id()), obj) for obj in self.objects_in_section('PBXFileReference'))
        for ref_id, ref in candidates:
            if ref is not None and ref.isa == 'PBXFileReference' \
                    and str(getattr(ref, 'path', '')) == path:
                return ref_id
        return None

    # ==================== 创建 ====================

    def key(self, object_id: str) -> PBXKey:
        return PBXKey(str(object_id), self.project.objects)

    def generate_id(self) -> str:
        while True:
            object_id = uuid.uuid4().hex[:24].upper()
            if self.find_object_by_id(object_id) is None:
                return object_id

    def new_object(self, data: dict) -> str:
        """创建对象并加入 objects，返回 UUID"""
        object_id = self.generate_id()
        obj = PBXGenericObject().parse(data)
        # 必须在添加到 project.objects 之前设置 _id，否则排序比较会失败
        obj._id = PBXKey(object_id, self.project.objects)
        self.project.objects[object_id] = obj
        return object_id

    def new_file_reference(self, path: str) -> str:
        """在主分组下创建文件引用（相对 group），返回 UUID"""
        data = {
            'isa': 'PBXFileReference',
            'includeInIndex': 1,
            'path': path,
            'sourceTree': '<group>',
        }
        if path.endswith('.xcconfig'):
            data['lastKnownFileType'] = 'text.xcconfig'
        ref_id = self.new_object(data)
        self._add_child(self.main_group(), ref_id)
        self.logger.debug(f"Created file reference {ref_id} for {path}")
        return ref_id

    def new_static_library(self, label: str) -> str:
        """在 Frameworks 分组下创建静态库引用，已存在同名引用时直接复用"""
        group_id = self.frameworks_group()
        path = STATIC_LIBRARY_PATH_TEMPLATE.format(label=label)

        existing = self.find_file_reference(path, group_id)
        if existing is not None:
            self.logger.debug(f"Reusing static library reference {existing} for {path}")
            return existing

        ref_id = self.new_object({
            'isa': 'PBXFileReference',
            'explicitFileType': 'archive.ar',
            'includeInIndex': 0,
            'path': path,
            'sourceTree': 'BUILT_PRODUCTS_DIR',
        })
        self._add_child(self.find_object_by_id(group_id), ref_id)
        self.logger.debug(f"Created static library reference {ref_id} for {path}")
        return ref_id

    def new_shell_script_build_phase(self, name: str, script: str) -> str:
        """创建 Shell Script Build Phase（不加入任何 Target），返回 UUID"""
        return self.new_object({
            'isa': 'PBXShellScriptBuildPhase',
            'buildActionMask': 2147483647,
            'files': [],
            'inputPaths': [],
            'name': name,
            'outputPaths': [],
            'runOnlyForDeploymentPostprocessing': 0,
            'shellPath': '/bin/sh',
            'shellScript': script,
        })

    # ==================== 保存 ====================

    def save(self, path: Optional[Union[str, Path]] = None, validate: bool = True):
        """
        保存工程

        先写到同目录的临时文件，校验通过后再替换原文件，
        任何一步失败原文件都保持不变。
        """
        pbxproj_path = resolve_pbxproj_path(path)[1] if path else self.pbxproj_path
        self.logger.info(f"Saving project: {pbxproj_path}")

        fd, tmp_name = tempfile.mkstemp(
            prefix='project.', suffix='.pbxproj.tmp', dir=str(pbxproj_path.parent)
        )
        os.close(fd)
        tmp_path = Path(tmp_name)

        try:
            self.project.save(str(tmp_path))

            size = tmp_path.stat().st_size
            if size == 0:
                raise ProjectValidationError(
                    f"Serialized project is empty, `{pbxproj_path}` was left untouched"
                )
            self.logger.debug(f"Serialized file size: {size}")

            if validate:
                self._validate(tmp_path, pbxproj_path)

            if pbxproj_path.exists():
                shutil.copymode(str(pbxproj_path), str(tmp_path))
            os.replace(str(tmp_path), str(pbxproj_path))
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

        self.logger.info(f"Project saved successfully: {pbxproj_path}")

    def _validate(self, tmp_path: Path, pbxproj_path: Path):
        """plutil 可用时校验文件格式"""
        plutil = shutil.which('plutil')
        if not plutil:
            self.logger.debug("plutil not available, skipping validation")
            return

        result = subprocess.run(
            [plutil, '-lint', str(tmp_path)],
            capture_output=True, text=True
        )
        if result.returncode != 0:
            self.logger.error(f"Project file validation failed: {result.stderr or result.stdout}")
            raise ProjectValidationError(
                f"Serialized project failed validation, `{pbxproj_path}` was left untouched: "
                f"{(result.stderr or result.stdout).strip()}"
            )
