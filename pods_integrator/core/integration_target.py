"""
待集成库的只读描述

由外部（依赖解析 / 生成 Pods 工程的组件）构造，集成过程中不会修改。
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

from .errors import ConfigError


REQUIRED_KEYS = (
    'label',
    'user_project_path',
    'user_target_uuids',
    'xcconfig_relative_path',
    'copy_resources_script_relative_path',
)


@dataclass(frozen=True)
class IntegrationTarget:
    """一个库与一个用户工程的组合"""
    # 静态库名称，如 Pods（产物为 libPods.a）
    label: str
    # 集成后 Frameworks 中文件引用的显示名称
    product_name: str
    # 用户工程 .xcodeproj 路径
    user_project_path: str
    # 需要集成的用户 Target UUID（有序、去重）
    user_target_uuids: Tuple[str, ...]
    # 生成的 xcconfig 绝对路径及其相对工程的路径
    xcconfig_path: str
    xcconfig_relative_path: str
    # 资源拷贝脚本相对工程的路径
    copy_resources_script_relative_path: str
    # xcconfig 中的 build settings，None 表示需要从 xcconfig_path 读取
    xcconfig_attributes: Optional[Dict[str, str]] = None

    def __post_init__(self):
        # 重复的 UUID 只集成一次
        object.__setattr__(self, 'user_target_uuids', self.unique_uuids(self.user_target_uuids))

    def __str__(self) -> str:
        return self.label

    @staticmethod
    def unique_uuids(uuids: Iterable[str]) -> Tuple[str, ...]:
        seen = []
        for uuid in uuids:
            if uuid not in seen:
                seen.append(uuid)
        return tuple(seen)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> "IntegrationTarget":
        """
        从配置字典构造

        Args:
            data: 单个库的配置
            base_dir: 相对路径的基准目录（通常是配置文件所在目录）
        """
        missing = [key for key in REQUIRED_KEYS if not data.get(key)]
        if missing:
            raise ConfigError(
                f"Library entry is missing required key(s): {', '.join(missing)}"
            )

        uuids = data['user_target_uuids']
        if isinstance(uuids, str):
            uuids = [uuids]

        label = str(data['label'])
        user_project_path = cls._resolve(data['user_project_path'], base_dir)
        # xcconfig 相对路径默认相对于工程所在目录
        xcconfig_path = data.get('xcconfig_path') or str(
            Path(user_project_path).parent / data['xcconfig_relative_path']
        )

        attributes = data.get('xcconfig_attributes')
        if attributes is not None and not isinstance(attributes, dict):
            raise ConfigError(f"`xcconfig_attributes` of `{label}` must be a mapping")

        return cls(
            label=label,
            product_name=str(data.get('product_name') or f"lib{label}.a"),
            user_project_path=user_project_path,
            user_target_uuids=tuple(str(u) for u in uuids),
            xcconfig_path=cls._resolve(xcconfig_path, base_dir),
            xcconfig_relative_path=str(data['xcconfig_relative_path']),
            copy_resources_script_relative_path=str(data['copy_resources_script_relative_path']),
            xcconfig_attributes=(
                {str(k): str(v) for k, v in attributes.items()}
                if attributes is not None else None
            ),
        )

    @staticmethod
    def _resolve(path: str, base_dir: Optional[Path]) -> str:
        p = Path(path).expanduser()
        if base_dir is not None and not p.is_absolute():
            p = base_dir / p
        return str(p)
