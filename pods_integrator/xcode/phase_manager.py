"""
集成步骤模块

四个步骤只作用于未集成的 Target，顺序固定：
base configuration -> 静态库 -> 资源拷贝脚本 -> Manifest.lock 检查脚本。
"""
from typing import TYPE_CHECKING

from .templates import (
    COPY_RESOURCES_PHASE_NAME,
    COPY_RESOURCES_SCRIPT_TEMPLATE,
    CHECK_MANIFEST_PHASE_NAME,
    CHECK_MANIFEST_SCRIPT,
)

if TYPE_CHECKING:
    from .integrator import TargetIntegrator


class PhaseManagerMixin:
    """集成步骤相关的 Mixin 类"""

    def xcconfig_file_reference(self: "TargetIntegrator") -> str:
        """xcconfig 的文件引用，工程中已有则复用，同一次运行只创建一次"""
        if self._xcconfig_ref is None:
            path = self.library.xcconfig_relative_path
            ref_id = self.user_project.find_file_reference(path)
            if ref_id is None:
                ref_id = self.user_project.new_file_reference(path)
            self._xcconfig_ref = ref_id
        return self._xcconfig_ref

    def add_xcconfig_base_configuration(self: "TargetIntegrator"):
        """
        把生成的 xcconfig 设置为所有 configuration 的 base configuration

        设置之前先检查 Target 是否覆盖了 xcconfig 中的 build setting。
        """
        xcconfig_ref = self.xcconfig_file_reference()
        attributes = self.xcconfig_attributes
        for target in self.targets:
            self.check_overridden_build_settings(attributes, target)
            for config in target.build_configurations:
                previous = config.base_configuration_reference
                if previous and previous != xcconfig_ref:
                    self.logger.debug(
                        f"Replacing base configuration {previous} of {target.name} [{config.name}]"
                    )
                config.base_configuration_reference = xcconfig_ref

    def add_pods_library(self: "TargetIntegrator"):
        """在 Frameworks 分组下添加静态库，并加入每个 Target 的 Frameworks Build Phase"""
        library_ref = self.user_project.new_static_library(self.library.label)
        for target in self.targets:
            target.add_file_reference(library_ref)
            self.logger.debug(f"Added {self.library.product_name} to {target.name}")

    def add_copy_resources_script_phase(self: "TargetIntegrator"):
        """追加资源拷贝脚本"""
        script = COPY_RESOURCES_SCRIPT_TEMPLATE.format(
            path=self.library.copy_resources_script_relative_path
        )
        for target in self.targets:
            phase_id = self.user_project.new_shell_script_build_phase(COPY_RESOURCES_PHASE_NAME, script)
            target.append_build_phase(phase_id)

    def add_check_manifest_lock_script_phase(self: "TargetIntegrator"):
        """Manifest.lock 检查脚本插入到 Build Phases 最前面 (index 0)"""
        for target in self.targets:
            phase_id = self.user_project.new_shell_script_build_phase(
                CHECK_MANIFEST_PHASE_NAME, CHECK_MANIFEST_SCRIPT
            )
            target.insert_build_phase(phase_id, 0)
