"""
build setting 覆盖检查

xcconfig 作为 base configuration 时，Target 本地定义的同名设置会覆盖它。
这里只产生警告，不修改工程，也不会中断集成。
"""
from typing import Dict, List, Mapping, TYPE_CHECKING

from ..core.events import Diagnostic, Severity
from .project_document import BuildTarget
from .templates import INHERITED_FLAG, OVERRIDE_ACTIONS, OVERRIDE_MESSAGE_TEMPLATE

if TYPE_CHECKING:
    from .integrator import TargetIntegrator


class OverrideCheckerMixin:
    """覆盖检查相关的 Mixin 类"""

    def find_overridden_build_settings(
        self: "TargetIntegrator",
        attributes: Mapping[str, str],
        target: BuildTarget
    ) -> Dict[str, List[str]]:
        """
        Returns:
            {build setting key: [覆盖它的 configuration 名称]}，按 key 首次出现的顺序
        """
        configs_by_overridden_key: Dict[str, List[str]] = {}
        for config in target.build_configurations:
            for key in attributes:
                target_value = config.build_setting(key)
                if target_value and INHERITED_FLAG not in target_value:
                    configs_by_overridden_key.setdefault(key, []).append(config.name)
        return configs_by_overridden_key

    def check_overridden_build_settings(
        self: "TargetIntegrator",
        attributes: Mapping[str, str],
        target: BuildTarget
    ) -> List[Diagnostic]:
        """每个被覆盖的 key 产生一条警告"""
        if not attributes:
            return []

        diagnostics = []
        overridden = self.find_overridden_build_settings(attributes, target)
        for key, config_names in overridden.items():
            name = f"{target.name} [{' - '.join(config_names)}]"
            diagnostic = Diagnostic(
                message=OVERRIDE_MESSAGE_TEMPLATE.format(
                    name=name, key=key, xcconfig=self.library.xcconfig_relative_path
                ),
                suggested_actions=OVERRIDE_ACTIONS,
                severity=Severity.WARNING,
                target_name=target.name,
                setting_key=key,
                configurations=tuple(config_names),
            )
            self.logger.warning(diagnostic.message)
            self.events.emit(diagnostic)
            diagnostics.append(diagnostic)
        return diagnostics
