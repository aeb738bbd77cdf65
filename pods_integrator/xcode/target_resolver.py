"""
Target 解析模块

把库描述中的 UUID 解析为工程中的 Target，并过滤掉已经集成过的 Target。
"""
from typing import List, TYPE_CHECKING

from ..core.errors import TargetNotFoundError
from .project_document import BuildTarget

if TYPE_CHECKING:
    from .integrator import TargetIntegrator


class TargetResolverMixin:
    """Target 解析与幂等判断相关的 Mixin 类"""

    @property
    def targets(self: "TargetIntegrator") -> List[BuildTarget]:
        """
        需要集成的 Target 列表

        只计算一次，后续步骤必须看到同一组 Target。
        任何一个 UUID 找不到都直接失败，不做部分集成。
        """
        if self._targets is None:
            resolved = []
            for uuid in self.library.user_target_uuids:
                target = self.user_project.target(uuid)
                if target is None:
                    self.logger.error(f"Target {uuid} not found for library {self.library}")
                    raise TargetNotFoundError(uuid, str(self.library))
                resolved.append(target)

            non_integrated = []
            for target in resolved:
                if self.is_integrated(target):
                    self.logger.info(f"Target '{target.name}' already integrated, skipping")
                else:
                    non_integrated.append(target)

            self.logger.log_list("Targets to integrate", [t.name for t in non_integrated], level="info")
            self._targets = non_integrated
        return self._targets

    def is_integrated(self: "TargetIntegrator", target: BuildTarget) -> bool:
        """Frameworks Build Phase 中已有与 product_name 同名的 PBXFileReference"""
        for file_ref in target.frameworks_file_references():
            if file_ref.isa == 'PBXFileReference' \
                    and self.user_project.display_name(file_ref) == self.library.product_name:
                return True
        return False
