"""
TargetIntegrator 主类

组合所有 Mixin 类，把一个库集成到它的用户工程中。
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..core.events import EventLog, SectionEvent, StepEvent
from ..core.integration_target import IntegrationTarget
from ..core.xcconfig import load_xcconfig
from ..lib.logger import get_logger, LogContext

from .project_document import ProjectDocument
from .target_resolver import TargetResolverMixin
from .override_checker import OverrideCheckerMixin
from .phase_manager import PhaseManagerMixin


@dataclass
class IntegrationResult:
    """一次 integrate 的结果"""
    library: IntegrationTarget
    integrated_targets: Tuple[str, ...]
    saved: bool
    events: EventLog


class TargetIntegrator(TargetResolverMixin, OverrideCheckerMixin, PhaseManagerMixin):
    """单个库的集成器

    工程在第一次访问时从磁盘读取，integrate 结束（成功或失败）后释放，
    其他集成器修改过的工程因此总能被重新读取。
    """

    STEPS = (
        'add_xcconfig_base_configuration',
        'add_pods_library',
        'add_copy_resources_script_phase',
        'add_check_manifest_lock_script_phase',
    )

    def __init__(
        self,
        library: IntegrationTarget,
        events: Optional[EventLog] = None,
        dry_run: bool = False,
        validate_saved_project: bool = True
    ):
        self.library = library
        self.events = events if events is not None else EventLog()
        self.dry_run = dry_run
        self.validate_saved_project = validate_saved_project
        self.logger = get_logger("integrator")

        self._document: Optional[ProjectDocument] = None
        self._targets = None
        self._xcconfig_ref: Optional[str] = None
        self._xcconfig_attributes: Optional[Dict[str, str]] = None

        self.logger.debug(f"TargetIntegrator initialized for {library.label}")
        self.logger.debug(f"User project: {library.user_project_path}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} for library `{self.library.label}`>"

    @property
    def user_project(self) -> ProjectDocument:
        # 每个集成器都重新读取，其他集成器可能已经修改过工程
        if self._document is None:
            self._document = ProjectDocument.open(self.library.user_project_path)
        return self._document

    @property
    def xcconfig_attributes(self) -> Dict[str, str]:
        if self._xcconfig_attributes is None:
            if self.library.xcconfig_attributes is not None:
                self._xcconfig_attributes = dict(self.library.xcconfig_attributes)
            else:
                self._xcconfig_attributes = load_xcconfig(self.library.xcconfig_path)
        return self._xcconfig_attributes

    def close(self):
        """释放工程文档和本次运行的缓存"""
        self._document = None
        self._targets = None
        self._xcconfig_ref = None

    def integrate(self) -> IntegrationResult:
        """
        集成未集成的 Target

        没有需要集成的 Target 时不做任何修改也不保存。
        所有步骤完成后只保存一次，中途失败时磁盘上的工程保持原样。
        """
        self.logger.log_separator(f"Integrate {self.library.label}")
        try:
            targets = self.targets
            if not targets:
                self.logger.info(f"All targets of {self.library.label} already integrated")
                return IntegrationResult(self.library, (), False, self.events)

            target_names = tuple(t.name for t in targets)
            self.events.emit(SectionEvent(
                product_name=self.library.product_name,
                target_names=target_names,
                project_path=str(self.library.user_project_path),
            ))

            with LogContext(self.logger, f"integrate {self.library.label}"):
                for step in self.STEPS:
                    getattr(self, step)()
                    self.events.emit(StepEvent(step, target_names))

                saved = self.save_user_project()
                if saved:
                    self.events.emit(StepEvent('save_user_project', target_names))

            return IntegrationResult(self.library, target_names, saved, self.events)
        finally:
            self.close()

    def save_user_project(self) -> bool:
        """保存工程，dry run 时跳过"""
        if self.dry_run:
            self.logger.info("[DRY RUN] Not saving changes")
            return False
        self.user_project.save(
            self.library.user_project_path,
            validate=self.validate_saved_project
        )
        return True
