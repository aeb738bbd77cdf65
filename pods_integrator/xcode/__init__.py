"""Pods Integrator Xcode 集成模块

主要组件:
- TargetIntegrator: 主集成器类
- ProjectDocument: 用户工程文档（基于 pbxproj）
- COPY_RESOURCES_PHASE_NAME / CHECK_MANIFEST_PHASE_NAME: 注入的 Phase 名称
"""
from .integrator import TargetIntegrator, IntegrationResult
from .project_document import ProjectDocument, BuildTarget, BuildConfiguration
from .templates import (
    COPY_RESOURCES_PHASE_NAME,
    CHECK_MANIFEST_PHASE_NAME,
    CHECK_MANIFEST_SCRIPT,
    INHERITED_FLAG,
)

__all__ = [
    'TargetIntegrator',
    'IntegrationResult',
    'ProjectDocument',
    'BuildTarget',
    'BuildConfiguration',
    'COPY_RESOURCES_PHASE_NAME',
    'CHECK_MANIFEST_PHASE_NAME',
    'CHECK_MANIFEST_SCRIPT',
    'INHERITED_FLAG',
]
