"""
Core domain types

与工程文件后端无关的领域类型：库描述、xcconfig 解析、配置加载、结构化事件、错误类型。
"""
from .errors import (
    Informative,
    TargetNotFoundError,
    ConfigError,
    XcconfigError,
    ProjectValidationError,
)
from .events import (
    Severity,
    Diagnostic,
    SectionEvent,
    StepEvent,
    EventLog,
)
from .integration_target import IntegrationTarget

__all__ = [
    'Informative',
    'TargetNotFoundError',
    'ConfigError',
    'XcconfigError',
    'ProjectValidationError',
    'Severity',
    'Diagnostic',
    'SectionEvent',
    'StepEvent',
    'EventLog',
    'IntegrationTarget',
]
