"""
Pods Integrator Logger Module

统一日志模块，日志文件存储在 ~/.pods_integrator/logs/ 目录下
（可通过 PODS_INTEGRATOR_LOG_DIR 覆盖）。

Usage:
    from pods_integrator.lib.logger import get_logger, LogContext

    logger = get_logger("integrator")
    logger.info("Integrating library")

Available loggers:
    - integrator: 集成器日志
    - cli: 命令行入口日志
"""
from .python_logger import (
    IntegratorLogger,
    get_logger,
    reset_session,
    log_function,
)
from .context import LogContext
from .utils import cleanup_old_logs
from .constants import ENV_VERBOSE, ENV_LOG_DIR

__all__ = [
    # 核心类和函数
    'IntegratorLogger',
    'get_logger',
    'LogContext',
    'reset_session',
    'log_function',

    # 工具函数
    'cleanup_old_logs',

    # 常量
    'ENV_VERBOSE',
    'ENV_LOG_DIR',
]
