"""
Pods Integrator Python Logger

日志文件统一存储在 ~/.pods_integrator/logs/ 目录下。

Usage:
    from pods_integrator.lib.logger import get_logger, LogContext

    logger = get_logger('integrator')
    logger.info("Integrating library")

    with LogContext(logger, "add_pods_library"):
        logger.debug("Adding static library reference")
"""
import logging
import os
import sys
from datetime import datetime
from functools import wraps
from typing import Optional

from .constants import (
    LOG_FORMAT,
    LOG_FORMAT_DETAILED,
    LOG_TIMESTAMP_FORMAT,
    DATE_FORMAT,
    ENV_VERBOSE,
    ensure_logs_dir,
)


class IntegratorLogger:
    """Pods Integrator 日志记录器"""

    _instances: dict = {}
    _session_id: Optional[str] = None

    def __init__(self, name: str, log_file: Optional[str] = None):
        self.name = name
        self.logger = logging.getLogger(f"pods_integrator.{name}")
        self.logger.setLevel(logging.DEBUG)
        self.log_file: Optional[str] = None

        # 确保不重复添加 handler
        if not self.logger.handlers:
            self._setup_handlers(log_file)

    def _setup_handlers(self, log_file: Optional[str] = None):
        """设置日志处理器"""
        if log_file is None:
            log_file = self._get_default_log_file()

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED, DATE_FORMAT))
        self.logger.addHandler(file_handler)

        # 控制台处理器 - 通过环境变量开启
        if os.environ.get(ENV_VERBOSE):
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
            self.logger.addHandler(console_handler)

        self.log_file = log_file

    def _get_default_log_file(self) -> str:
        """获取默认日志文件路径"""
        logs_dir = ensure_logs_dir()

        # 使用会话 ID 确保同一次运行的日志在同一个文件
        if IntegratorLogger._session_id is None:
            IntegratorLogger._session_id = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        session_id = IntegratorLogger._session_id
        return str(logs_dir / f"{self.name}_{session_id}.log")

    def close(self):
        """关闭并移除所有 handler"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def debug(self, msg: str, *args, **kwargs):
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self.logger.error(msg, *args, **kwargs)

    def log_separator(self, title: str = ""):
        """记录分隔线"""
        if title:
            self.info(f"{'=' * 20} {title} {'=' * 20}")
        else:
            self.info("=" * 60)

    def log_list(self, title: str, items: list, level: str = "debug", max_items: int = 20):
        """记录列表数据"""
        log_func = getattr(self, level, self.debug)
        log_func(f"{title} ({len(items)} items):")
        for i, item in enumerate(items[:max_items]):
            log_func(f"  [{i}] {item}")
        if len(items) > max_items:
            log_func(f"  ... and {len(items) - max_items} more")


def get_logger(name: str, log_file: Optional[str] = None) -> IntegratorLogger:
    """
    获取日志记录器（单例模式）

    Args:
        name: 日志记录器名称，如 'integrator', 'cli'
        log_file: 可选的日志文件路径

    Returns:
        IntegratorLogger 实例
    """
    if name not in IntegratorLogger._instances:
        IntegratorLogger._instances[name] = IntegratorLogger(name, log_file)
    return IntegratorLogger._instances[name]


def reset_session():
    """重置会话（用于新的运行），关闭已打开的日志文件"""
    for instance in IntegratorLogger._instances.values():
        instance.close()
    IntegratorLogger._session_id = None
    IntegratorLogger._instances.clear()


def log_function(logger_name: str = "integrator"):
    """函数装饰器，自动记录函数调用"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(logger_name)
            func_name = func.__name__
            logger.debug(f"Calling {func_name}()")
            try:
                result = func(*args, **kwargs)
                logger.debug(f"{func_name}() completed successfully")
                return result
            except Exception as e:
                logger.error(f"{func_name}() failed: {e}")
                raise
        return wrapper
    return decorator
