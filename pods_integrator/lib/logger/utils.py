"""
Pods Integrator Logger Utilities

日志工具函数（清理等）
"""
from datetime import datetime

from .constants import LOG_RETENTION_DAYS, get_logs_dir


def cleanup_old_logs(max_days: int = LOG_RETENTION_DAYS) -> int:
    """清理旧日志文件

    Args:
        max_days: 保留天数，默认 7 天

    Returns:
        删除的文件数量
    """
    logs_dir = get_logs_dir()
    if not logs_dir.exists():
        return 0

    now = datetime.now()
    deleted_count = 0

    for log_file in logs_dir.glob("*.log"):
        # 格式: name_YYYYMMDD_HHMMSS.log
        parts = log_file.stem.split('_')
        if len(parts) < 3:
            continue
        try:
            file_date = datetime.strptime(parts[-2], "%Y%m%d")
        except ValueError:
            continue
        if (now - file_date).days > max_days:
            log_file.unlink()
            deleted_count += 1

    return deleted_count
