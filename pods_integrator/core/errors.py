"""
错误类型

Informative 及其子类的 message 面向用户，由 CLI 原样输出。
打开 / 保存工程时的 OSError 不做包装，直接抛给调用方。
"""


class Informative(Exception):
    """用户可处理的错误"""


class TargetNotFoundError(Informative):
    """库描述中的 Target UUID 在工程中不存在"""

    def __init__(self, uuid: str, library: str):
        self.uuid = uuid
        self.library = library
        super().__init__(
            f"[Bug] Unable to find the target with the `{uuid}` UUID "
            f"for the `{library}` library"
        )


class ConfigError(Informative):
    """配置文件格式错误"""


class XcconfigError(Informative):
    """xcconfig 文件无法读取"""


class ProjectValidationError(Informative):
    """序列化后的工程文件未通过校验"""
