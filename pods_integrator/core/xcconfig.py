"""
xcconfig 解析

只解析集成需要的部分：KEY = VALUE、// 注释、#include 与 #include?。
"""
import re
from pathlib import Path
from typing import Dict, List, Optional

from ..lib.logger import get_logger, log_function
from .errors import XcconfigError


INCLUDE_PATTERN = re.compile(r'^#include(\?)?\s+"([^"]+)"\s*$')
SETTING_PATTERN = re.compile(r'^([A-Za-z_][A-Za-z0-9_]*(?:\[[^\]]*\])*)\s*=\s*(.*?)\s*;?\s*$')


def _strip_comment(line: str) -> str:
    # 引号内的 // 不是注释，比如 URL
    in_quotes = False
    for i, ch in enumerate(line):
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == '/' and not in_quotes and line[i:i + 2] == '//':
            return line[:i]
    return line


def parse_xcconfig(text: str, base_dir: Optional[Path] = None,
                   _stack: Optional[List[Path]] = None) -> Dict[str, str]:
    """
    解析 xcconfig 文本

    Args:
        text: 文件内容
        base_dir: #include 的相对路径基准
        _stack: 当前 include 链，用于检测循环引用

    Returns:
        有序的 build setting 字典，后定义的值覆盖先定义的值
    """
    stack = _stack or []
    attributes: Dict[str, str] = {}

    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line:
            continue

        include = INCLUDE_PATTERN.match(line)
        if include:
            optional, rel_path = include.groups()
            include_path = (base_dir or Path('.')) / rel_path
            if not include_path.exists():
                if optional:
                    continue
                raise XcconfigError(f"Unable to find included xcconfig `{include_path}`")
            attributes.update(_load(include_path, stack))
            continue

        line = _strip_comment(line).strip()
        if not line:
            continue

        match = SETTING_PATTERN.match(line)
        if not match:
            get_logger("integrator").debug(f"Skipping unrecognized xcconfig line {lineno}: {raw!r}")
            continue

        key, value = match.groups()
        attributes.pop(key, None)
        attributes[key] = value

    return attributes


def _load(path: Path, stack: List[Path]) -> Dict[str, str]:
    resolved = path.resolve()
    if resolved in stack:
        raise XcconfigError(f"Circular #include of `{path}`")
    try:
        text = resolved.read_text(encoding='utf-8')
    except OSError as e:
        raise XcconfigError(f"Unable to read xcconfig `{path}`: {e}") from e
    return parse_xcconfig(text, resolved.parent, stack + [resolved])


@log_function("integrator")
def load_xcconfig(path: str) -> Dict[str, str]:
    """读取 xcconfig 文件，文件不存在时返回空字典"""
    xcconfig_path = Path(path)
    if not xcconfig_path.exists():
        get_logger("integrator").debug(f"xcconfig not found, no attributes: {xcconfig_path}")
        return {}
    return _load(xcconfig_path, [])
