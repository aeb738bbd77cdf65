"""
Configuration Module - 集成配置文件解析
"""
import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..lib.logger import get_logger
from .errors import ConfigError
from .integration_target import IntegrationTarget


@dataclass
class IntegratorConfig:
    """完整的集成配置"""
    # 只执行集成步骤，不写回工程
    dry_run: bool = False
    # 保存前用 plutil 校验（仅在 plutil 可用时）
    validate_saved_project: bool = True
    # 按顺序集成的库
    libraries: List[IntegrationTarget] = field(default_factory=list)


class ConfigLoader:
    """配置加载器"""

    DEFAULT_CONFIG = {
        "dry_run": False,
        "validate_saved_project": True,
        "libraries": [],
    }

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else None
        self._config: Dict[str, Any] = {}
        self.logger = get_logger("integrator")

    def load(self) -> IntegratorConfig:
        """加载配置文件"""
        self.logger.debug(f"Loading config from: {self.config_path}")

        self._config = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path and self.config_path.exists():
            with open(self.config_path, 'r', encoding='utf-8') as f:
                try:
                    user_config = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigError(f"Invalid YAML in `{self.config_path}`: {e}") from e
            if not isinstance(user_config, dict):
                raise ConfigError(f"Config `{self.config_path}` must be a mapping")
            self._merge_config(self._config, user_config)
            self.logger.debug(f"Merged {len(user_config)} user config keys")
        elif self.config_path:
            raise ConfigError(f"Config file not found: {self.config_path}")
        else:
            self.logger.debug("No config file given, using defaults only")

        config = self._build_config()
        self.logger.debug(f"Config built: {len(config.libraries)} libraries")
        return config

    def _merge_config(self, base: Dict, override: Dict):
        """递归合并配置"""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _build_config(self) -> IntegratorConfig:
        base_dir = self.config_path.parent if self.config_path else None

        entries = self._config.get("libraries") or []
        if not isinstance(entries, list):
            raise ConfigError("`libraries` must be a list")

        libraries = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise ConfigError(f"Invalid library entry: {entry!r}")
            libraries.append(IntegrationTarget.from_dict(entry, base_dir))

        return IntegratorConfig(
            dry_run=bool(self._config.get("dry_run", False)),
            validate_saved_project=bool(self._config.get("validate_saved_project", True)),
            libraries=libraries,
        )
