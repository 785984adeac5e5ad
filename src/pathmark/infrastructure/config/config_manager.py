"""Configuration manager for building the immutable application config"""

import copy
import logging
import os
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from pathmark.domain.config import AnnotateConfig, AppConfig, TreeConfig

logger = logging.getLogger(__name__)

EXTRA_IGNORE_ENV = "PATHMARK_EXTRA_IGNORE"


class ConfigurationError(Exception):
    """Configuration validation error."""

    pass


class ConfigManager:
    """Builds the application configuration once at startup

    Configuration priority:
    1. Default values (defined in Pydantic models)
    2. Programmatic overrides passed to the constructor
    3. Environment variables (PATHMARK_*)

    No configuration file is read; the tables are fixed at startup.
    """

    def __init__(self, overrides: Optional[Dict[str, Any]] = None):
        """Initialize config manager

        Args:
            overrides: Nested dict merged over the defaults, e.g.
                ``{"tree": {"root_label": "."}}``

        Raises:
            ConfigurationError: If configuration validation fails
        """
        self.overrides = overrides or {}
        try:
            self.config: AppConfig = self._load_config()
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(x) for x in error["loc"])
                msg = error["msg"]
                errors.append(f"  - {field}: {msg}")
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            ) from e

    def _load_config(self) -> AppConfig:
        """Merge defaults, overrides and environment, then validate

        Returns:
            Validated AppConfig instance

        Raises:
            ValidationError: If configuration is invalid
        """
        config_dict = AppConfig().model_dump()
        config_dict = self._merge_config(config_dict, copy.deepcopy(self.overrides))
        config_dict = self._apply_env_overrides(config_dict)
        return AppConfig(**config_dict)

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Merged configuration
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with env overrides applied
        """
        extra = self._split_patterns(os.getenv(EXTRA_IGNORE_ENV, ""))
        if extra:
            logger.debug(f"Extra ignore patterns from {EXTRA_IGNORE_ENV}: {extra}")
            for section in ("annotate", "tree"):
                # Malformed sections are left for pydantic to report
                if not isinstance(config.get(section), dict):
                    continue
                patterns = config[section].get("ignore_patterns")
                if isinstance(patterns, list):
                    config[section]["ignore_patterns"] = patterns + extra
        return config

    @staticmethod
    def _split_patterns(raw: str) -> List[str]:
        return [p.strip() for p in raw.split(",") if p.strip()]

    def get_annotate_config(self) -> AnnotateConfig:
        """Get annotator configuration

        Returns:
            Annotator configuration model
        """
        return self.config.annotate

    def get_tree_config(self) -> TreeConfig:
        """Get tree renderer configuration

        Returns:
            Tree renderer configuration model
        """
        return self.config.tree
