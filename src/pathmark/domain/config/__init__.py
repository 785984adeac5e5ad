"""Configuration models with Pydantic validation."""

from pathmark.domain.config.annotate import AnnotateConfig
from pathmark.domain.config.app import AppConfig
from pathmark.domain.config.tree import TreeConfig

__all__ = [
    "AppConfig",
    "AnnotateConfig",
    "TreeConfig",
]
