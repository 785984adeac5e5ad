"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from pathmark.domain.config.annotate import AnnotateConfig
from pathmark.domain.config.tree import TreeConfig


class AppConfig(BaseModel):
    """Main application configuration.

    Root model aggregating the fixed tables of both tools. It is built once
    at startup and never mutated afterwards.

    Attributes:
        annotate: Path annotator tables
        tree: Tree renderer tables
    """

    annotate: AnnotateConfig = Field(default_factory=AnnotateConfig)
    tree: TreeConfig = Field(default_factory=TreeConfig)

    model_config = ConfigDict(frozen=True, extra="forbid")
