"""Annotator configuration model."""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pathmark.domain.config._patterns import validate_patterns


class AnnotateConfig(BaseModel):
    """Configuration for the path annotator.

    Attributes:
        comment_prefixes: Extension (with leading dot) -> single-line comment token.
            Lookup is case-sensitive; unmapped extensions are never touched.
        ignore_patterns: Regular expressions matched against bare entry names
        whitelist: Exact names that are visited even if a pattern matches
        marker: Token that identifies an existing path annotation
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    comment_prefixes: Dict[str, str] = Field(
        default_factory=lambda: {
            ".go": "//",
            ".js": "//",
            ".ts": "//",
            ".java": "//",
            ".c": "//",
            ".cpp": "//",
            ".php": "//",
            ".sh": "#",
            ".py": "#",
            ".yml": "#",
            ".yaml": "#",
            ".env": "#",
            ".gitignore": "#",
        }
    )
    ignore_patterns: List[str] = Field(
        default_factory=lambda: [
            r"^\.",
            r"^node_modules$",
            r"^tmp$",
            r"^docs$",  # generated API docs
            r"^vendor$",
            r"^tests$",
            r"\.exe$",
            r"^go\.sum$",
            r"^go\.mod$",  # some tools choke on a comment here
        ]
    )
    whitelist: List[str] = Field(default_factory=list)
    marker: str = Field("File:", min_length=1)

    @field_validator("comment_prefixes")
    @classmethod
    def _check_prefixes(cls, value: Dict[str, str]) -> Dict[str, str]:
        for extension, prefix in value.items():
            if not extension.startswith("."):
                raise ValueError(f"extension {extension!r} must start with '.'")
            if not prefix.strip():
                raise ValueError(f"comment prefix for {extension!r} must not be empty")
        return value

    @field_validator("ignore_patterns")
    @classmethod
    def _check_patterns(cls, value: List[str]) -> List[str]:
        return validate_patterns(value)
