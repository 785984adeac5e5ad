"""Tree renderer configuration model."""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pathmark.domain.config._patterns import validate_patterns


class TreeConfig(BaseModel):
    """Configuration for the tree renderer.

    Attributes:
        ignore_patterns: Regular expressions matched against bare entry names
        whitelist: Exact names shown even if a pattern matches (e.g. `.gitignore`)
        remarks: Entry name -> suffix appended to its tree line
        root_label: Line printed above the rendered tree
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ignore_patterns: List[str] = Field(
        default_factory=lambda: [
            r"^\.",
            r"^node_modules$",
            r"^tmp$",
            r"^docs$",
            r"^tests$",
            r"\.exe$",
            r"\.log$",
            r"^go\.sum$",
            r"^LICENSE$",
            r"^README\.md$",
        ]
    )
    whitelist: List[str] = Field(default_factory=lambda: [".env.example", ".gitignore"])
    remarks: Dict[str, str] = Field(
        default_factory=lambda: {
            "main.go": "  # [entry]",
            "client.go": "  # [core] TCB SDK",
        }
    )
    root_label: str = "/"

    @field_validator("ignore_patterns")
    @classmethod
    def _check_patterns(cls, value: List[str]) -> List[str]:
        return validate_patterns(value)
