"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from linkmarker.version import PACKAGE_NAME, package_version


def _default_user_agent() -> str:
    return f"{PACKAGE_NAME}/{package_version()}"


class CheckerConfig(BaseModel):
    root: Path = Path(".")
    check_http: bool = True
    check_images: bool = True
    timeout: float = Field(default=10.0, gt=0)
    max_redirects: int = Field(default=5, ge=0, le=20)
    max_concurrent: int = Field(default=8, ge=1, le=64)
    user_agent: str = Field(default_factory=_default_user_agent)

    model_config = {"frozen": True}

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("user_agent must be non-empty")
        return value
