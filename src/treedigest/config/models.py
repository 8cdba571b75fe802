"""Pydantic models describing treedigest configuration."""

from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DigestMode = Literal["serial", "parallel"]


class DigestSettings(BaseModel):
    """Which digest function to use and which digesters to run."""

    model_config = ConfigDict(extra="allow")

    algorithm: Literal["md5", "sha1", "sha256"] = "md5"
    modes: List[DigestMode] = Field(default_factory=lambda: ["serial", "parallel"], min_length=1)

    @field_validator("algorithm", mode="before")
    @classmethod
    def _lower_algorithm(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value


class RuntimeConfig(BaseModel):
    """Execution-time settings: logging and run manifests."""

    model_config = ConfigDict(extra="allow")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_path: Optional[Path] = None
    manifest_dir: Optional[Path] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class TreeDigestConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="allow")

    digest: DigestSettings = Field(default_factory=DigestSettings)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
