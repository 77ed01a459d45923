"""Environment-based configuration."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_SNAPSHOT_PATH = "categories.json"
DEFAULT_GENERATED_PATH = "nzfcc_generated.py"


class Settings(BaseModel):
    snapshot_path: Path = Field(
        default=Path(DEFAULT_SNAPSHOT_PATH),
        description="Taxonomy snapshot downloaded from https://nzfcc.org/downloads/categories.json",
    )
    generated_path: Path = Field(
        default=Path(DEFAULT_GENERATED_PATH),
        description="Where `nzfcc generate` writes the generated module.",
    )
    log_level: str = "INFO"


def load_settings(env_file: Path | None = None) -> Settings:
    """Load settings from the environment, reading a .env file first if present."""
    load_dotenv(env_file or Path.cwd() / ".env")
    return Settings(
        snapshot_path=Path(os.environ.get("NZFCC_SNAPSHOT_PATH", DEFAULT_SNAPSHOT_PATH)),
        generated_path=Path(os.environ.get("NZFCC_GENERATED_PATH", DEFAULT_GENERATED_PATH)),
        log_level=os.environ.get("NZFCC_LOG_LEVEL", "INFO").upper(),
    )
