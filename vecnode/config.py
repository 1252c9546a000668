"""
Editor settings.

Values come from ``VECNODE_*`` environment variables, optionally seeded from
a ``.env`` file (python-dotenv) so a host can configure the core without
touching code.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

ENV_PREFIX = "VECNODE_"


class EditorSettings(BaseModel):
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    # Horizontal gap between nodes placed without an explicit position
    node_spacing: float = 180.0

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @field_validator("node_spacing")
    @classmethod
    def _positive_spacing(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("node_spacing must be positive")
        return value


def load_settings(env_file: Optional[str] = None) -> EditorSettings:
    """Build settings from the environment (and ``env_file`` if given)."""
    if env_file is not None:
        load_dotenv(env_file)

    values = {}
    for field_name in EditorSettings.model_fields:
        raw = os.environ.get(ENV_PREFIX + field_name.upper())
        if raw is not None:
            values[field_name] = raw
    return EditorSettings(**values)


def configure_logging(settings: EditorSettings) -> None:
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
