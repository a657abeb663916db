# src/treasury_yields/config/loader.py
from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from treasury_yields.config.models import ServiceConfig


def load_config(path: str | Path) -> ServiceConfig:
    """
    Load a ServiceConfig from YAML or JSON.

    Automatically validates using Pydantic v2. An empty file gives defaults.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    text = path.read_text()

    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            raw = yaml.safe_load(text)
        elif path.suffix.lower() == ".json":
            raw = json.loads(text) if text.strip() else None
        else:
            raise ValueError("Config path must be YAML or JSON.")
    except Exception as e:
        raise ValueError(f"Failed to parse config: {e}") from e

    try:
        return ServiceConfig.model_validate(raw or {})
    except ValidationError as e:
        raise ValueError(f"Invalid ServiceConfig: {e}") from e
