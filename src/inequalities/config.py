"""Configuration loader for the inequality tools."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

DEFAULTS: Dict[str, Any] = {
    "inequalities": {
        "rows": 2,
        "cols": 2,
        "log_level": "WARNING",
    },
    "mcp_server": {
        "http_host": "127.0.0.1",
        "http_port": 8765,
        "log_level": "INFO",
    },
}


def default_config_path() -> Path:
    repo_root = Path(__file__).resolve().parents[2]
    return repo_root / "config.yaml"


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    *,
    required: bool = False,
) -> Dict[str, Any]:
    """
    Load configuration from YAML, layered over the built-in defaults.

    Args:
        config_path: Path to config.yaml. If None, looks for config.yaml in repo root.
        required: Raise instead of falling back to defaults when the file is missing.

    Returns:
        Configuration dictionary with ``inequalities`` and ``mcp_server`` sections.
    """
    path = Path(config_path) if config_path is not None else default_config_path()

    config = {section: dict(values) for section, values in DEFAULTS.items()}
    if not path.exists():
        if required:
            raise FileNotFoundError(f"Config file not found: {path}")
        return config

    with open(path, "r", encoding="utf-8") as f:
        full_config = yaml.safe_load(f) or {}

    if not isinstance(full_config, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")

    for section, values in full_config.items():
        if section in config and isinstance(values, dict):
            config[section].update(values)

    return config
