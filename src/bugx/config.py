from __future__ import annotations
from pathlib import Path
import copy
import yaml

DEFAULT_SPEED = 50

DEFAULT_CONFIG: dict = {
    "speed": DEFAULT_SPEED,
    "base_dir": None,
    "shell": "/bin/sh",
    "steps": {},
}

class ConfigError(Exception):
    pass

def load_config(path: Path | None = None) -> dict:
    """Load YAML config over the defaults. A missing file means defaults."""
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if path is None or not Path(path).exists():
        return cfg
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    if data is None:
        return cfg
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping, got {type(data).__name__}")
    cfg.update(data)

    try:
        speed = int(cfg.get("speed") or DEFAULT_SPEED)
    except (TypeError, ValueError):
        raise ConfigError(f"speed must be an integer, got {cfg.get('speed')!r}") from None
    cfg["speed"] = speed if speed > 0 else DEFAULT_SPEED

    steps = cfg.get("steps") or {}
    if not isinstance(steps, dict):
        raise ConfigError("steps must be a mapping of tool name to true/false")
    cfg["steps"] = {str(k): bool(v) for k, v in steps.items()}
    return cfg
