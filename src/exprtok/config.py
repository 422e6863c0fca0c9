from pathlib import Path
from typing import Optional

CONFIG_DIR = Path.home() / ".exprtok"
CONFIG_FILE = CONFIG_DIR / "config"

DEMO_EXPRESSION_KEY = "EXPRTOK_DEMO_EXPRESSION"
DEFAULT_EXPRESSION = "Bjaeq + kPlzs * qWeTt-(100/zzAbv)"

def _read_config() -> dict:
    config = {}
    if not CONFIG_FILE.exists():
        return config

    try:
        with open(CONFIG_FILE, "r") as f:
            for line in f:
                line = line.rstrip("\n")
                if "=" in line:
                    key, value = line.split("=", 1)
                    config[key.strip()] = value
    except (IOError, PermissionError, OSError):
        # if we can't read the file, treat as not configured
        return {}
    return config

def get_demo_expression() -> Optional[str]:
    """get the configured demo expression, if any."""
    return _read_config().get(DEMO_EXPRESSION_KEY) or None

def resolve_demo_expression() -> str:
    return get_demo_expression() or DEFAULT_EXPRESSION

def set_demo_expression(expression: str):
    """set the demo expression in config file, preserving other config values."""
    if "\n" in expression or "\r" in expression:
        raise ValueError("demo expression must be a single line")

    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    config = _read_config()
    config[DEMO_EXPRESSION_KEY] = expression

    try:
        with open(CONFIG_FILE, "w") as f:
            for key, value in config.items():
                f.write(f"{key}={value}\n")
    except (IOError, PermissionError, OSError) as e:
        raise RuntimeError(f"failed to write config file: {e}") from e
