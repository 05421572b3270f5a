import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from lib.utils.validation import ensure

from .yaml_loader import load_yaml

DEFAULT_CONFIG_PATH = "config/home.yaml"
CONFIG_ENV_VAR = "HOME_CONFIG"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class HomeConfig:
    """Typed view over ``home.yaml``.

    The defaults reproduce the hardcoded listener of the tutorial server, so
    a missing file or a missing key is never an error.  The raw mapping is
    kept for keys the service does not interpret itself.
    """

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    raw: Optional[Dict[str, Any]] = None


def resolve_config_path(path: Union[str, Path, None] = None) -> Path:
    """Pick the explicit ``path``, then ``$HOME_CONFIG``, then the default."""

    return Path(path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def load_home_config(path: Union[str, Path, None] = None) -> HomeConfig:
    """Load ``home.yaml`` and return a validated :class:`HomeConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML configuration file.  When omitted the
        ``HOME_CONFIG`` environment variable and then ``config/home.yaml``
        are tried; if no file exists the defaults are returned.
    """

    cfg_path = resolve_config_path(path)
    raw = load_yaml(cfg_path) if cfg_path.exists() else {}
    server = raw.get("server") or {}
    logging_cfg = raw.get("logging") or {}
    defaults = HomeConfig()

    host = str(server.get("host", defaults.host))
    port = server.get("port", defaults.port)
    ensure(isinstance(port, int) and not isinstance(port, bool), f"server.port must be an integer, got {port!r}")
    ensure(0 < port < 65536, f"server.port out of range: {port}")

    level = str(logging_cfg.get("level", defaults.log_level)).upper()
    ensure(level in LOG_LEVELS, f"unknown logging.level: {level}")

    return HomeConfig(host=host, port=port, log_level=level, raw=raw)
