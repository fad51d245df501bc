import dataclasses
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from i18n_tool import hooks
from i18n_tool.exceptions import ConfigurationError

from .logging import tool_logger


CONFIG_DEFAULTS = {
    "log_level": "WARNING",
    "allow_malformed_catalog": False,
    "ignore_walk_errors": False,
}


@dataclasses.dataclass
class ToolConfig:
    source_dir: Path
    enterprise_dir: Path
    allow_malformed_catalog: bool = False
    ignore_walk_errors: bool = False
    log_level: str = "WARNING"

    @property
    def catalog_path(self) -> Path:
        return self.source_dir.joinpath(*hooks.catalog_relpath)

    @property
    def vendor_dir(self) -> Path:
        return self.source_dir / hooks.vendor_dirname


def _as_path(value: Any, param: str) -> Path:
    """Validate a path parameter; anything that is not a non-empty path is fatal."""
    if not isinstance(value, (str, os.PathLike)):
        raise ConfigurationError(f"Invalid {param} parameter")
    text = os.fspath(value)
    if not isinstance(text, str) or not text:
        raise ConfigurationError(f"Invalid {param} parameter")
    return Path(text)


def read_config_file(source_dir: Path) -> Dict[str, Any]:
    """Read i18n_tool.json at the source root; returns {} when absent.

    Only known keys are returned, unknown ones are logged and ignored.
    """
    cfg_path = source_dir / hooks.config_filename
    if not cfg_path.exists():
        return {}

    try:
        raw = cfg_path.read_text(encoding="utf-8")
        data = json.loads(raw or "{}")
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Failed to read/parse {cfg_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{cfg_path} must contain a JSON object")

    known = {}
    for key, value in data.items():
        if key not in CONFIG_DEFAULTS:
            tool_logger.warning("Ignoring unknown key %r in %s", key, cfg_path)
            continue
        known[key] = value
    return known


def load_config(
    source_dir: Any = hooks.default_source_dir,
    enterprise_dir: Any = hooks.default_enterprise_dir,
    **overrides: Optional[Any],
) -> ToolConfig:
    """Build the run configuration.

    Precedence: built-in defaults < i18n_tool.json at the source root < overrides.
    Overrides set to None are treated as "not given".
    """
    src = _as_path(source_dir, "source-dir")
    ent = _as_path(enterprise_dir, "enterprise-dir")

    settings: Dict[str, Any] = dict(CONFIG_DEFAULTS)
    settings.update(read_config_file(src))
    for key, value in overrides.items():
        if key not in CONFIG_DEFAULTS:
            raise ConfigurationError(f"Unknown configuration option: {key}")
        if value is not None:
            settings[key] = value

    return ToolConfig(
        source_dir=src,
        enterprise_dir=ent,
        allow_malformed_catalog=bool(settings["allow_malformed_catalog"]),
        ignore_walk_errors=bool(settings["ignore_walk_errors"]),
        log_level=str(settings["log_level"]).upper(),
    )
