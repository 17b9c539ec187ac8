"""Configuration for the biotools command line."""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

DEFAULT_CONFIG_PATH = Path("~/.config/biotools/config.yaml")
OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BiotoolsConfig:
    """
    Settings read from the YAML config file.

    Attributes:
        api_base_url: Base URL of the optional sequence service; remote-only
            operations are refused when unset
        timeout_sec: HTTP timeout for service calls
        output_format: "text" or "json"
        log_level: Name of the logging level for the command line
    """
    api_base_url: Optional[str] = None
    timeout_sec: float = 10.0
    output_format: str = "text"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, "
                f"got {self.output_format!r}"
            )
        if self.timeout_sec <= 0:
            raise ValueError("timeout_sec must be positive")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}"
            )

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "BiotoolsConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in raw.items() if key in known}

        url = str(values.get("api_base_url") or "").strip()
        values["api_base_url"] = url.rstrip("/") or None
        if "timeout_sec" in values:
            values["timeout_sec"] = float(values["timeout_sec"])
        if "log_level" in values:
            values["log_level"] = str(values["log_level"]).upper()
        return cls(**values)

    def override(self, **changes: Any) -> "BiotoolsConfig":
        """Return a copy with the non-None values in changes applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_config(path: Optional[Union[str, Path]] = None) -> BiotoolsConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Config file. When None, the default location is used if it
            exists and built-in defaults otherwise.

    Returns:
        BiotoolsConfig

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If the file does not contain a mapping or has invalid values
    """
    if path is None:
        default = DEFAULT_CONFIG_PATH.expanduser()
        if not default.exists():
            return BiotoolsConfig()
        path = default

    path = Path(path).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return BiotoolsConfig.from_dict(raw)
