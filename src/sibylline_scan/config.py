"""Scanner configuration.

Loads numeric-literal and whitespace settings from YAML files with priority
resolution:
1. User config: ~/.config/{app_name}/scanner.yaml (highest priority)
2. Project config: .{app_name}/scanner.yaml in current directory
3. Package defaults: shipped with sibylline-scan (fallback)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .predicates import CharPredicate, get_predicate

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "scanner.yaml"

# Lazy import yaml to avoid startup cost
_yaml = None


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml

        _yaml = yaml
    return _yaml


def _get_package_defaults_path() -> Path:
    """Get path to package default config using importlib.resources."""
    try:
        from importlib.resources import files

        return files("sibylline_scan.scan_data") / "_defaults"
    except (ImportError, TypeError):
        # Fallback for editable installs
        return Path(__file__).parent / "scan_data" / "_defaults"


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Characters with special meaning during scanning."""

    digit_separators: frozenset[str] = field(default_factory=lambda: frozenset("_'"))
    """Characters skipped inside numeric literals (digit-group separators)."""

    negative_sign: str = "-"
    """Leading character that negates a numeric literal."""

    decimal_point: str = "."
    """Character separating integer and fractional parts."""

    whitespace: str = "whitespace"
    """Registered predicate name used by ``Scanner.consume_whitespace``."""

    def __post_init__(self) -> None:
        try:
            separators = frozenset(self.digit_separators)
        except TypeError as exc:
            raise ValueError(
                f"Digit separators must be a collection of characters, got {self.digit_separators!r}"
            ) from exc
        object.__setattr__(self, "digit_separators", separators)

        for sep in self.digit_separators:
            if not isinstance(sep, str) or len(sep) != 1:
                raise ValueError(f"Digit separator must be a single character, got {sep!r}")
        for name in ("negative_sign", "decimal_point"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")

        clashes = self.digit_separators & {self.negative_sign, self.decimal_point}
        if clashes:
            raise ValueError(
                f"Digit separators {sorted(clashes)!r} collide with the sign or decimal point"
            )

        if not isinstance(self.whitespace, str):
            raise ValueError(f"whitespace must be a predicate name, got {self.whitespace!r}")
        # Fail early on unknown predicate names
        get_predicate(self.whitespace)

    @property
    def whitespace_predicate(self) -> CharPredicate:
        return get_predicate(self.whitespace)

    @classmethod
    def from_dict(cls, data: dict) -> ScanConfig:
        """Build a config from a parsed YAML mapping.

        Recognised layout::

            numeric:
              separators: ["_", "'"]
              negative_sign: "-"
              decimal_point: "."
            whitespace: whitespace

        Raises:
            ValueError: If the layout or a value has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Scanner config must be a mapping, got {type(data).__name__}")
        numeric = data.get("numeric") or {}
        if not isinstance(numeric, dict):
            raise ValueError(f"numeric must be a mapping, got {type(numeric).__name__}")

        kwargs: dict = {}
        if "separators" in numeric:
            separators = numeric["separators"] or ()
            if isinstance(separators, str):
                separators = list(separators)
            if not isinstance(separators, (list, tuple)) or not all(
                isinstance(sep, str) for sep in separators
            ):
                raise ValueError(f"separators must be a list of characters, got {separators!r}")
            kwargs["digit_separators"] = frozenset(separators)
        if "negative_sign" in numeric:
            kwargs["negative_sign"] = numeric["negative_sign"]
        if "decimal_point" in numeric:
            kwargs["decimal_point"] = numeric["decimal_point"]
        if "whitespace" in data:
            kwargs["whitespace"] = data["whitespace"]
        return cls(**kwargs)


DEFAULT_CONFIG = ScanConfig()


def config_locations(app_name: str = "sibylline-scan") -> list[Path]:
    """Return user and project config paths in priority order."""
    return [
        Path.home() / ".config" / app_name / CONFIG_FILENAME,  # User overrides
        Path.cwd() / f".{app_name}" / CONFIG_FILENAME,  # Project config
    ]


def load_config(app_name: str = "sibylline-scan") -> ScanConfig:
    """Load the highest-priority readable config file.

    Files that cannot be read or are not valid YAML are skipped with a
    warning and the next location is tried. Falls back to
    :data:`DEFAULT_CONFIG` when nothing usable is found.

    Raises:
        ValueError: If a parsed config holds invalid values.
    """
    yaml = _get_yaml()

    candidates: list = [p for p in config_locations(app_name) if p.exists()]
    default_file = _get_package_defaults_path() / CONFIG_FILENAME
    if default_file.is_file():
        candidates.append(default_file)

    for config_file in candidates:
        try:
            content = config_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping unreadable scanner config %s: %s", config_file, exc)
            continue

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            logger.warning("Skipping unparsable scanner config %s: %s", config_file, exc)
            continue

        if not data:
            continue

        logger.debug("Loaded scanner config from %s", config_file)
        return ScanConfig.from_dict(data)

    return DEFAULT_CONFIG
