"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

MALFORMED_POLICIES = ("skip", "error")


@dataclass(frozen=True)
class TocConfig:
    """Configuration for building a Markdown table of contents.

    Attributes:
        toc_heading: Whether to emit a synthetic "Table Of Content" entry above
            the document headings. Every real heading moves one level deeper.
        indent_string: Unit repeated three times per nesting level.
        malformed_headings: What to do with a ``#`` line that has no space:
            ``"skip"`` drops it, ``"error"`` raises `MalformedHeadingError`.
        max_file_size: Maximum file size in bytes that will be read.

    Examples:
        TocConfig(toc_heading=True, indent_string="\\t")
    """

    toc_heading: bool = False
    indent_string: str = "  "
    malformed_headings: str = "skip"

    # Limits
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`indent_string` must be a string")
    """


def load_config(search_path: Path) -> TocConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.gtoc]`` table from `pyproject.toml` and the ``[gtoc]`` or
    ``[tool.gtoc]`` table from `.gtoc.toml` when present. Returns default
    values when no configuration is found. TOML files that cannot be read or
    decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        TocConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(current / "pyproject.toml", table_paths=[("tool", "gtoc")])
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".gtoc.toml",
            table_paths=[("gtoc",), ("tool", "gtoc")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return TocConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> TocConfig | None:
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> TocConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys may use dashes, e.g. `indent-string`
    options = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return TocConfig(**options)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: TocConfig) -> None:
    """Validate a `TocConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a field has the wrong type, the malformed-heading policy
            is unknown, or the file size limit is not a positive integer.
    """
    if not isinstance(config.toc_heading, bool):
        raise ConfigError("`toc_heading` must be a boolean")
    if not isinstance(config.indent_string, str):
        raise ConfigError("`indent_string` must be a string")
    if config.malformed_headings not in MALFORMED_POLICIES:
        raise ConfigError(f"`malformed_headings` must be one of: {', '.join(MALFORMED_POLICIES)}")

    max_file_size = config.max_file_size
    if isinstance(max_file_size, bool) or not isinstance(max_file_size, int):
        raise ConfigError("`max_file_size` must be an integer")
    if max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def apply_overrides(config: TocConfig, **overrides: object) -> TocConfig:
    """Apply override values to a `TocConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        TocConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `TocConfig`.

    Examples:
        updated = apply_overrides(config, indent_string="\\t", toc_heading=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> TocConfig:
    """Load, override, and validate configuration.

    Examples:
        config = build_config(Path.cwd(), toc_heading=True)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config
