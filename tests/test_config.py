from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from gtoc.config import (
    ConfigError,
    TocConfig,
    apply_overrides,
    build_config,
    load_config,
    validate_config,
)


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def _write_dotfile(base: Path, body: str) -> Path:
    path = base / ".gtoc.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_loads_config_from_pyproject(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.gtoc]
        toc_heading = true
        indent_string = "\\t"
        malformed_headings = "error"
        max_file_size = 1024
        """,
    )

    config = load_config(tmp_path)

    assert config == TocConfig(
        toc_heading=True,
        indent_string="\t",
        malformed_headings="error",
        max_file_size=1024,
    )


def test_loads_config_with_dashed_keys(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.gtoc]
        toc-heading = true
        indent-string = "-"
        """,
    )

    config = load_config(tmp_path)

    assert config.toc_heading is True
    assert config.indent_string == "-"


def test_loads_config_from_dotfile(tmp_path: Path):
    _write_dotfile(
        tmp_path,
        """
        [gtoc]
        indent_string = "    "
        """,
    )
    nested = tmp_path / "child"
    nested.mkdir()

    config = load_config(nested)

    assert config.indent_string == "    "


def test_load_config_walks_up_directories(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.gtoc]
        toc_heading = true
        """,
    )
    nested = tmp_path / "a" / "b" / "c"
    nested.mkdir(parents=True)

    assert load_config(nested).toc_heading is True


def test_empty_config_table_stops_inheritance(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.gtoc]
        toc_heading = true
        """,
    )
    child = tmp_path / "child"
    child.mkdir()
    _write_pyproject(
        child,
        """
        [tool.gtoc]
        """,
    )

    assert load_config(child) == TocConfig()


def test_pyproject_without_table_is_ignored(tmp_path: Path):
    _write_dotfile(
        tmp_path,
        """
        [gtoc]
        indent_string = "."
        """,
    )
    _write_pyproject(
        tmp_path,
        """
        [project]
        name = "demo"
        """,
    )

    assert load_config(tmp_path).indent_string == "."


def test_load_config_returns_defaults_when_missing(tmp_path: Path):
    assert load_config(tmp_path) == TocConfig()


def test_load_config_skips_invalid_toml(tmp_path: Path):
    invalid_dir = tmp_path / "invalid"
    invalid_dir.mkdir()
    (invalid_dir / "pyproject.toml").write_text("[tool.gtoc\n", encoding="utf-8")

    assert load_config(invalid_dir) == TocConfig()


def test_load_config_rejects_unknown_keys(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.gtoc]
        unknown = 1
        """,
    )

    with pytest.raises(ConfigError, match=r"Invalid `\[tool.gtoc\]` settings"):
        load_config(tmp_path)


def test_load_config_rejects_non_table(tmp_path: Path):
    _write_dotfile(tmp_path, 'gtoc = "yes"\n')

    with pytest.raises(ConfigError):
        load_config(tmp_path)


@pytest.mark.parametrize(
    ("config", "message"),
    [
        (TocConfig(toc_heading="yes"), "`toc_heading` must be a boolean"),
        (TocConfig(indent_string=2), "`indent_string` must be a string"),
        (TocConfig(malformed_headings="ignore"), "`malformed_headings` must be one of"),
        (TocConfig(max_file_size=0), "`max_file_size` must be a positive integer"),
        (TocConfig(max_file_size=True), "`max_file_size` must be an integer"),
    ],
)
def test_validate_config_rejects_invalid_values(config: TocConfig, message: str):
    with pytest.raises(ConfigError, match=message):
        validate_config(config)


def test_validate_config_accepts_empty_indent_string():
    validate_config(TocConfig(indent_string=""))


def test_apply_overrides_ignores_none_values():
    config = TocConfig(indent_string="\t")

    assert apply_overrides(config, indent_string=None, toc_heading=None) is config
    assert apply_overrides(config, toc_heading=True) == TocConfig(
        toc_heading=True, indent_string="\t"
    )


def test_build_config_overrides_file_values(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.gtoc]
        indent_string = "\\t"
        """,
    )

    config = build_config(tmp_path, indent_string="  ", toc_heading=True)

    assert config == TocConfig(toc_heading=True, indent_string="  ")


def test_build_config_validates_result(tmp_path: Path):
    with pytest.raises(ConfigError):
        build_config(tmp_path, malformed_headings="sometimes")
