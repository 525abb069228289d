"""Tests for devdocs.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from devdocs.config import CONFIG_FILENAME, ConfigError, DevDocsConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, DevDocsConfig)
    assert config.root == tmp_path.resolve()
    assert config.project_name == "Logseq"
    assert config.sources.typescript == "libs/src"
    assert config.sources.api == "src/main/logseq"
    assert config.output.dir == "docs/generated"
    assert config.output.timestamps is True
    assert config.output.key_function_limit == 10
    assert config.scanners.enabled == []
    assert config.exclude_paths == []
    assert config.templates_dir is None
    assert config.output_dir == (tmp_path / "docs/generated").resolve()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        """
project_name: Acme
sources:
  typescript: sdk/src
  stylesheets: styles
output:
  dir: build/docs
  timestamps: false
  key_function_limit: 3
  namespace_limit: 5
scanners:
  enabled: [typescript, stylesheet]
exclude_paths:
  - node_modules/
  - "*.min.css"
templates_dir: docs/templates
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.project_name == "Acme"
    assert config.sources.typescript == "sdk/src"
    assert config.sources.stylesheets == "styles"
    assert config.sources.clojurescript == "src/main/frontend"
    assert config.source_path("typescript") == (tmp_path / "sdk/src").resolve()
    assert config.output.dir == "build/docs"
    assert config.output.timestamps is False
    assert config.output.key_function_limit == 3
    assert config.output.namespace_limit == 5
    assert config.output.showcase_example_limit == 5
    assert config.scanners.enabled == ["typescript", "stylesheet"]
    assert config.exclude_paths == ["node_modules/", "*.min.css"]
    assert config.templates_dir == (tmp_path / "docs/templates").resolve()


def test_load_config_accepts_explicit_file_path(tmp_path: Path) -> None:
    config_file = tmp_path / CONFIG_FILENAME
    config_file.write_text("project_name: Direct\n", encoding="utf-8")
    assert load_config(config_file).project_name == "Direct"


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).project_name == "Logseq"


def test_invalid_yaml_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("sources: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_mapping_root_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


@pytest.mark.parametrize("value", ["0", "-2", "many"])
def test_non_positive_limits_raise_config_error(tmp_path: Path, value: str) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(f"output:\n  key_function_limit: {value}\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)
