"""Tests for godecls.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from godecls.config import ConfigError, ScanConfig, apply_overrides, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ScanConfig)
    assert config.root == tmp_path
    assert config.extension == ".go"
    assert config.exclude_paths == []
    assert config.log_format == "text"
    assert config.verbosity == 0


def test_load_config_reads_root_file(tmp_path: Path) -> None:
    (tmp_path / ".godecls.yml").write_text(
        """
extension: ".go"
log_format: json
exclude_paths:
  - "vendor/"
  - "*_test.go"
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.log_format == "json"
    assert config.exclude_paths == ["vendor/", "*_test.go"]


def test_load_config_accepts_single_exclude_string(tmp_path: Path) -> None:
    config_file = tmp_path / "scan.yml"
    config_file.write_text("exclude_paths: testdata/\n", encoding="utf-8")

    config = load_config(tmp_path, config_file)

    assert config.exclude_paths == ["testdata/"]


def test_load_config_rejects_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "nope.yml")


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "log_format: xml\n",
        "extension: 3\n",
        "exclude_paths: {a: 1}\n",
        "key: [unclosed\n",
    ],
)
def test_load_config_rejects_invalid_content(tmp_path: Path, content: str) -> None:
    (tmp_path / ".godecls.yml").write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_apply_overrides_ignores_none(tmp_path: Path) -> None:
    base = ScanConfig(root=tmp_path, exclude_paths=["vendor/"])

    config = apply_overrides(base, extension=None, log_format="json", verbosity=2)

    assert config.extension == ".go"
    assert config.log_format == "json"
    assert config.verbosity == 2
    assert config.exclude_paths == ["vendor/"]
    assert base.log_format == "text"


def test_apply_overrides_validates_values(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        apply_overrides(ScanConfig(root=tmp_path), extension="")
    with pytest.raises(ConfigError):
        apply_overrides(ScanConfig(root=tmp_path), log_format="xml")
