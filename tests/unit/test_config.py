"""Tests for configuration loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from checklicenses.config import RawConfig, expand_env, load_config
from checklicenses.errors import ConfigError
from checklicenses.rules.types import LicenseTemplate


class TestExpandEnv:
    """Tests for module prefix environment expansion."""

    def test_braced_and_bare(self) -> None:
        env = {"GOPATH": "/go", "PKG": "u-root"}
        assert expand_env("$GOPATH/src/${PKG}/", env) == "/go/src/u-root/"

    def test_undefined_expands_to_empty(self) -> None:
        assert expand_env("${MISSING}pkg/", {}) == "pkg/"

    def test_plain_string_unchanged(self) -> None:
        assert expand_env("github.com/u-root/u-root/", {}) == "github.com/u-root/u-root/"


class TestFromDict:
    """Tests for RawConfig.from_dict()."""

    def test_parses_all_fields(self) -> None:
        config = RawConfig.from_dict(
            {
                "Licenses": [["a", "b"], ["c"]],
                "GoPkg": "$ROOT/",
                "Accept": [r".*\.go"],
                "Reject": ["vendor/.*"],
            },
            environ={"ROOT": "pkg"},
        )
        assert config.licenses == [LicenseTemplate(("a", "b")), LicenseTemplate(("c",))]
        assert config.module_prefix == "pkg/"
        assert config.accept == [r".*\.go"]
        assert config.reject == ["vendor/.*"]

    def test_keys_are_case_insensitive(self) -> None:
        config = RawConfig.from_dict({"licenses": [["a"]], "gopkg": "p/", "ACCEPT": ["x"]}, environ={})
        assert config.module_prefix == "p/"
        assert config.accept == ["x"]

    def test_module_prefix_alias(self) -> None:
        config = RawConfig.from_dict({"Licenses": [["a"]], "ModulePrefix": "m/"}, environ={})
        assert config.module_prefix == "m/"

    def test_optional_fields_default_empty(self) -> None:
        config = RawConfig.from_dict({"Licenses": [["a"]], "Comment": "ignored"}, environ={})
        assert config.module_prefix == ""
        assert config.accept == []
        assert config.reject == []

    @pytest.mark.parametrize(
        ("data", "message"),
        [
            ([], "must be a mapping"),
            ({}, "Licenses must be a non-empty list"),
            ({"Licenses": []}, "Licenses must be a non-empty list"),
            ({"Licenses": ["flat string"]}, r"Licenses\[0\] must be a list of strings"),
            ({"Licenses": [["a"]], "Accept": "x"}, "Accept must be a list of strings"),
            ({"Licenses": [["a"]], "Reject": [1]}, "Reject must be a list of strings"),
            ({"Licenses": [["a"]], "GoPkg": 3}, "GoPkg must be a string"),
        ],
    )
    def test_rejects_bad_shapes(self, data, message) -> None:
        with pytest.raises(ConfigError, match=message):
            RawConfig.from_dict(data, environ={})


class TestLoadConfig:
    """Tests for load_config()."""

    def test_json(self, tmp_path: Path, raw_config_data: dict) -> None:
        path = tmp_path / "licenses.json"
        path.write_text(json.dumps(raw_config_data), encoding="utf-8")
        config = load_config(path, environ={})
        assert config.module_prefix == "pkg/"
        assert config.reject == [r".*_test\.go"]

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "licenses.yaml"
        path.write_text(
            "Licenses:\n  - ['BSD line1', 'BSD line2']\nGoPkg: pkg/\nAccept: ['.*\\.go']\n",
            encoding="utf-8",
        )
        config = load_config(path, environ={})
        assert config.licenses == [LicenseTemplate(("BSD line1", "BSD line2"))]
        assert config.accept == [r".*\.go"]

    def test_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "licenses.toml"
        path.write_text(
            "Licenses = [['BSD line1', 'BSD line2']]\nGoPkg = 'pkg/'\nReject = ['vendor/.*']\n",
            encoding="utf-8",
        )
        config = load_config(path, environ={})
        assert config.reject == ["vendor/.*"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Failed to read config file"):
            load_config(tmp_path / "nope.json")

    @pytest.mark.parametrize(
        ("name", "content"),
        [
            ("bad.json", "{not json"),
            ("bad.yaml", "Licenses: [unclosed"),
            ("bad.toml", "[invalid toml...\n"),
        ],
    )
    def test_malformed(self, tmp_path: Path, name: str, content: str) -> None:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError, match="Malformed config file"):
            load_config(path)

    def test_invalid_structure_names_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text('{"Licenses": []}', encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid config in .*empty.json"):
            load_config(path)
