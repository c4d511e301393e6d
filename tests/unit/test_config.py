"""
Unit tests for JSON config loading and CollapsingConfig construction.
"""

from __future__ import annotations

import json
import logging

import pytest

from variantcollapse.config import CollapsingConfig, load_config


@pytest.mark.unit
class TestLoadConfig:
    def test_default_config(self) -> None:
        cfg = load_config()
        assert cfg["method"] == "cmc"
        assert cfg["case_value"] == 1.0

    def test_custom_file(self, tmp_path) -> None:
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"method": "zeggini"}), encoding="utf-8")
        assert load_config(str(path)) == {"method": "zeggini"}

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.json"))

    def test_malformed_json(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{method: cmc", encoding="utf-8")
        with pytest.raises(ValueError, match="Error parsing JSON"):
            load_config(str(path))

    def test_non_object_json(self, tmp_path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            load_config(str(path))


@pytest.mark.unit
class TestCollapsingConfig:
    def test_defaults_match_packaged_config(self) -> None:
        assert CollapsingConfig.from_dict(load_config()) == CollapsingConfig()

    def test_from_dict(self) -> None:
        cfg = CollapsingConfig.from_dict({"method": "fp", "inverse_normal": True})
        assert cfg.method == "fp"
        assert cfg.inverse_normal is True
        assert cfg.case_value == 1.0

    def test_unknown_keys_warned_and_ignored(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="variantcollapse"):
            cfg = CollapsingConfig.from_dict({"method": "cmc", "gene_burden_mode": "samples"})
        assert cfg == CollapsingConfig()
        assert "gene_burden_mode" in caplog.text
