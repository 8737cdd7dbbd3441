import json

import pytest

import logic.lineup_config as lineup_config
from logic.lineup_config import LineupConfig, load_config


def test_defaults_when_values_missing():
    cfg = LineupConfig.from_dict({})
    assert cfg.randomizeFieldTies == 0
    assert cfg.preferNonPitcherBenchBackfill == 1
    assert cfg.flag("logPairingHints") is True
    assert cfg.get("unknownKey", 7) == 7
    with pytest.raises(AttributeError):
        cfg.notAKey


def test_from_dict_accepts_section_mapping():
    cfg = LineupConfig.from_dict({"Lineup": {"randomizeFieldTies": 1}})
    assert cfg.flag("randomizeFieldTies")


def test_from_file_reads_lineup_section(tmp_path):
    ini = tmp_path / "lineup.ini"
    ini.write_text("[Lineup]\nrandomizeFieldTies = 1\nlogPairingHints = 0\n", encoding="utf-8")
    cfg = LineupConfig.from_file(ini)
    assert cfg.values == {"randomizeFieldTies": 1, "logPairingHints": 0}
    assert not cfg.flag("logPairingHints")


def test_from_file_without_section(tmp_path):
    ini = tmp_path / "other.ini"
    ini.write_text("[Other]\nx = 1\n", encoding="utf-8")
    assert LineupConfig.from_file(ini).values == {}


def test_shipped_ini_matches_defaults(tmp_path):
    cfg = load_config(overrides_path=tmp_path / "missing.json")
    for key, value in lineup_config._DEFAULTS.items():
        assert cfg.get(key) == value


def test_overrides_merge(tmp_path):
    overrides = tmp_path / "overrides.json"
    overrides.write_text(json.dumps({"randomizeEmergencyCatcher": 1}), encoding="utf-8")
    cfg = load_config(tmp_path / "absent.ini", overrides)
    assert cfg.flag("randomizeEmergencyCatcher")
    assert not cfg.flag("randomizeFieldTies")


def test_unknown_override_keys_rejected(tmp_path):
    overrides = tmp_path / "overrides.json"
    overrides.write_text(json.dumps({"Lineup": {"randomiseFieldTies": 1}}), encoding="utf-8")
    with pytest.raises(KeyError):
        load_config(tmp_path / "absent.ini", overrides)
