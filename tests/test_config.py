import json

import pytest

from topkbench.config import Settings
from topkbench.config_loader import load_settings
from topkbench.error_handling import ConfigurationError, TopKBenchError


def test_defaults_match_reference_run():
    settings = Settings.from_env()
    assert settings.n == 1000
    assert settings.k == 10
    assert settings.value_range_factor == 10
    assert settings.value_upper_bound == 10000
    assert settings.seed is None
    assert settings.verify is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("TOPK_N", "50")
    monkeypatch.setenv("TOPK_K", "5")
    monkeypatch.setenv("TOPK_SEED", "17")
    monkeypatch.setenv("TOPK_VERIFY", "yes")
    settings = Settings.from_env()
    assert (settings.n, settings.k, settings.seed, settings.verify) == (50, 5, 17, True)


def test_bad_env_integer(monkeypatch):
    monkeypatch.setenv("TOPK_N", "many")
    with pytest.raises(ConfigurationError) as exc_info:
        Settings.from_env()
    assert "TOPK_N" in str(exc_info.value)


def test_bad_env_boolean(monkeypatch):
    monkeypatch.setenv("TOPK_VERIFY", "maybe")
    with pytest.raises(ConfigurationError):
        Settings.from_env()


class TestEnsure:

    def test_valid_settings_pass(self):
        Settings(n=10, k=10).ensure()
        Settings(n=0, k=0).ensure()

    def test_k_greater_than_n(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(n=5, k=6).ensure()
        assert "K=6" in str(exc_info.value)
        assert exc_info.value.details == {"k": 6, "n": 5}

    def test_negative_k(self):
        with pytest.raises(ConfigurationError):
            Settings(n=5, k=-1).ensure()

    def test_negative_n(self):
        with pytest.raises(ConfigurationError):
            Settings(n=-5, k=0).ensure()

    def test_range_factor(self):
        with pytest.raises(TopKBenchError):
            Settings(value_range_factor=0).ensure()


class TestLoadSettings:

    def test_overrides_win_over_env(self, monkeypatch):
        monkeypatch.setenv("TOPK_K", "3")
        settings = load_settings(overrides={"k": 7, "n": None})
        assert settings.k == 7
        assert settings.n == 1000

    def test_config_file(self, tmp_path):
        path = tmp_path / "bench.json"
        path.write_text(json.dumps({"n": 200, "k": 20, "seed": 1, "verify": True}), encoding="utf-8")
        settings = load_settings(config_file=str(path))
        assert (settings.n, settings.k, settings.seed, settings.verify) == (200, 20, 1, True)

    def test_overrides_win_over_config_file(self, tmp_path):
        path = tmp_path / "bench.json"
        path.write_text(json.dumps({"n": 200, "k": 20}), encoding="utf-8")
        settings = load_settings(config_file=str(path), overrides={"k": 2})
        assert (settings.n, settings.k) == (200, 2)

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(config_file=str(tmp_path / "absent.json"))
        assert "not found" in str(exc_info.value)

    def test_config_file_must_be_object(self, tmp_path):
        path = tmp_path / "bench.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_settings(config_file=str(path))

    def test_unparsable_config_file(self, tmp_path):
        path = tmp_path / "bench.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_settings(config_file=str(path))

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(overrides={"repeat": 5})
        assert "repeat" in str(exc_info.value)

    def test_wrong_value_type(self, tmp_path):
        path = tmp_path / "bench.json"
        path.write_text(json.dumps({"n": "100"}), encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_settings(config_file=str(path))

    def test_seed_may_be_null_in_file(self, tmp_path):
        path = tmp_path / "bench.json"
        path.write_text(json.dumps({"seed": None}), encoding="utf-8")
        assert load_settings(config_file=str(path)).seed is None
