import pytest
from pydantic import ValidationError

from heroviz.core import load_config
from heroviz.utils.config import load_engine_config


def test_defaults_without_files():
    cfg = load_engine_config()
    assert cfg.motion.pending_as_static is True
    assert cfg.motion.default_intensity == "medium"
    assert cfg.cache.max_entries == 64
    assert cfg.profile is None


def test_precedence_and_validation(monkeypatch, conf_dir):
    (conf_dir / "engine.example.yaml").write_text(
        "cache:\n  max_entries: 8\nlogging:\n  level: DEBUG\n", encoding="utf-8"
    )
    (conf_dir / "engine.yaml").write_text(
        "cache:\n  max_entries: 16\nlogging:\n  level: INFO\n", encoding="utf-8"
    )
    (conf_dir / "profiles" / "calm.yaml").write_text(
        "motion:\n  default_intensity: subtle\ncache:\n  max_entries: 32\n", encoding="utf-8"
    )
    monkeypatch.setenv("HEROVIZ_LOG_LEVEL", "warning")

    cfg = load_engine_config(profile="calm", cli_overrides={"cache": {"max_entries": 48}})
    assert cfg.profile == "calm"
    assert cfg.motion.default_intensity == "subtle"
    assert cfg.logging.level == "WARNING"
    assert cfg.cache.max_entries == 48
    assert cfg.cache.enabled is True


def test_example_file_used_when_engine_missing(conf_dir):
    (conf_dir / "engine.example.yaml").write_text("cache:\n  max_entries: 8\n", encoding="utf-8")
    assert load_engine_config().cache.max_entries == 8


def test_explicit_path_wins_over_conf_dir(conf_dir, tmp_path):
    (conf_dir / "engine.yaml").write_text("cache:\n  max_entries: 16\n", encoding="utf-8")
    custom = tmp_path / "custom.yaml"
    custom.write_text("cache:\n  max_entries: 5\n", encoding="utf-8")
    assert load_engine_config(str(custom)).cache.max_entries == 5


def test_profile_from_env(monkeypatch, conf_dir):
    (conf_dir / "profiles" / "calm.yaml").write_text(
        "motion:\n  pending_as_static: false\n", encoding="utf-8"
    )
    monkeypatch.setenv("HEROVIZ_PROFILE", "calm")
    cfg = load_engine_config()
    assert cfg.profile == "calm"
    assert cfg.motion.pending_as_static is False


def test_pending_env_flag(monkeypatch):
    monkeypatch.setenv("HEROVIZ_PENDING_AS_STATIC", "0")
    assert load_engine_config().motion.pending_as_static is False


def test_intensity_table_override(conf_dir):
    (conf_dir / "engine.yaml").write_text(
        "intensity:\n  tile:\n    bold: {opacity: 1.8, stroke: 0.5}\n", encoding="utf-8"
    )
    cfg = load_engine_config()
    assert cfg.intensity.tile.bold.opacity == 1.8
    assert cfg.intensity.tile.subtle.opacity == 0.6
    assert cfg.intensity.background.bold.opacity == 2.25


def test_non_mapping_yaml_rejected(conf_dir):
    (conf_dir / "engine.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_engine_config()


def test_schema_violation_raises(conf_dir):
    (conf_dir / "engine.yaml").write_text("cache:\n  max_entries: 0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config()


def test_non_monotone_table_rejected(conf_dir):
    (conf_dir / "engine.yaml").write_text(
        "intensity:\n  background:\n    subtle: {opacity: 3.0, stroke: 0.0}\n", encoding="utf-8"
    )
    with pytest.raises(ValidationError):
        load_engine_config()
