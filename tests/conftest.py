"""
Test configuration and fixtures for the hero visual engine.

Every test runs from a scratch working directory so the config loader only
sees the conf/ files a test writes itself, and engine env vars are cleared.
"""

import os
import sys

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from heroviz.config.schemas import EngineConfig
from heroviz.procedural.registry import REGISTRY
from heroviz.procedural.sdk import Family

ENGINE_ENV_VARS = ("HEROVIZ_LOG_LEVEL", "HEROVIZ_PENDING_AS_STATIC", "HEROVIZ_PROFILE")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Clear engine env vars and run from an empty directory."""
    for name in ENGINE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def engine_config():
    """Built-in defaults, no files involved"""
    return EngineConfig()


@pytest.fixture
def conf_dir(tmp_path):
    """Create an empty conf/ tree in the working directory"""
    conf = tmp_path / "conf"
    (conf / "profiles").mkdir(parents=True)
    return conf


@pytest.fixture
def seed_sample():
    """Distinct seeds for distribution checks"""
    return [f"seed-{i}" for i in range(40)] + ["home-hero", "/", "/services/seo", ""]


def all_variant_specs():
    return [spec for family in Family for spec in REGISTRY[family].values()]


def variant_ids(spec):
    return spec.key
