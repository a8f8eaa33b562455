from pathlib import Path

import pytest

from fars.config import PACKAGE_DATA_DIR, FarsConfig, resolve_config
from fars.utils.convert import to_int


def test_default_uses_package_dir(monkeypatch):
    monkeypatch.delenv("FARS_DATA_DIR", raising=False)
    assert FarsConfig.default().data_dir == PACKAGE_DATA_DIR
    assert PACKAGE_DATA_DIR.name == "extdata"


def test_default_uses_env(monkeypatch, tmp_path):
    monkeypatch.setenv("FARS_DATA_DIR", str(tmp_path))
    assert FarsConfig.default().data_dir == tmp_path


def test_data_dir_is_coerced_to_path():
    assert FarsConfig("some/dir").data_dir == Path("some/dir")


def test_resolve_config_passthrough(config):
    assert resolve_config(config) is config


@pytest.mark.parametrize("value", [2013, "2013", " 2013 ", 2013.0, "2013.0"])
def test_to_int(value):
    assert to_int(value, "year") == 2013


@pytest.mark.parametrize("value", ["abc", None, True, float("nan"), ""])
def test_to_int_rejects(value):
    with pytest.raises(ValueError, match="invalid year"):
        to_int(value, "year")
