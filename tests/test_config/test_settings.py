# tests/test_config/test_settings.py
import os
from pathlib import Path
import pytest
from pydantic import ValidationError
from netrcparse.config.settings import App, PERMISSION_MASK_DEFAULT


def setup_function():
    for k in list(os.environ):
        if k.startswith("NETRC_"):
            del os.environ[k]


def teardown_function():
    for k in list(os.environ):
        if k.startswith("NETRC_"):
            del os.environ[k]


def test_app_default_settings():
    app = App()
    assert app.beQuiet is False
    assert app.detailedOutput is False
    assert app.netrc_file == Path.home() / ".netrc"
    assert app.permission_mask == PERMISSION_MASK_DEFAULT == 0o600


def test_app_env_override(tmp_path):
    os.environ["NETRC_BEQUIET"] = "true"
    os.environ["NETRC_DETAILEDOUTPUT"] = "true"
    os.environ["NETRC_NETRC_FILE"] = str(tmp_path / "netrc")
    os.environ["NETRC_PERMISSION_MASK"] = "0400"

    app = App()
    assert app.beQuiet is True
    assert app.detailedOutput is True
    assert app.netrc_file == tmp_path / "netrc"
    assert app.permission_mask == 0o400


def test_app_expands_home():
    os.environ["NETRC_NETRC_FILE"] = "~/creds/netrc"
    app = App()
    assert app.netrc_file == Path.home() / "creds" / "netrc"


def test_app_rejects_bad_mask():
    with pytest.raises(ValidationError):
        App(permission_mask=0o1000)
    with pytest.raises(ValidationError):
        App(permission_mask=-1)


@pytest.mark.parametrize("raw", ["600", "0600", "0o600", " 600 "])
def test_app_mask_env_is_octal(raw):
    os.environ["NETRC_PERMISSION_MASK"] = raw
    app = App()
    assert app.permission_mask == 0o600


def test_app_mask_int_is_taken_as_is():
    assert App(permission_mask=0o400).permission_mask == 0o400


@pytest.mark.parametrize("raw", ["rw-------", "0o1000", "800"])
def test_app_rejects_bad_mask_env(raw):
    os.environ["NETRC_PERMISSION_MASK"] = raw
    with pytest.raises(ValidationError):
        App()
