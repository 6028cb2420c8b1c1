"""Tests for kit settings."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from atomictest import eq
from atomictest.config import (
    ERROR_TAG,
    KitConfig,
    configure,
    get_config,
    load_config,
    reset_config,
)


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "atomictest.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    config = KitConfig()
    assert config.error_tag == ERROR_TAG == "[Error]: "
    assert config.float_tolerance == 1e-7
    assert config.echo is True


def test_load_full_config(tmp_yaml):
    path = tmp_yaml("""\
        error_tag: "FAIL> "
        float_tolerance: 0.001
        echo: false
    """)
    config = load_config(path)
    assert config.error_tag == "FAIL> "
    assert config.float_tolerance == 0.001
    assert config.echo is False


def test_load_empty_config_uses_defaults(tmp_yaml):
    assert load_config(tmp_yaml("")) == KitConfig()


def test_unknown_key_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("colour: red\n"))


def test_non_positive_tolerance_rejected():
    with pytest.raises(ValidationError, match="float_tolerance"):
        KitConfig(float_tolerance=0)


def test_blank_error_tag_rejected():
    with pytest.raises(ValidationError, match="error_tag"):
        KitConfig(error_tag="   ")


def test_non_mapping_config_rejected(tmp_yaml):
    with pytest.raises(ValueError, match="mapping"):
        load_config(tmp_yaml("- a\n- b\n"))


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        KitConfig().echo = False


# --- process-wide settings ---


def test_configure_returns_previous():
    custom = KitConfig(error_tag="!! ")
    previous = configure(custom)
    assert previous == KitConfig()
    assert get_config() is custom


def test_reset_config():
    configure(KitConfig(echo=False))
    reset_config()
    assert get_config() == KitConfig()


def test_custom_error_tag_used_in_diagnostics(capsys):
    configure(KitConfig(error_tag="!! "))
    eq(1, 2)
    assert capsys.readouterr().out == "1\n!! 1 != 2\n"


def test_echo_disabled(capsys):
    configure(KitConfig(echo=False))
    eq(1, 1)
    eq(1, 2)
    assert capsys.readouterr().out == "[Error]: 1 != 2\n"


def test_custom_tolerance(capsys):
    configure(KitConfig(float_tolerance=0.1))
    assert eq(1.0, 1.05).passed is True
