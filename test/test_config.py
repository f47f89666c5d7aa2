#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# test/test_config.py

import logging

import pytest

from octothorpe import InvalidSourceError, Octothorpe, config
from octothorpe.conf import ConfigurationError, OctothorpeConfig


@pytest.fixture
def conf():
    return OctothorpeConfig()


@pytest.fixture
def write_yaml(tmp_path):
    def write(text, name="octothorpe_config.yml"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return write


def test_defaults(conf):
    assert conf.defaults() == {
        "COPY_ON_DUMP": True,
        "STRICT_EQUALITY": False,
        "LOG_FILE": "octothorpe.log",
        "LOG_FILE_LEVEL": None,
        "LOG_STDOUT_LEVEL": "WARNING",
    }
    assert conf.snapshot() == conf.defaults()


def test_load_file_sets_options(conf, write_yaml):
    path = write_yaml("COPY_ON_DUMP: false\nSTRICT_EQUALITY: true\n")
    conf.load_file(path)
    assert conf.COPY_ON_DUMP is False
    assert conf.STRICT_EQUALITY is True
    assert conf._loaded_files == [path.resolve()]


def test_load_empty_file(conf, write_yaml):
    conf.load_file(write_yaml(""))
    assert conf.snapshot() == conf.defaults()


def test_load_file_with_an_unknown_option(conf, write_yaml):
    with pytest.raises(ConfigurationError, match="COPY_ON_WRITE"):
        conf.load_file(write_yaml("COPY_ON_WRITE: true\n"))


def test_load_file_with_a_bad_value_keeps_the_old_one(conf, write_yaml):
    with pytest.raises(ConfigurationError):
        conf.load_file(write_yaml("STRICT_EQUALITY: sometimes\n"))
    assert conf.STRICT_EQUALITY is False


def test_strict_equality_from_a_file(write_yaml, restore_config_afterwards):
    ot = Octothorpe({"one": 1})
    assert ot != 12

    config.load_file(write_yaml("STRICT_EQUALITY: true\n"))
    with pytest.raises(InvalidSourceError):
        ot == 12
    assert ot == {"one": 1}


def test_copy_on_dump_from_a_file(write_yaml, restore_config_afterwards):
    ot = Octothorpe({"one": 1})
    config.load_file(write_yaml("COPY_ON_DUMP: false\n"))
    assert ot.to_dict() is ot.to_dict()


def test_override_as_a_decorator():
    @config.override(COPY_ON_DUMP=False)
    def dump(ot, label=None):
        assert label == "shared"
        return ot.to_dict()

    ot = Octothorpe({"one": 1})
    assert dump(ot, label="shared") is dump(ot, label="shared")
    assert config.COPY_ON_DUMP is True


def test_override_restores_after_an_exception():
    with pytest.raises(InvalidSourceError):
        with config.override(STRICT_EQUALITY=True):
            Octothorpe() == "nothing"
    assert config.STRICT_EQUALITY is False


def test_override_restores_options_changed_inside():
    with config.override(STRICT_EQUALITY=True):
        config.COPY_ON_DUMP = False
    assert config.snapshot() == config.defaults()


def test_nested_overrides():
    with config.override(STRICT_EQUALITY=True):
        with config.override(STRICT_EQUALITY=False, COPY_ON_DUMP=False):
            assert not config.STRICT_EQUALITY
        assert config.STRICT_EQUALITY
        assert config.COPY_ON_DUMP
    assert not config.STRICT_EQUALITY


def test_diff(conf):
    other = OctothorpeConfig()
    assert conf.diff(other) == ({}, {})
    other.STRICT_EQUALITY = True
    assert conf.diff(other) == ({"STRICT_EQUALITY": False}, {"STRICT_EQUALITY": True})


def test_unknown_options_are_rejected(conf):
    with pytest.raises(ConfigurationError):
        conf.STRICT = True
    conf._private = 2
    assert conf._private == 2


def test_option_docs():
    assert "default=True" in OctothorpeConfig.COPY_ON_DUMP.__doc__
    assert OctothorpeConfig.options()["LOG_FILE"].name == "LOG_FILE"


@pytest.mark.parametrize("name,valid,invalid", [
    ("COPY_ON_DUMP", [True, False], [1, "yes", None]),
    ("STRICT_EQUALITY", [True, False], [0, "no"]),
    ("LOG_STDOUT_LEVEL", [None, "DEBUG", "ERROR"], ["LOUD", 10]),
    ("LOG_FILE_LEVEL", [None, "INFO"], ["quiet"]),
])
@config.override()
def test_config_validation(name, valid, invalid):
    for value in valid:
        setattr(config, name, value)
        assert getattr(config, name) == value

    for value in invalid:
        with pytest.raises(ValueError):
            setattr(config, name, value)
        assert getattr(config, name) == valid[-1]


def test_reconfigure_logging_on_change(capsys):
    log = logging.getLogger("octothorpe.conf")

    with config.override(LOG_STDOUT_LEVEL="WARNING"):
        log.warning("Just a warning, folks.")
    out, err = capsys.readouterr()
    assert "Just a warning, folks." in err

    with config.override(LOG_STDOUT_LEVEL="ERROR"):
        log.warning("Another warning.")
    out, err = capsys.readouterr()
    assert err == ""


def test_log_to_file(tmp_path):
    path = tmp_path / "octothorpe.log"

    with config.override(LOG_FILE=str(path), LOG_FILE_LEVEL="DEBUG"):
        Octothorpe().guard(list, "fred")
    assert "Guarded missing keys ['fred']" in path.read_text()
