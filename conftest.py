#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import pytest

import octothorpe

collect_ignore = ["setup.py"]


# Octothorpe configuration management
# ================================================================


@pytest.fixture(scope="function")
def restore_config_afterwards():
    """Reset Octothorpe configuration after a test.

    Useful for tests that can't be decorated with `config.override`.
    """
    with octothorpe.config.override():
        yield
