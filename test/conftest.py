#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# conftest.py

import example_maps
import pytest

# Test fixtures from example maps
# =============================================================================


@pytest.fixture()
def source():
    return example_maps.source()


@pytest.fixture()
def canonical():
    return example_maps.canonical()


@pytest.fixture()
def ot():
    return example_maps.ot()


@pytest.fixture()
def subset():
    return example_maps.subset()


@pytest.fixture()
def superset():
    return example_maps.superset()
