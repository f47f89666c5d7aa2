#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# test/test_convert.py

import enum
from collections import OrderedDict

import pytest

from example_maps import Key
from octothorpe import InvalidKeyError, InvalidSourceError, Octothorpe, convert


class Name(str):
    pass


def test_to_key():
    assert convert.to_key("two") == "two"
    assert convert.to_key(Key.two) == "two"
    assert convert.to_key("weird key") == "weird key"


def test_to_key_strips_str_subclasses():
    assert type(convert.to_key(Name("two"))) is str


def test_to_key_uses_the_enum_name_not_the_value():
    Colour = enum.Enum("Colour", {"red": "crimson"})
    assert convert.to_key(Colour.red) == "red"


@pytest.mark.parametrize("key", [1, 1.5, None, b"two", ("two",)])
def test_to_key_rejects_other_keys(key):
    with pytest.raises(InvalidKeyError) as excinfo:
        convert.to_key(key)
    assert excinfo.value.key == key


@pytest.mark.parametrize(
    "thing,expected",
    [
        ({}, True),
        (OrderedDict(), True),
        (Octothorpe(), True),
        ([], True),
        (iter([]), True),
        ("abc", False),
        (b"abc", False),
        (bytearray(b"abc"), False),
        (12, False),
        (None, False),
    ],
)
def test_is_source(thing, expected):
    assert convert.is_source(thing) is expected


def test_pairs():
    assert list(convert.pairs({"one": 1})) == [("one", 1)]
    assert list(convert.pairs([("one", 1), ["two", 2]])) == [("one", 1), ("two", 2)]


def test_pairs_rejects_items_that_are_not_pairs():
    with pytest.raises(InvalidSourceError):
        list(convert.pairs([("one", 1, 2)]))


def test_to_store_returns_a_new_dict():
    source = {"one": 1}
    store = convert.to_store(source)
    assert store == source
    assert store is not source


def test_to_store_accepts_generators():
    store = convert.to_store((name, len(name)) for name in ["one", "three"])
    assert store == {"one": 3, "three": 5}
