#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# convert.py

"""
Conversion of keys and sources to the canonical form stored by an
|Octothorpe|.

A canonical key is an interned ``str``. Symbolic identifiers (members of an
``enum.Enum``) are spelled by their ``name``, so ``Key.two`` and ``'two'``
name the same entry:

    >>> import enum
    >>> Key = enum.Enum('Key', 'one two')
    >>> to_key(Key.two) == to_key('two') == 'two'
    True
"""

import enum
import sys
from collections.abc import Iterable, Mapping

from . import exceptions

# Iterables that are never read as a sequence of pairs
_TEXT_TYPES = (str, bytes, bytearray)


def to_key(key):
    """Return the canonical form of ``key``.

    Raises:
        InvalidKeyError: If ``key`` is not a string or an enum member.
    """
    if isinstance(key, enum.Enum):
        key = key.name
    if not isinstance(key, str):
        raise exceptions.InvalidKeyError(key)
    # Strip any str subclass so that stored keys compare and hash plainly
    return sys.intern(str(key))


def is_source(thing):
    """Return whether ``thing`` has the shape of a source of key/value pairs.

    Only the outer type is checked; the pairs themselves are validated by
    ``to_store``.
    """
    if isinstance(thing, Mapping):
        return True
    return isinstance(thing, Iterable) and not isinstance(thing, _TEXT_TYPES)


def pairs(source):
    """Yield ``(key, value)`` pairs from a mapping or an iterable of pairs.

    Raises:
        InvalidSourceError: If ``source`` is not a mapping or a (non-text)
            iterable, or if one of its items is not a pair.
    """
    if not is_source(source):
        raise exceptions.InvalidSourceError(source)
    if isinstance(source, Mapping):
        yield from source.items()
        return
    for item in source:
        try:
            key, value = item
        except (TypeError, ValueError) as e:
            raise exceptions.InvalidSourceError(source) from e
        yield key, value


def to_store(source):
    """Return a new ``dict`` holding ``source`` with every key canonicalized.

    Later pairs win when two keys canonicalize to the same key; the entry keeps
    the position of the first.

    Raises:
        InvalidSourceError: If ``source`` cannot be read as key/value pairs or
            holds a key that cannot be canonicalized.
    """
    store = {}
    for key, value in pairs(source):
        try:
            store[to_key(key)] = value
        except exceptions.InvalidKeyError as e:
            raise exceptions.InvalidSourceError(source) from e
    return store
