#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# exceptions.py

"""Octothorpe exceptions."""

import reprlib


class OctothorpeError(Exception):
    """Base class for all Octothorpe errors."""


class InvalidSourceError(OctothorpeError, TypeError):
    """The source cannot be read as key/value pairs."""

    def __init__(self, source):
        self.source = source
        msg = "Cannot read {} as key/value pairs: {}"
        super().__init__(msg.format(type(source).__name__, reprlib.repr(source)))


class InvalidKeyError(OctothorpeError, TypeError):
    """The key is neither a string nor a symbolic (enum) identifier."""

    def __init__(self, key):
        self.key = key
        msg = "Keys must be strings or enum members; got {} {}"
        super().__init__(msg.format(type(key).__name__, reprlib.repr(key)))


class FrozenInstanceError(OctothorpeError, AttributeError):
    """The Octothorpe has been frozen and can no longer be guarded."""


class InvalidAccessError(OctothorpeError, TypeError):
    """An attribute-style read was given arguments, or was written to."""

    def __init__(self, name, reason):
        self.name = name
        super().__init__("`{}`: {}".format(name, reason))
