# -*- coding: utf-8 -*-
# __init__.py

#       _|    _|
#   _|_|_|_|_|_|_|_|
#       _|    _|
#   _|_|_|_|_|_|_|_|
#       _|    _|

"""
==========
Octothorpe
==========

Octothorpe is a very simple, mostly read-only, hash-like object for passing
messages between objects. It borrows a little from ``types.SimpleNamespace``
and friends:

- string and symbolic (enum) keys are treated as equal;
- members can be read as attributes, with ``ot.attrs.keyname``;
- guard conditions control what a missing key returns;
- it is read-only, apart from guard conditions, for better or worse.


Usage
~~~~~

    >>> from octothorpe import Octothorpe
    >>> ot = Octothorpe({'one': 1, 'two': 2, 'weird key': 3})
    >>> ot.attrs.one
    1
    >>> ot.get('weird key')
    3
    >>> ot.guard(list, 'three')
    Octothorpe({'one': 1, 'two': 2, 'weird key': 3, 'three': []})
    >>> ot.freeze().attrs.three
    []

An Octothorpe also answers the usual read-only mapping queries (``len``,
``in``, ``keys``, ``values``, ``items``) along with ``has_value``, ``select``,
``reject``, ``map`` and ``reduce``.


Configuration (optional)
~~~~~~~~~~~~~~~~~~~~~~~~

Package-level options are loaded from a YAML configuration file,
``octothorpe_config.yml``, if there is one in the directory where Octothorpe is
imported. See the documentation for the |config| module for a description of
the options and their defaults.
"""

from .__about__ import *
from .conf import config
from .exceptions import (
    FrozenInstanceError,
    InvalidAccessError,
    InvalidKeyError,
    InvalidSourceError,
    OctothorpeError,
)
from .octothorpe import Octothorpe
from .storage import Storage

__all__ = [
    "config",
    "FrozenInstanceError",
    "InvalidAccessError",
    "InvalidKeyError",
    "InvalidSourceError",
    "Octothorpe",
    "OctothorpeError",
    "Storage",
]
