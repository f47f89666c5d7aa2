#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# octothorpe.py

"""
The |Octothorpe| type: a very simple, pretty much read-only mapping meant to
carry messages between objects.

- String and symbolic (enum) keys are equal.
- Members can be read as attributes with ``ot.attrs.keyname``.
- Guard conditions control what a missing key holds.
- ``freeze()`` makes an Octothorpe truly read-only.

Example:
    >>> ot = Octothorpe({'one': 1, 'two': 2, 'weird key': 3})
    >>> ot.attrs.one
    1
    >>> ot.get('weird key')
    3
    >>> ot.guard(list, 'three').freeze().attrs.three
    []
"""

import functools
import logging
import types
import typing
from collections.abc import Mapping

import toolz

from . import convert, exceptions
from .conf import config
from .storage import Storage

log = logging.getLogger(__name__)

# Marks a fold with no initial value
_NO_INITIAL = object()


class Octothorpe(typing.Mapping[str, typing.Any]):
    """A read-only mapping whose keys are normalized to strings.

    Args:
        source (Mapping | Iterable | Octothorpe): The initial members: a
            mapping, an iterable of ``(key, value)`` pairs, or another
            Octothorpe. ``None`` gives an empty Octothorpe.

    Raises:
        InvalidSourceError: If ``source`` cannot be read as key/value pairs.

    Comparison operators test containment of key/value pairs rather than
    ordering: ``a < b`` means that ``a`` is a proper subset of ``b``. The
    right-hand side may be any mapping or Octothorpe. These do not form a total
    order; ``a < b``, ``a == b`` and ``a > b`` can all be false.
    """

    __slots__ = ("_store", "_storage", "_frozen")

    def __init__(self, source=None):
        if source is None:
            store = {}
        elif isinstance(source, Octothorpe):
            # Already canonical; copied so the two never share members
            store = dict(source._store)
        else:
            store = convert.to_store(source)
        self._store = store
        self._storage = Storage(store)
        self._frozen = False

    def __repr__(self):
        if self._frozen:
            return "{}({!r}, frozen=True)".format(type(self).__name__, self._store)
        return "{}({!r})".format(type(self).__name__, self._store)

    def __reduce__(self):
        return (type(self), (self._store,))

    # Accessors
    # =========================================================================

    @property
    def attrs(self):
        """Attribute-style view of the members.

        ``ot.attrs.one`` is the value of ``one``, or ``None`` if there is no
        such key. This does not work for keys that are not identifiers; use
        ``get`` for those.
        """
        return self._storage

    def get(self, key, default=None):
        """Return the value of ``key``, or ``default`` if it is absent.

        Unlike ``attrs``, this works for any key, including keys with spaces.
        """
        return self._store.get(convert.to_key(key), default)

    def __getitem__(self, key):
        return self.get(key)

    def to_dict(self):
        """Return the members as a ``dict``.

        This is a copy unless ``config.COPY_ON_DUMP`` is ``False``, in which
        case the Octothorpe's own dictionary is returned and must not be
        modified.
        """
        if config.COPY_ON_DUMP:
            return dict(self._store)
        return self._store

    # Guard conditions
    # =========================================================================

    @property
    def frozen(self):
        """Whether ``freeze()`` has been called."""
        return self._frozen

    def freeze(self):
        """Make this Octothorpe permanently read-only and return it.

        Any later call to ``guard`` raises ``FrozenInstanceError``.
        """
        if not self._frozen:
            log.debug("Freezing Octothorpe with keys %s", list(self._store))
        self._frozen = True
        return self

    def guard(self, *args, fill=None):
        """Guarantee the initial state of some members.

        Call either as ``guard(klass, *keys)``, which sets each missing key to
        ``klass()``, or as ``guard(*keys, fill=function)``, which sets each
        missing key to ``function(key)``. Keys that are already present are
        left alone and the fill rule is not called for them.

        This is the only way an Octothorpe can change once it is created.

        Returns:
            Octothorpe: This Octothorpe.

        Raises:
            FrozenInstanceError: If the Octothorpe is frozen.
            ValueError: Unless exactly one of ``klass`` and ``fill`` is given.
        """
        if self._frozen:
            raise exceptions.FrozenInstanceError(
                "Cannot guard a frozen Octothorpe"
            )

        has_class = bool(args) and isinstance(args[0], type)
        # XOR; exactly one fill rule
        if not has_class ^ (fill is not None):
            raise ValueError("Exactly one of a class and ``fill`` must be given")
        if has_class:
            klass, args = args[0], args[1:]
            fill = lambda key: klass()  # noqa: E731

        keys = [convert.to_key(key) for key in args]
        missing = [key for key in dict.fromkeys(keys) if key not in self._store]
        for key in missing:
            self._store[key] = fill(key)
        if missing:
            log.debug("Guarded missing keys %s", missing)
        return self

    # New Octothorpes
    # =========================================================================

    def merge(self, other, conflict=None):
        """Return a new Octothorpe combining this one with ``other``.

        Works exactly like ``dict.update`` on a copy: ``other`` wins, unless
        ``conflict`` is given, in which case it is called as
        ``conflict(key, old_value, new_value)`` for each key in both and its
        result is used.

        Example:
            >>> ot = Octothorpe({'one': 1, 'two': 2})
            >>> ot.merge({'one': 3}, lambda k, o, n: o + n).to_dict()
            {'one': 4, 'two': 2}

        Raises:
            InvalidSourceError: If ``other`` cannot be read as key/value pairs.
        """
        incoming = (
            other._store if isinstance(other, Octothorpe) else convert.to_store(other)
        )
        if conflict is None:
            merged = toolz.merge(self._store, incoming)
        else:
            merged = dict(self._store)
            for key, value in incoming.items():
                if key in merged:
                    value = conflict(key, merged[key], value)
                merged[key] = value
        log.debug("Merged %d keys into %d", len(incoming), len(self._store))
        return type(self)(merged)

    def whitelist(self, *keys):
        """Return a new Octothorpe with only the given keys.

        Keys that this Octothorpe does not have, including keys that cannot
        be canonicalized, are ignored.
        """
        wanted = {convert.to_key(key) for key in keys if key in self}
        return type(self)(toolz.keyfilter(wanted.__contains__, self._store))

    # Comparison
    # =========================================================================

    def _other_store(self, other):
        if isinstance(other, Octothorpe):
            return other._store
        if isinstance(other, Mapping):
            return convert.to_store(other)
        raise exceptions.InvalidSourceError(other)

    def __eq__(self, other):
        try:
            other_store = self._other_store(other)
        except exceptions.InvalidSourceError:
            if config.STRICT_EQUALITY:
                raise
            return NotImplemented
        return self._store == other_store

    __hash__ = None

    def __lt__(self, other):
        return self._store.items() < self._other_store(other).items()

    def __le__(self, other):
        return self._store.items() <= self._other_store(other).items()

    def __gt__(self, other):
        return self._store.items() > self._other_store(other).items()

    def __ge__(self, other):
        return self._store.items() >= self._other_store(other).items()

    # Hash-like queries and iteration
    # =========================================================================

    def __iter__(self):
        return iter(self._store)

    def __len__(self):
        return len(self._store)

    # Views of the store itself; absent keys are never reported as present
    def keys(self):
        return types.MappingProxyType(self._store).keys()

    def values(self):
        return types.MappingProxyType(self._store).values()

    def items(self):
        return types.MappingProxyType(self._store).items()

    def __contains__(self, key):
        try:
            return convert.to_key(key) in self._store
        except exceptions.InvalidKeyError:
            return False

    @property
    def empty(self):
        return not self._store

    def has_key(self, key):
        return key in self

    include = has_key

    def has_value(self, value):
        return value in self._store.values()

    def each(self):
        """Yield each ``(key, value)`` pair in insertion order."""
        yield from self._store.items()

    def select(self, predicate):
        """Return a ``dict`` of the pairs for which ``predicate(key, value)``
        is true."""
        return toolz.itemfilter(lambda item: predicate(*item), self._store)

    def reject(self, predicate):
        """Return a ``dict`` of the pairs for which ``predicate(key, value)``
        is false."""
        return toolz.itemfilter(lambda item: not predicate(*item), self._store)

    def map(self, function):
        """Return a list of ``function(key, value)`` for each pair."""
        return [function(key, value) for key, value in self._store.items()]

    def reduce(self, function, initial=_NO_INITIAL):
        """Fold the pairs from the left, as ``function(acc, (key, value))``.

        Without ``initial`` the first pair starts the fold, and an empty
        Octothorpe raises ``TypeError``.
        """
        if initial is _NO_INITIAL:
            return functools.reduce(function, self._store.items())
        return functools.reduce(function, self._store.items(), initial)
