#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# storage.py

"""Attribute-style access to the members of an |Octothorpe|."""

from . import exceptions
from .convert import to_key


class Storage:
    """A read-only view of a dictionary whose keys can be read as attributes.

    The view holds the owner's dictionary itself, so it always reflects the
    current contents. It has no public methods of its own in order to keep
    clear of key names.

    Example:
        >>> view = Storage({'one': 1})
        >>> view.one
        1
        >>> view.two is None
        True
        >>> view('one')
        1
    """

    __slots__ = ("__store",)

    def __init__(self, store):
        object.__setattr__(self, "_Storage__store", store)

    def __getattr__(self, name):
        # Only reached for names not found normally. Dunder lookups are left
        # to Python so that copying and introspection behave.
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return object.__getattribute__(self, "_Storage__store").get(name)

    def __call__(self, name, *args, **kwargs):
        """Read the member ``name``; ``None`` if it is absent.

        This is a plain read: passing any further argument or a callback
        raises ``InvalidAccessError``.
        """
        if args or kwargs:
            raise exceptions.InvalidAccessError(
                name, "member access takes no arguments or callbacks"
            )
        return self.__store.get(to_key(name))

    def __setattr__(self, name, value):
        raise exceptions.InvalidAccessError(name, "members are read-only")

    def __delattr__(self, name):
        raise exceptions.InvalidAccessError(name, "members are read-only")

    def __dir__(self):
        return [key for key in self.__store if key.isidentifier()]

    def __repr__(self):
        return "Storage({!r})".format(self.__store)
