#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# __about__.py

"""Octothorpe metadata."""

__title__ = 'octothorpe'
__version__ = '0.2.0'
__description__ = ('Read-only, key-normalizing mapping for passing messages '
                   'between objects.')
__author__ = 'The Octothorpe developers'
__copyright__ = 'Copyright 2015-2018 The Octothorpe developers'
__license__ = 'MIT License'

__all__ = ['__title__', '__version__', '__description__', '__author__',
           '__copyright__', '__license__']
