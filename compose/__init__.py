# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Compose - object composition without inheritance.

Reusable types are built by combining plain behavior tables, classes and
constructor functions, and refined with aspect-oriented advice:

>>> import compose
>>> Foo = compose.create({'foo': lambda self, a: a})
>>> FooBar = Foo.extend({'bar': 2}).before(
...   'foo', lambda args: [args[0] + 'bar'])
>>> FooBar().foo('foo')
'foobar'
>>> Foo().foo('foo')
'foo'
"""

from importlib.metadata import PackageNotFoundError, version

from compose.advice import after, around, before
from compose.composition import (
    ComposeMeta, aspect, compose, create, extend, from_, mixin, overlay,
    )
from compose.core import (
    AdviceError, Error, ImmutableType, InvalidAdvice, InvalidSource,
    ReservedMember, UnknownMember,
    )


__author__ = 'Alec Thomas <alec@swapoff.org>'

__all__ = ['Error', 'InvalidSource', 'ReservedMember', 'UnknownMember',
           'AdviceError', 'InvalidAdvice', 'ImmutableType', 'ComposeMeta',
           'create', 'compose', 'extend', 'mixin', 'overlay', 'from_',
           'before', 'after', 'around', 'aspect']

# Try and determine the version of compose from the installed distribution.
try:
    __version__ = version('compose')
except PackageNotFoundError:
    __version__ = None # unknown
