# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Normalisation of behavior sources into behavior descriptors.

A behavior descriptor is a plain dictionary mapping member names to values or
functions. Any of the following sources may be normalised into one.

A behavior table, which is simply copied:

>>> table = {'greeting': 'hello'}
>>> behavior = normalize(table)
>>> behavior.descriptor
{'greeting': 'hello'}
>>> behavior.descriptor is table
False
>>> behavior.initializers
()

A class, from which the methods and class attributes are taken. Its
__init__ is not carried over:

>>> class Greeter(object):
...   greeting = 'hello'
...
...   def __init__(self):
...     self.name = 'world'
...
...   def greet(self):
...     return '%s %s' % (self.greeting, self.name)
>>> sorted(normalize(Greeter).descriptor)
['greet', 'greeting']

A constructor function carrying its members in a "members" attribute. The
function itself becomes an initializer, called with the new instance only:

>>> def Counter(self):
...   self.count = 0
>>> Counter.members = {'increment': lambda self: self.count + 1}
>>> behavior = normalize(Counter)
>>> sorted(behavior.descriptor)
['increment']
>>> behavior.initializers == (Constructor(Counter),)
True

Anything else is rejected:

>>> normalize(42)
Traceback (most recent call last):
...
compose.core.InvalidSource: Can not compose from 42
"""

from collections import namedtuple
from collections.abc import Mapping
from inspect import isclass
from types import GetSetDescriptorType, MemberDescriptorType

from compose.core import InvalidSource, UnknownMember


__all__ = ['Behavior', 'Constructor', 'normalize', 'lookup', 'members_of', 'is_composed']


# Class bookkeeping that is not behavior.
_CLASS_INTERNALS = frozenset([
    '__module__', '__qualname__', '__doc__', '__dict__', '__weakref__',
    '__slots__', '__init__', '__new__', '__annotations__', '__annotate__',
    '__annotate_func__', '__annotations_cache__', '__firstlineno__',
    '__static_attributes__', '__classcell__', '__orig_bases__',
    '__parameters__', '__type_params__',
    ])


class Behavior(namedtuple('Behavior', 'name descriptor initializers lineage')):
    """A normalised behavior source.

    :ivar name: Name given to types composed from the source.
    :ivar descriptor: A fresh dictionary of members.
    :ivar initializers: Tuple of initializers, in the order they run.
    :ivar lineage: Frozenset of composed types the source belongs to.
    """

    __slots__ = ()


class Constructor(object):
    """Run a constructor function as an initializer.

    The function is called with the new instance only, any construction
    options are for the explicit initializers.
    """

    __slots__ = ['function']

    def __init__(self, function):
        self.function = function

    def __call__(self, instance, *options):
        self.function(instance)

    def __eq__(self, other):
        return isinstance(other, Constructor) and \
            other.function is self.function

    def __hash__(self):
        return hash(self.function)

    def __repr__(self):
        return 'Constructor(%r)' % (self.function,)


def is_composed(source):
    """Is source a type produced by compose?"""
    return isclass(source) and '__descriptor__' in vars(source) \
        and '__lineage__' in vars(source)


def members_of(cls):
    """Collect the member table of a class.

    Members of base classes are collected first so subclasses override them.
    """
    members = {}
    for base in reversed(cls.__mro__):
        if base is object:
            continue
        for name, value in vars(base).items():
            if name in _CLASS_INTERNALS:
                continue
            if isinstance(value, (GetSetDescriptorType, MemberDescriptorType)):
                continue
            members[name] = value
    return members


def normalize(source):
    """Normalise a behavior source.

    :param source: A composed type, a mapping of members, a class or a
                   function with a "members" mapping attribute.
    :returns: A :class:`Behavior`.
    :raises InvalidSource: If source is not one of the above.
    """
    if is_composed(source):
        return Behavior(source.__name__, dict(source.__descriptor__),
                        source.__initializers__,
                        source.__lineage__ | frozenset([source]))
    if isinstance(source, Mapping):
        return Behavior('Composed', dict(source), (), frozenset())
    if isclass(source):
        return Behavior(source.__name__, members_of(source), (), frozenset())
    members = getattr(source, 'members', None)
    if callable(source) and isinstance(members, Mapping):
        return Behavior(getattr(source, '__name__', 'Composed'),
                        dict(members), (Constructor(source),), frozenset())
    raise InvalidSource(source)


def lookup(source, name):
    """Extract a single member from a behavior source.

    >>> lookup({'answer': 42}, 'answer')
    42
    >>> lookup({'answer': 42}, 'question')
    Traceback (most recent call last):
    ...
    compose.core.UnknownMember: Unknown member 'question'

    :raises UnknownMember: If source has no such member.
    """
    descriptor = normalize(source).descriptor
    try:
        return descriptor[name]
    except KeyError:
        raise UnknownMember(name)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
