# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Composed types and the operators that combine them.

A composed type is created from any behavior source, such as a class:

>>> class Laser(object):
...   power = 11
...
...   def fire(self, at):
...     return 'Fired laser with power %i at %s' % (self.power, at)
>>> Laser = create(Laser)
>>> laser = Laser()
>>> laser.fire('Moon')
'Fired laser with power 11 at Moon'
>>> isinstance(laser, Laser)
True

An initializer runs once for each new instance, receiving the options passed
when calling the type, if any:

>>> def init_laser(self, options=None):
...   self.power = (options or {}).get('power', self.power)
>>> Laser = create(Laser, init_laser)
>>> Laser({'power': 5}).fire('Moon')
'Fired laser with power 5 at Moon'
>>> Laser().power
11

Operators never modify the types they are given. Each returns a new type,
either called as a function or chained from an existing type:

>>> OrbitalLaser = Laser.extend({'orbit': 'geostationary'})
>>> OrbitalLaser().orbit
'geostationary'
>>> hasattr(Laser(), 'orbit')
False

Instances of derived types still belong to the types they were derived from:

>>> isinstance(OrbitalLaser(), Laser)
True
>>> isinstance(Laser(), OrbitalLaser)
False

Composed types themselves can not be modified:

>>> Laser.power = 12
Traceback (most recent call last):
...
compose.core.ImmutableType: Can not modify composed type 'Laser', use extend() or overlay() to derive a new one
"""

from collections.abc import Mapping
from types import MappingProxyType

from compose.advice import advise
from compose.core import ImmutableType, InvalidSource, ReservedMember, log
from compose.descriptors import lookup, normalize


__all__ = ['ComposeMeta', 'create', 'compose', 'extend', 'mixin', 'overlay',
           'from_', 'aspect']


# Bookkeeping attributes of every composed type.
_RESERVED = frozenset(['__descriptor__', '__initializers__', '__lineage__'])


class ComposeMeta(type):
    """Metaclass of composed types.

    Calling a composed type constructs an instance and runs its initializers.
    The combination operators are also available as methods of every composed
    type, so they can be chained.
    """

    def __call__(cls, *args, **kwargs):
        if kwargs or len(args) > 1:
            raise TypeError('%s() takes at most one options argument'
                            % cls.__name__)
        instance = object.__new__(cls)
        for initializer in cls.__initializers__:
            initializer(instance, *args)
        return instance

    def __instancecheck__(cls, instance):
        return type(cls).__subclasscheck__(cls, type(instance))

    def __subclasscheck__(cls, subclass):
        if cls in getattr(subclass, '__lineage__', ()):
            return True
        return type.__subclasscheck__(cls, subclass)

    def __setattr__(cls, name, value):
        raise ImmutableType(cls.__name__)

    def __delattr__(cls, name):
        raise ImmutableType(cls.__name__)

    # Chainable operators
    def extend(cls, additions):
        """Add members to a new copy of this type."""
        return extend(cls, additions)

    def mixin(cls, other):
        """Mix a behavior source into a new copy of this type."""
        return mixin(cls, other)

    def overlay(cls, function):
        """Post-process the descriptor of a new copy of this type."""
        return overlay(cls, function)

    def from_(cls, source, name):
        """Replace member name with the member of the same name in source."""
        return extend(cls, {name: from_(source, name)})

    def before(cls, name, advice):
        """Transform the arguments of method name in a new copy of this type."""
        return aspect(cls, {'before': {name: advice}})

    def after(cls, name, advice):
        """Transform the result of method name in a new copy of this type."""
        return aspect(cls, {'after': {name: advice}})

    def around(cls, name, advice):
        """Replace method name in a new copy of this type."""
        return aspect(cls, {'around': {name: advice}})

    def aspect(cls, spec):
        """Apply several pieces of advice to a new copy of this type."""
        return aspect(cls, spec)


def _chain(*chains):
    """Concatenate initializer chains, running each initializer only once."""
    initializers = []
    for chain in chains:
        for initializer in chain:
            if initializer not in initializers:
                initializers.append(initializer)
    return tuple(initializers)


def _build(name, descriptor, initializers, lineage):
    reserved = _RESERVED.intersection(descriptor)
    if reserved:
        raise ReservedMember(min(reserved))
    namespace = dict(descriptor)
    namespace['__descriptor__'] = MappingProxyType(dict(descriptor))
    namespace['__initializers__'] = tuple(initializers)
    namespace['__lineage__'] = frozenset(lineage)
    log.debug('Composed %s with members %s', name,
              ', '.join(sorted(descriptor)))
    return ComposeMeta(name, (object,), namespace)


def create(source, initializer=None):
    """Create a new composed type.

    :param source: Any behavior source: a mapping of members, a class, a
                   constructor function with a "members" mapping or an
                   existing composed type.
    :param initializer: Optional function called as initializer(instance) or
                        initializer(instance, options) for each new instance,
                        after any initializers the source already carries.
                        It must accept an options argument if the type is
                        ever called with one. A constructor function source
                        is always called with the instance only.
    :returns: A new composed type.
    :raises InvalidSource: If source can not be composed.
    :raises ReservedMember: If source defines __descriptor__, __initializers__
                            or __lineage__.
    """
    behavior = normalize(source)
    initializers = behavior.initializers
    if initializer is not None:
        initializers = _chain(initializers, [initializer])
    return _build(behavior.name, behavior.descriptor, initializers,
                  behavior.lineage)


compose = create


def extend(base, additions):
    """Derive a new type with additional members.

    >>> Foo = create({'foo': 'foo'})
    >>> FooBar = extend(Foo, {'bar': 2})
    >>> foobar = FooBar()
    >>> foobar.foo, foobar.bar
    ('foo', 2)

    :param base: Composed type or behavior source to extend.
    :param additions: Mapping of members, overriding those of base.
    """
    if not isinstance(additions, Mapping):
        raise InvalidSource(additions)
    behavior = normalize(base)
    behavior.descriptor.update(additions)
    return _build(behavior.name, behavior.descriptor, behavior.initializers,
                  behavior.lineage)


def mixin(base, other):
    """Derive a new type combining the behavior of base and other.

    Members of other override those of base. Initializers of both run, those
    of base first.

    >>> class Bar(object):
    ...   def bar(self):
    ...     return 2
    >>> FooBar = mixin(create({'foo': 'foo'}), Bar)
    >>> FooBar().bar()
    2
    """
    behavior = normalize(base)
    mixed = normalize(other)
    behavior.descriptor.update(mixed.descriptor)
    return _build(behavior.name, behavior.descriptor,
                  _chain(behavior.initializers, mixed.initializers),
                  behavior.lineage | mixed.lineage)


def overlay(base, function):
    """Derive a new type by modifying a copy of base's descriptor.

    The function is called once, with the descriptor dictionary as its only
    argument, and may add, remove or replace members in place:

    >>> def rename(descriptor):
    ...   descriptor['bar'] = descriptor.pop('foo')
    >>> Bar = overlay(create({'foo': 'foo'}), rename)
    >>> Bar().bar
    'foo'
    >>> hasattr(Bar(), 'foo')
    False
    """
    behavior = normalize(base)
    function(behavior.descriptor)
    return _build(behavior.name, behavior.descriptor, behavior.initializers,
                  behavior.lineage)


def from_(source, name):
    """Extract a member from a behavior source.

    The member is returned as stored, functions unbound, for use in another
    behavior table.

    :raises UnknownMember: If source has no member name.
    """
    return lookup(source, name)


def aspect(base, spec):
    """Derive a new type with advice applied to its methods.

    >>> Echo = create({'echo': lambda self, what: what})
    >>> Shout = aspect(Echo, {'after': {'echo': lambda result, what: result.upper()}})
    >>> Shout().echo('hello')
    'HELLO'
    >>> Echo().echo('hello')
    'hello'

    :param spec: Mapping with optional "before", "after" and "around" keys,
                 each mapping method names to advice. See :mod:`compose.advice`.
    :raises AdviceError: If advice names a method base does not have.
    """
    behavior = normalize(base)
    advise(behavior.descriptor, spec)
    return _build(behavior.name, behavior.descriptor, behavior.initializers,
                  behavior.lineage)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
