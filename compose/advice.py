# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""A simple Aspect-Oriented Programming API for behavior descriptors.

Advice wraps an existing function without modifying it, producing a new
function that can be used as a member of a composed type. Functions receive
their instance explicitly as the first argument, as methods do:

>>> def fire(self, at, power=11):
...   return 'Fired laser with power %i at %s' % (power, at)

Before advice receives the positional arguments as a list and returns the
arguments to call the original function with:

>>> def redirect(args):
...   return ['Sun']
>>> redirected = before(fire, redirect)
>>> redirected(None, 'Moon')
'Fired laser with power 11 at Sun'

Keyword arguments are passed through untouched:

>>> redirected(None, 'Moon', power=5)
'Fired laser with power 5 at Sun'

After advice receives the result followed by the original arguments, and
returns the new result:

>>> def shout(result, at, power=11):
...   return result.upper()
>>> after(fire, shout)(None, 'Moon')
'FIRED LASER WITH POWER 11 AT MOON'

Around advice receives the original function and returns its replacement:

>>> def decrease_power(fire):
...   def weak_fire(self, at):
...     return fire(self, at, power=5)
...   return weak_fire
>>> around(fire, decrease_power)(None, 'Moon')
'Fired laser with power 5 at Moon'

The original function is unaffected:

>>> fire(None, 'Moon')
'Fired laser with power 11 at Moon'

Methods can also be advised by name, directly from a behavior source:

>>> class OrbitalLaser(object):
...   target = 'Moon'
...
...   def fire(self):
...     return self.target
>>> fire_twice = after(OrbitalLaser, 'fire', lambda result: result * 2)
>>> fire_twice(OrbitalLaser())
'MoonMoon'

Several kinds of advice can be applied to the members of a descriptor at once
with :func:`advise`.
"""

import functools

from compose.core import AdviceError, InvalidAdvice, log
from compose.descriptors import lookup


__all__ = ['ADVICE_KINDS', 'before', 'after', 'around', 'advise']


def _resolve(source, method, advice):
    """Resolve the (function, advice) pair from an advice call."""
    if advice is None:
        return source, method
    return lookup(source, method), advice


def _split(args, receiver):
    """Split the receiver, if any, from positional arguments."""
    if receiver:
        return args[:1], args[1:]
    return (), args


def _wrap(function, wrap):
    """Wrap function, or the function inside a static or class method."""
    if isinstance(function, staticmethod):
        return staticmethod(wrap(function.__func__, False))
    if isinstance(function, classmethod):
        return classmethod(wrap(function.__func__, True))
    return wrap(function, True)


def before(source, method, advice=None):
    """Advise a function with a transformation of its arguments.

    May be called either as before(function, advice) or
    before(source, method_name, advice). Static and class methods are
    advised as the function they contain and stay static or class methods.

    :param advice: Called with a list of the positional arguments, excluding
                   the instance. Returns the argument sequence to call the
                   original with, or None to leave them unchanged.
    :returns: A new function.
    """
    function, advice = _resolve(source, method, advice)

    def wrap(function, receiver):
        @functools.wraps(function)
        def advised(*args, **kwargs):
            head, args = _split(args, receiver)
            advised_args = advice(list(args))
            if advised_args is None:
                advised_args = args
            return function(*head, *advised_args, **kwargs)
        return advised
    return _wrap(function, wrap)


def after(source, method, advice=None):
    """Advise a function with a transformation of its result.

    :param advice: Called with the result of the original function followed
                   by the original arguments. Its return value replaces the
                   result.
    :returns: A new function.
    """
    function, advice = _resolve(source, method, advice)

    def wrap(function, receiver):
        @functools.wraps(function)
        def advised(*args, **kwargs):
            result = function(*args, **kwargs)
            return advice(result, *_split(args, receiver)[1], **kwargs)
        return advised
    return _wrap(function, wrap)


def around(source, method, advice=None):
    """Replace a function with one derived from it.

    The advice is called once, immediately, with the original function and
    must return the replacement. The replacement decides if and how the
    original is called. For a static method both take no instance.

    :returns: A new function.
    """
    function, advice = _resolve(source, method, advice)

    def wrap(function, receiver):
        replacement = advice(function)

        @functools.wraps(function)
        def advised(*args, **kwargs):
            return replacement(*args, **kwargs)
        return advised
    return _wrap(function, wrap)


# Innermost first. Before advice ends up outermost, so argument
# transformation is seen by after advice and the original alike.
ADVICE_KINDS = (('around', around), ('after', after), ('before', before))


def advise(descriptor, spec):
    """Apply an aspect specification to a behavior descriptor in place.

    >>> descriptor = {'echo': lambda self, what: what}
    >>> advise(descriptor, {
    ...   'before': {'echo': lambda args: [args[0] + 'bar']},
    ...   'after': {'echo': lambda result, what: result + 'bar' + what},
    ...   })
    >>> descriptor['echo'](None, 'foo')
    'foobarbarfoobar'

    :param descriptor: Dictionary of members. Callers are expected to pass a
                       private copy.
    :param spec: Mapping with optional "before", "after" and "around" keys,
                 each a mapping of method name to advice.
    :raises AdviceError: If a method does not exist in the descriptor.
    :raises InvalidAdvice: If spec contains an unknown kind of advice.
    """
    kinds = dict(ADVICE_KINDS)
    for kind in spec:
        if kind not in kinds:
            raise InvalidAdvice(kind)
    for kind, wrap in ADVICE_KINDS:
        for name, advice in spec.get(kind, {}).items():
            if name not in descriptor:
                raise AdviceError(name)
            log.debug('Applying %s advice to %r', kind, name)
            descriptor[name] = wrap(descriptor[name], advice)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
