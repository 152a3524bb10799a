# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Exceptions and logging shared by the compose modules."""

import logging
import os


__all__ = ['Error', 'InvalidSource', 'ReservedMember', 'UnknownMember',
           'AdviceError', 'InvalidAdvice', 'ImmutableType', 'log',
           'set_log_level']


class Error(Exception):
    """Base compose exception."""


class InvalidSource(Error, TypeError):
    """Object can not be used as a behavior source."""

    def __str__(self):
        return 'Can not compose from %r' % (self.args[0],)


class ReservedMember(InvalidSource):
    """Member name is used by composed types for their own bookkeeping."""

    def __str__(self):
        return 'Member name %r is reserved' % (self.args[0],)


class UnknownMember(Error, LookupError):
    """Member does not exist in a behavior descriptor."""

    def __str__(self):
        return 'Unknown member %r' % (self.args[0],)


class AdviceError(UnknownMember):
    """Advice was applied to a method that does not exist."""

    def __str__(self):
        return 'Trying to advise non-existing method: "%s"' % (self.args[0],)


class InvalidAdvice(Error, ValueError):
    """Unknown kind of advice in an aspect."""

    def __str__(self):
        return 'Unknown advice kind %r, expected one of before, after or ' \
               'around' % (self.args[0],)


class ImmutableType(Error, AttributeError):
    """Composed types can not be modified once created."""

    def __str__(self):
        return 'Can not modify composed type %r, use extend() or ' \
               'overlay() to derive a new one' % (self.args[0],)


def set_log_level(value):
    """Set the level of the compose logger.

    :param value: A level name (debug, info, warning, error or fatal) or a
                  numeric logging level. Unknown names fall back to WARN.
    """
    if isinstance(value, str):
        value = getattr(logging, value.upper(), logging.WARN)
    log.setLevel(value)


formatter = logging.Formatter(
    '%(asctime)s %(name)-12s %(levelname)-8s %(message)s',
    '%Y-%m-%d %H:%M:%S',
    )
console = logging.StreamHandler()
console.setLevel(logging.DEBUG)
console.setFormatter(formatter)

log = logging.getLogger('compose')
log.addHandler(console)
set_log_level(os.environ.get('COMPOSE_LOG_LEVEL', 'fatal'))
