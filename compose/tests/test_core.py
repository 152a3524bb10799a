# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

import logging

from mock import patch

import compose
from compose import core


def teardown_function(function):
    core.set_log_level('fatal')


def test_set_log_level_by_name():
    core.set_log_level('debug')
    assert core.log.level == logging.DEBUG
    core.set_log_level('Error')
    assert core.log.level == logging.ERROR


def test_set_log_level_unknown_name():
    core.set_log_level('moo')
    assert core.log.level == logging.WARN


def test_set_log_level_numeric():
    core.set_log_level(logging.INFO)
    assert core.log.level == logging.INFO


def test_composition_is_logged():
    with patch.object(core.log, 'debug') as debug:
        compose.create({'foo': 'foo', 'bar': 'bar'})
    debug.assert_called_once_with('Composed %s with members %s', 'Composed',
                                  'bar, foo')


def test_advice_is_logged():
    Foo = compose.create({'foo': lambda self: 'foo'})
    with patch.object(core.log, 'debug') as debug:
        Foo.before('foo', lambda args: args)
    assert debug.call_args_list[0][0] == ('Applying %s advice to %r',
                                          'before', 'foo')


def test_errors_share_a_base():
    for error in (core.InvalidSource, core.UnknownMember, core.AdviceError,
                  core.InvalidAdvice, core.ImmutableType, core.ReservedMember):
        assert issubclass(error, compose.Error)


def test_error_messages():
    assert str(core.UnknownMember('foo')) == "Unknown member 'foo'"
    assert str(core.ReservedMember('__lineage__')) == \
        "Member name '__lineage__' is reserved"
    assert str(core.AdviceError('foo')) == \
        'Trying to advise non-existing method: "foo"'
    assert str(core.ImmutableType('Foo')) == \
        "Can not modify composed type 'Foo', use extend() or overlay() to " \
        "derive a new one"
