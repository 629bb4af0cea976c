"""Tests for the type bundle."""

import datetime
import re
import types

from is_checker import is_
from is_checker.core.tags import UNDEFINED, tag_of


class Point:
    def __init__(self, x=0):
        self.x = x


class AppError(Exception):
    pass


class TestSameType:
    def test_same(self) -> None:
        assert is_.same_type(1, 2)
        assert is_.same_type(1, 1.5)
        assert is_.same_type([], ())
        assert is_.same_type(None, None)
        assert is_.same_type(Point(), Point(1))

    def test_different(self) -> None:
        assert not is_.same_type(1, '1')
        assert not is_.same_type([], {})
        assert not is_.same_type(None, UNDEFINED)
        assert not is_.same_type(Point(), {})
        assert not is_.same_type(True, 1)


class TestPrimitive:
    def test_primitives(self) -> None:
        for value in (None, UNDEFINED, 1, 1.5, 'a', True, object()):
            assert is_.primitive(value), value

    def test_objects(self) -> None:
        for value in ([], {}, (), len, Point(), {1}):
            assert not is_.primitive(value), value


class TestTagPredicates:
    def test_date(self) -> None:
        assert is_.date(datetime.date(2020, 1, 1))
        assert is_.date(datetime.datetime(2020, 1, 1))
        assert not is_.date('2020-01-01')

    def test_error(self) -> None:
        assert is_.error(ValueError('x'))
        assert is_.error(Exception())

    def test_user_error_is_tagged_by_name(self) -> None:
        assert tag_of(AppError()) == 'apperror'
        assert not is_.error(AppError())

    def test_function(self) -> None:
        assert is_.function(len)
        assert is_.function(lambda: 0)
        assert is_.function(Point)
        assert not is_.function(Point())

    def test_map(self) -> None:
        assert is_.map(types.MappingProxyType({}))
        assert not is_.map({})

    def test_regexp(self) -> None:
        assert is_.regexp(re.compile('x'))
        assert not is_.regexp('x')

    def test_set(self) -> None:
        assert is_.set({1})
        assert is_.set(frozenset())
        assert not is_.set([])

    def test_symbol(self) -> None:
        assert is_.symbol(object())
        assert not is_.symbol('x')
        assert not is_.symbol(None)
