"""Tests for is_checker.core.keys — own keys and property access."""

import pytest
from is_checker.core.errors import InvalidArgumentError
from is_checker.core.keys import get_property, has_own, has_property, length_of, own_keys
from is_checker.core.tags import UNDEFINED


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self._cache = None

    def norm(self):
        return (self.x**2 + self.y**2) ** 0.5


class Slotted:
    __slots__ = ('a', 'b')


class TestOwnKeys:
    def test_dict_insertion_order(self) -> None:
        assert own_keys({'b': 1, 'a': 2}) == ['b', 'a']

    def test_dict_non_string_keys_spelled_as_strings(self) -> None:
        assert own_keys({1: 'x', 'a': 2}) == ['1', 'a']
        assert own_keys({1.0: 'x', None: 'y'}) == ['1', 'null']

    def test_dict_keys_with_same_spelling_collapse(self) -> None:
        assert own_keys({1: 'x', '1': 'y'}) == ['1']

    def test_sequence_indices(self) -> None:
        assert own_keys([10, 20]) == ['0', '1']
        assert own_keys('ab') == ['0', '1']

    def test_instance_public_attributes(self) -> None:
        assert own_keys(Point(1, 2)) == ['x', 'y']

    def test_slots(self) -> None:
        s = Slotted()
        s.a = 1
        assert own_keys(s) == ['a']

    def test_set_has_no_keys(self) -> None:
        assert own_keys({1, 2}) == []

    def test_number_has_no_keys(self) -> None:
        assert own_keys(5) == []

    def test_none_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            own_keys(None)

    def test_undefined_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            own_keys(UNDEFINED)


class TestHasOwn:
    def test_dict(self) -> None:
        assert has_own({'a': 1}, 'a')
        assert not has_own({'a': 1}, 'b')

    def test_integer_index_on_dict(self) -> None:
        assert has_own({'0': 'a'}, 0)

    def test_string_name_of_integer_key(self) -> None:
        assert has_own({1: 'a'}, '1')
        assert get_property({1: 'a'}, '1') == 'a'
        assert not has_own({1: 'a'}, '2')

    def test_sequence(self) -> None:
        assert has_own([1, 2], 1)
        assert has_own([1, 2], '1')
        assert not has_own([1, 2], 2)
        assert not has_own([1, 2], '01')

    def test_instance(self) -> None:
        p = Point(1, 2)
        assert has_own(p, 'x')
        assert has_own(p, '_cache')
        assert not has_own(p, 'norm')

    def test_absent(self) -> None:
        assert not has_own(None, 'a')


class TestHasProperty:
    def test_inherited_method(self) -> None:
        assert has_property(Point(1, 2), 'norm')

    def test_sequence_length(self) -> None:
        assert has_property([1], 'length')

    def test_dict_only_its_keys(self) -> None:
        assert not has_property({}, 'keys')


class TestGetProperty:
    def test_missing_is_undefined(self) -> None:
        assert get_property({'a': 1}, 'b') is UNDEFINED
        assert get_property([1], 3) is UNDEFINED
        assert get_property(Point(1, 2), 'z') is UNDEFINED

    def test_found(self) -> None:
        assert get_property({'a': 1}, 'a') == 1
        assert get_property([5, 6], '1') == 6
        assert get_property(Point(1, 2), 'y') == 2


class TestLengthOf:
    def test_sequence(self) -> None:
        assert length_of([1, 2, 3]) == 3

    def test_dict_length_key(self) -> None:
        assert length_of({'length': 2}) == 2

    def test_missing(self) -> None:
        assert length_of(5) is UNDEFINED
        assert length_of({}) is UNDEFINED
