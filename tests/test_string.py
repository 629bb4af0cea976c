"""Tests for the string bundle."""

from is_checker import is_


class TestString:
    def test_string(self) -> None:
        assert is_.string('')
        assert is_.string('abc')
        assert not is_.string(1)
        assert not is_.string(None)

    def test_empty_string(self) -> None:
        assert is_.empty_string('')
        assert is_.empty_string('   \t\n')
        assert not is_.empty_string(' a ')
        assert not is_.empty_string(None)
        assert not is_.empty_string([])


class TestSubstring:
    def test_found(self) -> None:
        assert is_.substring('lo', 'hello', 0)
        assert is_.substring('lo', 'hello')
        assert is_.substring('lo', 'hello', 3)

    def test_offset_past_match(self) -> None:
        # 'lo' starts at index 3; searching from 4 misses it
        assert not is_.substring('lo', 'hello', 4)

    def test_negative_offset(self) -> None:
        assert is_.substring('lo', 'hello', -2)
        assert not is_.substring('he', 'hello', -3)

    def test_offset_out_of_range(self) -> None:
        assert not is_.substring('he', 'hello', -10)
        assert not is_.substring('lo', 'hello', 5)
        assert not is_.substring('', '')

    def test_non_integer_offset_means_zero(self) -> None:
        assert is_.substring('h', 'hello', 1.5)
        assert is_.substring('h', 'hello', 'x')

    def test_coerces_substring(self) -> None:
        assert is_.substring(1, 'a1b')
        assert is_.substring(None, 'is null')

    def test_not_a_string(self) -> None:
        assert not is_.substring('lo', None)
        assert not is_.substring('1', ['1'])


class TestAffixes:
    def test_prefix(self) -> None:
        assert is_.prefix('he', 'hello')
        assert is_.prefix('', 'hello')
        assert not is_.prefix('xo', 'hello')
        assert not is_.prefix('he', None)

    def test_suffix(self) -> None:
        assert is_.suffix('lo', 'hello')
        assert not is_.suffix('he', 'hello')
        assert not is_.suffix('lo', ['lo'])

    def test_coerced_affix(self) -> None:
        assert is_.prefix(1, '1st')
        assert is_.suffix(True, 'is true')
        assert is_.suffix(None, 'is null')

    def test_coerced_float_in_exponent_notation(self) -> None:
        assert is_.prefix(1e21, '1e+21 grains')
        assert is_.suffix(1e-7, 'eps=1e-7')
        assert not is_.prefix(1e21, '1000000000000000000000')
