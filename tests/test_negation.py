"""Every negated predicate is the complement of its predicate, for every input."""

import pytest
from is_checker import is_
from is_checker.core.tags import UNDEFINED

SAMPLE_ARGS = [
    (),
    (None,),
    (UNDEFINED,),
    (0,),
    (3,),
    (4.5,),
    (float('nan'),),
    (float('inf'),),
    ('',),
    ('12',),
    (True,),
    ([1, 2],),
    ({'length': 1},),
    ({},),
    (object(),),
    (len,),
    ({1},),
    (1, [1]),
    ('lo', 'hello'),
    ('lo', 'hello', 4),
    ([1, [2]], [1, [2]]),
    ({'a': 1}, {'a': 1, 'b': 2}),
    ({'a': {'b': 1}}, 'a.b'),
    ({'a': 1, 'b': 2}, {'a': lambda v, *_: v == 1}, True),
    (3, [1, 2, 3, 4], 2, None),
]


@pytest.mark.parametrize('name', sorted(is_))
def test_negation_is_complement(name: str) -> None:
    predicate = is_[name]
    negated = is_.not_[name]
    for args in SAMPLE_ARGS:
        try:
            expected = not predicate(*args)
        except TypeError:
            # More arguments than the predicate takes
            continue
        assert negated(*args) is expected, (name, args)


def test_every_predicate_has_a_negation() -> None:
    assert sorted(is_) == sorted(is_.not_)


@pytest.mark.parametrize('name', sorted(is_))
def test_predicates_are_total(name: str) -> None:
    for args in SAMPLE_ARGS[:17]:
        assert isinstance(is_[name](*args), bool), (name, args)
