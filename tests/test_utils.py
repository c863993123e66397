from functools import partial

import pytest

from stoch.utils import extract_kwargs, complement, normalize_name



def example_fn(a, b, c=3, *, d=4):
    scratch = a + b
    return scratch


def test_extract_kwargs():
    kwargs = {"a": 1, "c": 2, "d": 5, "scratch": 0, "e": 7}
    assert extract_kwargs(example_fn, kwargs) == {"a": 1, "c": 2, "d": 5}
    assert extract_kwargs(partial(example_fn, 1), kwargs) == {"a": 1, "c": 2, "d": 5}


def test_complement():
    assert complement({"a": 1, "b": 2}, {"a": 0}) == {"b": 2}
    with pytest.raises(TypeError):
        complement({"a": 1}, ["a"])


def test_normalize_name():
    assert normalize_name("Single Bit Flip") == "single_bit_flip"
    assert normalize_name("two-bit-flip") == "two_bit_flip"
    assert normalize_name(" Geometric ") == "geometric"
    assert normalize_name("random_walk") == "random_walk"
