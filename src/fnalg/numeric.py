"""
Small numeric functions and predicates exercising the combinators.
"""
from .curry import curry
from .predicate import Predicate, predicate, negate

SMALL_BOUND = 100


def square(n):
    return n * n


@predicate
def is_even(n) -> bool:
    return n % 2 == 0


is_odd = negate(is_even)


def small_bound(bound) -> Predicate:
    """
    Predicate: absolute value at most `bound`.
    """
    def is_small(n):
        return abs(n) <= bound
    return Predicate(is_small)


is_small = small_bound(SMALL_BOUND)


@curry
def is_square_of(a, b) -> bool:
    """
    a == b * b; is_square_of(a) is the predicate for the square roots of `a`.
    """
    return a == b * b


@curry
def is_triple(x, y, z) -> bool:
    # Pythagorean triple
    return x * x + y * y == z * z


def is_small_from_config(cfg) -> Predicate:
    """
    `is_small` with the bound given by the 'small_bound' item of the configuration.
    """
    return small_bound(cfg.small_bound)
