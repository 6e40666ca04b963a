"""
Boolean algebra over predicates.

    and_(p, q)(x) == p(x) and q(x)
    or_(p, q)(x) == p(x) or q(x)
    negate(p)(x) == not p(x)

Predicate values support the same through the operators `&`, `|`, `^`, `~`.
Plain booleans keep using `and`, `or`, `not`.
"""
from typing import *
import attrs

from .fn import Fn, compose, check_callable

PredicateFn = Callable[..., bool]


@attrs.frozen
class Predicate(Fn):
    """
    Function value with boolean result.
    """

    def __call__(self, *args, **kwargs) -> bool:
        return bool(self.func(*args, **kwargs))

    def __matmul__(self, other):
        # predicate after any function is still a predicate
        if not callable(other):
            return NotImplemented
        return Predicate(compose(self, other))

    def __and__(self, other):
        if not callable(other):
            return NotImplemented
        return and_(self, other)

    def __rand__(self, other):
        if not callable(other):
            return NotImplemented
        return and_(other, self)

    def __or__(self, other):
        if not callable(other):
            return NotImplemented
        return or_(self, other)

    def __ror__(self, other):
        if not callable(other):
            return NotImplemented
        return or_(other, self)

    def __xor__(self, other):
        if not callable(other):
            return NotImplemented
        return xor_(self, other)

    def __rxor__(self, other):
        if not callable(other):
            return NotImplemented
        return xor_(other, self)

    def __invert__(self):
        return negate(self)


def predicate(func: PredicateFn) -> Predicate:
    """
    Decorator, wraps a boolean function as Predicate.
    """
    check_callable(func, "predicate")
    if isinstance(func, Predicate):
        return func
    return Predicate(func)


def and_(p: PredicateFn, q: PredicateFn) -> Predicate:
    check_callable(p, "predicate")
    check_callable(q, "predicate")

    def conjunction(*args, **kwargs):
        return bool(p(*args, **kwargs)) and bool(q(*args, **kwargs))
    return Predicate(conjunction)


def or_(p: PredicateFn, q: PredicateFn) -> Predicate:
    check_callable(p, "predicate")
    check_callable(q, "predicate")

    def disjunction(*args, **kwargs):
        return bool(p(*args, **kwargs)) or bool(q(*args, **kwargs))
    return Predicate(disjunction)


def xor_(p: PredicateFn, q: PredicateFn) -> Predicate:
    check_callable(p, "predicate")
    check_callable(q, "predicate")

    def exclusive(*args, **kwargs):
        return bool(p(*args, **kwargs)) != bool(q(*args, **kwargs))
    return Predicate(exclusive)


def negate(p: PredicateFn) -> Predicate:
    check_callable(p, "predicate")

    def negation(*args, **kwargs):
        return not p(*args, **kwargs)
    return Predicate(negation)


def all_of(*predicates: PredicateFn) -> Predicate:
    """
    Conjunction of any number of predicates, true for no predicates.
    """
    for p in predicates:
        check_callable(p, "predicate")

    def conjunction(*args, **kwargs):
        return all(p(*args, **kwargs) for p in predicates)
    return Predicate(conjunction)


def any_of(*predicates: PredicateFn) -> Predicate:
    """
    Disjunction of any number of predicates, false for no predicates.
    """
    for p in predicates:
        check_callable(p, "predicate")

    def disjunction(*args, **kwargs):
        return any(p(*args, **kwargs) for p in predicates)
    return Predicate(disjunction)


always_true = Predicate(lambda *args, **kwargs: True)
always_false = Predicate(lambda *args, **kwargs: False)
