import itertools
import attrs
import pytest

from fixtures import sample_ints
from fnalg import curry, partial, Curried, arity_of, Fn, compose, ArityError, ParamError


def add3(a, b, c):
    return a + b + c


def ordered(a, b, c, d):
    return (a, b, c, d)


def scaled(x, factor=2, *, offset=0):
    return x * factor + offset


class TestArity:

    def test_signature(self):
        assert arity_of(add3) == 3
        assert arity_of(scaled) == 1
        assert arity_of(lambda: 0) == 0
        assert arity_of(Fn(add3)) == 3
        assert arity_of(compose(str, add3)) == 3
        assert arity_of(curry(add3)(1)) == 2

    def test_unknown(self):
        with pytest.raises(ParamError):
            arity_of(lambda *args: 0)
        with pytest.raises(ParamError):
            curry(lambda *xs: max(xs))
        assert curry(max, arity=3)(1)(5)(2) == 5
        with pytest.raises(ParamError):
            curry(add3, arity=-1)


class TestCurry:

    def test_groupings(self):
        args = (1, 2, 3, 4)
        f = curry(ordered)
        assert f(*args) == ordered(*args)
        assert f(1)(2)(3)(4) == args
        # every split of the argument list into consecutive groups
        for cuts in itertools.product([False, True], repeat=3):
            g = f
            group = [args[0]]
            for cut, a in zip(cuts, args[1:]):
                if cut:
                    g = g(*group)
                    group = []
                group.append(a)
            assert g(*group) == args

    def test_equivalence(self):
        xs = sample_ints(30)
        for a, b, c in zip(xs, xs[1:], xs[2:]):
            assert curry(add3)(a)(b)(c) == add3(a, b, c)
            assert curry(add3, a, b)(c) == add3(a, b, c)
            assert partial(add3, a)(b, c) == add3(a, b, c)

    def test_no_mutation(self):
        f = curry(ordered)
        g = f(1)
        h1 = g(2)
        h2 = g(20)
        assert isinstance(g, Curried)
        assert f.args == ()
        assert g.args == (1,)
        assert h1(3, 4) == (1, 2, 3, 4)
        assert h2(3, 4) == (1, 20, 3, 4)
        assert g.remaining == 3
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            g.args = ()

    def test_arity_mismatch(self):
        f = curry(add3)
        with pytest.raises(ArityError):
            f(1, 2, 3, 4)
        g = f(1, 2)
        with pytest.raises(ArityError):
            g(3, 4)
        with pytest.raises(TypeError):
            g(3, 4)
        # the failed call leaves g usable
        assert g(3) == 6

    def test_keywords(self):
        f = curry(scaled, offset=1)
        assert f(3) == 7
        assert curry(scaled)(offset=5)(offset=10)(1) == 12

    def test_zero_arity(self):
        f = curry(lambda: 42)
        assert f() == 42

    def test_decorator(self):
        @curry
        def add(a, b):
            return a + b

        @curry(arity=2)
        def join(*parts):
            return "-".join(parts)

        assert add(1)(2) == 3
        assert join("a")("b") == "a-b"
        inc = add(1)
        assert compose(inc, inc)(0) == 2
        assert (inc ** 5)(0) == 5


class TestKeywordParameters:

    def test_all_supplied(self):
        assert curry(add3)(1, 2, c=3) == 6
        assert curry(add3)(a=1, b=2, c=3) == 6
        assert curry(add3, 1, c=3)(2) == 6
        assert curry(ordered)(c=3)(1)(2)(d=4) == (1, 2, 3, 4)

    def test_remaining(self):
        g = curry(ordered)(1, d=4)
        assert isinstance(g, Curried)
        assert g.remaining == 2
        assert arity_of(g) == 2
        assert g(2, 3) == (1, 2, 3, 4)

    def test_keyword_before_positional(self):
        # b given by keyword, c can only follow by keyword
        g = curry(add3)(b=2)
        with pytest.raises(ArityError):
            g(1, 3)
        h = g(1)
        assert isinstance(h, Curried)
        with pytest.raises(ArityError):
            h(3)
        assert h(c=3) == 6

    def test_doubled(self):
        with pytest.raises(ArityError):
            curry(add3)(1)(a=5)
        with pytest.raises(ArityError):
            curry(add3)(c=3)(1, 2, 3)

    def test_decorator_binds(self):
        @curry(offset=1)
        def shift(x, factor=1, offset=0):
            return x * factor + offset

        assert shift(2) == 3
        assert shift(2, factor=3) == 7
