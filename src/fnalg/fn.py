"""
Function composition tools.

Every combinator result is an immutable (attrs frozen) callable value.
Composable values support the operators:

    f @ g    composition, (f @ g)(x) == f(g(x))
    f ** n   f applied n times
"""
from typing import *
import attrs

from .exceptions import ParamError


def check_callable(func, what="function"):
    if not callable(func):
        raise ParamError(f"Expected callable {what}, get: {type(func)}.")
    return func


def _callable_validator(instance, attribute, value):
    check_callable(value, attribute.name)


def func_name(func) -> str:
    """
    Readable name of a function value, used in log messages.
    """
    inner = getattr(func, 'func', None)
    if inner is not None and not isinstance(func, type):
        return func_name(inner)
    name = getattr(func, '__qualname__', None) or getattr(func, '__name__', None)
    if name is None:
        return repr(func)
    return name


def identity(x):
    return x


class Composable:
    """
    Operator protocol shared by all function values.
    Mimics composition and power of linear transforms.
    """
    __slots__ = ()

    def __matmul__(self, other):
        if not callable(other):
            return NotImplemented
        return compose(self, other)

    def __rmatmul__(self, other):
        if not callable(other):
            return NotImplemented
        return compose(other, self)

    def __pow__(self, power: int):
        from .iterate import repeat
        return repeat(self, power)


@attrs.frozen
class Fn(Composable):
    """
    Wrap any callable as a composable function value.
    """
    func: Callable = attrs.field(validator=_callable_validator)

    def __call__(self, *args, **kwargs):
        return self.func(*args, **kwargs)


@attrs.frozen
class Composition(Composable):
    """
    Chain of functions, outermost first.
    The last stage receives the call arguments, every other stage
    receives the result of the following one.
    """
    stages: Tuple[Callable, ...] = attrs.field(converter=tuple)

    @stages.validator
    def _check_stages(self, attribute, value):
        if len(value) == 0:
            raise ParamError("Composition needs at least one stage.")
        for f in value:
            check_callable(f, "stage")

    def __call__(self, *args, **kwargs):
        result = self.stages[-1](*args, **kwargs)
        for f in reversed(self.stages[:-1]):
            result = f(result)
        return result

    def __len__(self):
        return len(self.stages)

    def reported(self) -> 'Composition':
        """
        Same composition with every stage timed and logged, see `report`.
        """
        from .core.report import report
        return Composition(report(f) for f in self.stages)


def compose(*functions) -> Composition:
    """
    Return composition of functions:
    compose(A,B,C)(any args) is equivalent to A(B(C(any args))

    Nothing is evaluated until the composition is called.
    Nested compositions are flattened, so grouping of the arguments
    does not matter. `compose()` is the identity.
    """
    if not functions:
        return Composition((identity,))
    stages = []
    for f in functions:
        check_callable(f)
        if isinstance(f, Composition):
            stages.extend(f.stages)
        else:
            stages.append(f)
    return Composition(stages)


def pipe(*functions) -> Composition:
    """
    Left to right composition: pipe(A, B)(x) == B(A(x)).
    """
    return compose(*reversed(functions))
