"""
Currying and partial application.
"""
from typing import *
import inspect
import logging
import attrs

from .exceptions import ParamError, ArityError
from .fn import Composable, Fn, Composition, check_callable, func_name, _callable_validator


def parameter_names(func) -> Tuple[str, ...]:
    """
    Names of the positional parameters without default value, in order.
    Function values are unwrapped: Fn gives names of the wrapped function,
    Composition the names of its innermost stage.
    :raise ParamError: for variadic positional parameters or when the signature
        is not available.
    """
    if isinstance(func, Fn):
        return parameter_names(func.func)
    if isinstance(func, Composition):
        return parameter_names(func.stages[-1])
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        raise ParamError(f"Unknown signature of {func_name(func)}, pass the 'arity' explicitly.")
    names = []
    for param in sig.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            raise ParamError(f"Variadic function {func_name(func)}, pass the 'arity' explicitly.")
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD) \
                and param.default is param.empty:
            names.append(param.name)
    return tuple(names)


def arity_of(func) -> int:
    """
    Number of positional parameters without default value.
    For a Curried it is the number of parameters still to be supplied.
    """
    if isinstance(func, Curried):
        return func.remaining
    if isinstance(func, Fn):
        return arity_of(func.func)
    if isinstance(func, Composition):
        return arity_of(func.stages[-1])
    return len(parameter_names(func))


def _check_arity(instance, attribute, value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ParamError(f"Arity must be non-negative int, get: {value!r}.")


@attrs.frozen
class Curried(Composable):
    """
    Function awaiting the rest of its arguments.

    Calling binds the given arguments and returns a new Curried
    until all `arity` parameters are supplied, then the function is called.
    When the parameter `names` are known, a keyword naming one of them
    supplies that parameter; the positional arguments then fill only
    the parameters before the first such keyword. Other keywords are
    passed to the final call and do not count to the arity.
    """
    func: Callable = attrs.field(validator=_callable_validator)
    arity: int = attrs.field(validator=_check_arity)
    args: Tuple[Any, ...] = attrs.field(default=(), converter=tuple)
    keywords: Tuple[Tuple[str, Any], ...] = attrs.field(default=(), converter=tuple)
    # (name, value) pairs, kept as tuple to stay immutable
    names: Optional[Tuple[str, ...]] = attrs.field(
        default=None, converter=attrs.converters.optional(tuple))
    # None for explicit arity

    @names.validator
    def _check_names(self, attribute, value):
        if value is not None and len(value) != self.arity:
            raise ParamError(f"Got {len(value)} parameter names for arity {self.arity}.")

    def _by_keyword(self, keywords) -> List[int]:
        if self.names is None:
            return []
        return [i for i, name in enumerate(self.names) if name in keywords]

    @property
    def remaining(self) -> int:
        return self.arity - len(self.args) - len(self._by_keyword(dict(self.keywords)))

    def __call__(self, *args, **kwargs):
        args = self.args + args
        keywords = dict(self.keywords)
        keywords.update(kwargs)
        by_keyword = self._by_keyword(keywords)
        name = func_name(self.func)
        doubled = [self.names[i] for i in by_keyword if i < len(args)]
        if doubled:
            raise ArityError(f"{name} got both positional and keyword value for: {doubled}.")
        n_slots = by_keyword[0] if by_keyword else self.arity
        if len(args) > n_slots:
            raise ArityError(
                f"{name} takes {n_slots} positional arguments, {len(args)} given.")
        if len(args) + len(by_keyword) == self.arity:
            return self.func(*args, **keywords)
        return attrs.evolve(self, args=args, keywords=keywords.items())


def curry(func=None, *args, arity: int = None, **kwargs):
    """
    Curried form of `func`, optionally with some arguments already bound.
    Usable as decorator, either plain `@curry` or `@curry(arity=2)`,
    arguments given to the decorator are bound as well.

        @curry
        def add(a, b, c):
            return a + b + c

        add(1)(2)(3) == add(1, 2)(3) == add(1, 2, c=3) == 6

    :param arity: Number of positional arguments, detected from the signature by default.
    """
    if func is None:
        def decorator(f):
            return curry(f, *args, arity=arity, **kwargs)
        return decorator
    check_callable(func)
    if isinstance(func, Curried) and arity is None:
        curried = func
    elif arity is None:
        names = parameter_names(func)
        logging.debug(f"Curry {func_name(func)}, parameters {names}")
        curried = Curried(func, len(names), names=names)
    else:
        curried = Curried(func, arity)
    if args or kwargs:
        return curried(*args, **kwargs)
    return curried


def partial(func, *args, **kwargs):
    """
    Bind leading positional arguments of `func`.
    Unlike functools.partial, the result keeps track of the remaining arity.
    """
    return curry(func)(*args, **kwargs)
