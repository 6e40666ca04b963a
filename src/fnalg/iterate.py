"""
Repeated application of a function and bounded integer results.

Python integers never overflow, so `twice(twice(twice(twice(square))))(2)`
is simply 2 ** 65536. To emulate a fixed width integer type, compose the
function with an OverflowPolicy:

    step = bounded(square, OverflowPolicy('int64', 'saturate'))
"""
from typing import *
import operator
import warnings
import attrs
import numpy as np

from .exceptions import ParamError, NumericOverflowError, NumericOverflowWarning
from .fn import compose, check_callable, Composition


def repeat(f: Callable, n: int) -> Composition:
    """
    Function `f` applied `n` times, repeat(f, 0) is the identity.
    """
    check_callable(f)
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
        raise ParamError(f"Number of repetitions must be non-negative int, get: {n!r}.")
    return compose(*([f] * int(n)))


def twice(f: Callable) -> Composition:
    return compose(f, f)


MODES = ('raise', 'saturate', 'wrap', 'unbounded')


def _integer_dtype(value) -> np.dtype:
    try:
        dtype = np.dtype(value)
    except TypeError as e:
        raise ParamError(f"Unknown dtype: {value!r}.") from e
    if not np.issubdtype(dtype, np.integer):
        raise ParamError(f"Expected integer dtype, get: {dtype}.")
    return dtype


@attrs.frozen
class OverflowPolicy:
    """
    Maps an integer result into the range of a numpy integer type.

    mode:
    'raise' - NumericOverflowError for out of range values
    'saturate' - clip to the range
    'wrap' - two's complement wrap around, as the C integer arithmetic
    'unbounded' - no check, plain Python int
    """
    dtype: np.dtype = attrs.field(default='int64', converter=_integer_dtype)
    mode: str = attrs.field(default='raise')

    @mode.validator
    def _check_mode(self, attribute, value):
        if value not in MODES:
            raise ParamError(f"Unknown overflow mode: {value!r}, allowed: {MODES}.")

    @classmethod
    def from_config(cls, cfg) -> 'OverflowPolicy':
        """
        :param cfg: dotdict with 'overflow' item having keys 'dtype' and 'mode'.
        """
        return cls(dtype=cfg.overflow.dtype, mode=cfg.overflow.mode)

    @property
    def bounds(self) -> Tuple[int, int]:
        info = np.iinfo(self.dtype)
        return int(info.min), int(info.max)

    def __call__(self, value):
        try:
            value = operator.index(value)
        except TypeError:
            raise ParamError(f"Expected integer value, get: {type(value)}.")
        if self.mode == 'unbounded':
            return value
        lo, hi = self.bounds
        if lo <= value <= hi:
            return value
        # do not format the value itself, it may be too large for str()
        message = f"Result with {value.bit_length()} bits out of {self.dtype} range [{lo}, {hi}]."
        if self.mode == 'raise':
            raise NumericOverflowError(message)
        warnings.warn(f"{message} Mode: {self.mode}.", NumericOverflowWarning, stacklevel=2)
        if self.mode == 'saturate':
            return hi if value > hi else lo
        return (value - lo) % (hi - lo + 1) + lo

    def bounded(self, f: Callable) -> Composition:
        return bounded(f, self)


def bounded(f: Callable, policy: OverflowPolicy = None) -> Composition:
    """
    Compose `f` with the overflow `policy` (default: raise outside int64).
    """
    if policy is None:
        policy = OverflowPolicy()
    return compose(policy, f)
