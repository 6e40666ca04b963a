"""
Errors raised by the combinators.
"""


def make_warning(cls):
    """
    Derive the warning type '<cls.__name__>Warning' from an error class.
    Used where the error condition is resolved by a policy instead of raising.
    """
    return type(cls.__name__ + "Warning", (Warning,), {})


class FnAlgError(Exception):
    pass


class ParamError(FnAlgError):
    """
    Wrong argument passed to a combinator, e.g. a non-callable stage.
    """
    pass


class ArityError(FnAlgError, TypeError):
    """
    More positional arguments supplied to a curried function than it accepts.
    """
    pass


class NumericOverflowError(FnAlgError, OverflowError):
    pass


NumericOverflowWarning = make_warning(NumericOverflowError)
# saturated or wrapped result of a bounded function
