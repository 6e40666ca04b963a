import warnings
import pytest

from fnalg import FnAlgError, ParamError, ArityError, NumericOverflowError, make_warning, curry


def test_hierarchy():
    assert issubclass(ArityError, TypeError)
    assert issubclass(NumericOverflowError, OverflowError)
    for cls in (ParamError, ArityError, NumericOverflowError):
        assert issubclass(cls, FnAlgError)
    with pytest.raises(FnAlgError):
        curry(lambda a: a)(1, 2)


def test_make_warning():
    warning_cls = make_warning(NumericOverflowError)
    assert warning_cls.__name__ == "NumericOverflowErrorWarning"
    assert issubclass(warning_cls, Warning)
    with pytest.warns(warning_cls):
        warnings.warn("saturated", warning_cls)
