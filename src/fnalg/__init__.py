"""
Function composition, currying and predicate algebra.
"""
from .exceptions import FnAlgError, ParamError, ArityError, NumericOverflowError, NumericOverflowWarning, make_warning
from .fn import Composable, Fn, Composition, identity, compose, pipe
from .curry import Curried, curry, partial, arity_of
from .iterate import repeat, twice, OverflowPolicy, bounded
from .predicate import Predicate, predicate, and_, or_, xor_, negate, all_of, any_of, always_true, always_false
from .numeric import square, is_even, is_odd, is_small, small_bound, is_small_from_config, is_square_of, is_triple

__version__ = '0.1.0'
