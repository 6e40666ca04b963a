"""
Timing log of function calls.
"""
from functools import wraps
import logging
import threading
import time

from ..fn import func_name

_report_state = threading.local()
# nesting level of reported calls, per thread


def report(fn):
    """
    Decorator logging duration of every call of `fn`,
    nested reported calls in the same thread are indented.
    """
    name = f"{getattr(fn, '__module__', None)}.{func_name(fn)}"

    @wraps(fn)
    def do_report(*args, **kwargs):
        level = getattr(_report_state, 'indent_level', 0)
        _report_state.indent_level = level + 1
        init_time = time.perf_counter()
        try:
            result = fn(*args, **kwargs)
        finally:
            _report_state.indent_level = level
        duration = time.perf_counter() - init_time
        indent = (level * 2) * " "
        logging.info(f"{indent}DONE {name} @ {duration}")
        return result
    return do_report
