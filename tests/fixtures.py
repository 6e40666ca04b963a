"""
Common code for tests.
"""
import numpy as np


def sample_ints(n_samples=50, low=-1000, high=1000, seed=123):
    """
    Reproducible list of random Python ints.
    """
    rng = np.random.default_rng(seed)
    return [int(i) for i in rng.integers(low, high, size=n_samples)]


class CallCounter:
    """
    Usage:
    f = CallCounter(lambda x: x + 1)
    f(1)
    assert f.n_calls == 1
    """
    def __init__(self, fn):
        self.fn = fn
        self.n_calls = 0

    def __call__(self, *args, **kwargs):
        self.n_calls += 1
        return self.fn(*args, **kwargs)
