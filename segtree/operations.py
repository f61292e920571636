import functools
import operator
from enum import Enum

import numpy as np

# Sentinels used as the "empty range" result of MIN / MAX trees
INT64_MAX = int(np.iinfo(np.int64).max)
INT64_MIN = int(np.iinfo(np.int64).min)


class Operation(Enum):
    """Segment combination function, selected once when a tree is built.

    Each member carries its binary ``combine`` function and the ``identity``
    value that combine leaves unchanged (the result of an empty range).
    """
    SUM = (operator.add, 0)
    MIN = (min, INT64_MAX)
    MAX = (max, INT64_MIN)

    def __init__(self, combine, identity):
        self.combine = combine
        self.identity = identity

    @classmethod
    def parse(cls, value):
        if value is None:
            raise ValueError("Please specify a valid segment combination operation.")
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise ValueError("Unknown segment combination operation '" + str(value) + "'")

    def fold(self, values):
        # Folds over int64 so sums wrap exactly like the tree's storage
        values = np.asarray(values, dtype=np.int64)
        return int(functools.reduce(self.combine, values, np.int64(self.identity)))

    def __str__(self):
        return self.name.lower()
