import logging
import operator

import numpy as np

from segtree.operations import Operation

logger = logging.getLogger(__name__)


class SegmentTree:
    def __init__(self, values, operation):
        if values is None:
            raise ValueError("Segment tree values cannot be None.")
        self._operation = Operation.parse(operation)

        values = np.asarray(values, dtype=np.int64)
        if values.ndim != 1:
            raise ValueError("Segment tree values must be one-dimensional, got shape " + str(values.shape))
        self._n = len(values)

        # Node i covers some [tl, tr] and has children 2*i + 1 and 2*i + 2.  Only 2n - 1 nodes are ever
        #   used, but splitting at the midpoint leaves gaps in the last level, so 4n slots bounds the index
        # TODO: Pack the segments densely (Euler tour order) to get this down to 2n - 1 slots
        self._values = np.full(4 * self._n, self._operation.identity, dtype=np.int64)

        if self._n > 0:
            self._build(0, 0, self._n - 1, values)

        logger.debug("Built %s segment tree over %d values (%d slots)", self._operation, self._n, len(self._values))

    @property
    def operation(self):
        return self._operation

    def _combine_children(self, node):
        return self._operation.combine(self._values[2*node + 1], self._values[2*node + 2])

    def _build(self, node, tl, tr, values):
        if tl == tr:
            self._values[node] = values[tl]
            return

        mid = (tl + tr) // 2
        self._build(2*node + 1, tl, mid, values)
        self._build(2*node + 2, mid + 1, tr, values)
        self._values[node] = self._combine_children(node)

    def _check_range(self, start, end):
        # Raises TypeError for floats and other non-integer indexes
        start, end = operator.index(start), operator.index(end)
        if start < 0 or end > self._n - 1 or start > end:
            logger.debug("Rejected range [%d, %d] on tree of %d values", start, end, self._n)
            raise IndexError("Invalid range [" + str(start) + ", " + str(end) + "] for segment tree of " + str(self._n) + " values")

        return start, end

    # Recurses into both children regardless of overlap.  A child outside [start, end] ends up with
    #   start > end after clamping and contributes the identity element
    def _uniform_helper(self, node, tl, tr, start, end):
        if start > end:
            return self._operation.identity
        if tl == start and tr == end:
            return self._values[node]

        mid = (tl + tr) // 2
        return self._operation.combine(self._uniform_helper(2*node + 1, tl, mid, start, min(mid, end)),
                                       self._uniform_helper(2*node + 2, mid + 1, tr, max(start, mid + 1), end))

    # Only digs into the children that overlap [start, end], so the identity element is never needed
    def _pruned_helper(self, node, tl, tr, start, end):
        if tl == start and tr == end:
            return self._values[node]

        mid = (tl + tr) // 2
        overlaps_left = start <= mid
        overlaps_right = end > mid

        if overlaps_left and overlaps_right:
            return self._operation.combine(self._pruned_helper(2*node + 1, tl, mid, start, mid),
                                           self._pruned_helper(2*node + 2, mid + 1, tr, mid + 1, end))
        elif overlaps_left:
            return self._pruned_helper(2*node + 1, tl, mid, start, end)
        else:
            return self._pruned_helper(2*node + 2, mid + 1, tr, start, end)

    def range_query(self, start, end):
        """Combined value of the current values at indexes start..end (inclusive)."""
        start, end = self._check_range(start, end)
        return int(self._pruned_helper(0, 0, self._n - 1, start, end))

    def range_query_uniform(self, start, end):
        """Same result as range_query, but visits subtrees outside the range as well."""
        start, end = self._check_range(start, end)
        return int(self._uniform_helper(0, 0, self._n - 1, start, end))

    def reduce(self, start=0, end=None):
        if end is None:
            end = self._n - 1

        return self.range_query(start, end)

    def _update_helper(self, node, tl, tr, index, value):
        if tl == tr:
            self._values[node] = value
            return

        mid = (tl + tr) // 2
        if index <= mid:
            self._update_helper(2*node + 1, tl, mid, index, value)
        else:
            self._update_helper(2*node + 2, mid + 1, tr, index, value)

        # Recompute on the way back up, only the ancestors of the leaf change
        self._values[node] = self._combine_children(node)

    def update(self, index, value):
        index, _ = self._check_range(index, index)
        self._update_helper(0, 0, self._n - 1, index, value)

    def __setitem__(self, key, value):
        self.update(key, value)

    def __getitem__(self, key):
        return self.range_query(key, key)

    def __len__(self):
        return self._n

    def to_list(self):
        return [self[i] for i in range(self._n)]

    def _print_tree(self, string="", node=0, tl=0, tr=None, indent=0):
        if tr is None:
            tr = self._n - 1

        string += '\t' * indent + "[" + str(tl) + ", " + str(tr) + "]: " + str(self._values[node]) + '\n'
        if tl != tr:
            mid = (tl + tr) // 2
            string = self._print_tree(string, 2*node + 1, tl, mid, indent + 1)
            string = self._print_tree(string, 2*node + 2, mid + 1, tr, indent + 1)

        # Remove trailing '\n' from the last line
        if node == 0:
            return string[:-1]

        return string

    def __str__(self):
        if self._n == 0:
            return ""

        return self._print_tree()


class SumSegmentTree(SegmentTree):
    def __init__(self, values):
        super().__init__(values, operation=Operation.SUM)

    def sum(self, start=0, end=None):
        return super().reduce(start, end)


class MinSegmentTree(SegmentTree):
    def __init__(self, values):
        super().__init__(values, operation=Operation.MIN)

    def min(self, start=0, end=None):
        return super().reduce(start, end)


class MaxSegmentTree(SegmentTree):
    def __init__(self, values):
        super().__init__(values, operation=Operation.MAX)

    def max(self, start=0, end=None):
        return super().reduce(start, end)
