from segtree.operations import Operation
from segtree.data_structures import SegmentTree, SumSegmentTree, MinSegmentTree, MaxSegmentTree
