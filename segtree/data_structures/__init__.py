from segtree.data_structures.segment_tree import SegmentTree, SumSegmentTree, MinSegmentTree, MaxSegmentTree
