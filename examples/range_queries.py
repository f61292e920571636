# Builds a sum, min and max tree over the same values and queries the whole range of each

from segtree import SegmentTree, SumSegmentTree, Operation

#         0  1  2  3
values = [1, 2, 3, 2]
l, r = 0, 3

for operation in Operation:
    tree = SegmentTree(values, operation)
    print("The", operation, "between indices [" + str(l) + ", " + str(r) + "] is:", tree.range_query(l, r))

# Prints:
# The sum between indices [0, 3] is: 8
# The min between indices [0, 3] is: 1
# The max between indices [0, 3] is: 3

print()

tree = SumSegmentTree([1, 2, 3, 4, 5])
tree.update(2, 10)
print("Sum after setting index 2 to 10:", tree.sum())
print(tree)
