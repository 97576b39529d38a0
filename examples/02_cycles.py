"""
Cyclic input: the consolidated walk never ends, so only take a prefix.

Associations:
    1 → 1   (self-loop)
"""

from itertools import islice

from consolidated_map import ConsolidatedMap

cmap = ConsolidatedMap.from_pairs([(1, 1)])

print("children(1)               :", list(cmap.children(1)))
print("first 5 of consolidated(1):", list(islice(cmap.consolidated(1), 5)))
