"""
Basic usage: direct children and the consolidated (transitive) walk.

Associations:
    10 → 20
    20 → 30

consolidated(10) lists 10 itself followed by everything below it.
"""

from consolidated_map import ConsolidatedMapBuilder

builder = ConsolidatedMapBuilder()
builder.insert(10, 20)
builder.insert(20, 30)

cmap = builder.build()
print(cmap)
print()

print("children(10)     :", list(cmap.children(10)))
print("children(30)     :", list(cmap.children(30)))
print("consolidated(10) :", list(cmap.consolidated(10)))
print("consolidated(20) :", list(cmap.consolidated(20)))
print("consolidated(5)  :", list(cmap.consolidated(5)))
print("contains_child(10, 20):", cmap.contains_child(10, 20))
