"""
Build a map from an edge-list dataframe and export it back.

Each row of the dataframe is one (parent, child) association; row order
is insertion order.
"""

import pandas as pd

from consolidated_map import ConsolidatedMap

df = pd.DataFrame({
    "fund":    ["global", "global", "equity", "equity", "bond"],
    "holding": ["equity", "bond",   "AAPL",   "MSFT",   "UST10Y"],
})

cmap = ConsolidatedMap.from_frame(df, parent="fund", child="holding")
print(cmap)
print()

print("everything under 'global':", list(cmap.consolidated("global")))
print()
print(cmap.to_frame(parent="fund", child="holding"))
