"""
Generic helpers.

**Graphs** (graph.py)
    Breadth-first traversals and connected components of implicit graphs.

**Bits** (bits.py)
    Bit tricks used to encode neighborhood configurations.
"""
