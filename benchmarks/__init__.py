"""Performance benchmarks for lpsimplex.

Compares the pivot rules on random feasible, bounded LPs.
"""
