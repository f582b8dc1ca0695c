"""
Projection result models.

Immutable per-period fee results and projection summaries derived from a
model snapshot. Results are regenerated, never mutated.
"""
