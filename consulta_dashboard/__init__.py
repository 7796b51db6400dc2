"""
Core package for the PNDBio public-consultation dashboard.

Submodules provide data loading, record access, the aggregation pipeline,
and user interface rendering helpers that are orchestrated by the top-level
`app.py`.
"""
