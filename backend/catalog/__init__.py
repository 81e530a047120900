"""Catalog Browser Package — product/category/user join with a filterable view.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
