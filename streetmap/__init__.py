"""Top-level package for the street-map query core.

The package answers three queries over a loaded street-map graph:
nearest vertex to a coordinate, place names by prefix, and
minimum-weight routes under a time budget.
"""
