"""Core algorithms over the street-map graph.

This subpackage holds the spatial index, the place-name trie and the
A* solver. None of these modules know about files or configuration.
"""
