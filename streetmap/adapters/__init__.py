"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the query core to graph data (CSV files, in-memory
adjacency lists) and to the route solver.
"""
