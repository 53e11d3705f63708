"""Faceted query engine.

This package filters and orders locations from a loaded document
according to an explicit filter state.
"""
