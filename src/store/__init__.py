"""Document and side-table persistence.

This package serializes the locations document and loads the published
document and coordinate table for the query engine.
"""
