"""Relief directory exception hierarchy.

Ingest, store, and config failures each raise their own error type.
Callers can catch ReliefError to handle all of them at once.
"""

from __future__ import annotations


class ReliefError(Exception):
    """Base exception for all relief directory failures."""


class ReliefConfigError(ReliefError):
    """Raised for invalid runtime configuration or sheet layout."""


class ReliefIngestError(ReliefError):
    """Raised when the spreadsheet export cannot be read."""


class ReliefStoreError(ReliefError):
    """Raised for document and coordinate table persistence failures."""


class DataUnavailableError(ReliefStoreError):
    """Raised when the published document cannot be loaded.

    This is the single "data unavailable" condition surfaced to callers.
    It is distinct from a query that matches zero locations.
    """
