"""Error taxonomy for the menu cache."""

from __future__ import annotations


class SnapshotError(Exception):
    """A remote snapshot could not be turned into menu records."""

    title = "Error fetching data"


class FetchError(SnapshotError):
    """Network or transport failure, including non-JSON bodies."""

    title = "Error fetching data"


class DataShapeError(SnapshotError):
    """The response decoded but is not shaped like a menu document."""

    title = "Data not in expected format"


class StorageError(Exception):
    """Schema creation, insert or query against the local store failed."""
