"""Error kinds raised by the catalog store and turned into error pages by the app."""
from typing import Union


class CatalogError(Exception):
    pass


class NotFound(CatalogError):
    """No record with the given identifier exists in the collection."""

    def __init__(self, kind: str, record_id: Union[int, str]):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")


class StorageFailure(CatalogError):
    """The store could not be reached or the query failed."""
