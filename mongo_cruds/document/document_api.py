from collections.abc import Sequence
from typing import Generic, TypeVar

from pymongo.client_session import ClientSession

from .query import Query
from .update import Updates


T = TypeVar('T')

class DocumentAPI(Generic[T]):
    """ Create/Read/Update/Delete/Search over one collection of T. Depend on this rather than on a concrete store. """

    def create(self, document_id: str, document: T, *, session: ClientSession | None = None) -> None:
        raise NotImplementedError

    def read(self, document_id: str, *, session: ClientSession | None = None) -> T:
        raise NotImplementedError

    def update(self, document_id: str, updates: Updates, *, session: ClientSession | None = None) -> None:
        raise NotImplementedError

    def delete(self, document_id: str, *, session: ClientSession | None = None) -> None:
        raise NotImplementedError

    def search(self, queries: Sequence[Query] = (), *, session: ClientSession | None = None) -> list[T]:
        raise NotImplementedError
