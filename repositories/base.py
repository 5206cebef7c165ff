"""
Base repository for Appwrite document collections.
This follows the Repository pattern to separate business logic from data access.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Type, TypeVar
import logging

from appwrite.id import ID
from appwrite.query import Query
from pydantic import BaseModel

from adapters.appwrite_adapter import AppwriteBackend, get_backend
from domain.mappers import DocumentMapper
from domain.schemas import DeletionResult

ModelType = TypeVar("ModelType", bound=BaseModel)

PAGE_SIZE = 100

logger = logging.getLogger("foodorder.repositories")


def delete_concurrently(
    target: str,
    record_ids: Iterable[str],
    delete: Callable[[str], Any],
    max_workers: int = 8,
) -> List[DeletionResult]:
    """Run *delete* for every id on a bounded pool and capture each outcome.

    Args:
        target: Collection or bucket id, recorded on each result
        record_ids: Ids to delete
        delete: Callable deleting one record by id
        max_workers: Upper bound on parallel deletions

    Returns:
        One DeletionResult per id, failed ones carrying the raised exception
    """
    record_ids = list(record_ids)
    if not record_ids:
        return []

    results: List[DeletionResult] = []
    workers = max(1, min(max_workers, len(record_ids)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(delete, rid): rid for rid in record_ids}
        for future in as_completed(futures):
            rid = futures[future]
            try:
                future.result()
            except Exception as exc:
                logger.debug(f"delete_failed target={target} id={rid} error={exc}")
                results.append(DeletionResult(target, rid, exc))
            else:
                results.append(DeletionResult(target, rid))
    return results


class BaseDocumentRepository(Generic[ModelType]):
    """
    Base repository providing common document operations for one collection.
    Subclasses name the collection (an AppwriteConfig attribute) and the response model.
    """

    collection_attr: str = ""
    model: Type[ModelType]

    def __init__(self, backend: Optional[AppwriteBackend] = None):
        self.backend = backend or get_backend()
        self.database_id = self.backend.config.database_id
        self.collection_id = getattr(self.backend.config, self.collection_attr)

    @property
    def databases(self):
        return self.backend.databases

    def create(self, data: Dict[str, Any]) -> ModelType:
        """Create a document with a generated unique id"""
        document = self.databases.create_document(
            database_id=self.database_id,
            collection_id=self.collection_id,
            document_id=ID.unique(),
            data=data,
        )
        return DocumentMapper.to_model(self.model, document)

    def list(self, queries: Optional[List[str]] = None) -> List[ModelType]:
        """List documents matching *queries* (backend default page and order)"""
        response = self.databases.list_documents(
            database_id=self.database_id,
            collection_id=self.collection_id,
            queries=queries or [],
        )
        return DocumentMapper.to_models(self.model, response)

    def list_all_ids(self) -> List[str]:
        """Ids of every document in the collection, following cursor pages"""
        ids: List[str] = []
        cursor: Optional[str] = None
        while True:
            queries = [Query.limit(PAGE_SIZE)]
            if cursor:
                queries.append(Query.cursor_after(cursor))
            response = self.databases.list_documents(
                database_id=self.database_id,
                collection_id=self.collection_id,
                queries=queries,
            )
            page = [doc["$id"] for doc in DocumentMapper.documents(response)]
            ids.extend(page)
            if len(page) < PAGE_SIZE:
                return ids
            cursor = page[-1]

    def delete(self, document_id: str) -> None:
        self.databases.delete_document(
            database_id=self.database_id,
            collection_id=self.collection_id,
            document_id=document_id,
        )

    def delete_all(self, max_workers: int = 8) -> List[DeletionResult]:
        """Delete every document in the collection; one result per document"""
        return delete_concurrently(
            self.collection_id, self.list_all_ids(), self.delete, max_workers
        )
