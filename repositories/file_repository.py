"""
File Repository - Data access for the image bucket
"""

from typing import List, Optional

from appwrite.id import ID
from appwrite.input_file import InputFile
from appwrite.query import Query

from adapters.appwrite_adapter import AppwriteBackend, get_backend
from domain.mappers import DocumentMapper
from domain.schemas import DeletionResult, StoredFile
from repositories.base import PAGE_SIZE, delete_concurrently


class FileRepository:
    """
    Repository for files stored in the content bucket.
    """

    def __init__(self, backend: Optional[AppwriteBackend] = None):
        self.backend = backend or get_backend()
        self.bucket_id = self.backend.config.bucket_id

    @property
    def storage(self):
        return self.backend.storage

    def upload(self, content: bytes, filename: str, mime_type: str) -> StoredFile:
        """Store *content* under a generated unique id"""
        stored = self.storage.create_file(
            bucket_id=self.bucket_id,
            file_id=ID.unique(),
            file=InputFile.from_bytes(content, filename, mime_type),
        )
        return DocumentMapper.to_model(StoredFile, stored)

    def view_url(self, file_id: str) -> str:
        return self.backend.file_view_url(file_id, self.bucket_id)

    def list_all_ids(self) -> List[str]:
        ids: List[str] = []
        cursor: Optional[str] = None
        while True:
            queries = [Query.limit(PAGE_SIZE)]
            if cursor:
                queries.append(Query.cursor_after(cursor))
            response = self.storage.list_files(bucket_id=self.bucket_id, queries=queries)
            page = [f["$id"] for f in DocumentMapper.files(response)]
            ids.extend(page)
            if len(page) < PAGE_SIZE:
                return ids
            cursor = page[-1]

    def delete(self, file_id: str) -> None:
        self.storage.delete_file(bucket_id=self.bucket_id, file_id=file_id)

    def delete_all(self, max_workers: int = 8) -> List[DeletionResult]:
        """Delete every file in the bucket; one result per file"""
        return delete_concurrently(
            self.bucket_id, self.list_all_ids(), self.delete, max_workers
        )
