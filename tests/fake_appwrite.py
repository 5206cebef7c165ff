"""Lightweight in-memory Appwrite backend for unit tests.

Supports the subset of the Appwrite SDK used by the repositories and services:

- Account.create() / .create_email_password_session() / .get()
- Databases.create_document() / .list_documents() / .delete_document()
- Storage.create_file() / .list_files() / .delete_file()
- JSON query strings produced by appwrite.query.Query: equal, search,
  orderAsc, orderDesc, limit, offset, cursorAfter
- Failure injection per method and record id
"""

from __future__ import annotations

import copy
import json
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from appwrite.exception import AppwriteException

DEFAULT_LIMIT = 25
_EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _new_id(requested: Optional[str]) -> str:
    if not requested or requested == "unique()":
        return uuid.uuid4().hex[:20]
    return requested


class FakeAppwrite:
    """Shared state of the fake project plus its three services."""

    def __init__(self):
        self._lock = threading.Lock()
        self._clock = 0
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.buckets: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.accounts: Dict[str, Dict[str, Any]] = {}
        self.current_account_id: Optional[str] = None
        self.failures: Dict[tuple, Exception] = {}
        self.calls: List[tuple] = []
        self.account = FakeAccount(self)
        self.databases = FakeDatabases(self)
        self.storage = FakeStorage(self)

    # -- helpers -------------------------------------------------------------

    def timestamp(self) -> str:
        with self._lock:
            self._clock += 1
            return (_EPOCH + timedelta(milliseconds=self._clock)).isoformat()

    def fail(self, method: str, exc: Exception, record_id: Optional[str] = None) -> None:
        """Make *method* raise *exc* (for one record id, or for every call)."""
        self.failures[(method, record_id)] = exc

    def check(self, method: str, record_id: Optional[str] = None) -> None:
        self.calls.append((method, record_id))
        exc = self.failures.get((method, record_id)) or self.failures.get((method, None))
        if exc is not None:
            raise exc

    def documents(self, collection_id: str) -> List[Dict[str, Any]]:
        return [copy.deepcopy(d) for d in self.collections.get(collection_id, {}).values()]

    def files(self, bucket_id: str) -> List[Dict[str, Any]]:
        return [copy.deepcopy(f) for f in self.buckets.get(bucket_id, {}).values()]


def apply_queries(records: List[Dict[str, Any]], queries: Optional[List[str]]):
    """Return (requested page, every matching record)."""
    parsed = [json.loads(q) for q in (queries or [])]
    result = list(records)
    limit = DEFAULT_LIMIT
    offset = 0
    cursor = None
    for q in parsed:
        method = q["method"]
        attr = q.get("attribute")
        values = q.get("values") or []
        if method == "equal":
            result = [r for r in result if _matches_equal(r.get(attr), values)]
        elif method == "search":
            terms = [str(v).lower() for v in values]
            result = [r for r in result if any(t in str(r.get(attr, "")).lower() for t in terms)]
        elif method == "orderAsc":
            result.sort(key=lambda r: r.get(attr))
        elif method == "orderDesc":
            result.sort(key=lambda r: r.get(attr), reverse=True)
        elif method == "limit":
            limit = values[0]
        elif method == "offset":
            offset = values[0]
        elif method == "cursorAfter":
            cursor = values[0]
        else:
            raise AppwriteException(f"Invalid query method: {method}", 400, "general_query_invalid")
    if cursor is not None:
        ids = [r["$id"] for r in result]
        if cursor not in ids:
            raise AppwriteException(f'Document with the requested ID "{cursor}" could not be found.', 400, "general_cursor_not_found")
        result = result[ids.index(cursor) + 1:]
    return result[offset:offset + limit], result


def _matches_equal(value: Any, values: List[Any]) -> bool:
    if isinstance(value, dict):
        value = value.get("$id")
    if isinstance(value, list):
        return any(v in values for v in value)
    return value in values


class FakeAccount:
    def __init__(self, project: FakeAppwrite):
        self._p = project

    def create(self, user_id, email, password, name=None):
        self._p.check("account.create", email)
        if any(a["email"] == email for a in self._p.accounts.values()):
            raise AppwriteException(
                "A user with the same id, email, or phone already exists in this project.",
                409,
                "user_already_exists",
            )
        if len(password) < 8:
            raise AppwriteException(
                "Invalid `password` param: Password must be between 8 and 265 characters long.",
                400,
                "general_argument_invalid",
            )
        account_id = _new_id(user_id)
        self._p.accounts[account_id] = {
            "$id": account_id,
            "$createdAt": self._p.timestamp(),
            "email": email,
            "name": name or "",
            "password": password,
        }
        return {k: v for k, v in self._p.accounts[account_id].items() if k != "password"}

    def create_email_password_session(self, email, password):
        self._p.check("account.create_email_password_session", email)
        for account in self._p.accounts.values():
            if account["email"] == email and account["password"] == password:
                self._p.current_account_id = account["$id"]
                return {
                    "$id": uuid.uuid4().hex[:20],
                    "userId": account["$id"],
                    "provider": "email",
                    "expire": "2030-01-01T00:00:00.000+00:00",
                    "secret": "",
                }
        raise AppwriteException(
            "Invalid credentials. Please check the email and password.",
            401,
            "user_invalid_credentials",
        )

    def get(self):
        self._p.check("account.get")
        account = self._p.accounts.get(self._p.current_account_id)
        if account is None:
            raise AppwriteException(
                "User (role: guests) missing scope (account)",
                401,
                "general_unauthorized_scope",
            )
        return {k: v for k, v in account.items() if k != "password"}


class FakeDatabases:
    def __init__(self, project: FakeAppwrite):
        self._p = project

    def create_document(self, database_id, collection_id, document_id, data, permissions=None):
        self._p.check("databases.create_document", collection_id)
        doc_id = _new_id(document_id)
        now = self._p.timestamp()
        doc = copy.deepcopy(dict(data))
        doc.update(
            {
                "$id": doc_id,
                "$databaseId": database_id,
                "$collectionId": collection_id,
                "$createdAt": now,
                "$updatedAt": now,
                "$permissions": list(permissions or []),
            }
        )
        with self._p._lock:
            self._p.collections.setdefault(collection_id, {})[doc_id] = doc
        return copy.deepcopy(doc)

    def list_documents(self, database_id, collection_id, queries=None):
        self._p.check("databases.list_documents", collection_id)
        page, matched = apply_queries(self._p.documents(collection_id), queries)
        return {"total": len(matched), "documents": page}

    def delete_document(self, database_id, collection_id, document_id):
        self._p.check("databases.delete_document", document_id)
        with self._p._lock:
            docs = self._p.collections.get(collection_id, {})
            if document_id not in docs:
                raise AppwriteException(
                    "Document with the requested ID could not be found.", 404, "document_not_found"
                )
            del docs[document_id]
        return {}


class FakeStorage:
    def __init__(self, project: FakeAppwrite):
        self._p = project

    def create_file(self, bucket_id, file_id, file, permissions=None, on_progress=None):
        self._p.check("storage.create_file", bucket_id)
        fid = _new_id(file_id)
        data = getattr(file, "data", None) or b""
        record = {
            "$id": fid,
            "bucketId": bucket_id,
            "$createdAt": self._p.timestamp(),
            "name": getattr(file, "filename", None),
            "mimeType": getattr(file, "mime_type", None),
            "sizeOriginal": len(data),
        }
        with self._p._lock:
            self._p.buckets.setdefault(bucket_id, {})[fid] = record
        return copy.deepcopy(record)

    def list_files(self, bucket_id, queries=None, search=None):
        self._p.check("storage.list_files", bucket_id)
        page, matched = apply_queries(self._p.files(bucket_id), queries)
        return {"total": len(matched), "files": page}

    def delete_file(self, bucket_id, file_id):
        self._p.check("storage.delete_file", file_id)
        with self._p._lock:
            files = self._p.buckets.get(bucket_id, {})
            if file_id not in files:
                raise AppwriteException(
                    "The requested file could not be found.", 404, "storage_file_not_found"
                )
            del files[file_id]
        return {}
