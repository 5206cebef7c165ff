"""Appwrite adapter: the shared, pre-configured channel to the backend.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode
import logging

from appwrite.client import Client
from appwrite.services.account import Account
from appwrite.services.databases import Databases
from appwrite.services.storage import Storage

from app.config import AppwriteConfig

logger = logging.getLogger("foodorder.appwrite")

_backend = None


class AppwriteBackend:
    """
    Client handle bound to one Appwrite project.

    Holds the SDK services every operation goes through. Services can be
    passed in directly so that operations run against a substitute backend.
    """

    def __init__(
        self,
        config: AppwriteConfig,
        client: Optional[Client] = None,
        account=None,
        databases=None,
        storage=None,
    ):
        if client is None and None in (account, databases, storage):
            client = build_client(config)
        self.config = config
        self.client = client
        self.account = account if account is not None else Account(client)
        self.databases = databases if databases is not None else Databases(client)
        self.storage = storage if storage is not None else Storage(client)
        self.session: Optional[Dict[str, Any]] = None

    def attach_session(self, session: Dict[str, Any]) -> None:
        """Remember the session and authenticate later calls with its secret."""
        self.session = session
        secret = session.get("secret")
        if secret and self.client is not None:
            self.client.set_session(secret)

    def initials_avatar_url(self, name: str) -> str:
        """URL of the initials placeholder avatar generated for *name*."""
        params = urlencode({"name": name, "project": self.config.project_id})
        return f"{self.config.endpoint}/avatars/initials?{params}"

    def file_view_url(self, file_id: str, bucket_id: Optional[str] = None) -> str:
        """URL that serves a stored file inline."""
        bucket_id = bucket_id or self.config.bucket_id
        params = urlencode({"project": self.config.project_id})
        return (
            f"{self.config.endpoint}/storage/buckets/{quote(bucket_id, safe='')}"
            f"/files/{quote(file_id, safe='')}/view?{params}"
        )


# ------------------ Connection ------------------
def build_client(config: AppwriteConfig) -> Client:
    client = Client()
    client.set_endpoint(config.endpoint).set_project(config.project_id)
    if config.api_key:
        client.set_key(config.api_key)
    return client


def connect(config: Optional[AppwriteConfig] = None) -> AppwriteBackend:
    """Create the process-wide backend handle."""
    global _backend
    if config is None:
        from app.config import appwrite_config as config
    _backend = AppwriteBackend(config)
    logger.info(
        "Connected to Appwrite %s (project: %s, platform: %s, server key: %s)",
        config.endpoint,
        config.project_id,
        config.platform,
        "yes" if config.api_key else "no",
    )
    return _backend


def get_backend() -> AppwriteBackend:
    """Lazy init of the shared backend handle."""
    if _backend is not None:
        return _backend
    return connect()


def set_backend(backend: Optional[AppwriteBackend]) -> None:
    """Replace the shared backend handle (None clears it)."""
    global _backend
    _backend = backend
