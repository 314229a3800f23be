"""Datastore access for pages, leads and analytics events"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional

from supabase import Client, create_client

from launchgen_api.core.config import settings
from launchgen_api.models.errors import ApplicationError, ErrorCode, StorageError

logger = logging.getLogger(__name__)

PAGES_TABLE = "landing_pages"
LEADS_TABLE = "leads"
EVENTS_TABLE = "analytics_events"
USERS_TABLE = "users"


class PageRepository(ABC):
    """One method per entity operation; rows are plain dicts as stored."""

    @abstractmethod
    def save_page(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a page, or update it in place when ``record`` carries an id."""

    @abstractmethod
    def find_page_by_id(self, page_id: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def find_page_by_slug(self, slug: str, published_only: bool = True) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def update_page(self, page_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    def delete_page(self, page_id: str) -> None:
        ...

    @abstractmethod
    def list_pages(self, owner_id: Optional[str] = None) -> List[Dict[str, Any]]:
        ...

    @abstractmethod
    def insert_lead(self, record: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    def list_leads(self, page_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Leads for one page, or for every page when page_id is None."""

    @abstractmethod
    def insert_event(self, record: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    def list_events(self, page_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Events for one page, or for every page when page_id is None."""

    @abstractmethod
    def list_users(self) -> List[Dict[str, Any]]:
        ...


class SupabasePageRepository(PageRepository):
    """PageRepository backed by Supabase (PostgREST) tables."""

    def __init__(self, client: Client):
        self.client = client

    def _run(self, operation: str, query: Callable[[], Any]) -> List[Dict[str, Any]]:
        """Execute a query builder, turning backend failures into StorageError."""
        try:
            response = query().execute()
        except Exception as e:
            # PostgREST errors carry the backend message on .message
            message = getattr(e, "message", None) or str(e)
            logger.error(f"[Supabase] {operation} failed: {message}")
            raise StorageError(message) from e
        return response.data or []

    def save_page(self, record: Dict[str, Any]) -> Dict[str, Any]:
        table = self.client.table(PAGES_TABLE)
        if record.get("id"):
            rows = self._run("upsert page", lambda: table.upsert(record))
        else:
            rows = self._run("insert page", lambda: table.insert(record))
        return rows[0]

    def find_page_by_id(self, page_id: str) -> Optional[Dict[str, Any]]:
        rows = self._run(
            "select page",
            lambda: self.client.table(PAGES_TABLE).select("*").eq("id", page_id).limit(1),
        )
        return rows[0] if rows else None

    def find_page_by_slug(self, slug: str, published_only: bool = True) -> Optional[Dict[str, Any]]:
        def query():
            builder = self.client.table(PAGES_TABLE).select("*").eq("slug", slug)
            if published_only:
                builder = builder.eq("published", True)
            return builder.limit(1)

        rows = self._run("select page by slug", query)
        return rows[0] if rows else None

    def update_page(self, page_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        rows = self._run(
            "update page",
            lambda: self.client.table(PAGES_TABLE).update(changes).eq("id", page_id),
        )
        if not rows:
            raise StorageError(f"Landing page {page_id} was not updated")
        return rows[0]

    def delete_page(self, page_id: str) -> None:
        self._run("delete page", lambda: self.client.table(PAGES_TABLE).delete().eq("id", page_id))

    def list_pages(self, owner_id: Optional[str] = None) -> List[Dict[str, Any]]:
        def query():
            builder = self.client.table(PAGES_TABLE).select("*")
            if owner_id:
                builder = builder.eq("owner_id", owner_id)
            return builder.order("created_at", desc=True)

        return self._run("list pages", query)

    def insert_lead(self, record: Dict[str, Any]) -> Dict[str, Any]:
        return self._run("insert lead", lambda: self.client.table(LEADS_TABLE).insert(record))[0]

    def list_leads(self, page_id: Optional[str] = None) -> List[Dict[str, Any]]:
        def query():
            builder = self.client.table(LEADS_TABLE).select("*")
            if page_id:
                builder = builder.eq("page_id", page_id)
            return builder.order("created_at", desc=True)

        return self._run("list leads", query)

    def insert_event(self, record: Dict[str, Any]) -> Dict[str, Any]:
        return self._run("insert event", lambda: self.client.table(EVENTS_TABLE).insert(record))[0]

    def list_events(self, page_id: Optional[str] = None) -> List[Dict[str, Any]]:
        def query():
            builder = self.client.table(EVENTS_TABLE).select("*")
            if page_id:
                builder = builder.eq("landing_page_id", page_id)
            return builder.order("created_at", desc=True)

        return self._run("list events", query)

    def list_users(self) -> List[Dict[str, Any]]:
        return self._run("list users", lambda: self.client.table(USERS_TABLE).select("id, created_at, email"))


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Shared Supabase client; prefers the service role key when configured."""
    key = settings.supabase_service_role_key or settings.supabase_key
    if not settings.supabase_url or not key:
        raise ApplicationError(
            "Supabase is not configured. Please set SUPABASE_URL and SUPABASE_KEY in .env file.",
            code=ErrorCode.CONFIGURATION_ERROR,
        )
    logger.info(f"[Supabase] Connecting to {settings.supabase_url}")
    return create_client(settings.supabase_url, key)


def get_repository() -> PageRepository:
    """FastAPI dependency returning the configured repository."""
    return SupabasePageRepository(get_supabase_client())
