"""Shared fixtures: in-memory datastore, mocked AI client, FastAPI test client"""
import copy
import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from launchgen_api.agents.generator import ConfigGenerator
from launchgen_api.api.generate import get_generator
from launchgen_api.api.images import get_image_client
from launchgen_api.core.auth import require_user
from launchgen_api.core.repository import PageRepository, get_repository
from launchgen_api.main import app
from launchgen_api.models.errors import StorageError

OWNER_ID = "user-owner"
OTHER_USER_ID = "user-other"
IMAGE_URL = "https://images.example.com/hero.png"


class InMemoryPageRepository(PageRepository):
    """PageRepository keeping rows in dicts; ``fail_inserts`` simulates a backend outage"""

    def __init__(self):
        self.pages: Dict[str, Dict[str, Any]] = {}
        self.leads: List[Dict[str, Any]] = []
        self.events: List[Dict[str, Any]] = []
        self.users: List[Dict[str, Any]] = []
        self.fail_inserts = False

    def _stamp(self, record: Dict[str, Any]) -> Dict[str, Any]:
        row = copy.deepcopy(record)
        row.setdefault("id", str(uuid.uuid4()))
        row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        return row

    def save_page(self, record):
        if self.fail_inserts:
            raise StorageError("database unavailable")
        if record.get("id") and record["id"] in self.pages:
            self.pages[record["id"]].update(copy.deepcopy(record))
            return copy.deepcopy(self.pages[record["id"]])
        row = self._stamp(record)
        self.pages[row["id"]] = row
        return copy.deepcopy(row)

    def find_page_by_id(self, page_id):
        page = self.pages.get(page_id)
        return copy.deepcopy(page) if page else None

    def find_page_by_slug(self, slug, published_only=True):
        for page in self.pages.values():
            if page.get("slug") == slug and (page.get("published") or not published_only):
                return copy.deepcopy(page)
        return None

    def update_page(self, page_id, changes):
        if page_id not in self.pages:
            raise StorageError(f"Landing page {page_id} was not updated")
        self.pages[page_id].update(copy.deepcopy(changes))
        return copy.deepcopy(self.pages[page_id])

    def delete_page(self, page_id):
        self.pages.pop(page_id, None)

    def list_pages(self, owner_id: Optional[str] = None):
        return [copy.deepcopy(p) for p in self.pages.values() if owner_id is None or p.get("owner_id") == owner_id]

    def insert_lead(self, record):
        if self.fail_inserts:
            raise StorageError('duplicate key value violates unique constraint "leads_email_key"')
        row = self._stamp(record)
        self.leads.append(row)
        return copy.deepcopy(row)

    def list_leads(self, page_id=None):
        return [copy.deepcopy(l) for l in self.leads if page_id is None or l.get("page_id") == page_id]

    def insert_event(self, record):
        if self.fail_inserts:
            raise StorageError("database unavailable")
        row = self._stamp(record)
        self.events.append(row)
        return copy.deepcopy(row)

    def list_events(self, page_id=None):
        return [copy.deepcopy(e) for e in self.events if page_id is None or e.get("landing_page_id") == page_id]

    def list_users(self):
        return [copy.deepcopy(u) for u in self.users]


def make_config(**overrides) -> Dict[str, Any]:
    """A minimal valid landing page config"""
    config = {
        "business": {"name": "Acme", "logo": ""},
        "hero": {
            "headline": "Best Innovative AI Platform",
            "headlineHighlights": ["Innovative"],
            "subheadline": "Ship faster with less effort.",
            "cta": "Start Free Trial",
        },
        "features": [
            {"title": "Fast setup", "description": "Minutes, not days.", "icon": "⚡"},
            {"title": "Analytics", "description": "See what converts.", "icon": "📊"},
        ],
        "theme": {"mode": "white", "accentColor": "#6366f1"},
    }
    config.update(overrides)
    return config


@pytest.fixture
def repository():
    return InMemoryPageRepository()


@pytest.fixture
def mock_ai_client():
    """AI client whose completion returns a valid config as JSON text and whose images return IMAGE_URL"""
    client = Mock()
    client.complete = AsyncMock(return_value=json.dumps(make_config()))
    client.generate_image = AsyncMock(return_value=IMAGE_URL)
    return client


@pytest.fixture
def client(repository, mock_ai_client):
    """TestClient signed in as OWNER_ID with in-memory storage and a mocked AI client"""
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[require_user] = lambda: OWNER_ID
    app.dependency_overrides[get_generator] = lambda: ConfigGenerator(mock_ai_client)
    app.dependency_overrides[get_image_client] = lambda: mock_ai_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(repository):
    """TestClient with no session; only storage is overridden"""
    app.dependency_overrides[get_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def published_page(repository):
    """A published page owned by OWNER_ID"""
    return repository.save_page({
        "owner_id": OWNER_ID,
        "title": "Best Innovative AI Platform",
        "slug": "best-innovative-ai-platform-abc123",
        "template_id": "default",
        "page_content": make_config(),
        "page_style": {"theme": {"mode": "black", "accentColor": "#10b981"}, "sectionVisibility": {}},
        "published": True,
    })
