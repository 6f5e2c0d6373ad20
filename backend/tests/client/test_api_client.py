"""API Client — TaskTreeClient against the real app over ASGITransport.

Tests:
    - Success envelopes unwrapped into typed models
    - Error envelopes raised as ApiClientError with status, code, message
    - Parent picker and tree built from the listed categories
    - Preset palette and icon suggestions, free-form icons still accepted
    - Recurrence sent as a JSON string, dates as ISO strings
    - Transport failures and non-JSON bodies
"""

import json
from datetime import date

import httpx
import pytest
from httpx import ASGITransport

from app.client import ApiClientError, TaskTreeClient
from app.config import Settings, get_settings
from app.core.domain_types import RecurrenceType, TaskPriority
from app.core.errors import BusinessRuleError
from app.infrastructure.procedure_store import get_procedure_store
from app.main import app
from app.schemas.task import RecurrenceConfig

BASE_URL = "http://test/api/v1/internal"


class RecordingStore:
    def __init__(self):
        self.calls: list[dict] = []
        self.results: dict = {}

    async def fetch_all(self, procedure, params):
        self.calls.append({"procedure": procedure, "params": dict(params)})
        result = self.results.get(procedure, [])
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_one(self, procedure, params):
        return (await self.fetch_all(procedure, params))[0]


@pytest.fixture
def recording_store():
    return RecordingStore()


@pytest.fixture
async def api(recording_store):
    settings = Settings()
    app.dependency_overrides[get_procedure_store] = lambda: recording_store
    app.dependency_overrides[get_settings] = lambda: settings
    async with TaskTreeClient(
        BASE_URL, transport=ASGITransport(app=app, raise_app_exceptions=False),
    ) as client:
        yield client
    app.dependency_overrides.clear()


def _row(id_category, name, level=0, id_parent=None, task_count=0):
    return {
        "idCategory": id_category, "name": name, "color": "#3498db",
        "icon": None, "idParent": id_parent, "level": level,
        "isDefault": False, "taskCount": task_count,
    }


_CATEGORIES = [
    _row(1, "Work", task_count=2),
    _row(2, "Frontend", level=1, id_parent=1, task_count=1),
    _row(3, "React", level=2, id_parent=2),
    _row(4, "Home"),
]


async def test_list_categories_unwraps_data(api, recording_store):
    recording_store.results["spCategoryList"] = _CATEGORIES

    categories = await api.categories.list_categories()

    assert [c.name for c in categories] == ["Work", "Frontend", "React", "Home"]
    assert categories[1].id_parent == 1


async def test_create_sends_defaults(api, recording_store):
    recording_store.results["spCategoryCreate"] = [{"idCategory": 9}]

    result = await api.categories.create("Projects", icon="")

    assert result.id_category == 9
    params = recording_store.calls[0]["params"]
    assert params["color"] == "#3498db"
    assert params["icon"] is None
    assert params["idParent"] is None


async def test_update_and_delete(api, recording_store):
    recording_store.results["spCategoryUpdate"] = [{"idCategory": 4}]
    recording_store.results["spCategoryDelete"] = [{"idCategory": 4}]

    updated = await api.categories.update(4, "House", "#2ecc71", icon="home")
    deleted = await api.categories.delete(4)

    assert updated.id_category == deleted.id_category == 4
    assert recording_store.calls[0]["params"]["idCategory"] == 4
    assert recording_store.calls[1]["procedure"] == "spCategoryDelete"


async def test_business_error_raises_client_error(api, recording_store):
    recording_store.results["spCategoryCreate"] = BusinessRuleError(
        "categoryNameAlreadyExists",
    )

    with pytest.raises(ApiClientError) as exc_info:
        await api.categories.create("Projects")

    err = exc_info.value
    assert err.status == 400
    assert err.code == "BUSINESS_RULE_VIOLATION"
    assert err.message == "categoryNameAlreadyExists"


async def test_validation_error_carries_details(api):
    with pytest.raises(ApiClientError) as exc_info:
        await api.categories.create("P")

    assert exc_info.value.code == "VALIDATION_ERROR"
    assert exc_info.value.details[0]["field"] == "body.name"


async def test_available_parents(api, recording_store):
    recording_store.results["spCategoryList"] = _CATEGORIES

    parents = await api.categories.available_parents(editing_id=4)

    assert [c.id_category for c in parents] == [1, 2]


async def test_tree(api, recording_store):
    recording_store.results["spCategoryList"] = _CATEGORIES

    roots = await api.categories.tree()

    assert [r.category.name for r in roots] == ["Work", "Home"]
    assert roots[0].children[0].children[0].category.name == "React"


async def test_task_categories(api, recording_store):
    recording_store.results["spTaskCategoryAssociate"] = [{"idTask": 5, "idCategory": 1}]
    recording_store.results["spTaskCategoryList"] = [
        {"idCategory": 1, "name": "Work", "color": "#3498db", "icon": None},
    ]
    recording_store.results["spTaskCategoryRemove"] = [{"idTask": 5, "idCategory": 1}]

    associated = await api.task_categories.associate(5, 1)
    listed = await api.task_categories.list_task_categories(5)
    removed = await api.task_categories.remove(5, 1)

    assert associated.id_category == 1
    assert [c.name for c in listed] == ["Work"]
    assert removed.id_task == 5


async def test_task_create_serializes_recurrence(api, recording_store):
    recording_store.results["spTaskCreate"] = [{"idTask": 11}]
    recurrence = RecurrenceConfig(type=RecurrenceType.WEEKLY, interval=2, end=5)

    result = await api.tasks.create(
        "Standup",
        due_date=date(2027, 3, 1),
        priority=TaskPriority.HIGH,
        estimated_time=15,
        recurrence=recurrence,
    )

    assert result.id_task == 11
    params = recording_store.calls[0]["params"]
    assert params["priority"] == 2
    assert params["dueDate"] == date(2027, 3, 1)
    assert json.loads(params["recurrenceConfig"]) == {
        "type": "weekly", "interval": 2, "end": 5,
    }


async def test_transport_failure_is_status_zero():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with TaskTreeClient(
        BASE_URL, transport=httpx.MockTransport(refuse),
    ) as client:
        with pytest.raises(ApiClientError) as exc_info:
            await client.categories.list_categories()

    assert exc_info.value.status == 0
    assert exc_info.value.code == "TRANSPORT_ERROR"


async def test_non_json_response():
    transport = httpx.MockTransport(
        lambda request: httpx.Response(502, text="Bad Gateway"),
    )

    async with TaskTreeClient(BASE_URL, transport=transport) as client:
        with pytest.raises(ApiClientError) as exc_info:
            await client.tasks.create("Plan")

    assert exc_info.value.status == 502
    assert exc_info.value.code == "INVALID_RESPONSE"


async def test_palette_starts_with_default_color(api):
    palette = api.categories.palette()

    assert palette[0] == "#3498db"
    assert len(palette) == len(set(palette)) == 8


async def test_free_form_icon_outside_suggestions(api, recording_store):
    recording_store.results["spCategoryCreate"] = [{"idCategory": 10}]
    assert "rocket" not in api.categories.icons()

    await api.categories.create("Launches", icon="rocket")

    assert recording_store.calls[0]["params"]["icon"] == "rocket"
    assert "work" in api.categories.icons()
