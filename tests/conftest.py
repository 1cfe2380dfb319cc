import sys
from pathlib import Path

import pytest

# Ensure the repository root is on sys.path for direct pytest runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api import create_app  # noqa: E402
from models.memory_storage import MemoryStorage  # noqa: E402


@pytest.fixture
def storage():
    store = MemoryStorage()
    store.reload()
    return store


@pytest.fixture
def app(storage):
    return create_app("testing", storage=storage)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def gql(client):
    def run(query, **variables):
        resp = client.post("/graphql", json={"query": query, "variables": variables})
        assert resp.status_code == 200, resp.get_data(as_text=True)
        return resp.get_json()

    return run
