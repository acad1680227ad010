from pathlib import Path
from typing import Callable, Optional, Union

import httpx
import pytest

from ecs_metadata.config import ENV_METADATA_URI_V3, ENV_METADATA_URI_V4

STATIC_DIR = Path(__file__).parent / "_static"

Route = Union[bytes, httpx.Response]
ClientFactory = Callable[[dict[str, Route]], httpx.AsyncClient]


@pytest.fixture(autouse=True)
def clear_metadata_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests must not pick up endpoints from the environment they run in."""
    monkeypatch.delenv(ENV_METADATA_URI_V3, raising=False)
    monkeypatch.delenv(ENV_METADATA_URI_V4, raising=False)


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Requests received by clients created with `metadata_client`."""
    return []


@pytest.fixture
def metadata_client(sent_requests: list[httpx.Request]) -> ClientFactory:
    """Factory for clients that serve fixed responses for the given URLs.

    Unknown URLs get an empty 404 response.
    """

    def make_client(routes: dict[str, Route]) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            route: Optional[Route] = routes.get(str(request.url))
            if route is None:
                return httpx.Response(404)
            if isinstance(route, httpx.Response):
                return route
            return httpx.Response(200, content=route)

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return make_client


def _load(name: str) -> bytes:
    return (STATIC_DIR / name).read_bytes()


@pytest.fixture(scope="session")
def v3_task_json() -> bytes:
    return _load("metadatav3-response-task.json")


@pytest.fixture(scope="session")
def v3_container_json() -> bytes:
    return _load("metadatav3-response-container.json")


@pytest.fixture(scope="session")
def v4_task_json() -> bytes:
    return _load("metadatav4-response-task.json")


@pytest.fixture(scope="session")
def v4_container_json() -> bytes:
    return _load("metadatav4-response-container.json")
