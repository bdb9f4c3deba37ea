"""Pytest fixtures shared across portal and covenant tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from fakes import FakeSearchClient


@pytest.fixture
def empty_search() -> FakeSearchClient:
    """Return a search client that never finds anything."""

    return FakeSearchClient()


@pytest.fixture
def use_search_client(monkeypatch) -> Callable[[FakeSearchClient], FakeSearchClient]:
    """Route portal views and commands to the given fake search client."""

    def _install(client: FakeSearchClient) -> FakeSearchClient:
        monkeypatch.setattr("portal.services.build_search_client", lambda: client)
        return client

    return _install


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, views, commands, or IO.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
