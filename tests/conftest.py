"""Pytest shared fixtures."""
import pathlib
import sys
from typing import Any, Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from tfprovider.core.schema import Resource, ResourceData


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch):
    """Fail loudly if a unit test reaches for the real network."""

    def _unexpected(method):
        def _call(url, *args, **kwargs):
            raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")
        return _call

    for method in ("get", "post", "put", "patch", "delete"):
        monkeypatch.setattr(requests, method, _unexpected(method.upper()))


# ─────────────────────────────────────────────────────────────────────────────
# Resource lifecycle harness
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
def resource_fixture():
    """Run one lifecycle operation of a resource and capture the outcome.

    Returns a callable ``apply(resource, operation, id="", state=None,
    client=None)`` producing ``(data, error)``.
    """

    def apply(
        resource: Resource,
        operation: str,
        id: str = "",
        state: Optional[dict] = None,
        client: Any = None,
    ) -> tuple[ResourceData, Optional[Exception]]:
        data = resource.new_data(state, id=id)
        try:
            getattr(resource, operation)(data, client)
        except Exception as e:
            return data, e
        return data, None

    return apply
