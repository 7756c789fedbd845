"""
Walks every manager operation exposed by ManagementClient and checks its
docstring.

Each operation is first called with empty parameters, then again after every
required key it reports is filled with a value holding a slash, until a
request goes out.
"""

import inspect
import re
from typing import Any, Dict, List, Tuple

import pytest  # type: ignore

from auth0_management.exceptions.management_exceptions import RequiredError
from auth0_management.sources.external.auth0.management_client import ManagementClient
from auth0_management.sources.external.auth0.runtime import BaseManager

SLASHED_VALUE = "a/b"
ENCODED_VALUE = b"a%2Fb"
PLACEHOLDER = re.compile(r"\{([^}]+)\}")
MAX_REQUIRED_KEYS = 5


def _operations() -> List[Tuple[str, str]]:
    management = ManagementClient.from_options(domain="tenant.auth0.com", token="t")
    operations = []
    for attr, manager in vars(management).items():
        if not isinstance(manager, BaseManager):
            continue
        for name, _ in inspect.getmembers(type(manager), inspect.iscoroutinefunction):
            if not name.startswith("_"):
                operations.append((attr, name))
    return sorted(operations)


OPERATIONS = _operations()


class TestEveryOperation:
    def test_every_manager_is_walked(self):
        assert len({manager for manager, _ in OPERATIONS}) == 41
        assert ("users", "get") in OPERATIONS
        assert ("jobs", "import_users") in OPERATIONS

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "manager_name, operation", OPERATIONS, ids=[f"{m}.{o}" for m, o in OPERATIONS]
    )
    async def test_required_keys_and_path_encoding(self, management, mock_api, monkeypatch, manager_name, operation):
        manager = getattr(management, manager_name)
        templates: List[str] = []
        send = manager._request

        async def recording_request(method: str, path: str, *args: Any, **kwargs: Any) -> Any:
            templates.append(path)
            return await send(method, path, *args, **kwargs)

        monkeypatch.setattr(manager, "_request", recording_request)

        method = getattr(manager, operation)
        signature = inspect.signature(method)
        params: Dict[str, Any] = {}
        kwargs: Dict[str, Any] = {}
        if "params" in signature.parameters:
            kwargs["params"] = params
        if "body" in signature.parameters:
            kwargs["body"] = {}

        filled: List[str] = []
        for _ in range(MAX_REQUIRED_KEYS + 1):
            try:
                await method(**kwargs)
                break
            except RequiredError as e:
                assert mock_api.requests == []
                assert e.field not in params
                params[e.field] = SLASHED_VALUE
                filled.append(e.field)
        else:
            pytest.fail(f"{manager_name}.{operation} kept asking for required keys: {filled}")

        assert len(mock_api.requests) == 1
        placeholders = PLACEHOLDER.findall(templates[-1])
        assert set(placeholders) <= set(filled)

        path = mock_api.last.url.raw_path.split(b"?")[0]
        assert path.count(ENCODED_VALUE) == len(placeholders)
        assert b"{" not in path
        assert b"%7B" not in path

    @pytest.mark.parametrize(
        "manager_name, operation", OPERATIONS, ids=[f"{m}.{o}" for m, o in OPERATIONS]
    )
    def test_docstring_names_http_call_and_arguments(self, management, manager_name, operation):
        method = getattr(getattr(management, manager_name), operation)
        doc = inspect.getdoc(method)
        signature = inspect.signature(method)

        assert doc is not None
        assert re.search(r"^HTTP (GET|POST|PUT|PATCH|DELETE) /\S*$", doc, re.MULTILINE)
        assert "Args:" in doc
        assert "Returns:" in doc
        for name in signature.parameters:
            assert f"    {name}: " in doc
