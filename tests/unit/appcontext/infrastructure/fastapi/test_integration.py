"""Unit tests for FastAPI integration."""

import asyncio
import inspect

import pytest

pytest.importorskip("fastapi")

from fastapi.params import Depends as DependsParam

from appcontext.application.app_context import AppContext
from appcontext.application.mapping_types import default_mapping_types
from appcontext.domain.exceptions import ConfigurationNotDefinedError
from appcontext.infrastructure.fastapi_integration.integration import (
    create_fastapi_dependency,
    create_tagged_dependency,
    depends_on,
    inject_dependencies,
)


class Repository:
    pass


class AuditLog:
    pass


@pytest.fixture
def context():
    return AppContext(
        {
            "repository": {"class": Repository, "cache": True},
            "audit_log": {"class": AuditLog},
            "health_db": {"type": "value", "value": "db", "tags": ["health"]},
            "health_cache": {"type": "value", "value": "cache", "tags": ["health", "optional"]},
        },
        default_mapping_types(),
    )


class TestCreateFastAPIDependency:
    """Test cases for create_fastapi_dependency."""

    def test_returns_callable_without_parameters(self, context):
        dependency = create_fastapi_dependency(context, "repository")

        assert callable(dependency)
        assert len(inspect.signature(dependency).parameters) == 0

    def test_gets_object_from_context(self, context):
        dependency = create_fastapi_dependency(context, "repository")

        assert dependency() is context.get("repository")

    def test_follows_cache_flag(self, context):
        cached = create_fastapi_dependency(context, "repository")
        uncached = create_fastapi_dependency(context, "audit_log")

        assert cached() is cached()
        assert uncached() is not uncached()

    def test_unknown_key_fails_on_call(self, context):
        dependency = create_fastapi_dependency(context, "missing")

        with pytest.raises(ConfigurationNotDefinedError):
            dependency()


class TestCreateTaggedDependency:
    """Test cases for create_tagged_dependency."""

    def test_returns_tagged_objects(self, context):
        assert create_tagged_dependency(context, "health")() == ["db", "cache"]
        assert create_tagged_dependency(context, "health", "optional")() == ["cache"]


class TestDependsOn:
    """Test cases for depends_on."""

    def test_wraps_dependency_in_depends(self, context):
        marker = depends_on(context, "repository")

        assert isinstance(marker, DependsParam)
        assert marker.dependency() is context.get("repository")


class TestInjectDependencies:
    """Test cases for inject_dependencies."""

    def test_injects_objects_by_position(self, context):
        @inject_dependencies(context, "repository", "audit_log")
        async def endpoint(repository, audit_log):
            return repository, audit_log

        repository, audit_log = asyncio.run(endpoint())

        assert repository is context.get("repository")
        assert isinstance(audit_log, AuditLog)

    def test_keeps_explicit_keyword_arguments(self, context):
        @inject_dependencies(context, "repository")
        async def endpoint(repository):
            return repository

        assert asyncio.run(endpoint(repository="explicit")) == "explicit"

    def test_hides_injected_parameters_from_signature(self, context):
        @inject_dependencies(context, "repository")
        async def endpoint(repository, item_id: int):
            return repository, item_id

        assert list(inspect.signature(endpoint).parameters) == ["item_id"]
        assert asyncio.run(endpoint(item_id=3)) == (context.get("repository"), 3)

    def test_preserves_function_metadata(self, context):
        @inject_dependencies(context, "repository")
        async def list_items(repository):
            """List items."""
            return repository

        assert list_items.__name__ == "list_items"
        assert list_items.__doc__ == "List items."
