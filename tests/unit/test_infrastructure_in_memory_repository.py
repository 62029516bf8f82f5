"""Unit tests for InMemoryOrganizationRepository.

Tests cover:
- save/find round trip bumps the version
- Loads return fresh instances (no shared state between callers)
- Optimistic concurrency: stale writes are rejected and logged
- find_by_member and delete
"""

import pytest

from pling.infrastructure.persistence.in_memory_organization_repository import (
    InMemoryOrganizationRepository,
    RepositoryError,
)
from tests.utils.utils import create_organization


@pytest.mark.unit
class TestSaveAndLoad:
    """Test persistence round trips."""

    @pytest.mark.asyncio
    async def test_save_assigns_version(self, repository):
        org = create_organization()

        result = await repository.save(org)

        assert result.is_ok()
        assert org.version == 1
        assert len(repository) == 1

    @pytest.mark.asyncio
    async def test_find_returns_fresh_instance(self, repository):
        org = create_organization()
        await repository.save(org)

        loaded = (await repository.find_by_id(org.id)).value

        assert loaded == org
        assert loaded is not org
        assert loaded.version == 1
        assert loaded.domain_events == ()
        assert loaded.name == org.name

    @pytest.mark.asyncio
    async def test_unsaved_mutation_is_not_visible(self, repository):
        org = create_organization()
        await repository.save(org)

        org.add_member("user-2")
        loaded = (await repository.find_by_id(org.id)).value

        assert not loaded.is_member("user-2")

    @pytest.mark.asyncio
    async def test_find_missing(self, repository):
        assert (await repository.find_by_id("missing")).error == RepositoryError.NOT_FOUND

    @pytest.mark.asyncio
    async def test_find_by_member(self, repository):
        first = create_organization(name="Första")
        second = create_organization(name="Andra", owner_id="owner-2")
        first.add_member("user-2")
        for org in (first, second):
            await repository.save(org)

        found = (await repository.find_by_member("user-2")).value
        owned = (await repository.find_by_member("owner-2")).value

        assert [org.name for org in found] == ["Första"]
        assert [org.name for org in owned] == ["Andra"]
        assert (await repository.find_by_member("nobody")).value == []


@pytest.mark.unit
class TestOptimisticConcurrency:
    """Test version checks on save."""

    @pytest.mark.asyncio
    async def test_stale_write_is_rejected(self, repository, mock_logger):
        org = create_organization()
        await repository.save(org)
        first = (await repository.find_by_id(org.id)).value
        second = (await repository.find_by_id(org.id)).value

        first.add_member("user-2")
        second.add_member("user-3")
        assert (await repository.save(first)).is_ok()
        result = await repository.save(second)

        assert result.error == RepositoryError.CONCURRENT_UPDATE
        assert second.version == 1
        stored = (await repository.find_by_id(org.id)).value
        assert stored.is_member("user-2")
        assert not stored.is_member("user-3")
        mock_logger.warning.assert_called_once_with(
            "organization_save_conflict",
            organization_id=str(org.id),
            expected_version=2,
            actual_version=1,
        )

    @pytest.mark.asyncio
    async def test_consecutive_saves_of_same_instance(self, repository):
        org = create_organization()

        await repository.save(org)
        org.add_member("user-2")
        result = await repository.save(org)

        assert result.is_ok()
        assert org.version == 2

    @pytest.mark.asyncio
    async def test_conflict_without_logger(self):
        repository = InMemoryOrganizationRepository()
        org = create_organization()
        await repository.save(org)
        stale = (await repository.find_by_id(org.id)).value
        await repository.save(org)

        assert (await repository.save(stale)).is_err()


@pytest.mark.unit
class TestDelete:
    @pytest.mark.asyncio
    async def test_delete(self, repository):
        org = create_organization()
        await repository.save(org)

        assert (await repository.delete(org.id)).is_ok()
        assert (await repository.find_by_id(org.id)).is_err()
        assert (await repository.delete(org.id)).error == RepositoryError.NOT_FOUND
