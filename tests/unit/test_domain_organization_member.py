"""Unit tests for OrganizationMember."""

from datetime import UTC, datetime

import pytest

from pling.domain.enums import OrganizationPermission
from pling.domain.unique_id import UniqueId
from pling.domain.value_objects import OrganizationMember, OrganizationRole


@pytest.mark.unit
class TestOrganizationMember:
    """Test membership creation and role changes."""

    def test_create_from_role_name(self):
        joined = datetime(2026, 1, 5, 9, 0, tzinfo=UTC)

        member = OrganizationMember.create("user-1", "admin", joined).value

        assert member.user_id == UniqueId("user-1")
        assert member.role == OrganizationRole.ADMIN
        assert member.joined_at == joined

    def test_joined_at_defaults_to_now(self):
        member = OrganizationMember.create("user-1", OrganizationRole.MEMBER).value

        assert member.joined_at.tzinfo is not None

    def test_naive_joined_at_is_rejected(self):
        result = OrganizationMember.create("user-1", "member", datetime(2026, 1, 5))

        assert result.error == "Medlemskapets datum måste ha tidszon"

    def test_invited_is_not_a_membership_role(self):
        result = OrganizationMember.create("user-1", "invited")

        assert result.error == "En inbjuden användare är inte medlem ännu"

    def test_invalid_role_is_reported(self):
        assert "giltig organisationsroll" in OrganizationMember.create("u", "boss").error

    def test_permission_follows_role(self):
        member = OrganizationMember.create("user-1", "admin").value

        assert member.has_permission(OrganizationPermission.MANAGE_MEMBERS)
        assert not member.has_permission(OrganizationPermission.MANAGE_ROLES)

    def test_with_role_keeps_identity_and_join_time(self):
        member = OrganizationMember.create("user-1", "member").value

        promoted = member.with_role(OrganizationRole.ADMIN).value

        assert promoted.user_id == member.user_id
        assert promoted.joined_at == member.joined_at
        assert promoted.role == OrganizationRole.ADMIN
        assert member.role == OrganizationRole.MEMBER
