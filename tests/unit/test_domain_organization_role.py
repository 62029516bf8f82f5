"""Unit tests for OrganizationRole and the role/permission enums.

Tests cover:
- Parsing from strings, enum members and existing roles
- Role hierarchy comparisons
- Permission table
"""

import pytest

from pling.domain.enums import (
    InvitationStatus,
    OrganizationPermission,
    OrganizationRoleType,
    permissions_for,
)
from pling.domain.value_objects import OrganizationRole


@pytest.mark.unit
class TestOrganizationRoleCreate:
    """Test role parsing."""

    @pytest.mark.parametrize("raw", ["admin", "ADMIN", " Admin "])
    def test_parses_case_insensitively(self, raw):
        assert OrganizationRole.create(raw).value == OrganizationRole.ADMIN

    def test_accepts_enum_member(self):
        assert OrganizationRole.create(OrganizationRoleType.OWNER).value.is_owner

    def test_existing_role_passes_through(self):
        assert OrganizationRole.create(OrganizationRole.MEMBER).value is OrganizationRole.MEMBER

    def test_unknown_role_lists_valid_values(self):
        result = OrganizationRole.create("superuser")

        assert result.is_err()
        assert '"superuser"' in result.error
        assert "owner, admin, member, invited" in result.error

    def test_str_and_label(self):
        assert str(OrganizationRole.ADMIN) == "admin"
        assert OrganizationRole.ADMIN.label == "Administratör"


@pytest.mark.unit
class TestRoleHierarchy:
    """Test role comparisons."""

    def test_higher_role_covers_lower(self):
        assert OrganizationRole.OWNER.has_at_least_same_permission_as(OrganizationRole.ADMIN)
        assert OrganizationRole.ADMIN.has_at_least_same_permission_as(OrganizationRole.ADMIN)

    def test_lower_role_does_not_cover_higher(self):
        assert not OrganizationRole.MEMBER.has_at_least_same_permission_as(
            OrganizationRole.ADMIN
        )

    def test_levels_are_ordered(self):
        levels = [role.level for role in OrganizationRoleType]

        assert levels == sorted(levels, reverse=True)


@pytest.mark.unit
class TestPermissions:
    """Test the role to permission table."""

    def test_owner_has_every_management_permission(self):
        for permission in (
            OrganizationPermission.MANAGE_ORGANIZATION,
            OrganizationPermission.MANAGE_ROLES,
            OrganizationPermission.MANAGE_TEAMS,
        ):
            assert OrganizationRole.OWNER.has_permission(permission)

    def test_admin_cannot_manage_roles(self):
        assert OrganizationRole.ADMIN.has_permission(OrganizationPermission.INVITE_MEMBERS)
        assert not OrganizationRole.ADMIN.has_permission(OrganizationPermission.MANAGE_ROLES)

    def test_member_can_only_view(self):
        assert permissions_for(OrganizationRoleType.MEMBER) == frozenset(
            {OrganizationPermission.VIEW_ORGANIZATION}
        )

    def test_invited_can_only_join(self):
        assert OrganizationRole.INVITED.has_permission(OrganizationPermission.JOIN_ORGANIZATION)
        assert not OrganizationRole.INVITED.has_permission(
            OrganizationPermission.VIEW_ORGANIZATION
        )


@pytest.mark.unit
class TestInvitationStatus:
    def test_only_pending_is_non_terminal(self):
        assert not InvitationStatus.PENDING.is_terminal
        assert all(
            status.is_terminal
            for status in InvitationStatus
            if status is not InvitationStatus.PENDING
        )
