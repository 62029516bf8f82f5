"""Builders for domain objects used across the test suite."""

from pling.domain.entities.organization import Organization
from pling.domain.unique_id import UniqueId
from pling.domain.value_objects import OrgSettings


def create_organization(
    name: str = "Acme Sälj",
    owner_id: "str | UniqueId" = "owner-1",
    max_members: int | None = 5,
    max_teams: int | None = 2,
    allow_member_invites: bool = False,
    clear_events: bool = True,
) -> Organization:
    """Helper to create an Organization for testing.

    Args:
        name: Organization name (valid by default).
        owner_id: Owning user.
        max_members: Member limit (default 5, roomier than the basic plan).
        max_teams: Team limit.
        allow_member_invites: Settings flag.
        clear_events: Drop the OrganizationCreated event (default True).

    Returns:
        Organization instance for testing.

    Usage:
        org = create_organization()
        org = create_organization(max_members=2)
    """
    settings = OrgSettings.create(
        max_members=max_members,
        max_teams=max_teams,
        allow_member_invites=allow_member_invites,
    ).value
    organization = Organization.create(name=name, owner_id=owner_id, settings=settings).value
    if clear_events:
        organization.clear_events()
    return organization
