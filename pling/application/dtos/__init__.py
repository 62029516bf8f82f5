"""Use case outputs (DTOs)."""

from pling.application.dtos.organization_dtos import (
    InvitationDTO,
    MemberDTO,
    OrganizationDTO,
)

__all__ = ["InvitationDTO", "MemberDTO", "OrganizationDTO"]
