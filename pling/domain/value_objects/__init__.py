"""Domain value objects.

Immutable, structurally-equal objects built only through ``create()``.
"""

from pling.domain.value_objects.org_settings import OrgSettings
from pling.domain.value_objects.organization_invitation import OrganizationInvitation
from pling.domain.value_objects.organization_member import OrganizationMember
from pling.domain.value_objects.organization_name import OrganizationName
from pling.domain.value_objects.organization_role import OrganizationRole

__all__ = [
    "OrgSettings",
    "OrganizationInvitation",
    "OrganizationMember",
    "OrganizationName",
    "OrganizationRole",
]
