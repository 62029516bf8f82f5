"""Organization invitation lifecycle states.

State machine:
    PENDING -> ACCEPTED | DECLINED | EXPIRED (all terminal)
"""

from enum import Enum


class InvitationStatus(str, Enum):
    """Status of an OrganizationInvitation."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        return self is not InvitationStatus.PENDING
