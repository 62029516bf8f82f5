"""Domain protocols (ports).

Structural interfaces the domain and application layers depend on;
infrastructure provides the adapters.
"""

from pling.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
    EventKey,
    Unsubscribe,
)
from pling.domain.protocols.logger_protocol import LoggerProtocol
from pling.domain.protocols.notification_protocol import NotificationProtocol
from pling.domain.protocols.organization_repository import OrganizationRepository
from pling.domain.protocols.repository import Repository

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "EventKey",
    "LoggerProtocol",
    "NotificationProtocol",
    "OrganizationRepository",
    "Repository",
    "Unsubscribe",
]
