"""Container module - Centralized dependency injection (composition root).

This module re-exports all factory functions from submodules:

    from pling.core.container import create_event_bus, get_logger, ...

The container is organized into modules by concern:
- infrastructure: Settings and logging (cached, app-scoped)
- events: Event bus, publisher and subscriptions (new instance per call)
- use_cases: Repository and organization use case wiring

Usage:
    bus = create_event_bus()
    register_event_handlers(bus)
    use_cases = build_organization_use_cases(create_organization_repository(), bus)
    result = await use_cases.create_organization.execute(
        CreateOrganization(name="Acme", owner_id=user_id)
    )
"""

from pling.core.container.events import (
    create_domain_event_publisher,
    create_event_bus,
    register_event_handlers,
)
from pling.core.container.infrastructure import get_logger, get_settings
from pling.core.container.use_cases import (
    OrganizationUseCases,
    build_organization_use_cases,
    create_organization_repository,
)

__all__ = [
    "OrganizationUseCases",
    "build_organization_use_cases",
    "create_domain_event_publisher",
    "create_event_bus",
    "create_organization_repository",
    "get_logger",
    "get_settings",
    "register_event_handlers",
]
