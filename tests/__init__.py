"""Test suite for the Pling domain core.

- unit/: Domain, application and infrastructure pieces in isolation
- integration/: Organization flows through the container wiring
- utils/: Shared builders and assertion helpers
"""
