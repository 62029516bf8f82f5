"""Application layer.

Use cases orchestrate aggregates and ports; this layer imports only from
``pling.core`` and ``pling.domain``.
"""
