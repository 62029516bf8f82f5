"""Domain layer.

Pure business logic: identifiers, value objects, aggregates, events and the
ports (protocols) the outer layers implement. Nothing here performs I/O.
"""
