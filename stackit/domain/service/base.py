"""Marker base for StackIt domain services."""


class Service:
    """Stateless holder of rules spanning several entities.

    Services get repositories and other services injected and keep no
    per-request state of their own.
    """
