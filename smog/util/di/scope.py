"""Custom Dishka scopes for smog."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """smog dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (HTTP clients, rate limiters, caches, aggregator)
    - UOW: Unit of Work (one HTTP request or CLI invocation)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
