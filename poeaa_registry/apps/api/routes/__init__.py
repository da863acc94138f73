"""Router namespace exports for FastAPI include hooks."""

from . import health, people, registry

__all__ = ["health", "people", "registry"]
