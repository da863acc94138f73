"""Core exception types shared across layers."""


class UninitializedRegistryError(RuntimeError):
    """Raised when a thread's registry slot is empty after lazy population."""


class UnknownPersonFinderError(ValueError):
    """Raised when a person finder variant is requested by an unknown name."""


__all__ = [
    "UninitializedRegistryError",
    "UnknownPersonFinderError",
]
