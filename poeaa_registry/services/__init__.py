"""Application service layer: the registries and their lookup consumers."""

from __future__ import annotations

from .registry import Registry
from .thread_registry import ThreadLocalRegistry, current_thread_tag

__all__ = ["Registry", "ThreadLocalRegistry", "current_thread_tag"]
