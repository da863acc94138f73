"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so local overrides are honored.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Registries are built with the always-finding variant unless a test says otherwise
os.environ.setdefault("PERSON_FINDER", "always")
os.environ.setdefault("DEFAULT_FIRST_NAME", "John")


@pytest.fixture(autouse=True)
def fresh_registries():
    """Give every test freshly initialized registries on the test thread."""
    # pylint: disable=import-outside-toplevel
    from poeaa_registry.services.registry import Registry
    from poeaa_registry.services.thread_registry import ThreadLocalRegistry

    Registry.initialize()
    ThreadLocalRegistry.initialize()
    yield
    Registry.initialize()
    ThreadLocalRegistry.initialize()
