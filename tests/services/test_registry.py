"""Tests for the process-wide registry."""

# pylint: disable=missing-function-docstring

from __future__ import annotations

import threading

import pytest

from poeaa_registry.adapters.person_finders import (
    AlwaysFindingPersonFinder,
    NeverFindingPersonFinder,
)
from poeaa_registry.core.config import settings
from poeaa_registry.services.registry import Registry


def test_returns_the_same_instance() -> None:
    assert Registry.get_instance() is Registry.get_instance()


def test_returns_the_same_person_finder() -> None:
    assert Registry.get_instance().person_finder is Registry.get_instance().person_finder


def test_initialize_replaces_the_instance() -> None:
    before = Registry.get_instance()

    Registry.initialize()

    after = Registry.get_instance()
    assert after is not before
    assert after.person_finder is not before.person_finder


def test_default_finder_always_finds() -> None:
    result = Registry.get_instance().person_finder.find_by_last_name("Doe")

    assert isinstance(Registry.get_instance().person_finder, AlwaysFindingPersonFinder)
    assert result.found is True


def test_default_finder_follows_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "PERSON_FINDER", "never")

    Registry.initialize()

    assert isinstance(Registry.get_instance().person_finder, NeverFindingPersonFinder)


def test_set_person_finder_is_seen_by_later_callers() -> None:
    finder = NeverFindingPersonFinder()
    Registry.get_instance().person_finder = finder

    assert Registry.get_instance().person_finder is finder


def test_initialize_discards_mutations() -> None:
    Registry.get_instance().person_finder = NeverFindingPersonFinder()

    Registry.initialize()

    assert isinstance(Registry.get_instance().person_finder, AlwaysFindingPersonFinder)


def test_stale_instance_remains_usable_but_detached() -> None:
    stale = Registry.get_instance()
    Registry.initialize()

    stale.person_finder = NeverFindingPersonFinder()

    assert stale.person_finder.find_by_last_name("Doe").found is False
    assert Registry.get_instance().person_finder.find_by_last_name("Doe").found is True


def test_registry_is_shared_across_threads() -> None:
    seen: list[Registry] = []

    def reader() -> None:
        seen.append(Registry.get_instance())

    thread = threading.Thread(target=reader)
    thread.start()
    thread.join()

    assert seen == [Registry.get_instance()]
    assert seen[0] is Registry.get_instance()


def test_concurrent_initialize_never_exposes_partial_instances() -> None:
    errors: list[str] = []
    stop = threading.Event()

    def writer() -> None:
        for _ in range(200):
            Registry.initialize()
        stop.set()

    def reader() -> None:
        while not stop.is_set():
            instance = Registry.get_instance()
            if not isinstance(instance, Registry) or instance.person_finder is None:
                errors.append(repr(instance))

    readers = [threading.Thread(target=reader) for _ in range(4)]
    writers = [threading.Thread(target=writer) for _ in range(2)]
    for thread in readers + writers:
        thread.start()
    for thread in writers + readers:
        thread.join()

    assert not errors


def test_direct_construction_is_detached_from_the_slot() -> None:
    current = Registry.get_instance()

    detached = Registry()
    detached.person_finder = NeverFindingPersonFinder()

    assert detached is not Registry.get_instance()
    assert Registry.get_instance() is current
    assert isinstance(current.person_finder, AlwaysFindingPersonFinder)
