"""Tests for the process-wide initial seed."""

from collections.abc import Generator

import pytest

from nunit_report import randomizer


@pytest.fixture
def _restore_seed() -> Generator[None]:
    """Restore the initial seed after the test."""
    seed = randomizer.initial_seed()
    yield
    randomizer.set_initial_seed(seed)


def test_initial_seed_is_stable() -> None:
    """Returns the same seed on every call."""
    assert randomizer.initial_seed() == randomizer.initial_seed()
    assert 0 <= randomizer.initial_seed() < 0x7FFFFFFF


@pytest.mark.usefixtures("_restore_seed")
def test_set_initial_seed() -> None:
    """Replaces the seed for later reads."""
    randomizer.set_initial_seed(42)

    assert randomizer.initial_seed() == 42
