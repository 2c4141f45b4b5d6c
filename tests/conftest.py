"""Pytest configuration for the typedpath test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from typedpath.config import PLATFORM_ENV_VAR, reset_default_platform
from typedpath.platform import POSIX, WINDOWS, Platform


@pytest.fixture(autouse=True)
def posix_default_platform(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin the default platform to POSIX so results do not depend on the host.

    Yields
    ------
    None
        Control returns to the test with a fresh default platform cache.
    """
    monkeypatch.setenv(PLATFORM_ENV_VAR, "posix")
    reset_default_platform()
    yield
    reset_default_platform()


@pytest.fixture
def posix() -> Platform:
    """POSIX path rules.

    Returns
    -------
    Platform
        The POSIX platform.
    """
    return POSIX


@pytest.fixture
def windows() -> Platform:
    """Windows path rules.

    Returns
    -------
    Platform
        The Windows platform.
    """
    return WINDOWS
