"""Runtime configuration for the default path platform."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import cache

from typedpath.errors import UnknownPlatformError
from typedpath.platform import PLATFORMS, POSIX, WINDOWS, Platform

log = logging.getLogger(__name__)

PLATFORM_ENV_VAR = "TYPEDPATH_PLATFORM"
AUTO = "auto"


@dataclass(frozen=True)
class PathSettings:
    """
    Settings resolved from the environment.

    Attributes
    ----------
    platform_name : str
        ``"posix"``, ``"windows"`` or ``"auto"`` (follow ``os.name``).
    """

    platform_name: str = AUTO

    def resolve_platform(self) -> Platform:
        """
        Map the configured name to a platform implementation.

        Returns
        -------
        Platform
            The selected platform flavour.

        Raises
        ------
        UnknownPlatformError
            If ``platform_name`` is not recognised.
        """
        name = self.platform_name.strip().lower()
        if name == AUTO:
            return WINDOWS if os.name == "nt" else POSIX
        platform = PLATFORMS.get(name)
        if platform is None:
            raise UnknownPlatformError(name=self.platform_name, supported=(AUTO, *PLATFORMS))
        return platform


def settings_from_env() -> PathSettings:
    """
    Read ``TYPEDPATH_PLATFORM`` into settings.

    Returns
    -------
    PathSettings
        Settings with environment overrides applied.
    """
    raw = os.getenv(PLATFORM_ENV_VAR)
    if not raw:
        return PathSettings()
    return PathSettings(platform_name=raw)


@cache
def default_platform() -> Platform:
    """
    Return the platform used when callers do not pass one explicitly.

    Resolved once from the environment and cached; see :func:`reset_default_platform`.

    Returns
    -------
    Platform
        Configured platform.
    """
    platform = settings_from_env().resolve_platform()
    log.debug("Default path platform: %s", platform.name)
    return platform


def reset_default_platform() -> None:
    """Forget the cached default platform so the environment is read again."""
    default_platform.cache_clear()
