"""Host facts recorded alongside a test run."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class EnvironmentSnapshot:
    """Read-only facts about the host process.

    A fact is None when it cannot be determined on the current host.
    """

    product_version: str | None = None
    runtime_version: str | None = None
    os_version: str | None = None
    platform: str | None = None
    cwd: str | None = None
    machine_name: str | None = None
    user: str | None = None
    user_domain: str | None = None
    culture: str | None = None
    uiculture: str | None = None
