"""Host environment providers."""

from nunit_report.environment.base import EnvironmentProvider
from nunit_report.environment.host import HostEnvironment

__all__ = ["EnvironmentProvider", "HostEnvironment"]
