"""Abstract base for host environment providers."""

from abc import ABC, abstractmethod

from nunit_report.models.environment import EnvironmentSnapshot


class EnvironmentProvider(ABC):
    """Supplies the environment facts embedded in a results document.

    Each fact is resolved independently; a provider reports a fact it cannot
    determine as None instead of raising.
    """

    @abstractmethod
    def snapshot(self) -> EnvironmentSnapshot:
        """Capture the current host facts.

        Returns:
            Snapshot with every fact resolved, None where unavailable

        """
