"""Environment provider backed by the running interpreter."""

import getpass
import locale
import logging
import os
import platform
import re
import socket
import sys
from collections.abc import Callable
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version

from nunit_report.environment.base import EnvironmentProvider
from nunit_report.models.environment import EnvironmentSnapshot

log = logging.getLogger(__name__)

PRODUCT_DISTRIBUTION = "nunit-report"

CULTURE_RE = re.compile(r"[a-z]{2,3}(_[A-Za-z0-9]{2,4})?")


def locale_to_culture(locale_name: str | None) -> str | None:
    """Convert a locale name such as "de_DE.UTF-8" to a culture such as "de-DE".

    Names are normalized through the locale alias table first, so short aliases
    like "de" resolve too. Names that do not map to a language code, such as
    unknown Windows display names, give None.
    """
    if not locale_name:
        return None
    normalized = locale.normalize(locale_name)
    base = normalized.split(".", 1)[0].split("@", 1)[0]
    if not CULTURE_RE.fullmatch(base):
        return None
    return base.replace("_", "-")


@dataclass(frozen=True, kw_only=True)
class HostEnvironment(EnvironmentProvider):
    """Reads environment facts from the current process and host."""

    product_distribution: str = PRODUCT_DISTRIBUTION

    def snapshot(self) -> EnvironmentSnapshot:
        """Capture the current host facts."""
        return EnvironmentSnapshot(
            product_version=self._query("product-version", self._product_version),
            runtime_version=self._query("runtime-version", platform.python_version),
            os_version=self._query("os-version", platform.platform),
            platform=self._query("platform", lambda: sys.platform),
            cwd=self._query("cwd", os.getcwd),
            machine_name=self._query("machine-name", socket.gethostname),
            user=self._query("user", getpass.getuser),
            user_domain=self._query("user-domain", lambda: os.environ.get("USERDOMAIN")),
            culture=self._query("culture", self._culture),
            uiculture=self._query("uiculture", self._ui_culture),
        )

    def _query(self, fact: str, getter: Callable[[], str | None]) -> str | None:
        try:
            value = getter()
        except (OSError, KeyError, ValueError, PackageNotFoundError) as e:
            log.debug("Environment fact %s unavailable: %s", fact, e)
            return None
        if not value:
            log.debug("Environment fact %s unavailable on this host", fact)
            return None
        return value

    def _product_version(self) -> str:
        return version(self.product_distribution)

    @staticmethod
    def _culture() -> str | None:
        return locale_to_culture(locale.setlocale(locale.LC_CTYPE))

    @staticmethod
    def _ui_culture() -> str | None:
        # Message language follows the POSIX lookup order
        for name in ("LC_ALL", "LC_MESSAGES", "LANG"):
            if value := os.environ.get(name):
                return locale_to_culture(value)
        return None
