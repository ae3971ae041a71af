"""Writer for NUnit3 XML test plan and test result documents."""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from nunit_report import randomizer
from nunit_report.config import ReportConfig
from nunit_report.environment.base import EnvironmentProvider
from nunit_report.environment.host import HostEnvironment
from nunit_report.models.environment import EnvironmentSnapshot
from nunit_report.models.result import ResultNode
from nunit_report.models.test import TestNode
from nunit_report.serializer import (
    escape_invalid_characters,
    format_duration,
    format_time,
    serialize,
)

log = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0"?>'
INDENT = "  "

ENVIRONMENT_ATTRIBUTES = {
    "product-version": "product_version",
    "runtime-version": "runtime_version",
    "os-version": "os_version",
    "platform": "platform",
    "cwd": "cwd",
    "machine-name": "machine_name",
    "user": "user",
    "user-domain": "user_domain",
    "culture": "culture",
    "uiculture": "uiculture",
}


@dataclass(frozen=True, kw_only=True)
class ReportWriter:
    """Writes test plans and test results as NUnit3 XML documents.

    The writer flushes but never closes a sink it is handed. Sink errors
    propagate unchanged; a partially written document is left for the
    caller to discard.
    """

    config: ReportConfig
    environment: EnvironmentProvider = field(default_factory=HostEnvironment)

    def write_plan(self, test: TestNode, sink: TextIO) -> None:
        """Write the test plan rooted at test, without run summary or environment."""
        log.debug(
            "Writing test plan for %s (%d test case(s))",
            test.fullname,
            test.test_case_count,
        )
        self._write_document(serialize(test, True), sink)

    def write_results(self, result: ResultNode, sink: TextIO) -> None:
        """Write the results rooted at result wrapped in a test-run element."""
        log.debug(
            "Writing results for %s: %s (total=%d)",
            result.fullname,
            result.result_state.status,
            result.total_count,
        )
        root = self._test_run_element(result)
        root.append(environment_element(self.environment.snapshot()))
        root.append(serialize(result, True))
        self._write_document(root, sink)

    def write_plan_file(self, test: TestNode, path: Path) -> None:
        """Write the test plan to a UTF-8 file at path."""
        with path.open("w", encoding="utf-8") as sink:
            self.write_plan(test, sink)
        log.info("Test plan written to %s", path)

    def write_results_file(self, result: ResultNode, path: Path) -> None:
        """Write the results to a UTF-8 file at path."""
        with path.open("w", encoding="utf-8") as sink:
            self.write_results(result, sink)
        log.info("Test results written to %s", path)

    def _test_run_element(self, result: ResultNode) -> ET.Element:
        root = ET.Element("test-run")
        root.set("id", escape_invalid_characters(self.config.run_id))
        root.set("name", escape_invalid_characters(result.name))
        root.set("fullname", escape_invalid_characters(result.fullname))
        root.set("testcasecount", str(result.test.test_case_count))

        root.set("result", result.result_state.status)
        if result.result_state.label:
            root.set("label", escape_invalid_characters(result.result_state.label))

        root.set("start-time", format_time(result.start_time))
        root.set("end-time", format_time(result.end_time))
        root.set("duration", format_duration(result.duration))

        root.set("total", str(result.total_count))
        root.set("passed", str(result.pass_count))
        root.set("failed", str(result.fail_count))
        root.set("inconclusive", str(result.inconclusive_count))
        root.set("skipped", str(result.skip_count))
        root.set("asserts", str(result.assert_count))

        root.set("random-seed", str(self._random_seed()))
        return root

    def _random_seed(self) -> int:
        if self.config.random_seed is not None:
            return self.config.random_seed
        return randomizer.initial_seed()

    def _write_document(self, root: ET.Element, sink: TextIO) -> None:
        if self.config.indent:
            ET.indent(root, space=INDENT)

        sink.write(XML_DECLARATION)
        sink.write("\n")
        ET.ElementTree(root).write(sink, encoding="unicode")
        sink.write("\n")
        sink.flush()


def environment_element(snapshot: EnvironmentSnapshot) -> ET.Element:
    """Build the environment element, omitting facts that are unavailable."""
    element = ET.Element("environment")
    for attribute, fact in ENVIRONMENT_ATTRIBUTES.items():
        if (value := getattr(snapshot, fact)) is not None:
            element.set(attribute, escape_invalid_characters(value))
    return element
