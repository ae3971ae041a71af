"""Conversion of plan and result trees into NUnit3 XML elements."""

import re
import xml.etree.ElementTree as ET
from datetime import UTC, datetime

from nunit_report.models.result import ResultNode
from nunit_report.models.test import TestNode


class UnsupportedNodeError(TypeError):
    """Raised when asked to serialize something that is not a tree node."""


# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile(
    "[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def escape_invalid_characters(text: str) -> str:
    """Replace characters XML 1.0 cannot represent with a \\uXXXX escape.

    Valid surrogate pairs never reach here as Python strings hold code points.
    """
    return INVALID_XML_CHARS.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def format_duration(seconds: float) -> str:
    """Format a duration as six-decimal fixed point, independent of locale."""
    return f"{seconds:.6f}"


def format_time(value: datetime) -> str:
    """Format a timestamp in the sortable universal form, e.g. 2024-01-31 12:00:00Z.

    Naive timestamps are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.replace(tzinfo=None).isoformat(sep=" ", timespec="seconds") + "Z"


def serialize(node: TestNode | ResultNode, include_children: bool) -> ET.Element:
    """Serialize a plan or result node.

    Args:
        node: Node to serialize
        include_children: Whether to include all descendants

    Returns:
        The element for the node

    Raises:
        UnsupportedNodeError: If node is neither a TestNode nor a ResultNode

    """
    if isinstance(node, ResultNode):
        return serialize_result(node, include_children)
    if isinstance(node, TestNode):
        return serialize_test(node, include_children)
    raise UnsupportedNodeError(
        f"Cannot serialize {type(node).__name__}, expected TestNode or ResultNode"
    )


def serialize_test(test: TestNode, include_children: bool) -> ET.Element:
    """Serialize a plan node as a test-suite or test-case element."""
    element = _test_element(test)
    _add_properties(element, test)

    if include_children:
        for child in test.children:
            element.append(serialize_test(child, include_children))

    return element


def serialize_result(result: ResultNode, include_children: bool) -> ET.Element:
    """Serialize a result node, starting from the element of its test."""
    element = _test_element(result.test)

    state = result.result_state
    element.set("result", state.status)
    if state.label:
        element.set("label", escape_invalid_characters(state.label))
    if state.site != "Test":
        element.set("site", state.site)

    element.set("start-time", format_time(result.start_time))
    element.set("end-time", format_time(result.end_time))
    element.set("duration", format_duration(result.duration))

    element.set("total", str(result.total_count))
    element.set("passed", str(result.pass_count))
    element.set("failed", str(result.fail_count))
    element.set("inconclusive", str(result.inconclusive_count))
    element.set("skipped", str(result.skip_count))
    element.set("asserts", str(result.assert_count))

    _add_properties(element, result.test)

    match state.status:
        case "Failed":
            _add_failure(element, result)
        case "Skipped" | "Inconclusive" if result.message:
            reason = ET.SubElement(element, "reason")
            message = ET.SubElement(reason, "message")
            message.text = escape_invalid_characters(result.message)

    if result.output:
        output = ET.SubElement(element, "output")
        output.text = escape_invalid_characters(result.output)

    if include_children:
        for child in result.children:
            element.append(serialize_result(child, include_children))

    return element


def _test_element(test: TestNode) -> ET.Element:
    if test.is_suite:
        element = ET.Element("test-suite")
        element.set("type", escape_invalid_characters(test.type))
        element.set("id", escape_invalid_characters(test.id))
        element.set("name", escape_invalid_characters(test.name))
        element.set("fullname", escape_invalid_characters(test.fullname))
        if test.classname is not None:
            element.set("classname", escape_invalid_characters(test.classname))
        element.set("runstate", test.run_state)
        element.set("testcasecount", str(test.test_case_count))
        return element

    element = ET.Element("test-case")
    element.set("id", escape_invalid_characters(test.id))
    element.set("name", escape_invalid_characters(test.name))
    element.set("fullname", escape_invalid_characters(test.fullname))
    if test.methodname is not None:
        element.set("methodname", escape_invalid_characters(test.methodname))
    if test.classname is not None:
        element.set("classname", escape_invalid_characters(test.classname))
    element.set("runstate", test.run_state)
    if test.seed is not None:
        element.set("seed", str(test.seed))
    return element


def _add_properties(element: ET.Element, test: TestNode) -> None:
    if not test.properties:
        return

    properties = ET.SubElement(element, "properties")
    for name, values in test.properties.items():
        for value in values:
            ET.SubElement(
                properties,
                "property",
                name=escape_invalid_characters(name),
                value=escape_invalid_characters(value),
            )


def _add_failure(element: ET.Element, result: ResultNode) -> None:
    failure = ET.SubElement(element, "failure")
    if result.message:
        message = ET.SubElement(failure, "message")
        message.text = escape_invalid_characters(result.message)
    if result.stack_trace:
        stack_trace = ET.SubElement(failure, "stack-trace")
        stack_trace.text = escape_invalid_characters(result.stack_trace)
