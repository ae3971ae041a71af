"""Models for the static test plan."""

from collections.abc import Mapping, Sequence
from typing import Literal

from pydantic import Field, NonNegativeInt

from nunit_report.models.base import Model

TEST_CASE_TYPE = "TestMethod"


class TestNode(Model):
    """A node of the test plan produced by test discovery."""

    __test__ = False

    id: str = Field(..., description="Unique id of the test within the run")
    name: str = Field(..., description="Short test name")
    fullname: str = Field(..., description="Fully qualified hierarchical name")
    type: str = Field(default="TestSuite", description="NUnit test type")
    run_state: Literal["NotRunnable", "Runnable", "Explicit", "Skipped", "Ignored"] = (
        "Runnable"
    )
    test_case_count: NonNegativeInt = Field(
        ..., description="Number of leaf test cases this node represents"
    )
    classname: str | None = None
    methodname: str | None = None
    seed: int | None = None
    properties: Mapping[str, Sequence[str]] = Field(default_factory=dict)
    children: Sequence["TestNode"] = Field(default_factory=list)

    @property
    def is_suite(self) -> bool:
        """Whether this node is serialized as a test-suite."""
        return self.type != TEST_CASE_TYPE
