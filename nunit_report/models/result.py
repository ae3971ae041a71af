"""Models for test execution results."""

from collections.abc import Sequence
from datetime import datetime

from pydantic import Field, NonNegativeInt

from nunit_report.models.base import Model
from nunit_report.models.state import ResultState
from nunit_report.models.test import TestNode


class ResultNode(Model):
    """Result of running a TestNode, with counters aggregated from children.

    Counters are trusted as supplied; they are never recomputed here.
    """

    test: TestNode = Field(..., description="Plan node this result belongs to")
    result_state: ResultState
    start_time: datetime
    end_time: datetime
    duration: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Elapsed time in seconds"
    )
    pass_count: NonNegativeInt = 0
    fail_count: NonNegativeInt = 0
    skip_count: NonNegativeInt = 0
    inconclusive_count: NonNegativeInt = 0
    assert_count: NonNegativeInt = 0
    message: str = ""
    stack_trace: str | None = None
    output: str = ""
    children: Sequence["ResultNode"] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return self.test.name

    @property
    def fullname(self) -> str:
        return self.test.fullname

    @property
    def total_count(self) -> int:
        """Number of test cases counted in this result."""
        return (
            self.pass_count
            + self.fail_count
            + self.skip_count
            + self.inconclusive_count
        )
