"""Outcome classification of a test result."""

from typing import Literal

from pydantic import Field

from nunit_report.models.base import Model

TestStatus = Literal["Passed", "Failed", "Skipped", "Inconclusive"]
FailureSite = Literal["Test", "SetUp", "TearDown", "Parent", "Child"]


class ResultState(Model):
    """Status of a result plus an optional descriptive label.

    The label refines the status, e.g. a Skipped result labelled "Ignored"
    or a Failed result labelled "Error".
    """

    status: TestStatus = Field(..., description="Basic outcome of the test")
    label: str = Field(default="", description="Refinement of the status")
    site: FailureSite = Field(default="Test", description="Where a failure occurred")


INCONCLUSIVE = ResultState(status="Inconclusive")
SKIPPED = ResultState(status="Skipped")
IGNORED = ResultState(status="Skipped", label="Ignored")
EXPLICIT = ResultState(status="Skipped", label="Explicit")
SUCCESS = ResultState(status="Passed")
FAILURE = ResultState(status="Failed")
ERROR = ResultState(status="Failed", label="Error")
CANCELLED = ResultState(status="Failed", label="Cancelled")
NOT_RUNNABLE = ResultState(status="Failed", label="Invalid")
SETUP_FAILURE = ResultState(status="Failed", site="SetUp")
CHILD_FAILURE = ResultState(status="Failed", site="Child")
