"""Tests for ReportConfig."""

import pytest
from pydantic import ValidationError

from nunit_report.config import ReportConfig


def test_defaults() -> None:
    """Indents and uses the process seed by default."""
    config = ReportConfig(run_id="2")

    assert config.indent is True
    assert config.random_seed is None


def test_run_id_required() -> None:
    """Raises ValidationError without a run id."""
    with pytest.raises(ValidationError):
        ReportConfig()  # type: ignore[call-arg]
