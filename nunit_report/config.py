"""Configuration for the report writer."""

from pydantic import BaseModel, Field


class ReportConfig(BaseModel):
    """Configuration for ReportWriter."""

    run_id: str = Field(..., description="Identifier written as the test-run id")
    # None means the process-wide initial seed
    random_seed: int | None = None
    indent: bool = True
