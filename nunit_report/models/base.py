"""Base model configuration for plan and result trees."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model for plan and result nodes.

    Nodes are frozen; the serializer and writer only read them.
    """

    model_config = ConfigDict(frozen=True)
