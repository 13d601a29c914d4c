"""Configuration for Step 03: Frame index planning."""

from pydantic import BaseModel


class IndexPlanConfig(BaseModel):
    """The distribution formula is fixed; nothing to tune."""
