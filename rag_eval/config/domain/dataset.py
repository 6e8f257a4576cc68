"""Dataset configuration model."""

from pydantic import BaseModel, Field


class DatasetConfig(BaseModel, frozen=True):
    path: str = Field(min_length=1)
