"""Pydantic models for bulk data datasets."""

from pydantic import BaseModel


class Dataset(BaseModel):
    """A dataset available for download."""

    name: str
    scope: str | None = None
    description: str | None = None


class DatasetFile(BaseModel):
    """A downloadable file of a dataset."""

    name: str
    size: int | None = None
    timestamp: int | None = None
    url: str | None = None

    model_config = {"extra": "allow"}
