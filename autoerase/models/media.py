"""Pydantic models for media endpoint responses."""

from pydantic import BaseModel, ConfigDict


class MediaCount(BaseModel):
    """Response of the per-user media listing, used only for its total."""

    model_config = ConfigDict(extra="ignore")

    total: int = 0


class DeletedMedia(BaseModel):
    """Response of the per-user media deletion."""

    model_config = ConfigDict(extra="ignore")

    total: int = 0
