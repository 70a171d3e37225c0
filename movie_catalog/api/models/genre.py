"""
Pydantic schemas for Genre API.
"""

from pydantic import BaseModel, Field


class GenreCreate(BaseModel):
    """Request body for creating or renaming a genre."""

    name: str = Field(..., min_length=1, max_length=100)


class GenreResponse(BaseModel):
    """Response model for genre."""

    id: int
    name: str

    class Config:
        from_attributes = True
