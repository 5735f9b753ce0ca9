"""Pydantic schemas for Label API."""

from pydantic import BaseModel, ConfigDict, Field


class LabelCreate(BaseModel):
    """Schema for creating a Label."""

    name: str = Field(..., min_length=1, max_length=100)


class LabelResponse(BaseModel):
    """Schema for Label response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": {"id": 1, "name": "shopping"}},
    )

    id: int
    name: str


class LabelListResponse(BaseModel):
    """Schema for list of Labels."""

    data: list[LabelResponse]


class LabelDetailResponse(BaseModel):
    """Schema for single Label."""

    data: LabelResponse
