"""Pydantic schemas for Todo API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.v1.schemas.label import LabelResponse

TEXT_MIN_LENGTH = 1
TEXT_MAX_LENGTH = 100


def check_text(v: str) -> str:
    if len(v) < TEXT_MIN_LENGTH:
        raise ValueError("Can not be Empty")
    if len(v) > TEXT_MAX_LENGTH:
        raise ValueError("Over text length")
    return v


class TodoCreate(BaseModel):
    """Schema for creating a Todo."""

    text: str
    labels: list[int] = Field(default_factory=list)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return check_text(v)


class TodoUpdate(BaseModel):
    """Schema for updating a Todo (all fields optional)."""

    text: str | None = None
    completed: bool | None = None
    labels: list[int] | None = None

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str | None) -> str | None:
        return v if v is None else check_text(v)


class TodoResponse(BaseModel):
    """Schema for Todo response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "text": "buy milk",
                "completed": False,
                "labels": [{"id": 1, "name": "shopping"}],
            }
        },
    )

    id: int
    text: str
    completed: bool
    labels: list[LabelResponse] = []


class TodoListResponse(BaseModel):
    """Schema for list of Todos response."""

    data: list[TodoResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class TodoDetailResponse(BaseModel):
    """Schema for single Todo response."""

    data: TodoResponse
