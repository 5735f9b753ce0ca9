"""Label API routes."""

from fastapi import APIRouter, Depends, status

from api.v1.dependencies import get_label_repository
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.label import (
    LabelCreate,
    LabelDetailResponse,
    LabelListResponse,
    LabelResponse,
)
from domain.repositories.label_repository import ILabelRepository

router = APIRouter(prefix="/labels", tags=["labels"])


@router.get(
    "",
    response_model=LabelListResponse,
    summary="List all labels",
)
async def all_label(
    repository: ILabelRepository = Depends(get_label_repository),
) -> LabelListResponse:
    """Get all labels ordered by ID."""
    labels = await repository.all()
    return LabelListResponse(data=[LabelResponse.model_validate(label) for label in labels])


@router.post(
    "",
    response_model=LabelDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a label",
    responses={
        201: {"description": "Label created successfully"},
        409: {"model": ErrorResponse, "description": "Label with this name already exists"},
    },
)
async def create_label(
    body: LabelCreate,
    repository: ILabelRepository = Depends(get_label_repository),
) -> LabelDetailResponse:
    """Create a new label. Label names must be unique."""
    label = await repository.create(body.name)
    return LabelDetailResponse(data=LabelResponse.model_validate(label))


@router.delete(
    "/{label_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a label",
    responses={404: {"model": ErrorResponse, "description": "Label not found"}},
)
async def delete_label(
    label_id: int,
    repository: ILabelRepository = Depends(get_label_repository),
) -> None:
    """Delete a label. Todos that reference it are not updated."""
    await repository.delete(label_id)
