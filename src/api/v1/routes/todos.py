"""Todo API routes."""

from fastapi import APIRouter, Depends, status

from api.v1.dependencies import get_todo_repository
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.todo import (
    TodoCreate,
    TodoDetailResponse,
    TodoListResponse,
    TodoResponse,
    TodoUpdate,
)
from domain.entities.todo import CreateTodo, UpdateTodo
from domain.repositories.todo_repository import ITodoRepository

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get(
    "",
    response_model=TodoListResponse,
    summary="List all todos",
)
async def all_todo(
    repository: ITodoRepository = Depends(get_todo_repository),
) -> TodoListResponse:
    """Get every todo with its labels."""
    todos = await repository.all()
    return TodoListResponse(
        data=[TodoResponse.model_validate(todo) for todo in todos],
        meta={"total": len(todos)},
    )


@router.get(
    "/{todo_id}",
    response_model=TodoDetailResponse,
    summary="Get a todo",
    responses={404: {"model": ErrorResponse, "description": "Todo not found"}},
)
async def find_todo(
    todo_id: int,
    repository: ITodoRepository = Depends(get_todo_repository),
) -> TodoDetailResponse:
    """Get a specific todo by ID."""
    todo = await repository.find(todo_id)
    return TodoDetailResponse(data=TodoResponse.model_validate(todo))


@router.post(
    "",
    response_model=TodoDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a todo",
    responses={
        201: {"description": "Todo created successfully"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
async def create_todo(
    body: TodoCreate,
    repository: ITodoRepository = Depends(get_todo_repository),
) -> TodoDetailResponse:
    """Create a new todo, attaching the labels whose ids are given."""
    todo = await repository.create(CreateTodo(text=body.text, labels=body.labels))
    return TodoDetailResponse(data=TodoResponse.model_validate(todo))


@router.patch(
    "/{todo_id}",
    response_model=TodoDetailResponse,
    summary="Update a todo",
    responses={
        404: {"model": ErrorResponse, "description": "Todo not found"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
async def update_todo(
    todo_id: int,
    body: TodoUpdate,
    repository: ITodoRepository = Depends(get_todo_repository),
) -> TodoDetailResponse:
    """
    Update an existing todo. All fields are optional (partial update).

    Passing `labels` replaces the whole label set of the todo.
    """
    todo = await repository.update(
        todo_id,
        UpdateTodo(text=body.text, completed=body.completed, labels=body.labels),
    )
    return TodoDetailResponse(data=TodoResponse.model_validate(todo))


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a todo",
    responses={404: {"model": ErrorResponse, "description": "Todo not found"}},
)
async def delete_todo(
    todo_id: int,
    repository: ITodoRepository = Depends(get_todo_repository),
) -> None:
    """Delete a todo and its label associations."""
    await repository.delete(todo_id)
