"""Todo domain entity and commands."""

from dataclasses import dataclass, field

from domain.entities.label import Label


@dataclass
class Todo:
    """Domain entity for a Todo with its attached labels."""

    id: int
    text: str
    completed: bool = False
    labels: list[Label] = field(default_factory=list)


@dataclass
class CreateTodo:
    """Command for creating a Todo.

    ``labels`` holds the ids of the labels to attach.
    """

    text: str
    labels: list[int] = field(default_factory=list)


@dataclass
class UpdateTodo:
    """Command for updating a Todo. ``None`` leaves a field unchanged.

    A non-``None`` ``labels`` replaces the whole association set.
    """

    text: str | None = None
    completed: bool | None = None
    labels: list[int] | None = None


def unique_label_ids(label_ids: list[int]) -> list[int]:
    """Drop repeated label ids, keeping first-seen order."""
    return list(dict.fromkeys(label_ids))
