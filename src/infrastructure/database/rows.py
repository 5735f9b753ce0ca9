"""Joined-row read model and its aggregation into Todo entities."""

from collections.abc import Iterable
from dataclasses import dataclass

from domain.entities.label import Label
from domain.entities.todo import Todo


@dataclass(frozen=True, slots=True)
class TodoWithLabelFromRow:
    """One row of ``todos LEFT OUTER JOIN todo_labels LEFT OUTER JOIN labels``.

    The label columns are ``None`` when the todo has no (resolvable) label.
    """

    id: int
    text: str
    completed: bool
    label_id: int | None = None
    label_name: str | None = None


def fold_entities(rows: Iterable[TodoWithLabelFromRow]) -> list[Todo]:
    """Group joined rows into todos, one per distinct todo id.

    Todos come out in the order their first row appeared. Each todo's labels
    keep first-seen order and contain every label id at most once.
    """
    todos: dict[int, Todo] = {}
    seen_labels: dict[int, set[int]] = {}

    for row in rows:
        todo = todos.get(row.id)
        if todo is None:
            todo = Todo(id=row.id, text=row.text, completed=row.completed)
            todos[row.id] = todo
            seen_labels[row.id] = set()

        if row.label_id is None or row.label_name is None:
            continue
        if row.label_id in seen_labels[row.id]:
            continue
        seen_labels[row.id].add(row.label_id)
        todo.labels.append(Label(id=row.label_id, name=row.label_name))

    return list(todos.values())


def fold_entity(rows: Iterable[TodoWithLabelFromRow]) -> Todo | None:
    """Aggregate the rows of a single todo, or ``None`` when there are none."""
    todos = fold_entities(rows)
    return todos[0] if todos else None
