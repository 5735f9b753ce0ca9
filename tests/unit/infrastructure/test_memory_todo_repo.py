"""Unit tests for InMemoryTodoRepository."""

import asyncio
import threading

import pytest

from core.exceptions import NotFoundError
from domain.entities.label import Label
from domain.entities.todo import CreateTodo, Todo, UpdateTodo
from infrastructure.memory.label_repo import InMemoryLabelRepository
from infrastructure.memory.todo_repo import InMemoryTodoRepository


class TestCrudScenario:
    @pytest.mark.asyncio
    async def test_todo_crud_scenario(self, memory_todo_repo: InMemoryTodoRepository):
        created = await memory_todo_repo.create(CreateTodo(text="test1"))
        assert created == Todo(id=1, text="test1", completed=False, labels=[])

        assert await memory_todo_repo.find(1) == created

        updated = await memory_todo_repo.update(1, UpdateTodo(text="test2", completed=True))
        assert updated == Todo(id=1, text="test2", completed=True, labels=[])

        assert await memory_todo_repo.all() == [updated]

        await memory_todo_repo.delete(1)
        with pytest.raises(NotFoundError):
            await memory_todo_repo.find(1)


class TestCreate:
    @pytest.mark.asyncio
    async def test_resolves_labels(
        self,
        memory_todo_repo: InMemoryTodoRepository,
        memory_label_repo: InMemoryLabelRepository,
    ):
        work = await memory_label_repo.create("work")
        home = await memory_label_repo.create("home")

        todo = await memory_todo_repo.create(CreateTodo(text="t", labels=[home.id, work.id]))

        assert todo.labels == [work, home]

    @pytest.mark.asyncio
    async def test_repeated_and_unknown_label_ids_are_dropped(
        self,
        memory_todo_repo: InMemoryTodoRepository,
        memory_label_repo: InMemoryLabelRepository,
    ):
        work = await memory_label_repo.create("work")

        todo = await memory_todo_repo.create(
            CreateTodo(text="t", labels=[work.id, 99, work.id])
        )

        assert todo.labels == [work]

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, memory_todo_repo: InMemoryTodoRepository):
        await memory_todo_repo.create(CreateTodo(text="a"))
        await memory_todo_repo.create(CreateTodo(text="b"))
        await memory_todo_repo.delete(1)

        third = await memory_todo_repo.create(CreateTodo(text="c"))

        assert third.id == 3
        assert [t.id for t in await memory_todo_repo.all()] == [2, 3]

    @pytest.mark.asyncio
    async def test_owns_its_label_store_by_default(self):
        repo = InMemoryTodoRepository()

        todo = await repo.create(CreateTodo(text="t", labels=[1]))

        assert todo.labels == []

    def test_concurrent_creates_get_distinct_ids(self, memory_todo_repo: InMemoryTodoRepository):
        ids: list[int] = []
        ids_lock = threading.Lock()

        def worker(n: int) -> None:
            todo = asyncio.run(memory_todo_repo.create(CreateTodo(text=f"todo {n}")))
            with ids_lock:
                ids.append(todo.id)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(50)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert sorted(ids) == list(range(1, 51))


class TestRead:
    @pytest.mark.asyncio
    async def test_find_missing_raises_not_found(self, memory_todo_repo: InMemoryTodoRepository):
        with pytest.raises(NotFoundError) as exc_info:
            await memory_todo_repo.find(42)

        assert exc_info.value.id == 42

    @pytest.mark.asyncio
    async def test_all_keeps_insertion_order(self, memory_todo_repo: InMemoryTodoRepository):
        for text in ("first", "second", "third"):
            await memory_todo_repo.create(CreateTodo(text=text))

        assert [t.text for t in await memory_todo_repo.all()] == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_returned_entities_are_copies(self, memory_todo_repo: InMemoryTodoRepository):
        created = await memory_todo_repo.create(CreateTodo(text="original"))

        created.text = "mutated"
        created.labels.append(Label(id=1, name="sneaky"))
        found = await memory_todo_repo.find(created.id)

        assert found.text == "original"
        assert found.labels == []


class TestUpdate:
    @pytest.mark.asyncio
    async def test_completed_only_keeps_text_and_labels(
        self,
        memory_todo_repo: InMemoryTodoRepository,
        memory_label_repo: InMemoryLabelRepository,
    ):
        label = await memory_label_repo.create("l")
        todo = await memory_todo_repo.create(CreateTodo(text="keep me", labels=[label.id]))

        updated = await memory_todo_repo.update(todo.id, UpdateTodo(completed=True))

        assert updated.text == "keep me"
        assert updated.labels == [label]
        assert updated.completed is True

    @pytest.mark.asyncio
    async def test_labels_are_replaced_not_merged(
        self,
        memory_todo_repo: InMemoryTodoRepository,
        memory_label_repo: InMemoryLabelRepository,
    ):
        a = await memory_label_repo.create("a")
        b = await memory_label_repo.create("b")
        todo = await memory_todo_repo.create(CreateTodo(text="t", labels=[a.id]))

        updated = await memory_todo_repo.update(todo.id, UpdateTodo(labels=[b.id]))

        assert updated.labels == [b]

    @pytest.mark.asyncio
    async def test_empty_label_list_clears_labels(
        self,
        memory_todo_repo: InMemoryTodoRepository,
        memory_label_repo: InMemoryLabelRepository,
    ):
        a = await memory_label_repo.create("a")
        todo = await memory_todo_repo.create(CreateTodo(text="t", labels=[a.id]))

        updated = await memory_todo_repo.update(todo.id, UpdateTodo(labels=[]))

        assert updated.labels == []

    @pytest.mark.asyncio
    async def test_missing_raises_not_found(self, memory_todo_repo: InMemoryTodoRepository):
        with pytest.raises(NotFoundError):
            await memory_todo_repo.update(3, UpdateTodo(text="x"))

    @pytest.mark.asyncio
    async def test_keeps_position_in_all(self, memory_todo_repo: InMemoryTodoRepository):
        await memory_todo_repo.create(CreateTodo(text="a"))
        await memory_todo_repo.create(CreateTodo(text="b"))

        await memory_todo_repo.update(1, UpdateTodo(text="a2"))

        assert [t.text for t in await memory_todo_repo.all()] == ["a2", "b"]


class TestDelete:
    @pytest.mark.asyncio
    async def test_missing_raises_not_found(self, memory_todo_repo: InMemoryTodoRepository):
        with pytest.raises(NotFoundError):
            await memory_todo_repo.delete(1)

    @pytest.mark.asyncio
    async def test_label_delete_does_not_touch_existing_todos(
        self,
        memory_todo_repo: InMemoryTodoRepository,
        memory_label_repo: InMemoryLabelRepository,
    ):
        label = await memory_label_repo.create("gone")
        todo = await memory_todo_repo.create(CreateTodo(text="t", labels=[label.id]))

        await memory_label_repo.delete(label.id)

        assert (await memory_todo_repo.find(todo.id)).labels == [label]
