"""In-memory store: identity assignment, visibility rules, transactions."""

import pytest

from officeops.domain.exceptions import PersistenceError
from officeops.domain.value_objects import TodoId, UserId
from officeops.infrastructure.persistence import InMemoryTransaction


async def test_first_save_assigns_sequential_ids(repository, make_todo):
    first, second = make_todo("a"), make_todo("b")

    await repository.save(first)
    await repository.save(second)
    await repository.save(first)

    assert (first.id, second.id) == (TodoId(1), TodoId(2))


async def test_loaded_todo_has_no_pending_events(repository, make_todo, user_id):
    todo = make_todo()
    await repository.save(todo)

    loaded = await repository.get_by_id_for_user(todo.id, user_id)

    assert loaded == todo
    assert loaded.domain_events == ()


async def test_soft_deleted_todos_are_invisible(repository, make_todo, user_id):
    todo = make_todo()
    await repository.save(todo)
    todo.delete(user_id)
    await repository.save(todo)

    assert await repository.get_by_id(todo.id) is None
    assert not await repository.exists(todo.id)
    assert await repository.get_all_for_user(user_id) == []
    assert await repository.count_for_user(user_id) == 0


async def test_other_users_todos_are_invisible(repository, make_todo):
    todo = make_todo()
    await repository.save(todo)

    assert await repository.exists(todo.id)
    assert await repository.get_by_id_for_user(todo.id, UserId("intruder")) is None


async def test_paging_reports_total(repository, make_todo, user_id):
    for i in range(3):
        await repository.save(make_todo(f"todo {i}"))

    items, total = await repository.get_paged_for_user(user_id, page=2, page_size=2)

    assert total == 3
    assert len(items) == 1


async def test_counts(repository, make_todo, user_id):
    done, pending = make_todo("done"), make_todo("open")
    done.complete(user_id)
    await repository.save(done)
    await repository.save(pending)

    assert await repository.count_completed_for_user(user_id) == 1
    assert await repository.count_pending_for_user(user_id) == 1


class TestInMemoryTransaction:
    async def test_rollback_restores_snapshot(self, database, repository, make_todo):
        transaction = InMemoryTransaction(database)
        await transaction.begin()
        await repository.save(make_todo())

        await transaction.rollback()

        assert database.todos == {}
        assert not transaction.is_active

    async def test_ids_are_not_reused_after_rollback(self, database, repository, make_todo):
        transaction = InMemoryTransaction(database)
        await transaction.begin()
        await repository.save(make_todo())
        await transaction.rollback()

        todo = make_todo()
        await repository.save(todo)

        assert todo.id == TodoId(2)

    async def test_double_begin_is_rejected(self, database):
        transaction = InMemoryTransaction(database)
        await transaction.begin()

        with pytest.raises(PersistenceError):
            await transaction.begin()
        await transaction.commit()

    async def test_commit_without_begin_is_rejected(self, database):
        with pytest.raises(PersistenceError):
            await InMemoryTransaction(database).commit()


async def test_description_round_trips_unchanged(repository, make_todo):
    described, bare = make_todo("a", "Body"), make_todo("b")
    await repository.save(described)
    await repository.save(bare)

    loaded_described = await repository.get_by_id(described.id)
    loaded_bare = await repository.get_by_id(bare.id)

    assert loaded_described.description == described.description
    assert loaded_bare.description is None
