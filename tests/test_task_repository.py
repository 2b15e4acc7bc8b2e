import pytest

from task_tracker.core.errors import StoreError
from task_tracker.domain.entities import MutationOutcome
from task_tracker.ports.repository import TaskRepositoryPort
from task_tracker.repositories import SQLiteTaskRepository

REPO_MODULE = "task_tracker.repositories.task_repository"


def test_sqlite_repository_implements_port():
    assert issubclass(SQLiteTaskRepository, TaskRepositoryPort)


def test_create_then_get_returns_pending_task(repository):
    task_id = repository.create_task("Deploy v2")

    task = repository.get_task(task_id)

    assert task.id == task_id
    assert task.title == "Deploy v2"
    assert task.description is None
    assert task.status == "pending"
    assert task.created_at == task.updated_at


def test_create_assigns_unique_ids(repository):
    ids = [repository.create_task(f"task {n}") for n in range(5)]

    assert len(set(ids)) == 5


def test_get_missing_task_returns_none(repository):
    assert repository.get_task(999) is None


def test_list_empty_store(repository):
    assert repository.list_tasks() == []


def test_list_is_newest_first(repository):
    a = repository.create_task("A")
    b = repository.create_task("B")
    c = repository.create_task("C")

    assert [t.id for t in repository.list_tasks()] == [c, b, a]


def test_update_status_only_keeps_other_fields(repository, monkeypatch):
    task_id = repository.create_task("Write docs", "Cover the API")
    before = repository.get_task(task_id)
    monkeypatch.setattr(f"{REPO_MODULE}.utc_now_iso", lambda: "2999-01-01T00:00:00.000000+00:00")

    outcome = repository.update_task(task_id, status="done")

    after = repository.get_task(task_id)
    assert outcome is MutationOutcome.UPDATED
    assert after.status == "done"
    assert after.title == "Write docs"
    assert after.description == "Cover the API"
    assert after.created_at == before.created_at
    assert after.updated_at == "2999-01-01T00:00:00.000000+00:00"


def test_update_accepts_arbitrary_status_text(repository):
    task_id = repository.create_task("Anything goes")

    repository.update_task(task_id, status="blocked-on-review")

    assert repository.get_task(task_id).status == "blocked-on-review"


def test_update_with_no_fields_still_succeeds(repository):
    task_id = repository.create_task("No-op")

    assert repository.update_task(task_id) is MutationOutcome.UPDATED
    assert repository.get_task(task_id).title == "No-op"


def test_update_never_moves_updated_at_before_created_at(repository, monkeypatch):
    task_id = repository.create_task("Clock skew")
    created_at = repository.get_task(task_id).created_at
    monkeypatch.setattr(f"{REPO_MODULE}.utc_now_iso", lambda: "2000-01-01T00:00:00.000000+00:00")

    repository.update_task(task_id, title="Still here")

    assert repository.get_task(task_id).updated_at == created_at


def test_update_missing_task_reports_not_found(repository):
    assert repository.update_task(42, title="ghost") is MutationOutcome.NOT_FOUND


def test_delete_then_get_is_absent(repository):
    task_id = repository.create_task("Temporary")

    assert repository.delete_task(task_id) is MutationOutcome.DELETED
    assert repository.get_task(task_id) is None
    assert repository.delete_task(task_id) is MutationOutcome.NOT_FOUND


def test_count_tasks(repository):
    repository.create_task("one")
    repository.create_task("two")

    assert repository.count_tasks() == 2


def test_operations_after_disconnect_raise_store_error(repository, database):
    database.disconnect()

    with pytest.raises(StoreError):
        repository.list_tasks()
    with pytest.raises(StoreError):
        repository.create_task("too late")


@pytest.mark.parametrize("task_id", [2**63, -(2**63) - 1, 10**30])
def test_ids_beyond_sqlite_integer_range_are_absent(repository, task_id):
    repository.create_task("in range")

    assert repository.get_task(task_id) is None
    assert repository.update_task(task_id, status="done") is MutationOutcome.NOT_FOUND
    assert repository.delete_task(task_id) is MutationOutcome.NOT_FOUND
    assert repository.count_tasks() == 1
