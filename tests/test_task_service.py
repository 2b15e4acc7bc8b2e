from unittest.mock import MagicMock

import pytest

from task_tracker.core.errors import StoreError, TaskNotFoundError, TaskValidationError
from task_tracker.core.metrics import ServiceMetrics
from task_tracker.domain.entities import MutationOutcome, Task
from task_tracker.ports.repository import TaskRepositoryPort
from task_tracker.services import TaskService


@pytest.fixture
def repo():
    return MagicMock(spec=TaskRepositoryPort)


@pytest.fixture
def metrics():
    return ServiceMetrics()


@pytest.fixture
def service(repo, metrics):
    return TaskService(repo, metrics=metrics)


def _created(metrics):
    return metrics.registry.get_sample_value("tasks_total")


@pytest.mark.parametrize("title", [None, "", "   "])
def test_create_without_title_skips_store_and_counter(service, repo, metrics, title):
    with pytest.raises(TaskValidationError, match="Title is required"):
        service.create_task(title, "desc")

    repo.create_task.assert_not_called()
    assert _created(metrics) == 0


def test_create_counts_once_on_success(service, repo, metrics):
    repo.create_task.return_value = 7

    assert service.create_task("Deploy v2") == 7

    repo.create_task.assert_called_once_with("Deploy v2", None)
    assert _created(metrics) == 1


def test_create_store_failure_does_not_count(service, repo, metrics):
    repo.create_task.side_effect = StoreError("disk I/O error")

    with pytest.raises(StoreError, match="disk I/O error"):
        service.create_task("Deploy v2")

    assert _created(metrics) == 0


def test_create_without_metrics(repo):
    repo.create_task.return_value = 1

    assert TaskService(repo).create_task("No metrics wired") == 1


def test_get_missing_raises_not_found(service, repo):
    repo.get_task.return_value = None

    with pytest.raises(TaskNotFoundError) as exc_info:
        service.get_task(3)
    assert exc_info.value.task_id == 3


def test_get_returns_task(service, repo):
    task = Task(id=1, title="t", created_at="x", updated_at="x")
    repo.get_task.return_value = task

    assert service.get_task(1) is task


def test_update_not_found(service, repo):
    repo.update_task.return_value = MutationOutcome.NOT_FOUND

    with pytest.raises(TaskNotFoundError):
        service.update_task(5, status="done")


def test_update_passes_only_given_fields(service, repo):
    repo.update_task.return_value = MutationOutcome.UPDATED

    service.update_task(5, status="done")

    repo.update_task.assert_called_once_with(5, title=None, description=None, status="done")


def test_update_rejects_empty_title(service, repo):
    with pytest.raises(TaskValidationError):
        service.update_task(5, title="")

    repo.update_task.assert_not_called()


def test_delete_not_found(service, repo):
    repo.delete_task.return_value = MutationOutcome.NOT_FOUND

    with pytest.raises(TaskNotFoundError):
        service.delete_task(9)


def test_list_propagates_store_error(service, repo):
    repo.list_tasks.side_effect = StoreError("database is locked")

    with pytest.raises(StoreError, match="database is locked"):
        service.list_tasks()
