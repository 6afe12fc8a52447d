"""Tests for worker registration, matching and assignment."""

import pytest

from change_flow.core.exceptions import AlreadyBusy, InvalidSkillSet, NotFoundError
from change_flow.domain import Skill
from change_flow.services import WorkerRegistry


F, B, D = Skill.FRONT_END, Skill.BACK_END, Skill.DB


@pytest.fixture
def registry():
    return WorkerRegistry()


def test_add_worker_assigns_sequential_ids(registry):
    assert registry.add_worker("Al", [F]) == 1
    assert registry.add_worker("Bob", [B, D]) == 2
    assert len(registry) == 2
    assert registry.get(2).skills == [B, D]


def test_duplicate_skills_are_collapsed(registry):
    worker_id = registry.add_worker("Al", [F, F, B, F])
    assert registry.get(worker_id).skills == [F, B]


def test_empty_skill_set_is_rejected_without_creating_worker(registry):
    with pytest.raises(InvalidSkillSet):
        registry.add_worker("Nobody", [])

    assert len(registry) == 0
    assert registry.add_worker("Al", [F]) == 1


def test_find_available_prefers_registration_order(registry):
    first = registry.add_worker("Al", [F])
    second = registry.add_worker("Alice", [F])

    assert registry.find_available(F) == first
    registry.assign(first, job_id=10, task=F)
    assert registry.find_available(F) == second
    registry.assign(second, job_id=11, task=F)
    assert registry.find_available(F) is None


def test_find_available_requires_skill(registry):
    registry.add_worker("Bob", [B])
    assert registry.find_available(F) is None


def test_assign_and_release(registry):
    worker_id = registry.add_worker("Al", [F])

    registry.assign(worker_id, job_id=3, task=F)
    worker = registry.get(worker_id)
    assert worker.busy
    assert worker.current_task == F
    assert worker.current_job_id == 3

    registry.record_progress(worker_id)
    assert worker.progress == 1

    registry.release(worker_id)
    assert not worker.busy
    assert worker.current_task is None
    assert worker.current_job_id is None
    assert worker.progress == 0


def test_assign_busy_worker_raises(registry):
    worker_id = registry.add_worker("Al", [F])
    registry.assign(worker_id, job_id=1, task=F)

    with pytest.raises(AlreadyBusy) as exc_info:
        registry.assign(worker_id, job_id=2, task=F)

    assert exc_info.value.worker_id == worker_id
    assert exc_info.value.job_id == 1
    assert registry.get(worker_id).current_job_id == 1


def test_unknown_worker(registry):
    with pytest.raises(NotFoundError):
        registry.get(42)


def test_skills_in_use_and_clear(registry):
    registry.add_worker("Bob", [B])
    registry.add_worker("Al", [F, B])
    assert registry.skills_in_use() == [B, F]

    registry.clear()
    assert len(registry) == 0
    assert registry.add_worker("Al", [F]) == 1
