"""Tests for state duration metrics and their text exports."""

from change_flow.domain import Job, JobStatus, Skill
from change_flow.services import MetricsAggregator


def make_job(job_id, name, status):
    return Job(id=job_id, name=name, task_sequence=[Skill.DB], status=status)


def test_record_tick_counts_current_status_and_skips_done():
    metrics = MetricsAggregator()
    waiting = make_job(1, "A", JobStatus.WAITING)
    done = make_job(2, "B", JobStatus.DONE)

    metrics.record_tick([waiting, done])
    metrics.record_tick([waiting, done])

    assert metrics.get(1).counts[JobStatus.WAITING] == 2
    assert metrics.get(2) is None


def test_finalize_adds_one_completed_tick_once():
    metrics = MetricsAggregator()
    job = make_job(1, "A", JobStatus.COMPLETED)
    metrics.register(job)
    metrics.record_tick([job])

    metrics.finalize(1)
    metrics.finalize(1)

    record = metrics.get(1)
    assert record.final_status == JobStatus.DONE
    assert record.counts[JobStatus.COMPLETED] == 2
    assert record.total == 2


def test_summary_folds_unslotted_completion_into_completed():
    metrics = MetricsAggregator()
    job = make_job(1, "A", JobStatus.IN_PROGRESS)
    metrics.record_tick([job])
    job.status = JobStatus.COMPLETED_NO_SLOT
    metrics.record_tick([job])
    other = make_job(2, "B", JobStatus.WAITING)
    metrics.record_tick([other])

    summary = metrics.summary()

    first, second = summary.rows
    assert (first.in_progress, first.completed, first.total) == (1, 1, 2)
    assert first.status == "completedNoSlot"
    assert (second.waiting, second.total) == (1, 1)
    assert summary.overall_total == 3


def test_table_and_tsv_exports():
    metrics = MetricsAggregator()
    job = make_job(1, "DB-only 1", JobStatus.WAITING)
    for _ in range(3):
        metrics.record_tick([job])

    table = metrics.to_table().splitlines()
    assert table[0] == "Change State Durations (Ticks)"
    assert table[2].startswith("Name          | Not Started")
    assert table[4] == "DB-only 1    | 0           | 3           | 0           | 0           | 3"
    assert table[-1] == "Overall Total: 3 ticks"

    tsv = metrics.to_tsv().splitlines()
    assert tsv[0] == "Name\tNot Started\tWaiting\tIn Progress\tCompleted\tTotal"
    assert tsv[1] == "DB-only 1\t0\t3\t0\t0\t3"
    assert tsv[-1] == "Overall Total:\t3 ticks"


def test_reset():
    metrics = MetricsAggregator()
    metrics.record_tick([make_job(1, "A", JobStatus.WAITING)])
    metrics.reset()
    assert metrics.records() == []
    assert metrics.summary().overall_total == 0
