"""Per-job state duration metrics."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
import structlog

from ..domain import Job, JobStatus


logger = structlog.get_logger(__name__)


COUNTED_STATUSES = (
    JobStatus.NOT_STARTED,
    JobStatus.WAITING,
    JobStatus.IN_PROGRESS,
    JobStatus.COMPLETED,
    JobStatus.COMPLETED_NO_SLOT,
)

TABLE_RULE = "-" * 86


@dataclass
class MetricsRecord:
    """Tick counts per status for one job."""
    job_id: int
    name: str
    counts: Dict[JobStatus, int] = field(default_factory=lambda: {s: 0 for s in COUNTED_STATUSES})
    last_status: JobStatus = JobStatus.NOT_STARTED
    final_status: Optional[JobStatus] = None

    @property
    def total(self) -> int:
        return sum(self.counts.values())


@dataclass
class MetricsRow:
    job_id: int
    name: str
    not_started: int
    waiting: int
    in_progress: int
    completed: int
    total: int
    status: str

    def to_dict(self) -> dict:
        return {
            "job_id": self.job_id,
            "name": self.name,
            "not_started": self.not_started,
            "waiting": self.waiting,
            "in_progress": self.in_progress,
            "completed": self.completed,
            "total": self.total,
            "status": self.status,
        }


@dataclass
class MetricsSummary:
    rows: List[MetricsRow]
    overall_total: int

    def to_dict(self) -> dict:
        return {
            "rows": [row.to_dict() for row in self.rows],
            "overall_total": self.overall_total,
        }


class MetricsAggregator:
    """Accumulates how many ticks each job spends in each status."""

    def __init__(self):
        self._records: Dict[int, MetricsRecord] = {}

    def register(self, job: Job) -> MetricsRecord:
        record = self._records.get(job.id)
        if record is None:
            record = MetricsRecord(job_id=job.id, name=job.name, last_status=job.status)
            self._records[job.id] = record
        return record

    def record_tick(self, jobs: Iterable[Job]) -> None:
        """Count one tick for every job not yet Done."""
        for job in jobs:
            if job.status == JobStatus.DONE:
                continue
            record = self.register(job)
            record.counts[job.status] += 1
            record.last_status = job.status

    def finalize(self, job_id: int) -> None:
        """Close out a removed job's record; the arrival tick counts as Completed."""
        record = self._records.get(job_id)
        if record is None or record.final_status == JobStatus.DONE:
            return
        record.final_status = JobStatus.DONE
        record.last_status = JobStatus.DONE
        record.counts[JobStatus.COMPLETED] += 1
        logger.debug("Metrics record finalized", job_id=job_id, total=record.total)

    def get(self, job_id: int) -> Optional[MetricsRecord]:
        return self._records.get(job_id)

    def records(self) -> List[MetricsRecord]:
        return list(self._records.values())

    def reset(self) -> None:
        self._records.clear()

    def summary(self) -> MetricsSummary:
        rows = []
        for record in self._records.values():
            counts = record.counts
            rows.append(MetricsRow(
                job_id=record.job_id,
                name=record.name,
                not_started=counts[JobStatus.NOT_STARTED],
                waiting=counts[JobStatus.WAITING],
                in_progress=counts[JobStatus.IN_PROGRESS],
                completed=counts[JobStatus.COMPLETED] + counts[JobStatus.COMPLETED_NO_SLOT],
                total=record.total,
                status=record.last_status.value,
            ))
        return MetricsSummary(rows=rows, overall_total=sum(row.total for row in rows))

    def to_table(self) -> str:
        """Fixed-width text table of state durations."""
        summary = self.summary()
        lines = [
            "Change State Durations (Ticks)",
            TABLE_RULE,
            "Name          | Not Started | Waiting     | In Progress | Completed   | Total",
            TABLE_RULE,
        ]
        for row in summary.rows:
            lines.append(
                row.name.ljust(13) + "| "
                + str(row.not_started).ljust(12) + "| "
                + str(row.waiting).ljust(12) + "| "
                + str(row.in_progress).ljust(12) + "| "
                + str(row.completed).ljust(12) + "| "
                + str(row.total)
            )
        lines.append("")
        lines.append(f"Overall Total: {summary.overall_total} ticks")
        return "\n".join(lines)

    def to_tsv(self) -> str:
        """Tab-delimited export of the same table."""
        summary = self.summary()
        lines = ["Name\tNot Started\tWaiting\tIn Progress\tCompleted\tTotal"]
        for row in summary.rows:
            lines.append(
                f"{row.name}\t{row.not_started}\t{row.waiting}\t"
                f"{row.in_progress}\t{row.completed}\t{row.total}"
            )
        lines.append("")
        lines.append(f"Overall Total:\t{summary.overall_total} ticks")
        return "\n".join(lines)
