"""State duration metrics endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..models.schemas import MetricsResponse
from ..services import Scheduler
from .dependencies import get_scheduler


router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get("", response_model=MetricsResponse)
async def get_metrics(scheduler: Scheduler = Depends(get_scheduler)):
    """Per-change tick counts by state, plus the overall total."""
    return scheduler.metrics.summary().to_dict()


@router.get("/table", response_class=PlainTextResponse)
async def get_metrics_table(scheduler: Scheduler = Depends(get_scheduler)):
    return scheduler.metrics.to_table()


@router.get("/export", response_class=PlainTextResponse)
async def export_metrics(scheduler: Scheduler = Depends(get_scheduler)):
    """Tab-separated copy of the metrics table."""
    return scheduler.metrics.to_tsv()
