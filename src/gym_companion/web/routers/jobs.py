"""Generation job routes: status, video signal and event stream."""

import asyncio
import json
from typing import AsyncGenerator

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, StreamingResponse

from ...services.job_tracker import GenerationJob, JobStatus
from ..deps import get_job_tracker

router = APIRouter(prefix="/jobs", tags=["jobs"])


def _job_not_found() -> JSONResponse:
    return JSONResponse({"error": "Job not found"}, status_code=404)


def _outcome_event(job: GenerationJob) -> str:
    if job.status == JobStatus.COMPLETED:
        return f"data: {json.dumps({'type': 'navigate', 'url': job.navigate_url})}\n\n"
    return f"data: {json.dumps({'type': 'error', 'message': job.error})}\n\n"


@router.get("/{job_id}")
async def get_job(request: Request, job_id: str):
    """Get a job's status."""
    job = await get_job_tracker(request).get_job(job_id)
    if not job:
        return _job_not_found()
    return job.to_dict()


@router.post("/{job_id}/video-ended")
async def video_ended(request: Request, job_id: str):
    """Record that the transition video finished playing."""
    job = await get_job_tracker(request).video_ended(job_id)
    if not job:
        return _job_not_found()
    return job.to_dict()


@router.get("/{job_id}/stream")
async def stream_job(request: Request, job_id: str):
    """Stream the job outcome as a single navigate or error event."""
    job = await get_job_tracker(request).get_job(job_id)
    if not job:
        return _job_not_found()

    async def event_stream() -> AsyncGenerator[str, None]:
        while not job.done.is_set():
            try:
                await asyncio.wait_for(job.done.wait(), timeout=15.0)
            except asyncio.TimeoutError:
                # Send keepalive
                yield ": keepalive\n\n"
        yield _outcome_event(job)

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
        },
    )
