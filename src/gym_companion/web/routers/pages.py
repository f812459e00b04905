"""Landing page and exercise results page."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...services.job_tracker import JobStatus
from ..deps import get_job_tracker, get_settings, get_templates

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def landing_page(request: Request):
    """Intro video that reveals the upload widget."""
    templates = get_templates(request)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "redirect_delay_ms": get_settings(request).redirect_delay_ms,
        },
    )


@router.get("/exercises/{job_id}", response_class=HTMLResponse)
async def exercises_page(request: Request, job_id: str):
    """Show the exercise plan held by a completed generation job."""
    templates = get_templates(request)

    job = await get_job_tracker(request).get_job(job_id)
    if not job or job.status != JobStatus.COMPLETED:
        return templates.TemplateResponse(
            request,
            "exercises.html",
            {"job": None},
            status_code=404,
        )

    return templates.TemplateResponse(
        request,
        "exercises.html",
        {
            "job": job,
            "exercises": job.exercises,
        },
    )
