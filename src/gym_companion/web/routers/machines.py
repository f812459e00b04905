"""Machine list, edit, delete, upload and generation routes."""

import logging

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from ...errors import EmptyWorkoutGoalError, InvalidImageError, MachineNotFoundError, UploadFailedError
from ...models.machine import parse_muscles
from ...services.generation import start_generation
from ...services.upload import UploadService
from ..deps import get_gateway, get_job_tracker, get_repository, get_settings, get_templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/machines", tags=["machines"])

# Notification shown for each redirect query flag
NOTICES = {
    "saved": ("success", "Machine updated!"),
    "deleted": ("success", "Machine deleted"),
    "load_failed": ("error", "Failed to load machines"),
    "update_failed": ("error", "Failed to update machine"),
    "delete_failed": ("error", "Failed to delete machine"),
    "name_required": ("error", "Machine name is required"),
}


def _notice(request: Request) -> tuple[str, str] | None:
    error = request.query_params.get("error")
    if error in NOTICES:
        return NOTICES[error]
    for flag in ("saved", "deleted"):
        if request.query_params.get(flag) == "true":
            return NOTICES[flag]
    return None


@router.get("", response_class=HTMLResponse)
async def machines_page(request: Request):
    """List all machines, newest first."""
    templates = get_templates(request)
    notice = _notice(request)

    try:
        machines = await get_repository(request).list_all()
    except Exception:
        logger.exception("Failed to load machines")
        machines = []
        notice = NOTICES["load_failed"]

    return templates.TemplateResponse(
        request,
        "machines.html",
        {
            "machines": machines,
            "notice": notice,
            "editing_id": request.query_params.get("edit"),
        },
    )


@router.get("/api")
async def list_machines_json(request: Request):
    """List all machines as JSON."""
    try:
        machines = await get_repository(request).list_all()
    except Exception:
        logger.exception("Failed to load machines")
        return JSONResponse({"error": "Failed to load machines"}, status_code=500)

    return {"machines": [m.to_dict() for m in machines]}


@router.post("/upload")
async def upload_machine(request: Request, image: UploadFile = File(...)):
    """Analyze an uploaded photo and store the identified machine."""
    settings = get_settings(request)
    service = UploadService(
        repo=get_repository(request),
        client=get_gateway(request),
        settings=settings,
    )

    # One byte past the limit is enough to reject an oversized file
    data = await image.read(settings.max_upload_bytes + 1)
    try:
        machine = await service.analyze_and_store(data, image.content_type, image.filename or "")
    except InvalidImageError as e:
        logger.info("Rejected upload %r: %s", image.filename, e)
        return JSONResponse({"error": str(e)}, status_code=400)
    except UploadFailedError as e:
        return JSONResponse({"error": str(e)}, status_code=500)

    return JSONResponse(
        {
            "machine": machine.to_dict(),
            "message": f"Identified {machine.name}!",
            "redirect_url": "/machines",
            "redirect_delay_ms": settings.redirect_delay_ms,
        },
        status_code=201,
    )


@router.post("/{machine_id}/edit")
async def save_machine(
    request: Request,
    machine_id: int,
    name: str = Form(""),
    muscles: str = Form(""),
    notes: str = Form(""),
):
    """Save the inline edit form of one machine."""
    if not name.strip():
        return RedirectResponse(url=f"/machines?error=name_required&edit={machine_id}", status_code=302)

    try:
        await get_repository(request).update(
            machine_id,
            name=name.strip(),
            muscles=parse_muscles(muscles),
            notes=notes,
        )
    except Exception:
        logger.exception("Failed to update machine %d", machine_id)
        return RedirectResponse(url="/machines?error=update_failed", status_code=302)

    return RedirectResponse(url="/machines?saved=true", status_code=302)


@router.post("/{machine_id}/delete")
async def delete_machine(request: Request, machine_id: int):
    """Delete one machine."""
    try:
        await get_repository(request).delete(machine_id)
    except MachineNotFoundError:
        logger.warning("Delete of missing machine %d", machine_id)
        return RedirectResponse(url="/machines?error=delete_failed", status_code=302)
    except Exception:
        logger.exception("Failed to delete machine %d", machine_id)
        return RedirectResponse(url="/machines?error=delete_failed", status_code=302)

    return RedirectResponse(url="/machines?deleted=true", status_code=302)


@router.post("/{machine_id}/exercises")
async def generate_for_machine(
    request: Request,
    machine_id: int,
    workout_goal: str = Form(""),
):
    """Start exercise generation; the client plays the transition video meanwhile."""
    machine = await get_repository(request).get(machine_id)
    if machine is None:
        return JSONResponse({"error": "Machine not found"}, status_code=404)

    try:
        job = await start_generation(machine, workout_goal, get_gateway(request), get_job_tracker(request))
    except EmptyWorkoutGoalError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    return JSONResponse(
        {
            "job_id": job.id,
            "status_url": f"/jobs/{job.id}",
            "stream_url": f"/jobs/{job.id}/stream",
            "video_ended_url": f"/jobs/{job.id}/video-ended",
        },
        status_code=202,
    )
