"""Request-scoped accessors for objects stored on the app state."""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..ai.client import GatewayClient
from ..config import Settings
from ..db.repositories import MachineRepository
from ..services.job_tracker import JobTracker


def get_templates(request: Request) -> Jinja2Templates:
    """Get templates from app state."""
    return request.app.state.templates


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> MachineRepository:
    """Machine repository bound to the app's database."""
    return MachineRepository(request.app.state.db_path)


def get_gateway(request: Request) -> GatewayClient:
    return request.app.state.gateway


def get_job_tracker(request: Request) -> JobTracker:
    return request.app.state.job_tracker
