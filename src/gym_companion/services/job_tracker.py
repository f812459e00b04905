"""Job tracking for exercise generation.

Each job joins two completions: the client's transition video ending and
the generated exercises arriving. The job becomes navigable only when
both have happened; a generation failure ends it at once.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from uuid import uuid4

from ..coordination import CompletionJoin
from ..models.exercise import Exercise

logger = logging.getLogger(__name__)


class JobStatus(Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class GenerationJob:
    """A tracked exercise generation for one machine and goal."""
    id: str
    machine_id: int
    machine_name: str
    workout_goal: str
    status: JobStatus = JobStatus.RUNNING
    created_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None
    exercises: list[Exercise] = field(default_factory=list)
    navigate_url: str | None = None
    error: str | None = None
    done: asyncio.Event = field(default_factory=asyncio.Event)
    join: CompletionJoin | None = None
    task: asyncio.Task | None = None

    def __post_init__(self):
        if self.join is None:
            self.join = CompletionJoin(self._on_both_complete, self._on_failure)

    def _on_both_complete(self, exercises: list[Exercise]):
        self.exercises = exercises
        self.status = JobStatus.COMPLETED
        self.completed_at = datetime.now()
        self.navigate_url = f"/exercises/{self.id}"
        self.done.set()
        logger.info("Job %s ready, navigating to %s", self.id, self.navigate_url)

    def _on_failure(self, error: str):
        self.status = JobStatus.FAILED
        self.completed_at = datetime.now()
        self.error = error
        self.done.set()
        logger.warning("Job %s failed: %s", self.id, error)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "status": self.status.value,
            "machine_id": self.machine_id,
            "machine_name": self.machine_name,
            "workout_goal": self.workout_goal,
            "video_ended": self.join.signalled,
            "exercises_ready": self.join.has_value,
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "navigate_url": self.navigate_url,
            "error": self.error,
        }


class JobTracker:
    """Tracks active and recent generation jobs."""

    def __init__(
        self,
        max_completed_jobs: int = 20,
        max_running_jobs: int = 50,
        stale_after: timedelta = timedelta(minutes=30),
    ):
        self._jobs: dict[str, GenerationJob] = {}
        self._max_completed = max_completed_jobs
        self._max_running = max_running_jobs
        self._stale_after = stale_after
        self._lock = asyncio.Lock()

    async def create_job(self, machine_id: int, machine_name: str, workout_goal: str) -> GenerationJob:
        """Create a new job."""
        async with self._lock:
            job = GenerationJob(
                id=str(uuid4())[:8],
                machine_id=machine_id,
                machine_name=machine_name,
                workout_goal=workout_goal,
            )
            self._jobs[job.id] = job
            self._cleanup_old_jobs()
            return job

    async def get_job(self, job_id: str) -> GenerationJob | None:
        """Get a job by ID."""
        return self._jobs.get(job_id)

    async def list_jobs(self) -> list[GenerationJob]:
        """List all tracked jobs."""
        return list(self._jobs.values())

    async def video_ended(self, job_id: str) -> GenerationJob | None:
        """Record that the client's transition video finished."""
        job = self._jobs.get(job_id)
        if job:
            job.join.signal()
        return job

    async def exercises_ready(self, job_id: str, exercises: list[Exercise]) -> GenerationJob | None:
        """Record the generated exercises."""
        job = self._jobs.get(job_id)
        if job:
            job.join.resolve(exercises)
        return job

    async def fail_job(self, job_id: str, error: str) -> GenerationJob | None:
        """Mark a job as failed, whatever the video state."""
        job = self._jobs.get(job_id)
        if job:
            job.join.fail(error)
        return job

    def _drop_abandoned(self, job: GenerationJob, reason: str):
        """Fail and forget a running job whose video never ended."""
        logger.info("Dropping job %s: %s", job.id, reason)
        job.join.fail("Exercise generation expired")
        if job.task and not job.task.done():
            job.task.cancel()
        del self._jobs[job.id]

    def _cleanup_old_jobs(self):
        """Remove abandoned running jobs, then old finished jobs if over limit."""
        now = datetime.now()
        running = sorted(
            (j for j in self._jobs.values() if j.status == JobStatus.RUNNING),
            key=lambda j: j.created_at,
        )
        excess = len(running) - self._max_running
        for index, job in enumerate(running):
            if index < excess:
                self._drop_abandoned(job, "too many running jobs")
            elif now - job.created_at > self._stale_after:
                self._drop_abandoned(job, "stale")

        finished = [j for j in self._jobs.values() if j.status in (JobStatus.COMPLETED, JobStatus.FAILED)]
        if len(finished) > self._max_completed:
            finished.sort(key=lambda j: j.completed_at or datetime.min)
            for job in finished[:-self._max_completed]:
                del self._jobs[job.id]
