"""Exception types shared across gym-companion."""


class GymCompanionError(Exception):
    """Base class for all gym-companion errors."""


class InvalidImageError(GymCompanionError):
    """The uploaded file is not an acceptable image."""


class UploadFailedError(GymCompanionError):
    """Analyzing or storing an uploaded machine photo failed."""


class MachineNotFoundError(GymCompanionError):
    """No machine row exists for the requested id."""

    def __init__(self, machine_id: int):
        super().__init__(f"Machine {machine_id} not found")
        self.machine_id = machine_id


class EmptyWorkoutGoalError(GymCompanionError):
    """A workout goal was blank or whitespace only."""


class GatewayError(GymCompanionError):
    """The AI gateway returned a non-success response or could not be reached."""

    def __init__(self, message: str, status: int | None = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class RateLimitedError(GatewayError):
    """The AI gateway rejected the call with HTTP 429."""


class QuotaExhaustedError(GatewayError):
    """The AI gateway rejected the call with HTTP 402."""


class GatewayConfigError(GatewayError):
    """No API key is configured for the AI gateway."""


class EmptyReplyError(GatewayError):
    """The AI gateway answered without any completion text."""


class ReplyParseError(GymCompanionError):
    """The model reply could not be parsed into the expected JSON."""


class FunctionError(GymCompanionError):
    """A proxy endpoint failure carrying the HTTP status to respond with."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message
