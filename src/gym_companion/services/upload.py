"""Upload-and-analyze flow for machine photos."""

import base64
import logging

from ..ai.client import GatewayClient
from ..config import Settings, get_settings
from ..db.repositories import MachineRepository
from ..errors import GatewayError, InvalidImageError, ReplyParseError, UploadFailedError
from ..models.machine import Machine
from .functions import identify_machine

logger = logging.getLogger(__name__)


def validate_image(content_type: str | None, size: int, max_bytes: int) -> None:
    """Check that an upload is an image of acceptable size.

    Raises:
        InvalidImageError: for non-image, empty or oversized files
    """
    if not content_type or not content_type.startswith("image/"):
        raise InvalidImageError("Please upload an image file")
    if size == 0:
        raise InvalidImageError("The uploaded image is empty")
    if size > max_bytes:
        raise InvalidImageError(
            f"Image is too large (max {max_bytes // (1024 * 1024)}MB)"
        )


def encode_data_url(data: bytes, content_type: str) -> str:
    """Encode raw image bytes as a data URL."""
    return f"data:{content_type};base64,{base64.b64encode(data).decode('ascii')}"


class UploadService:
    """Identifies an uploaded machine photo and stores the result."""

    def __init__(
        self,
        repo: MachineRepository | None = None,
        client: GatewayClient | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.repo = repo or MachineRepository()
        self.client = client or GatewayClient(self.settings)

    async def analyze_and_store(
        self, data: bytes, content_type: str | None, filename: str = ""
    ) -> Machine:
        """Analyze a photo and insert one machine row for it.

        Args:
            data: Raw image bytes
            content_type: MIME type reported for the upload
            filename: Original file name, for logging

        Returns:
            The newly created machine

        Raises:
            InvalidImageError: if the file is rejected before any call is made
            UploadFailedError: if analysis or the insert fails
        """
        validate_image(content_type, len(data), self.settings.max_upload_bytes)

        image_url = encode_data_url(data, content_type)
        logger.info("Analyzing upload %r (%d bytes)", filename, len(data))

        try:
            name, muscles = await identify_machine(self.client, image_url)
        except (GatewayError, ReplyParseError) as e:
            logger.error("Machine analysis failed for %r: %s", filename, e)
            raise UploadFailedError("Failed to analyze machine") from e

        try:
            machine = await self.repo.create(name, muscles, image_url)
        except Exception as e:
            logger.exception("Storing analyzed machine %r failed", name)
            raise UploadFailedError("Failed to analyze machine") from e

        return machine
