"""ViewModel for picking a photo and running the placeholder edit."""

from __future__ import annotations

from collections.abc import Callable
import time

from loguru import logger

from app.viewmodels.session_vm import SessionVM
from core.models import Metadata
from core.services.extraction_service import MetadataExtractor
from core.services.interfaces import ImagePicker

PROMPT_SUGGESTIONS: list[str] = [
    "Make it look like a painting",
    "Add a sunset background",
    "Make it black and white",
    "Add vintage film effect",
]

DEFAULT_PROCESSING_DELAY = 2.0


class UserInputError(ValueError):
    """Blocking notice for the user; the pipeline was not invoked."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title
        self.message = message


class EditorVM:
    """Editor screen state: current image selection and processing."""

    def __init__(
        self,
        session: SessionVM,
        extractor: MetadataExtractor,
        picker: ImagePicker,
        processing_delay: float = DEFAULT_PROCESSING_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._session = session
        self._extractor = extractor
        self._picker = picker
        self._delay = max(0.0, float(processing_delay))
        self._sleep = sleep
        self.is_processing = False

    def pick_image(self, path: str) -> Metadata:
        """Select the image at `path`, harvest its metadata and make it current."""
        try:
            selection = self._picker.select(path)
        except (OSError, ValueError) as ex:
            logger.error("Error picking image {}: {}", path, ex)
            raise UserInputError("Error", "Failed to pick image. Please try again.") from ex

        self._session.set_current_image(selection.uri)
        metadata = self._extractor.extract(selection.uri, selection)
        self._session.record(metadata)
        return metadata

    def process_image(self, prompt: str) -> str:
        """Run the demo transformation and return the processed image URI.

        No transformation is applied: after a fixed delay the original image
        becomes the processed result.
        """
        current = self._session.current_image
        if not current:
            raise UserInputError("No Image", "Please select an image first.")
        if not (prompt or "").strip():
            raise UserInputError(
                "No Prompt", "Please enter a prompt describing how to edit the image."
            )
        if self.is_processing:
            raise UserInputError("Busy", "Processing is already in progress.")

        self.is_processing = True
        logger.info("Processing {} with prompt {!r}", current, prompt.strip())
        try:
            self._sleep(self._delay)
            self._session.set_processed_image(current)
        finally:
            self.is_processing = False
        logger.info("Processing complete (demo mode) for {}", current)
        return current
