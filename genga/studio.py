"""
Studio controller - owns the session state and sequences the Gemini calls.

Every call follows the same pattern: a request method validates and moves the
status out of IDLE, then the matching run method performs the call and always
returns the status to IDLE. The page reruns between the two steps so the
triggering controls render disabled while the call is in flight.

A trigger issued while another call is in flight is rejected (the request
method returns False and the state is left untouched).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Union

from .config import StudioSettings, load_settings
from .errors import InvalidImageError, NoImagesReturned
from .frame_analyst import suggest_next_actions
from .frame_generator import EDIT_MODE, generate_continuation_frame, generate_key_frames
from .gemini_client import get_thinking_config
from .state import EncodedImage, RequestStatus, SceneRequest, StudioState, validate_frame_count
from .strings import ExamplePreset, get_examples, get_strings, get_styles, language_name, resolve_language
from .utils import get_logger, load_image_bytes

logger = get_logger("studio")


class GengaStudio:
    """Controller for one user session."""

    def __init__(self, client, settings: Optional[StudioSettings] = None, state: Optional[StudioState] = None):
        self.client = client
        self.settings = settings or load_settings()
        self.language = resolve_language(self.settings.language)
        self.strings = get_strings(self.language)
        self.styles = get_styles(self.language)
        self.examples = get_examples(self.language)
        self.state = state or StudioState(request=SceneRequest(style=self.styles[0]))
        self._pending_image: Optional[EncodedImage] = None
        self._pending_request: Optional[SceneRequest] = None

    # ---------- Input state ----------
    @property
    def request(self) -> SceneRequest:
        return self.state.request

    def set_description(self, text: str) -> None:
        self.state.request.description = text

    def set_style(self, style: str) -> None:
        self.state.request.style = style

    def set_frame_count(self, count: int) -> None:
        self.state.request.frame_count = validate_frame_count(int(count))

    def apply_suggestion(self, suggestion: Union[int, str]) -> None:
        if isinstance(suggestion, int):
            suggestion = self.state.suggestions[suggestion]
        self.state.request.description = suggestion

    def apply_example(self, example: Union[int, ExamplePreset]) -> None:
        preset = self.examples[example] if isinstance(example, int) else example
        self.state.request.description = preset.description
        self.state.request.style = preset.style
        self.state.request.reference_image = None
        self.state.suggestions = []
        logger.info(f"Example preset applied: {preset.name}")

    def remove_image(self) -> None:
        self.state.request.reference_image = None
        self.state.suggestions = []

    # ---------- Suggestion analysis ----------
    def upload_file(self, file) -> bool:
        """Read an uploaded file and start analysis. Returns True if started."""
        if self.state.is_busy:
            logger.warning(f"Upload rejected while {self.state.status.value}")
            return False
        try:
            data, mime = load_image_bytes(file)
        except InvalidImageError as exc:
            logger.warning(str(exc))
            self.state.error = self.strings["error_invalid_image"]
            return False
        return self.upload_image(EncodedImage(mime_type=mime, data=data))

    def upload_image(self, image: EncodedImage) -> bool:
        """Store ``image`` as the reference frame and move to ANALYZING."""
        if self.state.is_busy:
            logger.warning(f"Upload rejected while {self.state.status.value}")
            return False
        self.state.request.reference_image = image
        self.state.suggestions = []
        self.state.error = None
        if self.client is None:
            self.state.error = self.strings["missing_key"]
            return False
        self._pending_image = image
        self.state.status = RequestStatus.ANALYZING
        logger.info(f"Analyzing uploaded frame ({image.mime_type}, {len(image.data)} bytes)")
        return True

    def run_analysis(self) -> None:
        if self.state.status is not RequestStatus.ANALYZING:
            return
        if self._pending_image is None:
            self.state.status = RequestStatus.IDLE
            return
        try:
            self.state.suggestions = suggest_next_actions(
                self.client,
                self._pending_image,
                language=language_name(self.language),
                model=self.settings.analysis_model,
                thinking_config=get_thinking_config(self.settings),
            )
        except Exception as exc:
            logger.error(f"Frame analysis failed: {exc}")
            self.state.error = self.strings["error_analysis"]
        finally:
            self._pending_image = None
            self.state.status = RequestStatus.IDLE

    def analyze(self, image: EncodedImage) -> bool:
        if not self.upload_image(image):
            return False
        self.run_analysis()
        return True

    # ---------- Generation ----------
    def request_generation(self) -> bool:
        """Validate the scene and move to GENERATING. Returns True if started."""
        if self.state.is_busy:
            logger.warning(f"Generate rejected while {self.state.status.value}")
            return False
        if not self.state.request.description.strip():
            self.state.error = self.strings["error_empty_description"]
            return False
        if self.client is None:
            self.state.error = self.strings["missing_key"]
            return False
        self._pending_request = replace(self.state.request)
        self.state.status = RequestStatus.GENERATING
        self.state.error = None
        self.state.frames = []
        return True

    def run_generation(self) -> None:
        if self.state.status is not RequestStatus.GENERATING:
            return
        if self._pending_request is None:
            self.state.status = RequestStatus.IDLE
            return
        request = self._pending_request
        try:
            if request.is_edit:
                logger.info(f"Generating continuation frame in style '{request.style}'")
                frames = generate_continuation_frame(
                    self.client,
                    request.reference_image,
                    request.description,
                    request.style,
                    model=self.settings.edit_model,
                )
            else:
                logger.info(f"Generating {request.effective_frame_count} key frame(s) in style '{request.style}'")
                frames = generate_key_frames(
                    self.client,
                    request.description,
                    request.style,
                    request.effective_frame_count,
                    model=self.settings.image_model,
                )
            self.state.frames = frames
        except NoImagesReturned as exc:
            logger.warning(str(exc))
            key = "error_edit_no_image" if exc.mode == EDIT_MODE else "error_generate_no_image"
            self.state.error = self.strings[key]
        except Exception as exc:
            logger.error(f"Generation failed: {exc}")
            self.state.error = self.strings["error_connection"]
        finally:
            self._pending_request = None
            self.state.status = RequestStatus.IDLE

    def generate(self) -> bool:
        if not self.request_generation():
            return False
        self.run_generation()
        return True

    def run_pending(self) -> None:
        """Run whichever call the current status is waiting on."""
        if self.state.status is RequestStatus.ANALYZING:
            self.run_analysis()
        elif self.state.status is RequestStatus.GENERATING:
            self.run_generation()
