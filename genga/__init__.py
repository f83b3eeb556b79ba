"""
Genga Frame Studio - Modular Components

This package contains the core modules for the Genga Frame Studio:
- config: Configuration, constants, and settings
- strings: UI copy, art styles and example presets per language
- utils: Helper functions (logging, data URLs, upload decoding)
- gemini_client: Gemini API client initialization
- frame_analyst: Suggestion agent (multimodal next-movement prompts)
- frame_generator: Continuation frame and key frame generation
- studio: Session controller sequencing the calls
- view: Pure helpers deciding what the page renders
"""

# Lazy imports to avoid circular dependencies and hot-reload issues
__all__ = [
    # Config
    "StudioSettings",
    "load_settings",
    "MIN_FRAMES",
    "MAX_FRAMES",
    "UPLOAD_TYPES",
    # State
    "EncodedImage",
    "GeneratedFrame",
    "RequestStatus",
    "SceneRequest",
    "StudioState",
    # Utils
    "get_logger",
    "parse_data_url",
    # Gemini Client
    "get_genai_client",
    # Agents
    "suggest_next_actions",
    "generate_continuation_frame",
    "generate_key_frames",
    # Controller
    "GengaStudio",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies and streamlit hot-reload issues."""
    if name in __all__:
        # Import on-demand to avoid module initialization issues
        if name in ("StudioSettings", "load_settings", "MIN_FRAMES", "MAX_FRAMES", "UPLOAD_TYPES"):
            from .config import StudioSettings, load_settings, MIN_FRAMES, MAX_FRAMES, UPLOAD_TYPES
            return locals()[name]
        elif name in ("EncodedImage", "GeneratedFrame", "RequestStatus", "SceneRequest", "StudioState"):
            from .state import EncodedImage, GeneratedFrame, RequestStatus, SceneRequest, StudioState
            return locals()[name]
        elif name in ("get_logger", "parse_data_url"):
            from .utils import get_logger, parse_data_url
            return locals()[name]
        elif name == "get_genai_client":
            from .gemini_client import get_genai_client
            return get_genai_client
        elif name == "suggest_next_actions":
            from .frame_analyst import suggest_next_actions
            return suggest_next_actions
        elif name in ("generate_continuation_frame", "generate_key_frames"):
            from .frame_generator import generate_continuation_frame, generate_key_frames
            return locals()[name]
        elif name == "GengaStudio":
            from .studio import GengaStudio
            return GengaStudio
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
