"""
Streamlit frontend for the Genga Frame Studio.

This is the main entry point for the application. It renders the controls and
the output panel, and hands every user action to the GengaStudio controller,
which sequences the Gemini calls (frame analysis, continuation frame, key frames).

Environment Variables:
- GEMINI_API_KEY or GOOGLE_GENAI_API_KEY: Required for Gemini calls
- GENGA_ANALYSIS_MODEL: (Optional) Suggestion model (default: gemini-2.5-flash)
- GENGA_EDIT_MODEL: (Optional) Continuation model (default: gemini-2.5-flash-image-preview)
- GENGA_IMAGE_MODEL: (Optional) Key frame model (default: imagen-4.0-generate-001)
- GENGA_LANGUAGE: (Optional) Interface language, "en" or "ar" (default: en)
- GEMINI_THINK_BUDGET: (Optional) Thinking budget for the analysis call (in tokens)
- GENGA_LOG_LEVEL: (Optional) Logging level (default: INFO)
"""

import streamlit as st
from dotenv import load_dotenv

from genga import GengaStudio, MAX_FRAMES, MIN_FRAMES, UPLOAD_TYPES, RequestStatus, get_genai_client, load_settings
from genga.view import (
    OutputPanel,
    can_generate,
    description_copy,
    frame_caption,
    frame_filename,
    frames_label,
    generate_label,
    output_panel,
    show_suggestions,
)

# Load environment variables from .env file
load_dotenv()
settings = load_settings()

# ---------- Streamlit Page Configuration ----------
st.set_page_config(
    page_title="Genga Frame Studio",
    page_icon="🎞️",
    layout="wide"
)


# ---------- Session ----------
def _studio() -> GengaStudio:
    if "studio" not in st.session_state:
        st.session_state["studio"] = GengaStudio(client=None, settings=settings)
    return st.session_state["studio"]


studio = _studio()
text = studio.strings
st.session_state.setdefault("upload_nonce", 0)
st.session_state.setdefault("processed_upload", None)

# Widget values live in session_state; seed them from the controller on first render.
if "description" not in st.session_state:
    st.session_state["description"] = studio.request.description
if st.session_state.get("style") not in studio.styles:
    st.session_state["style"] = studio.request.style if studio.request.style in studio.styles else studio.styles[0]
    studio.set_style(st.session_state["style"])
if "frame_count" not in st.session_state:
    st.session_state["frame_count"] = studio.request.frame_count


# ---------- Callbacks ----------
def _on_description_change():
    studio.set_description(st.session_state["description"])


def _on_style_change():
    studio.set_style(st.session_state["style"])


def _on_frame_count_change():
    studio.set_frame_count(st.session_state["frame_count"])


def _reset_uploader():
    st.session_state["upload_nonce"] += 1
    st.session_state["processed_upload"] = None


def _on_remove_image():
    studio.remove_image()
    _reset_uploader()


def _on_suggestion(index: int):
    studio.apply_suggestion(index)
    st.session_state["description"] = studio.request.description


def _on_example(index: int):
    studio.apply_example(index)
    st.session_state["description"] = studio.request.description
    st.session_state["style"] = studio.request.style
    _reset_uploader()


def _on_generate():
    studio.request_generation()


# ---------- Right-to-left layout for Arabic ----------
if studio.language == "ar":
    st.markdown(
        """
        <style>
        [data-testid="stMain"] { direction: rtl; text-align: right; }
        </style>
        """,
        unsafe_allow_html=True,
    )

# ---------- Sidebar: API Key ----------
with st.sidebar:
    st.markdown("**API Keys & Settings**")
    api_key = st.text_input(
        text["api_key_label"],
        type="password",
        value=settings.api_key or "",
        help=text["api_key_help"],
        key="api_key",
    )
    if api_key and api_key != st.session_state.get("client_api_key"):
        studio.client = get_genai_client(api_key)
        st.session_state["client_api_key"] = api_key
    elif not api_key and st.session_state.get("client_api_key"):
        studio.client = None
        st.session_state["client_api_key"] = None
    if studio.client is None:
        st.warning(f"⚠️ {text['missing_key']}")
    else:
        st.caption("✅ Gemini client ready")
    st.caption(f"🧠 Analysis: {studio.settings.analysis_model}")
    st.caption(f"✏️ Edit: {studio.settings.edit_model}")
    st.caption(f"🎨 Key frames: {studio.settings.image_model}")

state = studio.state
controls, output = st.columns([1, 2], gap="large")

# ---------- Controls Column ----------
with controls:
    st.title(f"🎞️ {text['title']}")
    st.markdown(f"_{text['subtitle']}_")

    # Reference frame
    st.markdown(f"**{text['reference_label']}**")
    if state.request.reference_image is not None:
        st.image(state.request.reference_image.data, width="stretch")
        st.button(
            f"✖ {text['remove_image']}",
            key="remove_image",
            on_click=_on_remove_image,
        )
    else:
        uploaded = st.file_uploader(
            text["upload_label"],
            type=UPLOAD_TYPES,
            key=f"upload_{st.session_state['upload_nonce']}",
            disabled=state.is_busy,
        )
        upload_id = getattr(uploaded, "file_id", None) or getattr(uploaded, "name", None)
        if uploaded is not None and upload_id != st.session_state["processed_upload"]:
            st.session_state["processed_upload"] = upload_id
            studio.upload_file(uploaded)
            st.rerun()

    # Scene description
    copy = description_copy(state, text)
    st.text_area(
        copy["label"],
        key="description",
        placeholder=copy["placeholder"],
        height=copy["height"],
        on_change=_on_description_change,
    )

    # Suggested prompts
    if state.status is RequestStatus.ANALYZING:
        st.caption(f"⏳ {text['analyzing']}")
    elif show_suggestions(state):
        st.markdown(f"**{text['suggestions_title']}**")
        for index, suggestion in enumerate(state.suggestions):
            st.button(
                suggestion,
                key=f"suggestion_{index}",
                on_click=_on_suggestion,
                args=(index,),
            )

    st.selectbox(
        text["style_label"],
        studio.styles,
        key="style",
        on_change=_on_style_change,
    )

    # Frame count is locked to one while a reference frame is loaded
    if state.request.is_edit:
        st.slider(frames_label(state, text), MIN_FRAMES, MAX_FRAMES, value=1, disabled=True, key="frame_count_locked")
    else:
        st.slider(
            frames_label(state, text),
            MIN_FRAMES,
            MAX_FRAMES,
            key="frame_count",
            on_change=_on_frame_count_change,
        )

    st.button(
        f"🪄 {generate_label(state, text)}",
        type="primary",
        width="stretch",
        disabled=not can_generate(state),
        key="generate",
        on_click=_on_generate,
    )

    st.markdown("---")
    st.markdown(f"**{text['examples_title']}**")
    example_cols = st.columns(len(studio.examples))
    for index, (col, example) in enumerate(zip(example_cols, studio.examples)):
        with col:
            st.button(example.name, key=f"example_{index}", on_click=_on_example, args=(index,))

# ---------- Output Column ----------
with output:
    panel = output_panel(state)
    if panel is OutputPanel.LOADING:
        st.markdown(f"## ⏳ {text['loading_title']}")
        st.caption(text["loading_body"])
    elif panel is OutputPanel.ERROR:
        st.error(state.error)
    elif panel is OutputPanel.RESULTS:
        grid = st.columns(min(3, len(state.frames)))
        for frame in state.frames:
            with grid[frame.position % len(grid)]:
                st.image(frame.image.data, caption=frame_caption(frame), width="stretch")
                st.download_button(
                    f"📥 {text['download_frame']}",
                    data=frame.image.data,
                    file_name=frame_filename(frame),
                    mime=frame.image.mime_type,
                    key=f"download_{frame.position}",
                )
    else:
        st.markdown(f"## 🖼️ {text['empty_title']}")
        st.caption(text["empty_body"])

st.caption(text["footer"])

# ---------- Pending Gemini call ----------
# Controls above are already rendered disabled; run the call and show its result.
if state.is_busy:
    with st.spinner(text["analyzing"] if state.status is RequestStatus.ANALYZING else text["loading_title"]):
        studio.run_pending()
    st.rerun()
