# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"Street Mockup Wizard Page."

import uuid

import mesop as me

from common.analytics import get_logger, log_step_change, track_click
from common.error_handling import WizardError
from common.utils import bytes_to_data_uri, get_image_dimensions_from_base64
from components.edit_button.edit_button import edit_button
from components.mockup_wizard.step_progress import step_progress
from components.snackbar import snackbar
from config.default import Default
from models.mockup import HEADLINE_MAX_LENGTH
from models.mockup_wizard import Step, WizardSession
from services.mockup_service import finish_generation, get_mockup_generator
from state.mockup_wizard_state import PageState

logger = get_logger(__name__)

IMAGE_FILE_TYPES = ["image/jpeg", "image/png", "image/webp"]

CARD_STYLE = me.Style(
    display="flex",
    flex_direction="column",
    gap=16,
    padding=me.Padding.all(24),
    border_radius=16,
    background=me.theme_var("surface-container-lowest"),
    border=me.Border.all(me.BorderSide(width=1, color=me.theme_var("outline-variant"))),
)

ROW_STYLE = me.Style(display="flex", flex_direction="row", gap=16)


def load_session(state: PageState) -> WizardSession:
    """Rebuilds the wizard session stored on the page state."""
    if not state.session_json:
        return WizardSession()
    return WizardSession.model_validate_json(state.session_json)


def save_session(state: PageState, session: WizardSession):
    state.session_json = session.model_dump_json()
    state.current_step = session.step.value
    state.show_snackbar = False


def on_load(e: me.LoadEvent):
    state = me.state(PageState)
    if not state.session_id:
        state.session_id = str(uuid.uuid4())
    if not state.session_json:
        save_session(state, WizardSession())


@me.page(
    path="/",
    title=Default().APP_TITLE,
    on_load=on_load,
)
def page():
    state = me.state(PageState)
    session = load_session(state)

    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="column",
            align_items="center",
            padding=me.Padding.symmetric(vertical=32, horizontal=16),
            min_height="100vh",
            background=me.theme_var("surface-container-low"),
        )
    ):
        with me.box(style=me.Style(width="100%", max_width=720, display="flex", flex_direction="column", gap=24)):
            with me.box(style=me.Style(display="flex", flex_direction="row", align_items="center", gap=12)):
                me.icon("signpost")
                me.text(Default().APP_TITLE, type="headline-5")
            step_progress(session.step)
            with me.box(style=CARD_STYLE):
                wizard_step_content(session)
        snackbar(is_visible=state.show_snackbar, label=state.snackbar_message)


def wizard_step_content(session: WizardSession):
    if session.step == Step.STREET_PHOTO:
        street_photo_step(session)
    elif session.step == Step.CLIENT_INFO:
        client_info_step(session)
    elif session.step == Step.BRAND_ASSETS:
        brand_assets_step(session)
    elif session.board_index is not None:
        board_step(session, session.board_index)
    elif session.step == Step.SUMMARY:
        summary_step(session)
    elif session.step == Step.GENERATING:
        generating_step()
    elif session.step == Step.RESULT:
        result_step(session)


def nav_buttons(session: WizardSession, show_back: bool = True):
    with me.box(style=ROW_STYLE):
        if show_back:
            me.button("Back", on_click=on_back_click, type="stroked")
        me.button(
            "Continue",
            on_click=on_next_click,
            type="flat",
            disabled=not session.can_advance(),
        )


# --- Steps ---

def street_photo_step(session: WizardSession):
    me.text("Upload Street Photo", type="headline-6")
    me.text("Start with a photo of the street with pole advertisement boards.")
    if session.data.street_photo:
        me.image(src=session.data.street_photo, style=me.Style(width="100%", border_radius=8))
    me.uploader(
        label="Replace Photo" if session.data.street_photo else "Upload Photo",
        on_upload=on_upload_street_photo,
        accepted_file_types=IMAGE_FILE_TYPES,
        key="street_photo_uploader",
    )
    nav_buttons(session, show_back=False)


def client_info_step(session: WizardSession):
    me.text("Client Information", type="headline-6")
    me.input(
        label="Client Name",
        value=session.data.client_name,
        on_input=on_client_name_input,
        style=me.Style(width="100%"),
    )
    me.input(
        label="Brand Website (optional)",
        placeholder="https://example.com",
        value=session.data.brand_url,
        on_blur=on_brand_url_blur,
        style=me.Style(width="100%"),
    )
    nav_buttons(session)


def brand_assets_step(session: WizardSession):
    me.text("Brand Assets", type="headline-6")
    with me.box(style=me.Style(display="flex", flex_direction="row", align_items="center", gap=16)):
        me.input(
            label="Primary Color",
            type="color",
            value=session.data.primary_color,
            on_input=on_primary_color_input,
        )
        me.text(session.data.primary_color.upper(), style=me.Style(font_family="monospace", font_weight="bold"))

    if session.data.client_logo:
        with me.box(style=me.Style(display="flex", align_items="center", gap=16)):
            me.image(src=session.data.client_logo, style=me.Style(height=64, border_radius=4))
            me.button("Clear Logo", on_click=on_clear_logo, type="stroked")
    else:
        me.uploader(
            label="Upload Logo (optional)",
            on_upload=on_upload_logo,
            accepted_file_types=["image/png", "image/svg+xml", "image/jpeg", "image/webp"],
            key="logo_uploader",
        )
    nav_buttons(session)


def board_step(session: WizardSession, index: int):
    board = session.data.boards[index]
    me.text(f"Board {index + 1} Design", type="headline-6")
    me.input(
        label=f"Headline (max {HEADLINE_MAX_LENGTH} characters)",
        value=board.headline,
        on_input=on_headline_input,
        style=me.Style(width="100%"),
        key=f"headline_{index}",
    )
    me.textarea(
        label="Visual Style",
        placeholder="e.g., A bold close-up of a coffee cup with morning light",
        value=board.image_prompt,
        on_input=on_image_prompt_input,
        rows=3,
        style=me.Style(width="100%"),
        key=f"image_prompt_{index}",
    )
    me.checkbox(
        label="Include client logo",
        checked=board.include_logo,
        on_change=on_include_logo_change,
        key=f"include_logo_{index}",
    )
    nav_buttons(session)


def summary_step(session: WizardSession):
    data = session.data
    me.text("Review & Finalize", type="headline-6")
    me.text("Ready to generate your high-fidelity mockup.")

    if session.error_message:
        with me.box(
            style=me.Style(
                padding=me.Padding.all(16),
                border_radius=12,
                background=me.theme_var("error-container"),
                color=me.theme_var("on-error-container"),
            )
        ):
            me.text(session.error_message)

    with me.box(style=me.Style(display="flex", flex_direction="row", justify_content="space-between", align_items="center")):
        with me.box():
            me.text("Client", type="caption")
            me.text(data.client_name, style=me.Style(font_weight="bold"))
        edit_button(target_step=Step.CLIENT_INFO.value, on_click=on_edit_click)

    dimensions = get_image_dimensions_from_base64(data.street_photo) if data.street_photo else None
    if dimensions:
        me.text(f"Street photo: {dimensions[0]} x {dimensions[1]} px", type="caption")

    with me.box(style=me.Style(display="grid", grid_template_columns="repeat(3, 1fr)", gap=8)):
        for i, board in enumerate(data.boards):
            with me.box():
                me.text(f"Board {i + 1}", type="caption")
                me.text(board.headline, style=me.Style(font_weight="bold"))
    edit_button(target_step=Step.BOARD_1.value, on_click=on_edit_click, label="Edit Content")

    with me.box(style=ROW_STYLE):
        me.button("Back", on_click=on_back_click, type="stroked")
        me.button("Generate Mockup", on_click=on_generate_click, type="flat")


def generating_step():
    with me.box(style=me.Style(display="flex", flex_direction="column", align_items="center", gap=16, padding=me.Padding.all(32))):
        me.progress_spinner(diameter=64)
        me.text("Generating Masterpiece...", type="headline-6")
        me.text("Analyzing branding, rendering perspectives, and applying light maps.")


def result_step(session: WizardSession):
    me.text("Mockup Ready!", type="headline-6")
    me.text(f"The visual asset for {session.data.client_name} has been generated.")
    if session.result_image:
        me.image(
            src=session.result_image,
            style=me.Style(width="100%", border_radius=12, border=me.Border.all(me.BorderSide(width=1, color="#ccc"))),
        )
    me.button("Start New Project", on_click=on_restart_click, type="stroked")


# --- Event Handlers ---

def _apply(update):
    """Applies `update` to the stored session, surfacing wizard errors."""
    state = me.state(PageState)
    session = load_session(state)
    try:
        updated = update(session)
    except (WizardError, ValueError, KeyError, IndexError) as ex:
        logger.warning(f"Wizard update rejected on step {session.step.value}: {ex}")
        state.snackbar_message = str(ex)
        state.show_snackbar = True
        return
    if updated.step != session.step:
        log_step_change(session.step.value, updated.step.value)
    save_session(state, updated)


def on_upload_street_photo(e: me.UploadEvent):
    file = e.files[0]
    uri = bytes_to_data_uri(file.getvalue(), file.mime_type)
    _apply(lambda s: s.update_field("street_photo", uri))
    yield

def on_upload_logo(e: me.UploadEvent):
    file = e.files[0]
    uri = bytes_to_data_uri(file.getvalue(), file.mime_type)
    _apply(lambda s: s.update_field("client_logo", uri))
    yield

def on_clear_logo(e: me.ClickEvent):
    _apply(lambda s: s.update_field("client_logo", None))
    yield

def on_client_name_input(e: me.InputEvent):
    _apply(lambda s: s.update_field("client_name", e.value))

def on_brand_url_blur(e: me.InputBlurEvent):
    _apply(lambda s: s.update_field("brand_url", e.value.strip()))

def on_primary_color_input(e: me.InputEvent):
    _apply(lambda s: s.update_field("primary_color", e.value))

def on_headline_input(e: me.InputEvent):
    _apply(lambda s: s.update_board(s.board_index, headline=e.value))

def on_image_prompt_input(e: me.InputEvent):
    _apply(lambda s: s.update_board(s.board_index, image_prompt=e.value))

def on_include_logo_change(e: me.CheckboxChangeEvent):
    _apply(lambda s: s.update_board(s.board_index, include_logo=e.checked))

def on_next_click(e: me.ClickEvent):
    _apply(lambda s: s.advance())
    yield

def on_back_click(e: me.ClickEvent):
    _apply(lambda s: s.retreat())
    yield

def on_edit_click(e: me.ClickEvent):
    _apply(lambda s: s.jump_to(Step(e.key)))
    yield

@track_click(element_id="generate_mockup")
def on_generate_click(e: me.ClickEvent):
    state = me.state(PageState)
    session = load_session(state).begin_generation()
    save_session(state, session)
    yield

    session = finish_generation(session, lambda data: get_mockup_generator().generate(data))
    save_session(state, session)
    yield

@track_click(element_id="restart")
def on_restart_click(e: me.ClickEvent):
    state = me.state(PageState)
    save_session(state, load_session(state).restart())
    yield
