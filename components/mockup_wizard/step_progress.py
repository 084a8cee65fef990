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

import mesop as me

from models.mockup_wizard import FORM_STEPS, Step

STEP_LABELS = {
    Step.STREET_PHOTO: "Street Photo",
    Step.CLIENT_INFO: "Client",
    Step.BRAND_ASSETS: "Brand",
    Step.BOARD_1: "Board 1",
    Step.BOARD_2: "Board 2",
    Step.BOARD_3: "Board 3",
    Step.SUMMARY: "Review",
    Step.GENERATING: "Generating",
    Step.RESULT: "Result",
}


@me.component
def step_progress(current: Step):
    """Row of pills marking completed, active and upcoming form steps."""
    # Generating and result count as past the last form step.
    position = FORM_STEPS.index(current) if current in FORM_STEPS else len(FORM_STEPS)
    with me.box(style=me.Style(display="flex", flex_direction="row", gap=6, flex_wrap="wrap")):
        for i, step in enumerate(FORM_STEPS):
            if i < position:
                background = me.theme_var("primary-container")
            elif i == position:
                background = me.theme_var("primary")
            else:
                background = me.theme_var("surface-container-high")
            with me.box(
                style=me.Style(
                    padding=me.Padding.symmetric(horizontal=10, vertical=4),
                    border_radius=12,
                    background=background,
                    color=me.theme_var("on-primary") if i == position else me.theme_var("on-surface"),
                    font_size=12,
                )
            ):
                me.text(STEP_LABELS[step])
