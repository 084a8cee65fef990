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

"""A reusable button for jumping back to an earlier wizard step."""

from typing import Callable

import mesop as me


@me.component
def edit_button(target_step: str, on_click: Callable, label: str = "Edit"):
    """
    A small text button used by the summary to reopen an earlier step.

    Args:
        target_step: The value of the step to jump to; passed through the key.
        on_click: Handler that receives the click event.
        label: Button text.
    """
    with (
        me.content_button(
            on_click=on_click,
            key=target_step,  # Pass the step through the key
            type="flat",
        ),
        me.box(
            style=me.Style(
                display="flex",
                flex_direction="row",
                align_items="center",
                gap=8,
                color=me.theme_var("primary"),
            )
        ),
    ):
        me.icon("edit")
        me.text(label)
