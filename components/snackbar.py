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


@me.component
def snackbar(is_visible: bool, label: str):
    """Shows a transient message pinned to the bottom of the page."""
    if not is_visible:
        return
    with me.box(
        style=me.Style(
            position="fixed",
            bottom=24,
            left="50%",
            transform="translateX(-50%)",
            padding=me.Padding.symmetric(horizontal=24, vertical=14),
            border_radius=8,
            background=me.theme_var("inverse-surface"),
            color=me.theme_var("inverse-on-surface"),
            z_index=1000,
        )
    ):
        me.text(label)
