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

@me.stateclass
class PageState:
    """Mockup Wizard Page State"""

    # Wizard session (models.mockup_wizard.WizardSession as a JSON string)
    session_json: str = ""
    session_id: str = ""
    current_step: str = "street_photo"

    # UI
    show_snackbar: bool = False
    snackbar_message: str = ""
