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

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv(override=True)


def _optional_int(name: str) -> int | None:
    value = os.environ.get(name, "").strip()
    return int(value) if value else None


@dataclass
class Default:
    """Defaults class"""

    # Gemini API
    # API_KEY is accepted when GEMINI_API_KEY is unset.
    GEMINI_API_KEY: str = field(
        default_factory=lambda: os.environ.get("GEMINI_API_KEY")
        or os.environ.get("API_KEY", "")
    )
    MOCKUP_MODEL_ID: str = field(
        default_factory=lambda: os.environ.get(
            "MOCKUP_MODEL_ID", "gemini-2.5-flash-image"
        )
    )
    # Unset means the request waits for the model indefinitely.
    MOCKUP_REQUEST_TIMEOUT_MS: int | None = field(
        default_factory=lambda: _optional_int("MOCKUP_REQUEST_TIMEOUT_MS")
    )

    # Application
    APP_TITLE: str = "Street Mockup Studio"
    LOG_LEVEL: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))
    DEBUG_MODE: bool = field(
        default_factory=lambda: os.environ.get("DEBUG_MODE", "false").lower() == "true"
    )
