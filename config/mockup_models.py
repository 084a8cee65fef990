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

"""Gemini models known to edit a street photo into a mockup."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class MockupModelConfig:
    model_name: str  # API model id, e.g. "gemini-2.5-flash-image"
    aliases: List[str] = field(default_factory=list)  # Short ids accepted in MOCKUP_MODEL_ID
    # Image models must be asked for image output explicitly.
    response_modalities: List[str] = field(default_factory=lambda: ["TEXT", "IMAGE"])


MOCKUP_MODELS: Dict[str, MockupModelConfig] = {
    cfg.model_name: cfg
    for cfg in [
        MockupModelConfig(
            model_name="gemini-2.5-flash-image",
            aliases=["2.5-flash", "gemini-2.5-flash-image-preview"],
        ),
        MockupModelConfig(
            model_name="gemini-3-pro-image-preview",
            aliases=["3.0-pro-preview"],
        ),
    ]
}


def get_mockup_model_config(model_id: str) -> Optional[MockupModelConfig]:
    """Looks a model up by API id or alias."""
    if model_id in MOCKUP_MODELS:
        return MOCKUP_MODELS[model_id]
    for cfg in MOCKUP_MODELS.values():
        if model_id in cfg.aliases:
            return cfg
    return None


def resolve_model_name(model_id: str) -> str:
    """Returns the API model id; unknown ids pass through untouched."""
    cfg = get_mockup_model_config(model_id)
    return cfg.model_name if cfg else model_id
