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

"""Gemini image model integration for street-scene mockups."""

from dataclasses import dataclass
from typing import Optional

from google import genai
from google.genai import types

from common.analytics import get_logger, track_model_call
from common.error_handling import MissingCredentialsError, NoImageGeneratedError
from common.utils import bytes_to_data_uri, data_uri_to_bytes
from config.default import Default
from config.mockup_models import (
    get_mockup_model_config,
    resolve_model_name,
)
from models.mockup import AppData, BoardConfig

logger = get_logger(__name__)

STREET_PHOTO_MIME_TYPE = "image/jpeg"
LOGO_MIME_TYPE = "image/png"
RESULT_MIME_TYPE = "image/png"


def build_board_description(index: int, board: BoardConfig, primary_color: str) -> str:
    """Renders the instruction sub-block for one board."""
    logo = (
        "Include the provided client logo prominently."
        if board.include_logo
        else "Do not include logo."
    )
    return (
        f"Board {index + 1}:\n"
        f'- Headline: "{board.headline}"\n'
        f"- Visual Style: {board.image_prompt}\n"
        f"- Branding: Use primary color {primary_color}.\n"
        f"- Logo: {logo}"
    )


def build_mockup_prompt(data: AppData) -> str:
    """Builds the instruction text sent alongside the images."""
    board_descriptions = "\n\n".join(
        build_board_description(i, board, data.primary_color)
        for i, board in enumerate(data.boards)
    )
    if data.brand_url:
        branding = (
            f"Client Branding Context (derived from URL: {data.brand_url}): "
            "Use a professional, cohesive visual identity."
        )
    else:
        branding = "Client Branding Context: Use a professional, cohesive visual identity."

    return f"""You are an expert advertising designer. I have provided a street scene photo with existing street pole advertisement boards.
Your task is to realistically replace the artwork on those specific boards with new client designs for "{data.client_name}".

{branding}

Designs for the {len(data.boards)} boards:
{board_descriptions}

CRITICAL INSTRUCTIONS:
1. Maintain perfect perspective and distortion to match the boards in the original photo.
2. Apply realistic environmental lighting, reflections, and subtle weathering so the mockups look like they were actually installed and photographed.
3. The text should be sharp but naturally blended into the scene's lighting.
4. Ensure the output is a single high-resolution image of the entire street scene with the new advertisements."""


def build_mockup_parts(data: AppData) -> list[types.Part]:
    """Assembles the request parts: street photo, logo, then the instructions."""
    parts: list[types.Part] = []
    if data.street_photo:
        parts.append(
            types.Part.from_bytes(
                data=data_uri_to_bytes(data.street_photo),
                mime_type=STREET_PHOTO_MIME_TYPE,
            )
        )
    if data.client_logo:
        parts.append(
            types.Part.from_bytes(
                data=data_uri_to_bytes(data.client_logo),
                mime_type=LOGO_MIME_TYPE,
            )
        )
    parts.append(types.Part.from_text(text=build_mockup_prompt(data)))
    return parts


def extract_image_data_uri(response: types.GenerateContentResponse) -> str:
    """Returns the first inline image of the response as a PNG data URI.

    Only the first candidate is inspected; later image parts are ignored.

    Raises:
        NoImageGeneratedError: If no part carries image data.
    """
    candidates = response.candidates or []
    content = candidates[0].content if candidates else None
    for part in (content.parts if content else None) or []:
        if part.inline_data and part.inline_data.data:
            return bytes_to_data_uri(part.inline_data.data, RESULT_MIME_TYPE)

    finish_reason = candidates[0].finish_reason if candidates else None
    logger.warning(f"Mockup response contained no image (finish_reason={finish_reason})")
    raise NoImageGeneratedError()


@dataclass
class MockupGenerator:
    """Sends a completed form to Gemini and returns the composite image."""

    client: genai.Client
    model: str

    @classmethod
    def create(
        cls, api_key: Optional[str] = None, model: Optional[str] = None
    ) -> "MockupGenerator":
        """Create a generator from explicit arguments or the environment."""
        cfg = Default()
        api_key = api_key or cfg.GEMINI_API_KEY
        if not api_key:
            raise MissingCredentialsError(
                "GEMINI_API_KEY is not set; cannot call the image model."
            )
        http_options = None
        if cfg.MOCKUP_REQUEST_TIMEOUT_MS:
            http_options = types.HttpOptions(timeout=cfg.MOCKUP_REQUEST_TIMEOUT_MS)
        client = genai.Client(api_key=api_key, http_options=http_options)
        return cls(client=client, model=resolve_model_name(model or cfg.MOCKUP_MODEL_ID))

    def generate(self, data: AppData) -> str:
        """Generate the mockup for `data` and return it as a PNG data URI.

        Exactly one request is made. Errors from the SDK are not retried.
        """
        parts = build_mockup_parts(data)
        model_config = get_mockup_model_config(self.model)
        generation_config = None
        if model_config:
            generation_config = types.GenerateContentConfig(
                response_modalities=model_config.response_modalities,
            )

        logger.info(
            f"Requesting mockup for '{data.client_name}' from {self.model} "
            f"({len(parts) - 1} image part(s))"
        )
        try:
            with track_model_call(self.model, client_name=data.client_name):
                response = self.client.models.generate_content(
                    model=self.model,
                    contents=parts,
                    config=generation_config,
                )
                return extract_image_data_uri(response)
        except Exception as e:
            logger.error(f"Gemini mockup generation error: {e}")
            raise
