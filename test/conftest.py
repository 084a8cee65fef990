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

"""Shared test fixtures."""

import io
from dataclasses import dataclass, field

import pytest
from google.genai import types
from PIL import Image

from common.utils import bytes_to_data_uri
from models.mockup import AppData, BoardConfig


def make_png_bytes(width: int = 4, height: int = 3, color=(255, 0, 0)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


def image_response(*parts: types.Part) -> types.GenerateContentResponse:
    """Builds a model response whose first candidate holds `parts`."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


@dataclass
class FakeModels:
    """Stands in for `genai.Client.models`, recording every call."""

    response: types.GenerateContentResponse | None = None
    error: Exception | None = None
    calls: list[dict] = field(default_factory=list)

    def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


@dataclass
class FakeGenaiClient:
    models: FakeModels = field(default_factory=FakeModels)


@pytest.fixture
def street_photo_bytes() -> bytes:
    return make_png_bytes(8, 6, (10, 20, 30))


@pytest.fixture
def logo_bytes() -> bytes:
    return make_png_bytes(2, 2, (200, 0, 0))


@pytest.fixture
def street_photo_uri(street_photo_bytes) -> str:
    return bytes_to_data_uri(street_photo_bytes, "image/jpeg")


@pytest.fixture
def logo_uri(logo_bytes) -> str:
    return bytes_to_data_uri(logo_bytes, "image/png")


@pytest.fixture
def complete_data(street_photo_uri, logo_uri) -> AppData:
    return AppData(
        street_photo=street_photo_uri,
        client_name="Acme Coffee",
        client_logo=logo_uri,
        brand_url="https://acme.example",
        primary_color="#112233",
        boards=(
            BoardConfig(headline="Wake Up Bold", image_prompt="steaming mug at sunrise"),
            BoardConfig(headline="Fresh Every Day", image_prompt="beans on burlap", include_logo=False),
            BoardConfig(headline="Open 24/7", image_prompt="neon storefront at night"),
        ),
    )


@pytest.fixture
def fake_client() -> FakeGenaiClient:
    return FakeGenaiClient()


@pytest.fixture
def make_response():
    return image_response
