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

from typing import List

from pydantic import BaseModel

from models.mockup import AppData


class MockupGenerationRequest(AppData):
    """
    Defines the contract for a mockup generation request.
    It is the wizard's form data, so the UI and the HTTP API share one schema.
    """


class MockupGenerationResponse(BaseModel):
    """A generated mockup as a PNG data URI."""

    image: str
    file_name: str


class MockupReadinessResponse(BaseModel):
    """Which wizard steps still block generation."""

    ready: bool
    incomplete_steps: List[str]
