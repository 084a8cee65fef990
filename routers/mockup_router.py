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

from fastapi import APIRouter, Depends, HTTPException

from common.analytics import get_logger
from common.utils import mockup_file_name
from models.gemini_mockup import MockupGenerator
from models.mockup_wizard import incomplete_steps
from models.requests import (
    MockupGenerationRequest,
    MockupGenerationResponse,
    MockupReadinessResponse,
)
from services.mockup_service import get_mockup_generator

logger = get_logger(__name__)

router = APIRouter(prefix="/api/mockup", tags=["mockup"])


@router.post("/readiness", response_model=MockupReadinessResponse)
def check_mockup_readiness(request: MockupGenerationRequest):
    """
    Reports which wizard steps are missing required fields.
    """
    missing = [step.value for step in incomplete_steps(request)]
    return MockupReadinessResponse(ready=not missing, incomplete_steps=missing)


@router.post("/generate", response_model=MockupGenerationResponse)
def generate_mockup(
    request: MockupGenerationRequest,
    generator: MockupGenerator = Depends(get_mockup_generator),
):
    """
    Generates a street mockup synchronously.
    Returns the composite image as a PNG data URI.
    """
    missing = [step.value for step in incomplete_steps(request)]
    if missing:
        raise HTTPException(
            status_code=422,
            detail={"message": "Form is incomplete", "incomplete_steps": missing},
        )

    try:
        image = generator.generate(request)
    except Exception as e:
        logger.error(f"Mockup generation request failed: {e}")
        raise HTTPException(status_code=502, detail=str(e)) from e

    return MockupGenerationResponse(
        image=image, file_name=mockup_file_name(request.client_name)
    )
