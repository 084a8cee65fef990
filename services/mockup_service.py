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

from typing import Callable

from common.analytics import get_logger
from models.gemini_mockup import MockupGenerator
from models.mockup import AppData
from models.mockup_wizard import Step, WizardSession

logger = get_logger(__name__)

DEFAULT_FAILURE_MESSAGE = "Failed to generate mockup. Please try again."

MockupGenerateFn = Callable[[AppData], str]

_generator: MockupGenerator | None = None


def get_mockup_generator() -> MockupGenerator:
    """Returns the process-wide generator, creating it on first use."""
    global _generator
    if _generator is None:
        _generator = MockupGenerator.create()
    return _generator


def finish_generation(session: WizardSession, generate: MockupGenerateFn) -> WizardSession:
    """
    Runs the model call for a session that is already GENERATING.
    Any failure sends the session back to the summary with the error attached.
    """
    try:
        image = generate(session.data)
    except Exception as e:
        logger.error(f"Mockup generation failed for '{session.data.client_name}': {e}")
        return session.fail_generation(str(e) or DEFAULT_FAILURE_MESSAGE)

    logger.info(f"Mockup generated for '{session.data.client_name}'")
    return session.complete_generation(image)


def run_generation(session: WizardSession, generate: MockupGenerateFn) -> WizardSession:
    """Moves a session from the summary through generation to its outcome."""
    if session.step != Step.GENERATING:
        session = session.begin_generation()
    return finish_generation(session, generate)
