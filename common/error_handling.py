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

import logging

# Dedicated logger for tracking the suppressed error
race_condition_logger = logging.getLogger("mockup_studio.race_condition_tracker")


class GenerationError(Exception):
    """Custom exception for mockup generation errors."""

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class NoImageGeneratedError(GenerationError):
    """Raised when the model response carries no inline image data."""

    def __init__(self, message="No image data found in response"):
        super().__init__(message)


class MissingCredentialsError(Exception):
    """Raised when no Gemini API key is configured."""
    pass


class WizardError(Exception):
    """Base exception for wizard navigation errors."""
    pass


class InvalidTransitionError(WizardError):
    """Raised when an action is not defined for the current step."""

    def __init__(self, step, action):
        self.step = step
        self.action = action
        super().__init__(f"Action '{action}' is not allowed from step '{step}'")


class IncompleteStepError(WizardError):
    """Raised when advancing from a step whose required fields are empty."""

    def __init__(self, step):
        self.step = step
        super().__init__(f"Step '{step}' is missing required fields")


class UnknownHandlerIdFilter(logging.Filter):
    """A logging filter to suppress 'Unknown handler id' errors."""
    def filter(self, record):
        # Suppress the specific benign error message from Mesop
        if "Unknown handler id" in record.getMessage():
            # Log to a separate, non-disruptive logger for tracking purposes
            race_condition_logger.info("Suppressed 'Unknown handler id' error", extra={"original_record": record.getMessage()})
            return False # Prevent the original logger from processing it
        return True
