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

"""Step state machine for the mockup wizard.

Every move between steps is looked up in TRANSITIONS; a (step, action) pair
that is not listed there is rejected with InvalidTransitionError.
"""

from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from common.error_handling import IncompleteStepError, InvalidTransitionError
from models.mockup import AppData, new_app_data, update_board, update_field


class Step(str, Enum):
    STREET_PHOTO = "street_photo"
    CLIENT_INFO = "client_info"
    BRAND_ASSETS = "brand_assets"
    BOARD_1 = "board_1"
    BOARD_2 = "board_2"
    BOARD_3 = "board_3"
    SUMMARY = "summary"
    GENERATING = "generating"
    RESULT = "result"


class WizardAction(str, Enum):
    NEXT = "next"
    BACK = "back"
    JUMP = "jump"
    GENERATE = "generate"
    SUCCEED = "succeed"
    FAIL = "fail"


# Steps the user fills in; the edit shortcuts may jump between any of them.
FORM_STEPS: tuple[Step, ...] = (
    Step.STREET_PHOTO,
    Step.CLIENT_INFO,
    Step.BRAND_ASSETS,
    Step.BOARD_1,
    Step.BOARD_2,
    Step.BOARD_3,
    Step.SUMMARY,
)

BOARD_STEPS: dict[Step, int] = {
    Step.BOARD_1: 0,
    Step.BOARD_2: 1,
    Step.BOARD_3: 2,
}


def _linear_transitions() -> dict[tuple[Step, WizardAction], Step]:
    table = {}
    for current, following in zip(FORM_STEPS, FORM_STEPS[1:]):
        table[(current, WizardAction.NEXT)] = following
        table[(following, WizardAction.BACK)] = current
    return table


TRANSITIONS: dict[tuple[Step, WizardAction], Step] = {
    **_linear_transitions(),
    (Step.SUMMARY, WizardAction.GENERATE): Step.GENERATING,
    (Step.GENERATING, WizardAction.SUCCEED): Step.RESULT,
    (Step.GENERATING, WizardAction.FAIL): Step.SUMMARY,
}


def board_index_for(step: Step) -> Optional[int]:
    """Returns the board a step edits, or None for non-board steps."""
    return BOARD_STEPS.get(step)


def _board_is_complete(index: int) -> Callable[[AppData], bool]:
    def check(data: AppData) -> bool:
        board = data.boards[index]
        return bool(board.headline) and bool(board.image_prompt)
    return check


STEP_REQUIREMENTS: dict[Step, Callable[[AppData], bool]] = {
    Step.STREET_PHOTO: lambda data: bool(data.street_photo),
    Step.CLIENT_INFO: lambda data: bool(data.client_name),
    Step.BRAND_ASSETS: lambda data: True,
    **{step: _board_is_complete(index) for step, index in BOARD_STEPS.items()},
}


def can_advance(step: Step, data: AppData) -> bool:
    """Whether the "continue" action is enabled on `step` for `data`."""
    if (step, WizardAction.NEXT) not in TRANSITIONS:
        return False
    return STEP_REQUIREMENTS[step](data)


def incomplete_steps(data: AppData) -> list[Step]:
    """Lists the form steps whose required fields are still empty."""
    return [step for step, check in STEP_REQUIREMENTS.items() if not check(data)]


def next_step(step: Step, action: WizardAction) -> Step:
    try:
        return TRANSITIONS[(step, action)]
    except KeyError:
        raise InvalidTransitionError(step.value, action.value) from None


class WizardSession(BaseModel):
    """One user's pass through the wizard.

    `result_image` and `error_message` hold the outcome of the latest
    generation attempt; at most one of them is set.
    """

    model_config = ConfigDict(frozen=True)

    step: Step = Step.STREET_PHOTO
    data: AppData = Field(default_factory=new_app_data)
    error_message: Optional[str] = None
    result_image: Optional[str] = None

    @property
    def board_index(self) -> Optional[int]:
        return board_index_for(self.step)

    def can_advance(self) -> bool:
        return can_advance(self.step, self.data)

    def _move(self, action: WizardAction, **changes: Any) -> "WizardSession":
        return self.model_copy(update={"step": next_step(self.step, action), **changes})

    def advance(self) -> "WizardSession":
        target = next_step(self.step, WizardAction.NEXT)
        if not self.can_advance():
            raise IncompleteStepError(self.step.value)
        return self.model_copy(update={"step": target})

    def retreat(self) -> "WizardSession":
        return self._move(WizardAction.BACK)

    def jump_to(self, step: Step) -> "WizardSession":
        """Moves straight to another form step without checking gates."""
        if self.step not in FORM_STEPS or step not in FORM_STEPS:
            raise InvalidTransitionError(self.step.value, WizardAction.JUMP.value)
        return self.model_copy(update={"step": step})

    def update_field(self, path: str, value: Any) -> "WizardSession":
        return self.model_copy(update={"data": update_field(self.data, path, value)})

    def update_board(self, index: int, **changes: Any) -> "WizardSession":
        return self.model_copy(update={"data": update_board(self.data, index, **changes)})

    def begin_generation(self) -> "WizardSession":
        return self._move(WizardAction.GENERATE, error_message=None, result_image=None)

    def complete_generation(self, image: str) -> "WizardSession":
        return self._move(WizardAction.SUCCEED, result_image=image, error_message=None)

    def fail_generation(self, message: str) -> "WizardSession":
        return self._move(WizardAction.FAIL, error_message=message, result_image=None)

    def restart(self) -> "WizardSession":
        return WizardSession()
