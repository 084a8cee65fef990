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

"""Tests for the wizard step state machine."""

import pytest

from common.error_handling import IncompleteStepError, InvalidTransitionError
from models.mockup_wizard import (
    BOARD_STEPS,
    FORM_STEPS,
    Step,
    WizardSession,
    board_index_for,
    can_advance,
    incomplete_steps,
)


def _session_at(step: Step, data) -> WizardSession:
    return WizardSession(step=step, data=data)


def test_new_session_starts_on_street_photo() -> None:
    session = WizardSession()

    assert session.step == Step.STREET_PHOTO
    assert session.error_message is None
    assert session.result_image is None


def test_advance_without_photo_is_rejected() -> None:
    session = WizardSession()

    assert not session.can_advance()
    with pytest.raises(IncompleteStepError):
        session.advance()
    assert session.step == Step.STREET_PHOTO


def test_advance_with_photo_moves_one_step(street_photo_uri) -> None:
    session = WizardSession().update_field("street_photo", street_photo_uri)

    advanced = session.advance()

    assert advanced.step == Step.CLIENT_INFO
    assert session.step == Step.STREET_PHOTO


def test_client_info_requires_name(complete_data) -> None:
    session = _session_at(Step.CLIENT_INFO, complete_data).update_field("client_name", "")

    with pytest.raises(IncompleteStepError):
        session.advance()
    assert session.update_field("client_name", "Acme").advance().step == Step.BRAND_ASSETS


def test_brand_assets_has_no_requirements(complete_data) -> None:
    data = complete_data.model_copy(update={"client_logo": None, "brand_url": ""})

    assert _session_at(Step.BRAND_ASSETS, data).advance().step == Step.BOARD_1


@pytest.mark.parametrize("step", list(BOARD_STEPS))
@pytest.mark.parametrize("field", ["headline", "image_prompt"])
def test_board_steps_require_headline_and_prompt(complete_data, step, field) -> None:
    index = BOARD_STEPS[step]
    session = _session_at(step, complete_data).update_board(index, **{field: ""})

    assert not session.can_advance()
    with pytest.raises(IncompleteStepError):
        session.advance()


def test_board_gate_only_checks_its_own_board(complete_data) -> None:
    session = _session_at(Step.BOARD_1, complete_data).update_board(2, headline="")

    assert session.advance().step == Step.BOARD_2


def test_full_forward_and_backward_walk(complete_data) -> None:
    session = _session_at(Step.STREET_PHOTO, complete_data)
    visited = [session.step]
    while session.step != Step.SUMMARY:
        session = session.advance()
        visited.append(session.step)

    assert tuple(visited) == FORM_STEPS

    while session.step != Step.STREET_PHOTO:
        session = session.retreat()
    assert session.step == Step.STREET_PHOTO


def test_summary_does_not_advance_by_navigation(complete_data) -> None:
    session = _session_at(Step.SUMMARY, complete_data)

    assert not session.can_advance()
    with pytest.raises(InvalidTransitionError):
        session.advance()


def test_retreat_from_first_step_is_invalid() -> None:
    with pytest.raises(InvalidTransitionError):
        WizardSession().retreat()


def test_jumps_keep_entered_data(complete_data) -> None:
    session = _session_at(Step.SUMMARY, complete_data)

    session = session.jump_to(Step.CLIENT_INFO)
    assert session.step == Step.CLIENT_INFO
    session = session.jump_to(Step.BOARD_1)

    assert session.step == Step.BOARD_1
    assert session.data == complete_data


def test_jump_cannot_enter_or_leave_generation(complete_data) -> None:
    with pytest.raises(InvalidTransitionError):
        _session_at(Step.SUMMARY, complete_data).jump_to(Step.RESULT)
    with pytest.raises(InvalidTransitionError):
        _session_at(Step.GENERATING, complete_data).jump_to(Step.SUMMARY)


def test_generation_success_moves_to_result(complete_data) -> None:
    session = _session_at(Step.SUMMARY, complete_data).begin_generation()
    assert session.step == Step.GENERATING

    done = session.complete_generation("data:image/png;base64,AAAA")

    assert done.step == Step.RESULT
    assert done.result_image == "data:image/png;base64,AAAA"
    assert done.error_message is None


def test_generation_failure_returns_to_summary(complete_data) -> None:
    session = _session_at(Step.SUMMARY, complete_data).begin_generation()

    failed = session.fail_generation("quota exceeded")

    assert failed.step == Step.SUMMARY
    assert failed.error_message == "quota exceeded"
    assert failed.data == complete_data


def test_begin_generation_clears_previous_error(complete_data) -> None:
    session = WizardSession(step=Step.SUMMARY, data=complete_data, error_message="boom")

    assert session.begin_generation().error_message is None


def test_generation_actions_require_matching_step(complete_data) -> None:
    with pytest.raises(InvalidTransitionError):
        _session_at(Step.BOARD_3, complete_data).begin_generation()
    with pytest.raises(InvalidTransitionError):
        _session_at(Step.SUMMARY, complete_data).complete_generation("data:image/png;base64,AAAA")


def test_restart_resets_everything(complete_data) -> None:
    session = WizardSession(step=Step.RESULT, data=complete_data, result_image="x")

    fresh = session.restart()

    assert fresh == WizardSession()


def test_board_index_mapping() -> None:
    assert board_index_for(Step.BOARD_1) == 0
    assert board_index_for(Step.BOARD_3) == 2
    assert board_index_for(Step.SUMMARY) is None
    assert WizardSession(step=Step.BOARD_2).board_index == 1


def test_incomplete_steps_lists_blocking_steps(complete_data) -> None:
    assert incomplete_steps(complete_data) == []
    assert incomplete_steps(WizardSession().data) == [
        Step.STREET_PHOTO,
        Step.CLIENT_INFO,
        Step.BOARD_1,
        Step.BOARD_2,
        Step.BOARD_3,
    ]


def test_terminal_steps_cannot_advance(complete_data) -> None:
    assert not can_advance(Step.GENERATING, complete_data)
    assert not can_advance(Step.RESULT, complete_data)


def test_session_survives_json_round_trip(complete_data) -> None:
    session = WizardSession(step=Step.BOARD_2, data=complete_data, error_message="oops")

    restored = WizardSession.model_validate_json(session.model_dump_json())

    assert restored == session
    assert restored.step is Step.BOARD_2
