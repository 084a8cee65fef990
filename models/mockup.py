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

"""Form data collected by the mockup wizard.

Both models are frozen. Updates go through the functions below, which return
a new value and carry every untouched field over by reference.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

BOARD_COUNT = 3
HEADLINE_MAX_LENGTH = 100
DEFAULT_PRIMARY_COLOR = "#ef4444"


class BoardConfig(BaseModel):
    """Ad copy and visual direction for one street-pole board."""

    model_config = ConfigDict(frozen=True)

    headline: str = Field(default="", max_length=HEADLINE_MAX_LENGTH)
    image_prompt: str = ""
    include_logo: bool = True


def _blank_boards() -> tuple[BoardConfig, BoardConfig, BoardConfig]:
    return tuple(BoardConfig() for _ in range(BOARD_COUNT))


class AppData(BaseModel):
    """Everything the wizard collects for one mockup."""

    model_config = ConfigDict(frozen=True)

    street_photo: Optional[str] = None  # data URI
    client_name: str = ""
    client_logo: Optional[str] = None  # data URI
    brand_url: str = ""
    primary_color: str = DEFAULT_PRIMARY_COLOR
    boards: tuple[BoardConfig, BoardConfig, BoardConfig] = Field(
        default_factory=_blank_boards
    )


def new_app_data() -> AppData:
    """Returns the empty form a new session starts with."""
    return AppData()


def update_board(data: AppData, index: int, **changes: Any) -> AppData:
    """Returns a copy of `data` with one board partially updated."""
    if not 0 <= index < BOARD_COUNT:
        raise IndexError(f"Board index {index} is out of range")
    unknown = set(changes) - set(BoardConfig.model_fields)
    if unknown:
        raise KeyError(f"Unknown board field(s): {', '.join(sorted(unknown))}")

    board = data.boards[index]
    updated = BoardConfig.model_validate({**board.model_dump(), **changes})
    boards = tuple(updated if i == index else b for i, b in enumerate(data.boards))
    return data.model_copy(update={"boards": boards})


def update_field(data: AppData, path: str, value: Any) -> AppData:
    """Returns a copy of `data` with the field at `path` set to `value`.

    `path` is either a top-level field name ("client_name") or a board field
    addressed as "boards.<index>.<field>" ("boards.0.headline").
    """
    if path.startswith("boards."):
        try:
            _, index, field_name = path.split(".")
            board_index = int(index)
        except ValueError as e:
            raise KeyError(f"Malformed board path: {path}") from e
        return update_board(data, board_index, **{field_name: value})

    if path == "boards" or path not in AppData.model_fields:
        raise KeyError(f"Unknown field: {path}")
    # Validate the single changed field against the model's annotation.
    validated = AppData.model_validate({path: value})
    return data.model_copy(update={path: getattr(validated, path)})
