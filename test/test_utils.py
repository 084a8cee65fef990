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

"""Tests for the wizard form data models."""

"""Tests for image and data URI helpers."""

import base64

import pytest

from common.utils import (
    bytes_to_data_uri,
    data_uri_to_bytes,
    get_image_dimensions_from_base64,
    mockup_file_name,
    split_data_uri,
)


def test_bytes_to_data_uri_encodes_payload() -> None:
    uri = bytes_to_data_uri(b"hello", "image/png")

    assert uri == "data:image/png;base64," + base64.b64encode(b"hello").decode("utf-8")
    assert data_uri_to_bytes(uri) == b"hello"


def test_split_data_uri_reads_mime_type() -> None:
    assert split_data_uri("data:image/webp;base64,QUJD") == ("image/webp", "QUJD")


def test_split_data_uri_accepts_bare_base64() -> None:
    assert split_data_uri("QUJD") == ("", "QUJD")
    assert data_uri_to_bytes("QUJD") == b"ABC"


def test_non_base64_data_uri_is_rejected() -> None:
    with pytest.raises(ValueError):
        split_data_uri("data:text/plain,hello")


def test_invalid_base64_is_rejected() -> None:
    with pytest.raises(ValueError):
        data_uri_to_bytes("data:image/png;base64,not*base64")


def test_image_dimensions(street_photo_uri) -> None:
    assert get_image_dimensions_from_base64(street_photo_uri) == (8, 6)


def test_image_dimensions_for_garbage_is_none() -> None:
    assert get_image_dimensions_from_base64(bytes_to_data_uri(b"nope", "image/png")) is None


@pytest.mark.parametrize(
    "client_name, expected",
    [
        ("Acme Coffee", "Acme_Coffee_Street_Mockup.png"),
        ("  Joe's Diner & Grill ", "Joe_s_Diner_Grill_Street_Mockup.png"),
        ("", "Client_Street_Mockup.png"),
        ("///", "Client_Street_Mockup.png"),
    ],
)
def test_mockup_file_name(client_name, expected) -> None:
    assert mockup_file_name(client_name) == expected
