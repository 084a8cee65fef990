# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import base64
import binascii
import io
import re

from absl import logging
from PIL import Image

DATA_URI_PATTERN = re.compile(r"^data:(?P<mime_type>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^;,]+)*),(?P<data>.*)$", re.DOTALL)


def bytes_to_data_uri(contents: bytes, mime_type: str) -> str:
    """Encodes raw bytes as a base64 data URI."""
    encoded = base64.b64encode(contents).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def split_data_uri(data_uri: str) -> tuple[str, str]:
    """Splits a base64 data URI into its (mime_type, base64 payload).

    A bare base64 string (no "data:" prefix) is accepted and reported with an
    empty mime type.

    Raises:
        ValueError: If the string looks like a data URI but is not base64.
    """
    if not data_uri.startswith("data:"):
        return "", data_uri
    match = DATA_URI_PATTERN.match(data_uri)
    if not match or ";base64" not in match.group("params"):
        raise ValueError("Only base64 encoded data URIs are supported")
    return match.group("mime_type") or "", match.group("data")


def data_uri_to_bytes(data_uri: str) -> bytes:
    """Decodes a base64 data URI (or bare base64 string) to raw bytes."""
    _, payload = split_data_uri(data_uri)
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 image data: {e}") from e


def get_image_dimensions_from_base64(base64_string: str) -> tuple[int, int] | None:
    """Retrieves the width and height of an image from a base64 encoded string.

    Args:
        base64_string: The base64 encoded image data, optionally as a data URI.

    Returns:
        A tuple (width, height) if successful, or None if an error occurs.
    """
    try:
        image_stream = io.BytesIO(data_uri_to_bytes(base64_string))
        with Image.open(image_stream) as img:
            return img.size
    except Exception as e:
        logging.info(f"App: Error getting image dimensions: {e}")
        return None


def mockup_file_name(client_name: str) -> str:
    """Builds the file name used when a finished mockup is saved."""
    safe_name = re.sub(r"[^\w-]+", "_", client_name.strip()).strip("_") or "Client"
    return f"{safe_name}_Street_Mockup.png"
