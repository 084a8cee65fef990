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

"""Street Mockup Studio: FastAPI app serving the API and the Mesop wizard."""

import logging

import mesop as me
from fastapi import FastAPI
from fastapi.middleware.wsgi import WSGIMiddleware

from common.error_handling import UnknownHandlerIdFilter
from config.default import Default
from pages import mockup_wizard as mockup_wizard_page  # noqa: F401 (registers the page)
from routers.mockup_router import router as mockup_router

logging.getLogger("mesop").addFilter(UnknownHandlerIdFilter())

app = FastAPI(title=Default().APP_TITLE)
app.include_router(mockup_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok"}


app.mount(
    "/",
    WSGIMiddleware(
        me.create_wsgi_app(debug_mode=Default().DEBUG_MODE)
    ),
)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8080)
