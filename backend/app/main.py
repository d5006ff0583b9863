from __future__ import annotations

import uvicorn
from fastapi import FastAPI, Response
from pydantic import ValidationError

from app.pages import HOME_HTML
from app.settings import ServerSettings, load_env_file, load_settings, log_debug


async def home() -> Response:
    """
    Landing page.

    Reads nothing from the request. The content type is set explicitly so it is
    exactly `text/html` (Starlette would otherwise append a charset).
    """
    return Response(content=HOME_HTML, headers={"Content-Type": "text/html"})


def create_app(debug: bool | None = None) -> FastAPI:
    """`debug=None` leaves diagnostics to the WEBAPP_DEBUG environment flag."""
    application = FastAPI(title="AI Web App", docs_url=None, redoc_url=None, openapi_url=None)
    application.add_api_route("/", home, methods=["GET"], response_class=Response)
    application.state.debug = debug

    @application.on_event("startup")
    async def _announce_routes() -> None:
        paths = [getattr(r, "path", "?") for r in application.routes]
        log_debug(f"[STARTUP] Routes: {paths}", debug=application.state.debug)

    return application


app = create_app()


def run(settings: ServerSettings | None = None) -> int:
    """
    Serve `app` with uvicorn until stopped.

    Port-bind failures are reported by uvicorn itself, which exits the process.
    """
    if settings is None:
        load_env_file()
        try:
            settings = load_settings()
        except ValidationError as e:
            print(f"[STARTUP] Invalid configuration: {e}")
            return 1

    app.state.debug = settings.debug
    print(f"[STARTUP] Serving on {settings.base_url}/")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
    return 0
