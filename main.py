from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from Auth.origin_policy import apply_cors_headers
from Config.settings import Settings
from Router.router import CREATE_DAMAGE_PATH, router
from typing import Optional
import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("damage_intake")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="damage_intake")
    app.state.settings = settings

    if not settings.airtable_pat:
        logger.warning("AIRTABLE_PAT is not set, every damage report will fail")

    # CORS runs before anything else, OPTIONS never reaches the routes
    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)
        return apply_cors_headers(request, response, settings.allowed_origins)

    @app.exception_handler(StarletteHTTPException)
    async def error_envelope(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405 and request.url.path == CREATE_DAMAGE_PATH:
            content = {"error": "POST only"}
        elif isinstance(exc.detail, dict):
            content = exc.detail
        else:
            content = {"error": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "damage_intake"}

    app.include_router(router)
    return app


app = create_app()
