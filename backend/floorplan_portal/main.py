# main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from floorplan_portal.config import Config
from floorplan_portal.errors import PortalError
from floorplan_portal.models.responses import envelope_response
from floorplan_portal.routes import auth, floorplan, pages, tutorial
from floorplan_portal.services.validator import BODY_NOT_OBJECT

logging.basicConfig(
    level=logging.DEBUG if Config.DEBUG else Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api"

app = FastAPI(title="Smart Floor Plan Generator", debug=Config.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def allowed_methods_message(allow: str) -> str:
    """'POST' -> 'Only POST requests are accepted',
    'POST, GET' -> 'Only GET and POST requests are accepted'."""
    methods = sorted(m.strip() for m in allow.split(",") if m.strip())
    return f"Only {' and '.join(methods)} requests are accepted"


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    return envelope_response(exc.status_code, False, exc.message, error=exc.error)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Only reachable when the body is not valid JSON
    logger.warning("Unparseable body on %s: %s", request.url.path, exc.errors())
    return envelope_response(400, False, "Validation failed", error=BODY_NOT_OBJECT)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405 and request.url.path.startswith(API_PREFIX):
        allow = (exc.headers or {}).get("Allow", "POST")
        return envelope_response(405, False, "Method not allowed",
                                 error=allowed_methods_message(allow))
    return await http_exception_handler(request, exc)


app.include_router(auth.router, prefix=API_PREFIX, tags=["Auth API"])
app.include_router(floorplan.router, prefix=API_PREFIX, tags=["Floor Plan API"])
app.include_router(tutorial.router, prefix=API_PREFIX, tags=["Tutorial API"])
app.include_router(pages.router, tags=["Pages"])


@app.get("/health")
def health():
    return {"status": "ok"}
