# floorplan_portal/routes/pages.py
"""
Server-rendered pages: the informational pages plus the register and
floor plan parameter forms.

The forms run the same field rules as the API, but report every failing
field at once so the page can show each message beside its input.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from floorplan_portal.config import Config
from floorplan_portal.models.requests import FloorPlanRequest
from floorplan_portal.services.generator import generate_floorplan
from floorplan_portal.services.validator import (
    DEFAULT_ROLE,
    ROLES,
    normalize_floorplan,
    validate_floorplan_form,
    validate_registration_form,
)

router = APIRouter()
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")

GENERATION_FAILED = "Failed to generate floor plan. Please check your inputs and try again."
PASSWORD_FIELDS = ("password", "confirmPassword")


def _render(request: Request, name: str, status_code: int = 200, **context) -> HTMLResponse:
    return templates.TemplateResponse(request, name, context, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    return _render(request, "index.html")


@router.get("/about", response_class=HTMLResponse)
def about(request: Request):
    return _render(request, "about.html")


@router.get("/tutorial", response_class=HTMLResponse)
def tutorial(request: Request):
    return _render(request, "tutorial.html")


def _text_values(form: dict) -> dict:
    # Only text fields are echoed into the page
    return {k: v for k, v in form.items() if isinstance(v, str)}


@router.get("/register", response_class=HTMLResponse)
def register_form(request: Request):
    return _render(request, "register.html", values={"role": DEFAULT_ROLE}, errors={},
                   roles=ROLES, registered=False)


@router.post("/register", response_class=HTMLResponse)
async def register_submit(request: Request):
    form = dict(await request.form())
    errors = validate_registration_form(form)
    # Passwords are never sent back to the browser
    values = {k: v for k, v in _text_values(form).items() if k not in PASSWORD_FIELDS}
    if not values.get("role"):
        values["role"] = DEFAULT_ROLE
    if errors:
        return _render(request, "register.html", status_code=400,
                       values=values, errors=errors, roles=ROLES, registered=False)
    logger.info("Registration form accepted for %s", values.get("email"))
    return _render(request, "register.html", values=values, errors={}, roles=ROLES, registered=True)


@router.get("/app", response_class=HTMLResponse)
def app_form(request: Request):
    return _render(request, "app.html", values={}, errors={}, floor_plan=None, generation_error=None)


@router.post("/app", response_class=HTMLResponse)
async def app_submit(request: Request):
    form = dict(await request.form())
    errors = validate_floorplan_form(form)
    if errors:
        return _render(request, "app.html", status_code=400, values=_text_values(form), errors=errors,
                       floor_plan=None, generation_error=None)
    try:
        req = FloorPlanRequest(**normalize_floorplan(form))
        floor_plan = await generate_floorplan(req, delay=Config.FORM_DELAY_SECONDS)
    except Exception as e:
        logger.exception("Generation error: %s", e)
        return _render(request, "app.html", status_code=500, values=_text_values(form), errors={},
                       floor_plan=None, generation_error=GENERATION_FAILED)
    return _render(request, "app.html", values=_text_values(form), errors={}, floor_plan=floor_plan,
                   generation_error=None)
