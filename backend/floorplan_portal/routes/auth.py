# floorplan_portal/routes/auth.py

from fastapi import APIRouter, Body
from typing import Any
import logging

from floorplan_portal.errors import InternalError, ValidationError
from floorplan_portal.models.requests import LoginRequest, RegisterRequest
from floorplan_portal.models.responses import Envelope, envelope_response
from floorplan_portal.services import auth
from floorplan_portal.services.validator import is_text, require_valid, validate_login, validate_registration

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=Envelope)
def login(payload: Any = Body(None)):
    try:
        ok, errors = validate_login(payload)
        require_valid(ok, errors)
        user = auth.login(LoginRequest(email=payload["email"], password=payload["password"]))
        return envelope_response(200, True, "Login successful", data=user)
    except ValidationError as e:
        logger.warning("Rejected login: %s", e.error)
        raise
    except Exception as e:
        logger.exception("Login error: %s", e)
        raise InternalError("Failed to process login") from e


@router.post("/register", response_model=Envelope, status_code=201)
def register(payload: Any = Body(None)):
    try:
        ok, errors = validate_registration(payload)
        require_valid(ok, errors)
        req = RegisterRequest(
            fullName=payload["fullName"],
            email=payload["email"],
            password=payload["password"],
            confirmPassword=payload["confirmPassword"],
            role=payload.get("role") if is_text(payload.get("role")) else None,
        )
        user = auth.register(req)
        return envelope_response(201, True, "Registration successful", data=user)
    except ValidationError as e:
        logger.warning("Rejected registration: %s", e.error)
        raise
    except Exception as e:
        logger.exception("Registration error: %s", e)
        raise InternalError("Failed to process registration") from e
