# Login / registration placeholders. Nothing is looked up, hashed or stored.
import logging
from typing import Any, Dict

from floorplan_portal.clock import now_ms
from floorplan_portal.models.requests import LoginRequest, RegisterRequest
from floorplan_portal.services.validator import DEFAULT_ROLE

logger = logging.getLogger(__name__)

PLACEHOLDER_USER_ID = "user_123"
PLACEHOLDER_TOKEN = "jwt_token_placeholder"


def login(req: LoginRequest) -> Dict[str, Any]:
    logger.info("Placeholder login for %s", req.email)
    return {
        "userId": PLACEHOLDER_USER_ID,
        "email": req.email,
        "token": PLACEHOLDER_TOKEN,
    }


def register(req: RegisterRequest) -> Dict[str, Any]:
    user = {
        "userId": f"user_{now_ms()}",
        "fullName": req.fullName,
        "email": req.email,
        "role": req.role or DEFAULT_ROLE,
    }
    logger.info("Placeholder registration %s for %s", user["userId"], req.email)
    return user
