# floorplan_portal/routes/floorplan.py

from fastapi import APIRouter, Body
from typing import Any
import logging

from floorplan_portal.errors import InternalError, ValidationError
from floorplan_portal.models.requests import FloorPlanRequest
from floorplan_portal.models.responses import Envelope, envelope_response
from floorplan_portal.services.generator import generate_floorplan
from floorplan_portal.services.validator import (
    normalize_floorplan,
    require_valid,
    validate_floorplan_request,
)

router = APIRouter()
logger = logging.getLogger(__name__)


# Only the success shape is declared here. Errors are raised and turned into
# envelopes by the handlers in main.py.
@router.post("/generate-floorplan", response_model=Envelope)
async def generate_floorplan_route(payload: Any = Body(None)):
    try:
        ok, errors = validate_floorplan_request(payload)
        if not ok:
            logger.warning("Rejected floor plan request: %s", "; ".join(errors))
        require_valid(ok, errors)

        req = FloorPlanRequest(**normalize_floorplan(payload))
        result = await generate_floorplan(req)
        return envelope_response(200, True, "Floor plan generated successfully", data=result)

    except ValidationError:
        raise
    except Exception as e:
        logger.exception("Floor plan generation error: %s", e)
        raise InternalError("Failed to generate floor plan") from e
