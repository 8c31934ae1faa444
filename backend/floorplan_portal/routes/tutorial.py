# floorplan_portal/routes/tutorial.py

from fastapi import APIRouter, Body, Request
from typing import Any, Mapping

from floorplan_portal.errors import ValidationError
from floorplan_portal.models.requests import TutorialStatusUpdate
from floorplan_portal.models.responses import Envelope, envelope_response
from floorplan_portal.services import tutorial
from floorplan_portal.services.validator import BODY_NOT_OBJECT

router = APIRouter()


# One route for both methods so a wrong method is answered with both in `Allow`.
@router.api_route("/tutorial-status", methods=["GET", "POST"], response_model=Envelope)
def tutorial_status(request: Request, payload: Any = Body(None)):
    if request.method == "GET":
        return envelope_response(200, True, "Tutorial status retrieved", data=tutorial.current_status())

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ValidationError(BODY_NOT_OBJECT)
    update = TutorialStatusUpdate(
        completed=payload.get("completed"),
        currentStep=payload.get("currentStep"),
    )
    return envelope_response(200, True, "Tutorial status updated", data=tutorial.update_status(update))
