from typing import Any, Dict

from floorplan_portal.clock import utc_now_iso
from floorplan_portal.models.requests import TutorialStatusUpdate


def current_status() -> Dict[str, Any]:
    """Nothing is persisted, so every visitor is on step 1."""
    return {
        "completed": False,
        "currentStep": 1,
        "lastVisited": utc_now_iso(),
    }


def update_status(update: TutorialStatusUpdate) -> Dict[str, Any]:
    return {
        "completed": update.completed,
        "currentStep": update.currentStep,
        "updatedAt": utc_now_iso(),
    }
