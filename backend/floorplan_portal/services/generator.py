import asyncio
import logging
from typing import Any, Dict, Optional

from floorplan_portal.clock import now_ms, utc_now_iso
from floorplan_portal.config import Config
from floorplan_portal.models.requests import FloorPlanRequest

logger = logging.getLogger(__name__)

IMAGE_DIR = "/floor-plans"
PLOT_UNIT = "feet"


def echo_parameters(req: FloorPlanRequest) -> Dict[str, Any]:
    return {
        "length": req.length,
        "width": req.width,
        "unit": PLOT_UNIT,
        "bedrooms": req.bedrooms,
        "drawingRoom": req.drawingRoom,
        "kitchen": req.kitchen,
        "toilet": req.toilet,
        "additionalSpaces": {
            "hasParking": req.hasParking,
            "parkingLength": req.parkingLength,
            "parkingWidth": req.parkingWidth,
            "parkingDepth": req.parkingDepth,
            "hasPorch": req.hasPorch,
            "porch": req.porch,
            "hasVeranda": req.hasVeranda,
            "veranda": req.veranda,
        },
    }


async def generate_floorplan(req: FloorPlanRequest, delay: Optional[float] = None) -> Dict[str, Any]:
    """
    Placeholder for the floor plan model.

    Waits for the simulated processing delay, then fabricates a result: an id
    and image path derived from the current time plus an echo of the inputs.
    No layout is computed and no image is written.
    """
    if delay is None:
        delay = Config.GENERATION_DELAY_SECONDS
    if delay > 0:
        await asyncio.sleep(delay)

    stamp = now_ms()
    result = {
        "floorPlanId": f"fp_{stamp}",
        "imageUrl": f"{IMAGE_DIR}/generated_{stamp}.png",
        "parameters": echo_parameters(req),
        "generatedAt": utc_now_iso(),
    }
    logger.info("Fabricated floor plan %s (%sx%s ft, %s bedrooms)",
                result["floorPlanId"], req.length, req.width, req.bedrooms)
    return result
