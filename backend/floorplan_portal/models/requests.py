# floorplan_portal/models/requests.py
from pydantic import BaseModel
from typing import Any, Optional


class FloorPlanRequest(BaseModel):
    """Canonical generate-floorplan parameters, plot dimensions in feet."""
    length: float
    width: float
    bedrooms: int
    drawingRoom: int
    kitchen: int
    toilet: int
    hasParking: bool = False
    parkingLength: Optional[float] = None
    parkingWidth: Optional[float] = None
    parkingDepth: Optional[float] = None
    hasPorch: bool = False
    porch: Optional[int] = None
    hasVeranda: bool = False
    veranda: Optional[int] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    fullName: str
    email: str
    password: str
    confirmPassword: str
    role: Optional[str] = None


class TutorialStatusUpdate(BaseModel):
    # Echoed back exactly as received
    completed: Any = None
    currentStep: Any = None
