from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Dict, Any, Optional


class Envelope(BaseModel):
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        # `data` and `error` are left out when unset; None inside `data` is kept.
        body: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            body["data"] = self.data
        if self.error is not None:
            body["error"] = self.error
        return body


def envelope_response(status_code: int, success: bool, message: str,
                      data: Optional[Dict[str, Any]] = None,
                      error: Optional[str] = None) -> JSONResponse:
    env = Envelope(success=success, message=message, data=data, error=error)
    return JSONResponse(status_code=status_code, content=env.to_json())
