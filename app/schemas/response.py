from typing import Optional, Any, Dict, Generic, List, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class ErrorInfo(BaseModel):
    """Machine-readable part of a failed response."""
    code: str
    details: Optional[List[Dict[str, Any]]] = None


class APIResponse(BaseModel, Generic[T]):
    """Envelope wrapped around every API payload."""

    success: bool
    message: str
    data: Optional[T] = None
    error: Optional[ErrorInfo] = None

    @classmethod
    def success_response(cls, data: T, message: str = "Success") -> "APIResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error_response(
        cls, message: str, code: str, details: Optional[List[Dict[str, Any]]] = None
    ) -> "APIResponse[T]":
        return cls(success=False, message=message, error=ErrorInfo(code=code, details=details))

    def to_content(self) -> Dict[str, Any]:
        """JSON-ready dict for a ``JSONResponse``; unset error details are omitted."""
        content = self.model_dump(mode="json")
        if content["error"] is not None and content["error"]["details"] is None:
            del content["error"]["details"]
        return content
