from fastapi import status, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.schemas.response import APIResponse


error_code_map = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    409: "CONFLICT",
    413: "PAYLOAD_TOO_LARGE",
    500: "INTERNAL_SERVER_ERROR"
}


async def http_exception_handler(request: Request, exc: HTTPException):
    error_code = error_code_map.get(exc.status_code, f"HTTP_{exc.status_code}")

    response_data = APIResponse.error_response(
        message=str(exc.detail),
        code=error_code,
    ).to_content()
    return JSONResponse(
        status_code=exc.status_code,
        content=response_data,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed or missing fields are reported as 400, not FastAPI's 422.
    details = [
        {
            "loc": list(err.get("loc", ())),
            "msg": err.get("msg"),
            "type": err.get("type"),
        }
        for err in exc.errors()
    ]
    response_data = APIResponse.error_response(
        message="Invalid request data",
        code=error_code_map[400],
        details=jsonable_encoder(details),
    ).to_content()
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response_data)


class NotFoundException(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestException(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedException(HTTPException):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class PayloadTooLargeException(HTTPException):
    def __init__(self, detail: str = "Payload too large"):
        super().__init__(status_code=status.HTTP_413_CONTENT_TOO_LARGE, detail=detail)


class InternalServerErrorException(HTTPException):
    def __init__(self, detail: str = "Internal Server Error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
