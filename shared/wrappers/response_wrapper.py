import json
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode


# success code and message per HTTP method, other methods use the GET entry
SUCCESS_BY_METHOD = {
    "GET": (AppStatusCode.DATA_RETRIEVED_SUCCESSFULLY, "Data retrieved successfully"),
    "POST": (AppStatusCode.CREATED_SUCCESSFULLY, "Created successfully"),
    "PUT": (AppStatusCode.UPDATED_SUCCESSFULLY, "Updated successfully"),
    "DELETE": (AppStatusCode.DELETED_SUCCESSFULLY, "Deleted successfully"),
}


class JsonResponseMiddleware(BaseHTTPMiddleware):
    """Wraps successful JSON bodies in the JsonOutResult envelope.

    Failures are already wrapped by the exception handlers, non-JSON bodies
    (PDF downloads) pass through untouched.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        # Skip docs/openapi endpoints
        if request.url.path.startswith(("/openapi", "/docs", "/redoc")):
            return await call_next(request)

        response = await call_next(request)

        is_json = "application/json" in response.headers.get("content-type", "")
        if not (200 <= response.status_code < 400) or not is_json:
            return response

        body_bytes = b""
        async for chunk in response.body_iterator:
            body_bytes += chunk

        headers = {k: v for k, v in response.headers.items()
                   if k.lower() != "content-length"}

        try:
            data = json.loads(body_bytes.decode("utf-8"))
        except ValueError:
            return Response(content=body_bytes, status_code=response.status_code,
                            headers=headers)

        # Skip if already wrapped
        if isinstance(data, dict) and {"status", "status_code", "message"}.issubset(data.keys()):
            return JSONResponse(content=data, status_code=response.status_code,
                                headers=headers)

        status_code, message = SUCCESS_BY_METHOD.get(
            request.method, SUCCESS_BY_METHOD["GET"])
        wrapped = JsonOutResult(
            data=data,
            status="Success",
            status_code=status_code,
            message=message
        ).model_dump()

        return JSONResponse(content=wrapped, status_code=response.status_code,
                            headers=headers)
