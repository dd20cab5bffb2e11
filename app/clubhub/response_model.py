from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from clubhub.constant_file import CORS_HEADERS, CORS_METHODS, CORS_ORIGINS


def ResponseModel(data, message, **extra):
    body = {"success": True, "message": message}
    body.update(extra)
    if data is not None:
        body["data"] = data
    return body


def ErrorResponseModel(error, code, message, **extra):
    body = {"success": False, "error": error, "code": code, "message": message}
    body.update(extra)
    return body


def json_response(content, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def apply_cors_headers(response, origin: str = None, allowed_origins=CORS_ORIGINS):
    """Stamp CORS headers. A request origin outside the allowlist gets none."""
    if "*" in allowed_origins:
        response.headers["Access-Control-Allow-Origin"] = "*"
    elif origin and origin in allowed_origins:
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Vary"] = "Origin"
    else:
        return response
    response.headers["Access-Control-Allow-Methods"] = CORS_METHODS
    response.headers["Access-Control-Allow-Headers"] = CORS_HEADERS
    return response
