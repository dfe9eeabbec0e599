from starlette.requests import Request
from starlette.responses import Response

ALLOW_METHODS = "POST, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"


def apply_cors_headers(request: Request, response: Response, allowed_origins):
    """
    Echo the caller's Origin only when it is allow-listed. Foreign origins get
    no Access-Control-Allow-Origin, so the browser blocks the response even
    though the request itself was processed.
    """
    origin = request.headers.get("origin", "")
    if origin in allowed_origins:
        response.headers["Access-Control-Allow-Origin"] = origin
    response.headers["Vary"] = "Origin"
    response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
    response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
    return response
