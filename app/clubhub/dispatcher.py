"""
Route table and request dispatcher.

Every API request lands in ``Dispatcher.handle``. The path is normalized, the
first matching ``Route`` in declaration order is selected, the caller is
authenticated according to the route's ``auth`` level, and the handler is
awaited with a ``RequestContext``. All errors are translated to JSON here and
nowhere else.
"""
import json
import logging
import re
import traceback
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from sqlalchemy.orm import Session

from clubhub.constant_file import API_PREFIX, CORS_ORIGINS, DEBUG
from clubhub.controller.auth_controller import get_user_from_header, require_admin
from clubhub.database import Store
from clubhub.exceptions import ApiError, AuthenticationError
from clubhub.response_model import ErrorResponseModel, apply_cors_headers, json_response

logger = logging.getLogger(__name__)

AUTH_LEVELS = ("public", "optional", "user", "admin")
BODY_METHODS = ("POST", "PUT", "PATCH")

_PARAM = re.compile(r":(\w+)")


@dataclass
class RequestContext:
    method: str
    path: str
    params: Dict[str, str]
    query: Dict[str, str]
    body: Dict[str, Any]
    headers: Dict[str, str]
    db: Session
    store: Store
    user: Any = None


Handler = Callable[[RequestContext], Awaitable[Any]]


@dataclass(frozen=True)
class Route:
    method: str
    pattern: str
    handler: Handler
    auth: str = "public"
    regex: Optional["re.Pattern"] = field(default=None, compare=False)

    @classmethod
    def build(cls, method: str, pattern: str, handler: Handler, auth: str = "public") -> "Route":
        if auth not in AUTH_LEVELS:
            raise ValueError(f"Unknown auth level: {auth}")
        regex = None
        if ":" in pattern:
            regex = re.compile("^" + _PARAM.sub(r"(?P<\1>[^/]+)", pattern) + "$")
        return cls(method.upper(), pattern, handler, auth, regex)

    def match(self, method: str, path: str) -> Optional[Dict[str, str]]:
        if method != self.method:
            return None
        if self.regex is None:
            return {} if path == self.pattern else None
        found = self.regex.match(path)
        return found.groupdict() if found else None

    def __str__(self):
        return f"{self.method} {self.pattern}"


class RouteTable:
    """Ordered collection of routes; earlier declarations win."""

    def __init__(self):
        self.routes: List[Route] = []

    def add(self, method: str, pattern: str, handler: Handler, auth: str = "public"):
        self.routes.append(Route.build(method, pattern, handler, auth))
        return handler

    def route(self, method: str, pattern: str, auth: str = "public"):
        def decorator(handler):
            return self.add(method, pattern, handler, auth)
        return decorator

    def extend(self, other: "RouteTable"):
        self.routes.extend(other.routes)

    def __iter__(self):
        return iter(self.routes)

    def __len__(self):
        return len(self.routes)


def match_route(routes, method: str, path: str) -> Optional[Tuple[Route, Dict[str, str]]]:
    for route in routes:
        params = route.match(method, path)
        if params is not None:
            return route, params
    return None


def normalize_path(raw_path: str, prefix: str = API_PREFIX) -> str:
    path = raw_path or "/"
    if prefix and (path == prefix or path.startswith(prefix + "/")):
        path = path[len(prefix):]
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def parse_json_body(raw: bytes) -> Dict[str, Any]:
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        logger.warning("Malformed JSON body ignored")
        return {}
    return body if isinstance(body, dict) else {}


class Dispatcher:
    def __init__(self, routes, store: Store, prefix: str = API_PREFIX, debug: bool = DEBUG,
                 cors_origins=None):
        self.routes = list(routes)
        self.store = store
        self.prefix = prefix
        self.debug = debug
        self.cors_origins = list(cors_origins or CORS_ORIGINS)

    def with_cors(self, response: Response, request: Request) -> Response:
        return apply_cors_headers(response, request.headers.get("origin"), self.cors_origins)

    def available_routes(self, method: str = None) -> List[str]:
        return [str(r) for r in self.routes if method is None or r.method == method]

    async def handle(self, request: Request) -> Response:
        method = request.method.upper()
        if method == "OPTIONS":
            return self.with_cors(Response(status_code=200), request)

        path = normalize_path(request.url.path, self.prefix)
        logger.info("[API] %s %s", method, path)

        try:
            self.store.connect()
            body = parse_json_body(await request.body()) if method in BODY_METHODS else {}
            response = await self.dispatch(
                method, path, body, dict(request.query_params), dict(request.headers)
            )
        except Exception as e:
            response = self.error_response(e)
        return self.with_cors(response, request)

    async def dispatch(self, method, path, body, query, headers) -> Response:
        found = match_route(self.routes, method, path)
        if found is None:
            return json_response(
                ErrorResponseModel(
                    "ROUTE_NOT_FOUND", 404, f"{method} endpoint not found",
                    method=method, path=path,
                    availableRoutes=self.available_routes(method),
                ),
                status_code=404,
            )
        route, params = found

        db = self.store.session()
        try:
            ctx = RequestContext(
                method=method, path=path, params=params, query=query,
                body=body, headers=headers, db=db, store=self.store,
            )
            ctx.user = await self.authenticate(route, ctx)
            result = await route.handler(ctx)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

        if isinstance(result, Response):
            return result
        return json_response(result)

    async def authenticate(self, route: Route, ctx: RequestContext):
        header = ctx.headers.get("authorization")
        if route.auth == "admin":
            return await require_admin(ctx.db, header)
        if route.auth == "user":
            return await get_user_from_header(ctx.db, header)
        if route.auth == "optional":
            try:
                return await get_user_from_header(ctx.db, header)
            except AuthenticationError:
                return None
        return None

    def error_response(self, error: Exception) -> JSONResponse:
        if isinstance(error, ApiError):
            if error.status_code >= 500:
                logger.error("[API Error] %s", error.message, exc_info=error)
            else:
                logger.warning("[API Error] %s %s", error.status_code, error.message)
            return json_response(error.to_dict(), status_code=error.status_code)

        logger.error("[API Error] unexpected failure", exc_info=error)
        body = {"success": False, "message": "Internal server error"}
        if self.debug:
            body["error"] = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        return json_response(body, status_code=500)


__all__ = [
    "RequestContext", "Route", "RouteTable", "Dispatcher",
    "match_route", "normalize_path", "parse_json_body",
]
