class ApiError(Exception):
    """Error carrying the HTTP status it should be reported with.

    Extra keyword arguments are merged into the JSON error body.
    """

    status_code = 500

    def __init__(self, message: str, status_code: int = None, error: str = None, **extra):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.error = error
        self.extra = extra

    def to_dict(self) -> dict:
        body = {"success": False, "message": self.message}
        if self.error:
            body["error"] = self.error
        body.update(self.extra)
        return body


class ValidationError(ApiError):
    status_code = 400


class DuplicateError(ApiError):
    status_code = 400


class AuthenticationError(ApiError):
    status_code = 401


class AuthorizationError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404
