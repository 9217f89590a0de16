"""
Error taxonomy shared by every app.

Each class is a ninja HttpError, so services raise them where the condition
is detected and ninja renders them as {"detail": message} with the matching
status code. Request shape errors are ninja's own ValidationError, mapped to
400 in config.urls.
"""
from ninja.errors import HttpError


class Unauthorized(HttpError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(401, message)


class Forbidden(HttpError):
    def __init__(self, message: str = "Forbidden"):
        super().__init__(403, message)


class NotFound(HttpError):
    def __init__(self, message: str = "Not found"):
        super().__init__(404, message)


class Conflict(HttpError):
    def __init__(self, message: str = "Conflict"):
        super().__init__(409, message)


class HashingError(HttpError):
    """The password hashing primitive failed. Always a server error."""

    def __init__(self, message: str = "Error hashing password"):
        super().__init__(500, message)
