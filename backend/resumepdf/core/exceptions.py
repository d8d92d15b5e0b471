"""Error taxonomy shared by the stores, the renderer and the HTTP layer.

Every error carries the HTTP status it maps to and a short message that is
safe to show to clients. ``InternalError`` and ``RenderFailure`` are marked
``expose=False``: outside development the client only sees ``message``, the
chained cause stays in the logs.
"""


class ServiceError(Exception):
    status_code = 500
    expose = True

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class NotFound(ServiceError):
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class Conflict(ServiceError):
    status_code = 409

    def __init__(self, message: str = "Conflict"):
        super().__init__(message)


class Unauthorized(ServiceError):
    status_code = 401

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class ValidationError(ServiceError):
    status_code = 400

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message)


class PayloadTooLarge(ValidationError):
    status_code = 413


class RenderFailure(ServiceError):
    expose = False

    def __init__(self, message: str = "Failed to generate PDF"):
        super().__init__(message)


class InternalError(ServiceError):
    expose = False
