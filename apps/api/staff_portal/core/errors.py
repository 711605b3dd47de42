"""Domain errors raised by services and turned into JSON responses in main.py.

Each class carries the HTTP status it maps to and a default, human-readable
message that is safe to show to the caller.
"""


class PortalError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(PortalError):
    status_code = 400
    message = "Invalid request data"


class UserNotFound(PortalError):
    status_code = 404
    message = "Roblox user not found"


class Ineligible(PortalError):
    status_code = 403
    message = "You are not eligible to access this portal. You must be Supervisor+ rank in the group."


class NoCodeFound(PortalError):
    status_code = 400
    message = "No verification code found. Please generate a code first."


class CodeExpired(PortalError):
    status_code = 400
    message = "Verification code has expired. Please generate a new code."


class CodeNotInProfile(PortalError):
    status_code = 400
    message = "Verification code not found in your Roblox About Me section. Please add the code and try again."


class Unauthorized(PortalError):
    status_code = 401
    message = "Unauthorized"


class Forbidden(PortalError):
    status_code = 403
    message = "Forbidden: Board of Directors+ rank required"


class NotFoundError(PortalError):
    status_code = 404
    message = "Not found"


class RequestAlreadyReviewed(PortalError):
    status_code = 409
    message = "Request has already been reviewed"


class InternalError(PortalError):
    status_code = 500
