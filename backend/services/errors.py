"""Errors raised by the services, each one knows the HTTP status it maps to"""


class ServiceError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(ServiceError, LookupError):
    status_code = 404
    default_message = "Not found"


class UserNotFound(NotFoundError):
    default_message = "User not found"


class RequestNotFoundError(NotFoundError):
    default_message = "Friend request not found"


class InvalidRequestError(ServiceError, ValueError):
    status_code = 400
    default_message = "Invalid request"


class SelfRequestError(InvalidRequestError):
    default_message = "You cannot send a friend request to yourself"


class DuplicateRequestError(InvalidRequestError):
    default_message = "Friend request already exists or you are already friends"


class AuthenticationError(ServiceError):
    status_code = 401
    default_message = "Unauthorized"


class StoreError(ServiceError):
    default_message = "Storage failure"
