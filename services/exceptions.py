class ServiceError(Exception):
    """Base class for errors raised by the service layer."""


class NotFoundError(ServiceError):
    pass


class ClientError(ServiceError):
    status_code = 400


class AttachmentRejected(ClientError):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class EmailAlreadyExistsError(ClientError):
    pass


class AuthenticationError(ServiceError):
    """The bearer credential is missing, malformed, expired or revoked."""


class AuthorizationError(ServiceError):
    """The credential is valid but the principal may not perform the action."""


class MailDeliveryError(ServiceError):
    pass
