"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class WorkspaceNotFoundError(DomainException):
    """Caller has no workspace, or the workspace does not exist"""

    pass


class WorkspaceExistsError(DomainException):
    """Caller already belongs to a workspace"""

    pass


class PurchaseNotFoundError(DomainException):
    """Purchase does not exist or belongs to another workspace"""

    pass


class PublicLinkNotFoundError(DomainException):
    """Public view token is unknown or revoked"""

    pass


class PermissionDeniedError(DomainException):
    """Caller is not allowed to perform a workspace admin action"""

    pass
