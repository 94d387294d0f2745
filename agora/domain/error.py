"""Domain layer errors.

Errors carry a message key from ``agora.util.lang`` so the interface layer
can render a localized message without knowing the domain details.
"""


class DomainError(Exception):
    """Base domain error."""

    message_key = "errors.generic"


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    message_key = "errors.not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a member's account may not act at all.

    Locked-out or unapproved members are logged off when this is raised.
    """

    message_key = "errors.no_access"

    def __init__(self, member_id: str):
        self.member_id = member_id
        super().__init__(f"Member {member_id} has no access")


class AccessDeniedError(DomainError):
    """Raised when a member group lacks a category permission."""

    message_key = "errors.no_permission"

    def __init__(self, action: str, resource_id: str):
        super().__init__(f"Permission denied: {action} on {resource_id}")


class BannedContentError(DomainError):
    """Raised when submitted content contains a banned link."""

    message_key = "errors.banned_link"


class TransactionError(DomainError):
    """Raised when a unit of work fails to commit."""

    pass


class DuplicateVoteError(DomainError):
    """Raised when a vote insert hits the one-vote-per-member constraint."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Already voted on post {post_id}")
