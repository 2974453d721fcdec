# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str,*, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when a boundary row cannot be turned into a domain object."""


class NotFoundError(DomainError):
    """Raised when a project is not part of the supplied working set."""


class BusinessRuleError(DomainError):
    """Raised when the working set violates an invariant (e.g. duplicate project codes)."""
