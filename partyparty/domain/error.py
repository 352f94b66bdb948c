"""Domain layer errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from partyparty.domain.model.membership import ReconciliationOutcome


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Caller-supplied input violates a precondition.

    Raised before any record store call is attempted.
    """

    pass


class NotAuthenticatedError(DomainError):
    """No valid user identity or credential is available."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class SyncFailure(DomainError):
    """A single record store operation failed.

    Not retried inside the core; callers re-trigger the idempotent operation.
    """

    def __init__(
        self,
        operation: str,
        collection: str,
        record_id: str | None = None,
        reason: str | None = None,
    ):
        self.operation = operation
        self.collection = collection
        self.record_id = record_id
        self.reason = reason
        target = f"{collection}/{record_id}" if record_id else collection
        message = f"Failed to {operation} {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PartialReconciliationError(DomainError):
    """A membership batch completed with some failed operations.

    Successful operations are not rolled back; re-running reconciliation
    recomputes the remaining delta.
    """

    def __init__(self, outcome: "ReconciliationOutcome"):
        self.outcome = outcome
        failed = ", ".join(
            f"{f.operation.value}:{f.guest_id}" for f in outcome.failed
        )
        super().__init__(
            f"Reconciliation of party {outcome.party_id} partially failed ({failed})"
        )
