"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InvalidRecurrencePolicy(ValidationError):
    """Recurrence policy with a malformed count, day or interval."""


class DuplicateTransactionError(ConflictError):
    """A same-day transaction with matching details is already stored."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def category_not_found(name: str) -> str:
    """Return message for missing category by name."""
    return f"Category '{name}' not found"


def category_exists(name: str) -> str:
    """Return message for duplicate category name."""
    return f"Category '{name}' already exists"


def unknown_filter(selected_filter: str, known: list[str]) -> str:
    """Return message for an unsupported filter key."""
    return f"Unknown filter '{selected_filter}'. Supported filters: {', '.join(known)}"


def possible_duplicate(description: str, on_date) -> str:
    """Return message when the duplicate guard matches a stored record."""
    return (
        f"A transaction '{description}' with the same counterparty, payment "
        f"method and amount already exists on {on_date}"
    )
