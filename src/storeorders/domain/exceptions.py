"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Store faults (file or database errors) are not wrapped and propagate as-is.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InsufficientStockError(ValidationError):
    """The catalog refused a stock decrement that would go below zero."""

    def __init__(self, product_id: str, requested: int, available: int) -> None:
        super().__init__(
            f"Quantity of product {product_id} is not enough "
            f"(need {requested}, have {available})"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
