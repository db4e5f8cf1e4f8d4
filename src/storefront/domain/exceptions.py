"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
The validation subclasses carry their offending values as attributes so
callers can build their own messages if they need to.
"""

from __future__ import annotations

from decimal import Decimal


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# ── Variation errors ─────────────────────────────────────────────────────────


class MalformedVariation(ValidationError):
    """A variation has neither a ``value`` nor a ``title`` to display."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(
            f"Variation #{position + 1} has no value or title to display"
        )


class InvalidDiscount(ValidationError):
    """A variation's discounted price is greater than its price."""

    def __init__(self, label: str | None, disc_price: Decimal, price: Decimal) -> None:
        self.label = label
        self.disc_price = disc_price
        self.price = price
        super().__init__(
            f"Discounted price ({disc_price}) cannot be greater than "
            f"price ({price}) for variation {label}"
        )


# ── Commission errors ────────────────────────────────────────────────────────


class MissingOrInvalidValue(ValidationError):
    """A commission value is absent, non-numeric, non-finite or negative."""

    def __init__(self, value: object, field: str = "Commission value") -> None:
        self.value = value
        self.field = field
        super().__init__(
            f"{field} must be a number greater than or equal to 0, got {value!r}"
        )


class OutOfRange(ValidationError):
    """A percentage commission falls outside its allowed bounds."""

    def __init__(self, value: Decimal, low: Decimal, high: Decimal) -> None:
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"Percentage must be between {low}-{high}, got {value}")


class UnknownCommissionType(ValidationError):
    """The commission type is neither ``percentage`` nor ``amount``."""

    def __init__(self, commission_type: object) -> None:
        self.commission_type = commission_type
        super().__init__(
            f"Unknown commission type {commission_type!r} "
            f"(expected 'percentage' or 'amount')"
        )
