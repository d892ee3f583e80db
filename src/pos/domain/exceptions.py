"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The storage backend failed to read or write a record."""


class PrintError(DomainException):
    """A receipt or kitchen ticket could not be printed."""


# ---------------------------------------------------------------------------
# Checkout failures
# ---------------------------------------------------------------------------


class CheckoutError(DomainException):
    """Base class for failures of the checkout pipeline.

    None of these are fatal: the cart is left as it was and the operator
    can retry.
    """


class EmptyCartError(CheckoutError, ValidationError):
    """Checkout was requested for a cart with no lines."""


class CheckoutInProgressError(CheckoutError):
    """A checkout is already running on this terminal."""


class BillNumberAllocationError(CheckoutError):
    """The backend could not allocate a bill number."""


class BillPersistenceError(CheckoutError):
    """The bill row could not be written."""


class BillItemsPersistenceError(CheckoutError):
    """The bill row was written but its line items were not.

    The bill number is kept so the operator can reconcile the partial
    record by hand.
    """

    def __init__(self, message: str, bill_number: str) -> None:
        super().__init__(message)
        self.bill_number = bill_number
