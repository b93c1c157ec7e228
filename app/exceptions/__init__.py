"""Custom exceptions for the store terminal application."""


def _fmt_amount(value):
    return f"{int(value)}" if value % 1 == 0 else f"{value:.2f}".rstrip('0').rstrip('.')


class StoreError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message="An internal error occurred", status_code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['message'] = self.message
        rv['status'] = 'error'
        return rv

class BusinessLogicError(StoreError):
    """Exception raised for business logic violations."""
    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message, status_code, payload)

class NotFoundError(StoreError):
    """Exception raised when a resource is not found."""
    def __init__(self, message="Resource not found", payload=None):
        super().__init__(message, 404, payload)

class ProductNotFoundError(NotFoundError):
    """Raised when a product code is unknown to the catalog or absent from a pool."""
    def __init__(self, code):
        self.code = code
        super().__init__(f"Product not found: {code}", payload={'code': code})

class PromotionNotFoundError(NotFoundError):
    """Raised when a promotion code is unknown to the catalog."""
    def __init__(self, code):
        self.code = code
        super().__init__(f"Promotion not found: {code}", payload={'code': code})

class NotEnoughItemsError(BusinessLogicError):
    """Raised when a quantity cannot cover a requested decrement."""
    def __init__(self, code, required, available):
        self.code = code
        self.required = required
        self.available = available
        message = (
            f"Not enough items for {code}: "
            f"required {_fmt_amount(required)}, available {_fmt_amount(available)}"
        )
        super().__init__(message, status_code=409, payload={'code': code})

class InvalidPayloadError(BusinessLogicError):
    """Raised when an entity payload cannot be parsed."""
    def __init__(self, message="Invalid payload"):
        super().__init__(message, status_code=400)
