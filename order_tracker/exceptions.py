class OrderTrackerError(Exception):
    """Base error rendered as a plain-text HTTP response."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidCredentials(OrderTrackerError):
    status_code = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AuthenticationFailure(OrderTrackerError):
    """Missing, malformed or badly signed token."""

    status_code = 403

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class AuthorizationFailure(OrderTrackerError):
    """Valid token, wrong role."""

    status_code = 403

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class OrderNotFound(OrderTrackerError):
    status_code = 404

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__("Order not found")


class StoreFailure(OrderTrackerError):
    """Any error raised by the spreadsheet read/write calls."""

    status_code = 500


class StoreConfigurationError(Exception):
    """The spreadsheet client could not be built at startup."""


class InvalidProducts(OrderTrackerError):
    """Products that cannot be stored as strict JSON (NaN, Infinity)."""

    status_code = 422

    def __init__(self, message: str = "Products must be valid JSON"):
        super().__init__(message)
