from fastapi import status


class StoreError(Exception):
    """Base class for errors raised by the storefront services.

    Each subclass carries the HTTP status the API answers with; the
    handler registered in ``app.main`` turns them into ``{"detail": ...}``.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# -------- 400 --------

class ValidationError(StoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidOrder(ValidationError):
    default_message = "Invalid order items"


class InvalidStatus(ValidationError):
    default_message = "Invalid status"


# -------- auth --------

class AuthError(StoreError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication failed"


class DuplicateAccount(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class InvalidCredentials(AuthError):
    default_message = "Invalid email or password"


class AdminRequired(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Admin access required"


# -------- 404 --------

class NotFound(StoreError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ProductNotFound(NotFound):
    default_message = "Product not found"


class OrderNotFound(NotFound):
    default_message = "Order not found"


# -------- 409 --------

class InvalidStatusTransition(StoreError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, old_status: str, new_status: str):
        self.old_status = old_status
        self.new_status = new_status
        super().__init__(f"Invalid status change from {old_status} → {new_status}")


# -------- 500 --------

class PersistenceError(StoreError):
    default_message = "Storage failure"


class OrderPersistenceError(PersistenceError):
    default_message = "Error creating order"
