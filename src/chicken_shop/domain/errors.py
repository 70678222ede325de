"""Error taxonomy for shop operations."""


class ShopError(Exception):
    """Base exception for all application errors."""

    status_code = 500

    def __init__(self, message: str = "An internal error occurred") -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly error payload."""
        return {"status": "error", "message": self.message}


class ValidationError(ShopError):
    """User-correctable input problems, raised before any mutation."""

    status_code = 422

    def __init__(self, messages: list[str] | str) -> None:
        self.messages = [messages] if isinstance(messages, str) else list(messages)
        super().__init__("; ".join(self.messages))

    def to_dict(self) -> dict[str, object]:
        payload = super().to_dict()
        payload["errors"] = self.messages
        return payload


class NotFoundError(ShopError):
    """Raised when a referenced entity does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class PersistenceError(ShopError):
    """The store rejected or could not perform an operation."""

    status_code = 502

    def __init__(self, message: str = "save failed") -> None:
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        """Return the generic failure payload; details stay in the logs."""
        return {"status": "error", "message": "save failed"}


class OrderSideEffectError(PersistenceError):
    """Order was created but a follow-up step failed.

    The order row and any side effects applied before ``step`` remain in
    place and must be reconciled by hand.
    """

    def __init__(self, order_id: str, step: str, cause: Exception) -> None:
        super().__init__(f"order {order_id} created but {step} failed: {cause}")
        self.order_id = order_id
        self.step = step
        self.cause = cause

    def to_dict(self) -> dict[str, object]:
        payload = super().to_dict()
        payload["order_id"] = self.order_id
        return payload
