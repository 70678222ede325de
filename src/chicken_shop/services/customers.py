"""Customer records."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from chicken_shop.domain.customers import Customer
from chicken_shop.domain.errors import NotFoundError, ValidationError


class CustomerRepository(Protocol):
    """Persistence interface for customers."""

    def list_customers(self) -> list[Customer]:
        """Return all customers."""

    def get_customer(self, customer_id: str) -> Customer | None:
        """Return a customer by id, if present."""

    def create_customer(
        self, name: str, phone: str, address: str, notes: str
    ) -> Customer:
        """Create a customer and return it."""

    def update_customer(self, customer_id: str, changes: dict[str, object]) -> Customer:
        """Apply field changes to a customer and return it."""

    def set_last_order_at(
        self, customer_id: str, last_order_at: datetime | None
    ) -> None:
        """Record when the customer last ordered."""

    def delete_customer(self, customer_id: str) -> None:
        """Delete a customer."""


@dataclass
class CustomerService:
    """Application service for customer records."""

    repository: CustomerRepository

    def list_customers(self) -> list[Customer]:
        """Return all customers."""
        return self.repository.list_customers()

    def get_customer(self, customer_id: str) -> Customer:
        """Return a customer or raise ``NotFoundError``."""
        customer = self.repository.get_customer(customer_id)
        if customer is None:
            raise NotFoundError("customer", customer_id)
        return customer

    def create_customer(
        self, name: str, phone: str = "", address: str = "", notes: str = ""
    ) -> Customer:
        """Create a customer."""
        if not name.strip():
            raise ValidationError("name is required")
        return self.repository.create_customer(
            name=name.strip(), phone=phone.strip(), address=address, notes=notes
        )

    def update_customer(
        self, customer_id: str, changes: dict[str, object]
    ) -> Customer:
        """Edit name, phone, address or notes."""
        self.get_customer(customer_id)
        allowed = {
            key: value
            for key, value in changes.items()
            if key in {"name", "phone", "address", "notes"} and value is not None
        }
        if "name" in allowed and not str(allowed["name"]).strip():
            raise ValidationError("name is required")
        if not allowed:
            return self.get_customer(customer_id)
        return self.repository.update_customer(customer_id, allowed)

    def delete_customer(self, customer_id: str) -> None:
        """Delete a customer."""
        self.get_customer(customer_id)
        self.repository.delete_customer(customer_id)

    def record_order(self, customer_id: str, ordered_at: datetime) -> None:
        """Set the customer's last order timestamp."""
        self.repository.set_last_order_at(customer_id, ordered_at)

    def refresh_last_order(
        self, customer_id: str, last_order_at: datetime | None
    ) -> None:
        """Overwrite the last order timestamp if the customer still exists."""
        if self.repository.get_customer(customer_id) is None:
            return
        self.repository.set_last_order_at(customer_id, last_order_at)

    def search(self, term: str) -> list[Customer]:
        """Return customers whose name or phone contains ``term``."""
        customers = self.repository.list_customers()
        needle = term.strip().lower()
        if not needle:
            return customers
        return [
            customer
            for customer in customers
            if needle in customer.name.lower() or needle in customer.phone
        ]
