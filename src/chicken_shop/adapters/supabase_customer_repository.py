"""Supabase repository for customers."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from chicken_shop.adapters.supabase_rows import row_datetime, row_id, row_text, to_row
from chicken_shop.domain.customers import Customer
from chicken_shop.domain.errors import PersistenceError
from chicken_shop.services.customers import CustomerRepository

_TABLE = "customers"


@dataclass
class SupabaseCustomerRepository(CustomerRepository):
    """Supabase implementation for customer records."""

    client: Client

    def list_customers(self) -> list[Customer]:
        """Return all customers ordered by name."""
        response = (
            self.client.table(_TABLE).select("*").order("name", desc=False).execute()
        )
        return [_parse_customer(row) for row in response.data or []]

    def get_customer(self, customer_id: str) -> Customer | None:
        """Return a customer by id."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", customer_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_customer(response.data[0])

    def create_customer(
        self, name: str, phone: str, address: str, notes: str
    ) -> Customer:
        """Insert a customer row."""
        response = (
            self.client.table(_TABLE)
            .insert({"name": name, "phone": phone, "address": address, "notes": notes})
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create customer")
        return _parse_customer(response.data[0])

    def update_customer(self, customer_id: str, changes: dict[str, object]) -> Customer:
        """Update a customer row."""
        response = (
            self.client.table(_TABLE)
            .update(to_row(changes))
            .eq("id", customer_id)
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to update customer")
        return _parse_customer(response.data[0])

    def set_last_order_at(
        self, customer_id: str, last_order_at: datetime | None
    ) -> None:
        """Write the last order timestamp."""
        self.client.table(_TABLE).update(
            to_row({"last_order_date": last_order_at})
        ).eq("id", customer_id).execute()

    def delete_customer(self, customer_id: str) -> None:
        """Delete a customer row."""
        self.client.table(_TABLE).delete().eq("id", customer_id).execute()


def _parse_customer(row: dict[str, object]) -> Customer:
    return Customer(
        id=row_id(row),
        name=row_text(row, "name"),
        phone=row_text(row, "phone"),
        address=row_text(row, "address"),
        notes=row_text(row, "notes"),
        last_order_at=row_datetime(row, "last_order_date"),
        created_at=row_datetime(row, "created_at"),
    )
