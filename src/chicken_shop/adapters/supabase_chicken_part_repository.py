"""Supabase repository for chicken parts."""

from dataclasses import dataclass
from decimal import Decimal

from supabase import Client

from chicken_shop.adapters.supabase_rows import (
    row_datetime,
    row_decimal,
    row_id,
    row_text,
    to_row,
)
from chicken_shop.domain.errors import PersistenceError
from chicken_shop.domain.parts import ChickenPart
from chicken_shop.services.stock import ChickenPartRepository

_TABLE = "chicken_parts"


@dataclass
class SupabaseChickenPartRepository(ChickenPartRepository):
    """Supabase implementation for the part catalogue and stock levels."""

    client: Client

    def list_parts(self) -> list[ChickenPart]:
        """Return all parts ordered by name."""
        response = (
            self.client.table(_TABLE).select("*").order("name", desc=False).execute()
        )
        return [_parse_part(row) for row in response.data or []]

    def get_part(self, part_id: str) -> ChickenPart | None:
        """Return a part by id."""
        response = (
            self.client.table(_TABLE).select("*").eq("id", part_id).limit(1).execute()
        )
        if not response.data:
            return None
        return _parse_part(response.data[0])

    def create_part(
        self, name: str, price_per_kg: Decimal, stock: Decimal, unit: str
    ) -> ChickenPart:
        """Insert a part row."""
        response = (
            self.client.table(_TABLE)
            .insert(
                to_row(
                    {
                        "name": name,
                        "price_per_kg": price_per_kg,
                        "stock": stock,
                        "unit": unit,
                    }
                )
            )
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create chicken part")
        return _parse_part(response.data[0])

    def update_part(self, part_id: str, changes: dict[str, object]) -> ChickenPart:
        """Update a part row."""
        response = (
            self.client.table(_TABLE)
            .update(to_row(changes))
            .eq("id", part_id)
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to update chicken part")
        return _parse_part(response.data[0])

    def set_stock(self, part_id: str, stock: Decimal) -> ChickenPart:
        """Overwrite the stock column."""
        return self.update_part(part_id, {"stock": stock})

    def delete_part(self, part_id: str) -> None:
        """Delete a part row."""
        self.client.table(_TABLE).delete().eq("id", part_id).execute()


def _parse_part(row: dict[str, object]) -> ChickenPart:
    return ChickenPart(
        id=row_id(row),
        name=row_text(row, "name"),
        price_per_kg=row_decimal(row, "price_per_kg"),
        stock=row_decimal(row, "stock"),
        unit=row_text(row, "unit") or "kg",
        created_at=row_datetime(row, "created_at"),
    )
