# src/inventory_tracker/services/export_service.py
from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from inventory_tracker.domain.models import format_amount

if TYPE_CHECKING:
    from inventory_tracker.domain.models import Product


class ExportService:
    def generate_csv(self, products: Iterable[Product]) -> Iterator[str]:
        """
        Generiert CSV-Daten für einen Produkt-Snapshot.
        Gibt einen Iterator zurück, der Zeile für Zeile als String liefert.
        """
        output = io.StringIO()
        writer = csv.writer(output)

        header = [
            "id",
            "name",
            "description",
            "category",
            "quantity",
            "price",
            "stock_value",
        ]
        writer.writerow(header)
        yield output.getvalue()
        output.seek(0)
        output.truncate(0)

        for product in products:
            row = [
                str(product.id),
                product.name,
                product.description,
                product.category,
                str(product.quantity),
                format_amount(product.price),
                format_amount(product.stock_value),
            ]
            writer.writerow(row)
            yield output.getvalue()
            output.seek(0)
            output.truncate(0)
