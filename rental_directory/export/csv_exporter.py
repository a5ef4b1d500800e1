"""Export a comparison set as a ZIP of CSVs."""
import csv
import io
from collections.abc import Sequence
from zipfile import ZipFile

from rental_directory.export.tables import feature_rows, overview_rows, pricing_rows
from rental_directory.schemas.software import EnrichedProduct


class ComparisonCSVExporter:
    """Export overview, features and pricing tables as CSVs in a ZIP."""

    def export_zip(self, products: Sequence[EnrichedProduct]) -> bytes:
        """Build ZIP with CSV files."""
        buffer = io.BytesIO()
        with ZipFile(buffer, "w") as zf:
            zf.writestr("overview.csv", self._to_csv(overview_rows(products)))
            zf.writestr("features.csv", self._to_csv(feature_rows(products)))
            zf.writestr("pricing.csv", self._to_csv(pricing_rows(products)))
        return buffer.getvalue()

    @staticmethod
    def _to_csv(rows: list[list[str]]) -> str:
        buf = io.StringIO()
        w = csv.writer(buf)
        w.writerows(rows)
        return buf.getvalue()
