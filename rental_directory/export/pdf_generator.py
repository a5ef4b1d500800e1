"""Generate a PDF comparison report."""
import io
from collections.abc import Sequence
from datetime import datetime, timezone
from xml.sax.saxutils import escape

from rental_directory.export.tables import feature_rows, overview_rows, pricing_rows
from rental_directory.schemas.software import EnrichedProduct


class ComparisonPDFGenerator:
    """Build a PDF with Overview, Features and Pricing sections for up to four products."""

    def generate(self, products: Sequence[EnrichedProduct]) -> bytes:
        """Produce PDF bytes for the given comparison set."""
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import landscape, letter
        from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
        from reportlab.lib.units import inch
        from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer, pagesize=landscape(letter), rightMargin=54, leftMargin=54, topMargin=54, bottomMargin=54
        )
        styles = getSampleStyleSheet()
        cell_style = ParagraphStyle(name="Cell", parent=styles["Normal"], fontSize=8, leading=10)
        table_style = TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.grey),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ]
        )

        def table(rows: list[list[str]]) -> Table:
            # wrap cells so long platform and customer lists fit the column
            data = [[Paragraph(escape(str(cell)), cell_style) for cell in row] for row in rows]
            col_width = (doc.width - 1.6 * inch) / max(len(rows[0]) - 1, 1)
            t = Table(data, colWidths=[1.6 * inch] + [col_width] * (len(rows[0]) - 1), repeatRows=1)
            t.setStyle(table_style)
            return t

        story = []
        title_style = ParagraphStyle(name="Title", parent=styles["Heading1"], fontSize=18, spaceAfter=12)
        story.append(Paragraph("Car Rental Software Comparison", title_style))
        story.append(
            Paragraph(
                f"<b>Products:</b> {escape(', '.join(p.name for p in products))} | "
                f"<b>Generated:</b> {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}",
                styles["Normal"],
            )
        )
        story.append(Spacer(1, 0.3 * inch))

        story.append(Paragraph("Overview", styles["Heading2"]))
        story.append(table(overview_rows(products)))
        story.append(Spacer(1, 0.3 * inch))

        story.append(Paragraph("Features", styles["Heading2"]))
        features = feature_rows(products)
        if len(features) > 1:
            story.append(table(features))
        else:
            story.append(Paragraph("No features listed for these products.", styles["Normal"]))
        story.append(Spacer(1, 0.3 * inch))

        story.append(Paragraph("Pricing Plans", styles["Heading2"]))
        pricing = pricing_rows(products)
        if len(pricing) > 1:
            story.append(table(pricing))
        else:
            story.append(Paragraph("No pricing plans listed. Contact the vendors for pricing.", styles["Normal"]))

        doc.build(story)
        return buffer.getvalue()
