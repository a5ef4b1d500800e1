"""Export: PDF report and CSV/ZIP."""
from rental_directory.export.pdf_generator import ComparisonPDFGenerator
from rental_directory.export.csv_exporter import ComparisonCSVExporter

__all__ = ["ComparisonPDFGenerator", "ComparisonCSVExporter"]
