"""Export API: comparison PDF and CSV/ZIP."""
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from rental_directory.api.compare import fetch_comparison
from rental_directory.api.dependencies import get_aggregator
from rental_directory.services.aggregator import ProductAggregator

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/compare/pdf")
async def export_comparison_pdf(
    names: list[str] = Query([]),
    aggregator: ProductAggregator = Depends(get_aggregator),
):
    """Export a comparison report as PDF."""
    from rental_directory.export.pdf_generator import ComparisonPDFGenerator

    products = await fetch_comparison(aggregator, names)
    if not products:
        raise HTTPException(status_code=404, detail="None of the requested software was found")
    try:
        pdf_bytes = ComparisonPDFGenerator().generate(products)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=comparison.pdf"},
    )


@router.get("/compare/csv")
async def export_comparison_csv(
    names: list[str] = Query([]),
    aggregator: ProductAggregator = Depends(get_aggregator),
):
    """Export comparison tables as ZIP of CSVs."""
    from rental_directory.export.csv_exporter import ComparisonCSVExporter

    products = await fetch_comparison(aggregator, names)
    if not products:
        raise HTTPException(status_code=404, detail="None of the requested software was found")
    try:
        zip_bytes = ComparisonCSVExporter().export_zip(products)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(
        content=zip_bytes,
        media_type="application/zip",
        headers={"Content-Disposition": "attachment; filename=comparison.zip"},
    )
