"""HTTP surface for the PDF generation pipeline."""
