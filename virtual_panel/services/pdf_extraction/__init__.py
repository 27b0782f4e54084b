from .pdf_text_extractor import PDFExtractionError, PdfTextExtractor, extract_pdf_text, get_pdf_text_extractor

__all__ = [
    "PDFExtractionError",
    "PdfTextExtractor",
    "extract_pdf_text",
    "get_pdf_text_extractor",
]
