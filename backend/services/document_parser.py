import io

import pdfplumber
from docx import Document

PDF_SUFFIXES = (".pdf",)
DOCX_SUFFIXES = (".docx",)


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_upload_text(filename: str | None, content: bytes) -> str:
    """Pick a parser by file extension; anything else is read as UTF-8 text."""
    name = (filename or "").lower()
    if name.endswith(PDF_SUFFIXES):
        return extract_text(content)
    if name.endswith(DOCX_SUFFIXES):
        return extract_text_docx(content)
    return content.decode("utf-8", errors="replace").strip()
