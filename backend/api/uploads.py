"""Multipart upload checks shared by the resume and storage routes."""

from fastapi import UploadFile

from services import document_parser
from services.errors import InputValidationError


async def read_upload(file: UploadFile | None, max_size_mb: int, missing_message: str) -> bytes:
    if file is None or not file.filename:
        raise InputValidationError(missing_message)

    content = await file.read()
    if len(content) > max_size_mb * 1024 * 1024:
        raise InputValidationError(f"File too large. Max size: {max_size_mb}MB")
    return content


async def read_resume_text(file: UploadFile | None, max_size_mb: int) -> str:
    content = await read_upload(file, max_size_mb, "No resume file provided")
    try:
        text = document_parser.extract_upload_text(file.filename, content)
    except Exception as e:
        raise InputValidationError("Could not parse resume file") from e

    if not text.strip():
        raise InputValidationError("No text could be extracted from resume")
    return text
