from enum import Enum

from fastapi import APIRouter, Depends, File, Form, UploadFile

from api.dependencies import get_current_user, get_services
from api.errors import failure_message
from api.uploads import read_upload
from config import settings
from models.responses import FileListResponse, FileUrlResponse, MessageResponse
from services.container import Services
from services.errors import NotFoundError, PersistenceError

router = APIRouter(prefix="/api/storage", tags=["storage"])

FILES = "files"


class FileKind(str, Enum):
    DOCUMENTS = "documents"
    IMAGES = "images"
    PRESENTATIONS = "presentations"


def bucket_for(kind: FileKind) -> str:
    return {
        FileKind.DOCUMENTS: settings.documents_bucket,
        FileKind.IMAGES: settings.images_bucket,
        FileKind.PRESENTATIONS: settings.presentations_bucket,
    }[kind]


async def _store_upload(
    services: Services,
    user_id: str,
    kind: FileKind,
    file: UploadFile | None,
    folder: str,
    missing_message: str,
) -> FileUrlResponse:
    content = await read_upload(file, settings.storage_max_upload_size_mb, missing_message)
    file_url = await services.files.upload(
        bucket_for(kind), folder, file.filename, content, file.content_type
    )
    try:
        await services.store.append(
            user_id, FILES, kind.value,
            {"file_name": file.filename, "file_url": file_url, "folder": folder},
            timestamp_field="upload_date",
        )
    except PersistenceError:
        # No reference was written, so the object would be unreachable
        await services.files.delete(file_url)
        raise
    return FileUrlResponse(file_url=file_url)


@router.post("/upload-document", response_model=FileUrlResponse)
async def upload_document(
    document: UploadFile | None = File(None),
    folder: str = Form("general"),
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Document Upload", "Failed to upload document"):
        return await _store_upload(
            services, user_id, FileKind.DOCUMENTS, document, folder, "No file provided"
        )


@router.post("/upload-image", response_model=FileUrlResponse)
async def upload_image(
    image: UploadFile | None = File(None),
    folder: str = Form("general"),
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Image Upload", "Failed to upload image"):
        return await _store_upload(
            services, user_id, FileKind.IMAGES, image, folder, "No image provided"
        )


@router.post("/upload-presentation", response_model=FileUrlResponse)
async def upload_presentation(
    presentation: UploadFile | None = File(None),
    folder: str = Form("general"),
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Presentation Upload", "Failed to upload presentation"):
        return await _store_upload(
            services, user_id, FileKind.PRESENTATIONS, presentation, folder, "No presentation provided"
        )


@router.get("/list-files/{kind}", response_model=FileListResponse)
async def list_files(
    kind: FileKind,
    folder: str | None = None,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("List Files", "Failed to list files"):
        files = await services.store.list_entries(
            user_id, FILES, kind.value,
            where={"folder": folder} if folder else None,
            order_by="upload_date",
        )
    return FileListResponse(files=files)


@router.delete("/delete-file/{kind}/{file_id}", response_model=MessageResponse)
async def delete_file(
    kind: FileKind,
    file_id: str,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Delete File", "Failed to delete file"):
        entry = await services.store.get_entry(user_id, FILES, kind.value, file_id)
        if entry is None:
            raise NotFoundError("File not found")
        # Reference first: a stale reference is visible to the user, a stray object is not
        await services.store.delete_entry(user_id, FILES, kind.value, file_id)
        await services.files.delete(entry["file_url"])
    return MessageResponse(message="File deleted successfully")
