"""
Upload surfaces for both blob backends.

Staged: POST /upload (single "file") and POST /upload/user-dashboard
("resume", "coverLetter", up to 10 "file"), served back from GET
/uploads/{name} and GET /user_uploads/{name}. Addressed: POST /blobs and
GET /files/{ref}.
"""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import FileResponse, StreamingResponse
from sqlalchemy.orm import Session

from careerbridge.core.errors import ValidationError
from careerbridge.database import Database, get_database, get_db
from careerbridge.schemas.blob import (
    BlobUploadResponse,
    DashboardUploadResponse,
    ResolvedReference,
    StagedUploadResponse,
)
from careerbridge.services.blob_store import (
    ObjectStore,
    STAGED_FOLDERS,
    StagedReference,
    StagedStore,
    get_object_store,
    get_staged_store,
    parse_reference,
    resolve_reference,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["uploads"])

MAX_DASHBOARD_FILES = 10


@router.post("/upload", response_model=StagedUploadResponse)
def upload_file(
    file: UploadFile | None = File(None),
    store: StagedStore = Depends(get_staged_store),
):
    if file is None:
        raise ValidationError("No file uploaded")
    return StagedUploadResponse(path=store.save(file.file, file.filename, purpose="default"))


@router.post("/upload/user-dashboard", response_model=DashboardUploadResponse, response_model_exclude_none=True)
def upload_dashboard_files(
    resume: UploadFile | None = File(None),
    cover_letter: UploadFile | None = File(None, alias="coverLetter"),
    file: list[UploadFile] | None = File(None),
    store: StagedStore = Depends(get_staged_store),
):
    if resume is None and cover_letter is None and not file:
        raise ValidationError("No files uploaded")
    if file and len(file) > MAX_DASHBOARD_FILES:
        raise ValidationError(f"At most {MAX_DASHBOARD_FILES} files per upload")
    result = DashboardUploadResponse()
    if resume is not None:
        result.resume = store.save(resume.file, resume.filename, purpose="user-dashboard")
    if cover_letter is not None:
        result.cover_letter = store.save(cover_letter.file, cover_letter.filename, purpose="user-dashboard")
    if file:
        result.files = [store.save(f.file, f.filename, purpose="user-dashboard") for f in file]
    return result


@router.post("/blobs", response_model=BlobUploadResponse)
def upload_blob(
    file: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    store: ObjectStore = Depends(get_object_store),
):
    if file is None:
        raise ValidationError("No file uploaded")
    blob = store.put(db, file.file, file.filename, file.content_type)
    return BlobUploadResponse(ref=blob.id, filename=blob.filename, content_type=blob.content_type)


@router.get("/blobs/resolve", response_model=ResolvedReference)
def resolve_blob_reference(reference: str = Query(..., min_length=1)):
    kind = type(parse_reference(reference)).__name__.removesuffix("Reference").lower()
    return ResolvedReference(kind=kind, url=resolve_reference(reference))


@router.get("/files/{ref}")
def download_blob(
    ref: str,
    database: Database = Depends(get_database),
    store: ObjectStore = Depends(get_object_store),
):
    with database.session() as db:
        blob = store.get(db, ref)
        content_type, filename, length = blob.content_type, blob.filename, blob.length

    def _stream():
        # The request's session is gone by the time the body is sent; stream on our own
        with database.session() as db:
            yield from store.iter_chunks(db, ref)

    headers = {
        "Content-Length": str(length),
        "Content-Disposition": f"inline; filename*=UTF-8''{quote(filename)}",
    }
    return StreamingResponse(_stream(), media_type=content_type, headers=headers)


def _serve_staged(folder: str, filename: str, store: StagedStore) -> FileResponse:
    return FileResponse(store.open(StagedReference(folder, filename).path))


@router.get("/uploads/{filename}")
def download_upload(filename: str, store: StagedStore = Depends(get_staged_store)):
    return _serve_staged(STAGED_FOLDERS["default"], filename, store)


@router.get("/user_uploads/{filename}")
def download_user_upload(filename: str, store: StagedStore = Depends(get_staged_store)):
    return _serve_staged(STAGED_FOLDERS["user-dashboard"], filename, store)
