"""
Uploaded files (resumes, cover letters, photos, intro videos).

Two backends share one reference scheme:

* staged: files written under ``<upload_root>/<folder>/`` and referenced as
  ``/<folder>/<unixMillis>-<originalFilename>``;
* addressed: payloads chunked into the database and referenced by a 24-hex ref.

Profiles and applications only ever hold the reference string. Three shapes of it
exist in stored data (staged path, ref, and a bare filename from older records), so
every read goes through ``parse_reference`` / ``resolve_reference``.
"""

import logging
import time
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import singledispatch
from pathlib import Path, PurePosixPath
from typing import BinaryIO
from urllib.parse import quote

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from careerbridge.config import settings
from careerbridge.core.errors import NotFoundError, UploadError, UploadTooLargeError, ValidationError
from careerbridge.core.ids import generate_ref, is_ref, parse_ref
from careerbridge.models.blob import BlobChunk, BlobFile

logger = logging.getLogger(__name__)

# upload purpose -> staged folder
STAGED_FOLDERS = {
    "default": "uploads",
    "user-dashboard": "user_uploads",
}
LEGACY_FOLDER = "user_uploads"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class StagedReference:
    folder: str
    filename: str

    @property
    def path(self) -> str:
        return f"/{self.folder}/{self.filename}"


@dataclass(frozen=True)
class AddressedReference:
    ref: str


@dataclass(frozen=True)
class LegacyReference:
    filename: str


Reference = StagedReference | AddressedReference | LegacyReference


def parse_reference(value: str) -> Reference:
    raw = (value or "").strip()
    if not raw:
        raise ValidationError("Empty file reference")
    if is_ref(raw):
        return AddressedReference(raw.lower())
    segments = [s for s in raw.replace("\\", "/").split("/") if s]
    if not segments:
        raise ValidationError(f"Invalid file reference: {value!r}")
    if len(segments) >= 2 and segments[-2] == "files" and is_ref(segments[-1]):
        return AddressedReference(segments[-1].lower())
    for segment in segments[:-1]:
        if segment in STAGED_FOLDERS.values():
            return StagedReference(segment, segments[-1])
    return LegacyReference(segments[-1])


@singledispatch
def _resolve(reference) -> str:
    raise ValidationError(f"Unsupported reference type: {type(reference).__name__}")


@_resolve.register
def _(reference: AddressedReference) -> str:
    return f"/files/{reference.ref}"


@_resolve.register
def _(reference: StagedReference) -> str:
    return f"/{reference.folder}/{quote(reference.filename)}"


@_resolve.register
def _(reference: LegacyReference) -> str:
    # Older records stored only the filename; those files were written to user_uploads
    return f"/{LEGACY_FOLDER}/{quote(reference.filename)}"


def resolve_reference(value: str, base_url: str | None = None) -> str:
    """Map any stored reference string to the URL it is served from."""
    base = settings.public_base_url if base_url is None else base_url
    return f"{base.rstrip('/')}{_resolve(parse_reference(value))}"


def _safe_filename(filename: str | None) -> str:
    name = PurePosixPath((filename or "").replace("\\", "/")).name.strip()
    if name in ("", ".", ".."):
        raise ValidationError("A filename is required")
    return name


def _read_chunks(stream: BinaryIO, chunk_size: int, max_bytes: int) -> Iterator[bytes]:
    total = 0
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        total += len(chunk)
        if total > max_bytes:
            raise UploadTooLargeError(f"File too large. Max allowed is {max_bytes // (1024 * 1024)}MB.")
        yield chunk


class StagedStore:
    """Path-addressed files under purpose-named folders."""

    def __init__(self, root: str | Path, max_bytes: int, chunk_size: int = 64 * 1024):
        self.root = Path(root)
        self.max_bytes = max_bytes
        self.chunk_size = chunk_size

    def folder_for(self, purpose: str) -> str:
        try:
            return STAGED_FOLDERS[purpose]
        except KeyError:
            raise ValidationError(f"Unknown upload purpose: {purpose}") from None

    def save(self, stream: BinaryIO, filename: str, purpose: str = "default") -> str:
        folder = self.folder_for(purpose)
        stored_name = f"{int(time.time() * 1000)}-{_safe_filename(filename)}"
        directory = self.root / folder
        target = directory / stored_name
        try:
            directory.mkdir(parents=True, exist_ok=True)
            # "xb": a same-millisecond, same-name upload fails instead of overwriting
            with open(target, "xb") as out:
                for chunk in _read_chunks(stream, self.chunk_size, self.max_bytes):
                    out.write(chunk)
        except UploadError:
            target.unlink(missing_ok=True)
            raise
        except FileExistsError as e:
            raise UploadError(f"Upload collided with an existing file: {stored_name}") from e
        except OSError as e:
            target.unlink(missing_ok=True)
            logger.exception("Staged upload failed for %s: %s", stored_name, e)
            raise UploadError("Failed to save upload") from e
        reference = StagedReference(folder, stored_name)
        logger.info("Staged upload saved: %s", reference.path)
        return reference.path

    def open(self, value: str) -> Path:
        """Filesystem path for a staged or legacy reference."""
        reference = parse_reference(value)
        if isinstance(reference, AddressedReference):
            raise ValidationError("Reference points at the object store, not a staged file")
        folder = reference.folder if isinstance(reference, StagedReference) else LEGACY_FOLDER
        path = self.root / folder / _safe_filename(reference.filename)
        if not path.is_file():
            raise NotFoundError(f"File not found: {value}")
        return path


class ObjectStore:
    """Content-addressed payloads stored as ordered chunks in the database."""

    def __init__(self, chunk_size: int, max_bytes: int):
        self.chunk_size = chunk_size
        self.max_bytes = max_bytes

    def put(self, db: Session, stream: BinaryIO, filename: str, content_type: str | None = None) -> BlobFile:
        blob = BlobFile(
            id=generate_ref(),
            filename=_safe_filename(filename),
            content_type=content_type or DEFAULT_CONTENT_TYPE,
            length=0,
            chunk_size=self.chunk_size,
            uploaded_at=datetime.now(timezone.utc),
        )
        try:
            db.add(blob)
            db.flush()
            length = 0
            for n, data in enumerate(_read_chunks(stream, self.chunk_size, self.max_bytes)):
                chunk = BlobChunk(file_id=blob.id, n=n, data=data)
                db.add(chunk)
                db.flush()
                # Keep at most one chunk in memory
                db.expunge(chunk)
                length += len(data)
            blob.length = length
            db.commit()
        except UploadError:
            db.rollback()
            raise
        except (SQLAlchemyError, OSError) as e:
            db.rollback()
            logger.exception("Object store upload failed for %s: %s", filename, e)
            raise UploadError("Upload failed") from e
        db.refresh(blob)
        logger.info("Blob stored: %s (%s, %d bytes)", blob.id, blob.content_type, blob.length)
        return blob

    def get(self, db: Session, ref: str) -> BlobFile:
        blob = db.get(BlobFile, parse_ref(ref))
        if blob is None:
            raise NotFoundError(f"File not found: {ref}")
        return blob

    def iter_chunks(self, db: Session, ref: str) -> Iterator[bytes]:
        key = parse_ref(ref)
        try:
            rows = (
                db.query(BlobChunk.data)
                .filter(BlobChunk.file_id == key)
                .order_by(BlobChunk.n.asc())
                .yield_per(8)
            )
            for row in rows:
                yield row.data
        except SQLAlchemyError as e:
            logger.exception("Object store read failed for %s: %s", key, e)
            raise UploadError("Error fetching file") from e


def get_staged_store() -> StagedStore:
    return StagedStore(settings.upload_root, settings.max_upload_mb * 1024 * 1024)


def get_object_store() -> ObjectStore:
    return ObjectStore(settings.blob_chunk_size_bytes, settings.max_upload_mb * 1024 * 1024)
