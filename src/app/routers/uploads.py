from typing import List, Optional
from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse
from loguru import logger
from storage.local import (
    ALLOWED_MIME_TYPES, MAX_FILE_BYTES, MAX_FILES_PER_UPLOAD,
    LocalAssetMissing, LocalAssetStore,
)
from app.deps import get_store

router = APIRouter(prefix="/api", tags=["uploads"])

@router.post("/upload")
def upload(designs: Optional[List[UploadFile]] = File(None), store: LocalAssetStore = Depends(get_store)):
    files = []
    for f in (designs or [])[:MAX_FILES_PER_UPLOAD]:
        # unsupported types are dropped quietly, oversize files too
        if f.content_type not in ALLOWED_MIME_TYPES:
            logger.info(f"Ignoring upload {f.filename!r} with type {f.content_type}")
            continue
        data = f.file.read(MAX_FILE_BYTES + 1)
        if len(data) > MAX_FILE_BYTES:
            logger.warning(f"Ignoring upload {f.filename!r}: larger than {MAX_FILE_BYTES} bytes")
            continue
        stored = store.save(f.filename or "design", data)
        files.append({
            "id": stored.id,
            "originalName": stored.original_name,
            "path": stored.path,
            "size": stored.size,
            "designName": stored.design_name,
        })
    if not files:
        return JSONResponse(status_code=400, content={"ok": False, "error": "No files uploaded"})
    return {"ok": True, "files": files}

@router.get("/uploads")
def list_uploads(store: LocalAssetStore = Depends(get_store)):
    files = [{"id": a.id, "path": a.path, "designName": a.design_name} for a in store.list()]
    return {"ok": True, "files": files}

@router.delete("/upload/{file_id}")
def delete_upload(file_id: str, store: LocalAssetStore = Depends(get_store)):
    try:
        store.delete(file_id)
    except LocalAssetMissing:
        return JSONResponse(status_code=404, content={"ok": False, "error": "File not found"})
    return {"ok": True}
