import base64
import hashlib

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from .config import APP_CONFIG
from .errors import DecodeError, EncodeError, UnsupportedEncodingError
from .models import HealthResponse, ReencodeResponse
from .reencode import transcode

app = FastAPI(
    title="reencoder",
    description="Strict character re-encoding with optional BOM",
    version="0.1.0",
)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/reencode", response_model=ReencodeResponse)
async def reencode_upload(
    file: UploadFile = File(...),
    source_encoding: str = Form(...),
    target_encoding: str = Form(APP_CONFIG.default_target),
    add_bom: bool = Form(False),
):
    if file.size is not None and file.size > APP_CONFIG.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Upload too large")

    raw = await file.read(APP_CONFIG.max_upload_bytes + 1)
    if len(raw) > APP_CONFIG.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Upload too large")

    try:
        encoded, report = transcode(raw, source_encoding, target_encoding, add_bom=add_bom)
    except (UnsupportedEncodingError, DecodeError, EncodeError) as exc:
        raise HTTPException(status_code=422, detail=exc.as_dict()) from exc

    return {
        "reencoded": {
            "sha256": hashlib.sha256(encoded).hexdigest(),
            "encoding": report["target"]["encoding"],
            "bom": report["target"]["bom"],
            "content_b64": base64.b64encode(encoded).decode("ascii"),
        },
        "report": report,
    }
