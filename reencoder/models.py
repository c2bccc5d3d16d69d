from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ReencodeOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    add_bom: bool = Field(default=False, alias="addBOM")


class ReencodeRequest(BaseModel):
    source_path: Path
    destination_path: Path
    source_encoding: str = Field(min_length=1)
    target_encoding: str = Field(min_length=1)
    options: ReencodeOptions = Field(default_factory=ReencodeOptions)


class ReencodedFile(BaseModel):
    sha256: str
    encoding: str
    bom: bool = False
    content_b64: str


class SideReport(BaseModel):
    encoding: str
    bytes: int
    bom: bool = False


class ReencodeReport(BaseModel):
    source: SideReport
    target: SideReport
    characters: int


class ReencodeResponse(BaseModel):
    reencoded: ReencodedFile
    report: ReencodeReport


class HealthResponse(BaseModel):
    ok: bool = True
