"""
Re-encoding of whole files between named character encodings.

Responsibilities:
- read the source file's raw bytes
- strict decode with the declared source encoding (leading BOM consumed)
- strict encode with the declared target encoding
- optional BOM on the output, never doubled
- atomic write to the destination (temp file in the same directory, then rename)
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, Tuple

from . import rules
from .charsets import DEFAULT_CODECS, TextCodecs
from .errors import NotFoundError, ReadError, WriteError
from .models import ReencodeRequest

logger = logging.getLogger(__name__)


def transcode(
    raw: bytes,
    source_encoding: str,
    target_encoding: str,
    *,
    add_bom: bool = rules.DEFAULT_ADD_BOM,
    codec: TextCodecs = DEFAULT_CODECS,
) -> Tuple[bytes, Dict[str, Any]]:
    """
    Convert ``raw`` from ``source_encoding`` to ``target_encoding`` in memory.

    Returns the output bytes and a report describing what happened.
    """
    source = codec.resolve(source_encoding)
    target = codec.resolve(target_encoding)

    text, source_bom = codec.decode(raw, source)
    encoded = codec.encode(text, target)

    target_bom = codec.bom(target)
    if add_bom:
        if not target_bom:
            logger.debug("%s has no BOM; add_bom ignored", target)
        elif encoded.startswith(target_bom):
            logger.debug("%s output already starts with a BOM", target)
        else:
            encoded = target_bom + encoded

    report = {
        "source": {
            "encoding": source,
            "bytes": len(raw),
            "bom": bool(source_bom),
        },
        "target": {
            "encoding": target,
            "bytes": len(encoded),
            "bom": bool(target_bom) and encoded.startswith(target_bom),
        },
        "characters": len(text),
    }
    return encoded, report


def reencode(
    source_path: os.PathLike[str] | str,
    destination_path: os.PathLike[str] | str,
    source_encoding: str,
    target_encoding: str,
    *,
    add_bom: bool = rules.DEFAULT_ADD_BOM,
    codec: TextCodecs = DEFAULT_CODECS,
) -> None:
    """
    Re-encode the file at ``source_path`` into ``destination_path``.

    The destination is overwritten. Its parent directory must already exist.
    Nothing is written unless every step succeeds.
    """
    source = Path(source_path)
    destination = Path(destination_path)

    # Fail on bad names before touching the filesystem.
    codec.resolve(source_encoding)
    codec.resolve(target_encoding)

    raw = _read_source(source)
    encoded, report = transcode(
        raw, source_encoding, target_encoding, add_bom=add_bom, codec=codec
    )
    _write_atomic(destination, encoded)

    logger.info(
        "Re-encoded %s (%s, %d bytes) -> %s (%s, %d bytes)",
        source,
        report["source"]["encoding"],
        report["source"]["bytes"],
        destination,
        report["target"]["encoding"],
        report["target"]["bytes"],
    )


def run_request(request: ReencodeRequest, *, codec: TextCodecs = DEFAULT_CODECS) -> None:
    """Execute a validated re-encode request."""
    reencode(
        request.source_path,
        request.destination_path,
        request.source_encoding,
        request.target_encoding,
        add_bom=request.options.add_bom,
        codec=codec,
    )


def _read_source(path: Path) -> bytes:
    try:
        if not stat.S_ISREG(path.stat().st_mode):
            raise NotFoundError(f"Not a regular file: {path}", details={"path": str(path)})
        return path.read_bytes()
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise NotFoundError(f"No such file: {path}", details={"path": str(path)}) from exc
    except OSError as exc:
        raise ReadError(
            f"Cannot read {path}: {exc.strerror or exc}",
            details={"path": str(path)},
        ) from exc


def _write_atomic(path: Path, data: bytes) -> None:
    """Write ``data`` to a temp file next to ``path`` and rename it into place."""
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            prefix=f".{path.name}.",
            suffix=rules.TEMP_SUFFIX,
        ) as fh:
            tmp_path = Path(fh.name)
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())

        if path.exists():
            shutil.copymode(path, tmp_path)
        else:
            os.chmod(tmp_path, rules.NEW_FILE_MODE)

        os.replace(tmp_path, path)
    except OSError as exc:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise WriteError(
            f"Cannot write {path}: {exc.strerror or exc}",
            details={"path": str(path)},
        ) from exc
