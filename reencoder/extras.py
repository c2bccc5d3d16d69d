"""Small scripting helpers shipped next to the re-encoder."""

from __future__ import annotations

import logging
import os
import random
import shutil
import string
import threading
import time
from pathlib import Path
from typing import Iterable, Optional
from zipfile import ZIP_DEFLATED, ZipFile

logger = logging.getLogger(__name__)

_ID_FIRST = string.ascii_letters
_ID_REST = string.ascii_letters + string.digits
_issued_ids: set[str] = set()
_issued_counts: dict[int, int] = {}
_id_lock = threading.Lock()


def create_directory(path: os.PathLike[str] | str) -> Path:
    """Create ``path`` recursively. A path with a file suffix gets its parent created."""
    directory = Path(path)
    if directory.suffix:
        directory = directory.parent
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def remove_directory(path: os.PathLike[str] | str) -> None:
    """Remove a directory tree. Missing paths are ignored."""
    directory = Path(path)
    if directory.exists():
        shutil.rmtree(directory)


def get_id(length: int = 6) -> str:
    """Return an alphanumeric ID, starting with a letter, unique within this process."""
    if length < 1:
        raise ValueError("length must be at least 1")
    with _id_lock:
        capacity = len(_ID_FIRST) * len(_ID_REST) ** (length - 1)
        if _issued_counts.get(length, 0) >= capacity:
            raise RuntimeError(f"No IDs of length {length} left")

        while True:
            candidate = random.choice(_ID_FIRST) + "".join(
                random.choices(_ID_REST, k=length - 1)
            )
            if candidate not in _issued_ids:
                _issued_ids.add(candidate)
                _issued_counts[length] = _issued_counts.get(length, 0) + 1
                return candidate


def sleep(ms: float, *, start: Optional[float] = None, log: bool = False) -> None:
    """
    Block for ``ms`` milliseconds.

    With ``start`` (a ``time.perf_counter()`` reading), only what is left of
    ``ms`` since ``start`` is slept.
    """
    seconds = ms / 1000
    if start is not None:
        seconds -= time.perf_counter() - start
    seconds = max(seconds, 0.0)

    if log:
        logger.info("Sleeping for %.3f s", seconds)
    time.sleep(seconds)


class DurationTracker:
    """Estimates the time left in a loop of ``nb_iterations`` iterations."""

    def __init__(self, nb_iterations: int, *, prefix: str = "", suffix: str = ""):
        if nb_iterations < 1:
            raise ValueError("nb_iterations must be at least 1")
        self.nb_iterations = nb_iterations
        self.prefix = prefix
        self.suffix = suffix
        self.nb_iterations_done = 0
        self.total_duration = 0.0
        self._started_at: Optional[float] = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def estimate(self) -> float:
        """Seconds left, based on the mean duration of finished iterations."""
        if self.nb_iterations_done == 0:
            return 0.0
        mean = self.total_duration / self.nb_iterations_done
        return mean * max(self.nb_iterations - self.nb_iterations_done, 0)

    def log(self) -> str:
        """Close the current iteration and log the estimate. Returns the logged message."""
        if self._started_at is None:
            raise RuntimeError("start() must be called before log()")
        self.total_duration += time.perf_counter() - self._started_at
        self.nb_iterations_done += 1
        self._started_at = None

        message = f"{self.prefix}~{format_duration(self.estimate())} left.{self.suffix}"
        logger.info(message)
        return message


def format_duration(seconds: float) -> str:
    total = int(round(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)

    parts = []
    if hours:
        parts.append(f"{hours} h")
    if minutes:
        parts.append(f"{minutes} min")
    parts.append(f"{secs} sec")
    return ", ".join(parts)


def zip(
    files: os.PathLike[str] | str | Iterable[os.PathLike[str] | str],
    zip_path: os.PathLike[str] | str,
) -> Path:
    """Zip a folder, or a list of files, into ``zip_path``."""
    output = Path(zip_path)

    if isinstance(files, (str, os.PathLike)) and Path(files).is_dir():
        folder = Path(files)
        entries = [(p, p.relative_to(folder)) for p in sorted(folder.rglob("*")) if p.is_file()]
    elif isinstance(files, (str, os.PathLike)):
        entries = [(Path(files), Path(files).name)]
    else:
        entries = [(Path(f), Path(f).name) for f in files]

    with ZipFile(output, "w", compression=ZIP_DEFLATED) as archive:
        for source, arcname in entries:
            archive.write(source, arcname=str(arcname))

    logger.debug("Zipped %d file(s) into %s", len(entries), output)
    return output


def unzip(zip_path: os.PathLike[str] | str, output: os.PathLike[str] | str) -> Path:
    """Extract ``zip_path`` into ``output``, creating it if needed."""
    destination = Path(output)
    destination.mkdir(parents=True, exist_ok=True)
    with ZipFile(zip_path) as archive:
        archive.extractall(destination)
    return destination
