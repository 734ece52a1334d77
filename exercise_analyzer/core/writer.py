"""Result writer — persist the canonical report to ``<output_path>/<output_file>``.

Writes go through a temp file in the target directory followed by an
atomic replace, so readers never observe a partial ``analysis.json``.
The output directory must already exist.
"""

from __future__ import annotations

import hashlib
import logging
import os
import stat
import tempfile
from pathlib import Path

from exercise_analyzer.models.params import RunParams
from exercise_analyzer.models.submission import Submission

logger = logging.getLogger(__name__)


def _read_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


# Read once at import; os.umask() can only be queried by setting it.
_UMASK = _read_umask()


class ResultWriteError(RuntimeError):
    """Raised when the report cannot be written. Fatal for the run."""


def report_digest(data: bytes) -> str:
    """Return ``"sha256:<hex>"`` for the serialized report."""
    return f"sha256:{hashlib.sha256(data).hexdigest()}"


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write *data* to *path* via temp file + replace, overwriting any existing file."""
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            prefix=f".{path.name}.",
            suffix=".tmp",
            dir=path.parent,
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            f.write(data)
        temp_path.chmod(_target_mode(path))
        temp_path.replace(path)
    except OSError as exc:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise ResultWriteError(f"Cannot write results to {path}: {exc}") from exc


def _target_mode(path: Path) -> int:
    """Mode for the report: the existing file's, else ``0o666`` minus the umask."""
    if path.is_file():
        return stat.S_IMODE(path.stat().st_mode)
    return 0o666 & ~_UMASK


def write_results(submission: Submission, params: RunParams) -> Submission:
    """Serialize and write the finalized submission when ``write_results`` is on."""
    if not params.write_results:
        logger.debug("write_results disabled; skipping %s", params.output_target)
        return submission

    data = submission.to_json().encode("utf-8")
    target = params.output_target
    atomic_write_bytes(target, data)
    logger.info("Wrote %s (%s)", target, report_digest(data))
    return submission
