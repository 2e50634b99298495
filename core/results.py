"""Uniquely named result files for crawl output."""

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Optional, Union

from core.scoper import InvalidDomainError
from utils.logger import get_logger
from utils.url_utils import extract_domain

log = get_logger("results")

RESULTS_DIR = "RESULTS"


@dataclass
class ResultsConfig:
    """Where result files go. ``base_dir`` defaults to the working directory."""
    results_dir: str = RESULTS_DIR
    base_dir: Optional[Path] = None


class ResultFileError(OSError):
    """Base class for result file failures."""


class WorkingDirectoryError(ResultFileError):
    """The working directory could not be determined."""


class ResultCreateError(ResultFileError):
    """The result file could not be created."""


class ResultWriteError(ResultFileError):
    """Writing to the result file failed."""


class ResultCloseError(ResultFileError):
    """Flushing or closing the result file failed."""


def format_timestamp(now: datetime) -> str:
    """Timestamp as d-M-yyyy-HH-mm-ss (day and month without padding)."""
    return f"{now.day}-{now.month}-{now.year}-{now:%H-%M-%S}"


def _base_dir(config: ResultsConfig) -> Path:
    if config.base_dir is not None:
        return Path(config.base_dir)
    try:
        return Path(os.getcwd())
    except OSError as e:
        raise WorkingDirectoryError(f"Cannot determine working directory: {e}") from e


def build_result_path(
    url: str,
    ext: str,
    config: Optional[ResultsConfig] = None,
    now: Optional[datetime] = None,
) -> Path:
    """
    Build ``<base>/<results_dir>/<domain>-<timestamp><ext>``.

    Args:
        url: Crawled URL; its host names the file
        ext: Extension with leading dot, e.g. ".json"
        config: Results location, defaults to RESULTS/ under the working directory
        now: Timestamp to use, defaults to the current time
    """
    config = config or ResultsConfig()
    domain = extract_domain(url)
    if not domain:
        raise InvalidDomainError(f"No domain in URL: {url!r}")

    stamp = format_timestamp(now or datetime.now())
    return _base_dir(config) / config.results_dir / f"{domain}-{stamp}{ext}"


def create_result_file(
    url: str,
    ext: str,
    config: Optional[ResultsConfig] = None,
    now: Optional[datetime] = None,
) -> BinaryIO:
    """Create the result file and return it opened for binary writing."""
    path = build_result_path(url, ext, config, now)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log.warning(f"Could not create results dir {path.parent}: {e}")

    try:
        fh = open(path, "wb")
    except OSError as e:
        raise ResultCreateError(f"Cannot create result file {path}: {e}") from e

    log.debug(f"Created result file {path}")
    return fh


def _write_and_flush(fh: BinaryIO, data: bytes) -> None:
    try:
        fh.write(data)
    except (OSError, ValueError) as e:
        raise ResultWriteError(f"Write to {getattr(fh, 'name', fh)} failed: {e}") from e

    try:
        fh.flush()
        os.fsync(fh.fileno())
    except (OSError, ValueError) as e:
        raise ResultCloseError(f"Flush of {getattr(fh, 'name', fh)} failed: {e}") from e


def write_and_close(fh: BinaryIO, data: Union[bytes, str]) -> None:
    """Write ``data``, flush it to disk and close ``fh``. The handle is always closed."""
    if isinstance(data, str):
        data = data.encode("utf-8")

    try:
        _write_and_flush(fh, data)
    except Exception:
        try:
            fh.close()
        except OSError as e:
            log.warning(f"Close after failed write also failed: {e}")
        raise

    try:
        fh.close()
    except OSError as e:
        raise ResultCloseError(f"Close of {getattr(fh, 'name', fh)} failed: {e}") from e


def save_result(
    url: str,
    data: Union[bytes, str],
    ext: str,
    config: Optional[ResultsConfig] = None,
    now: Optional[datetime] = None,
) -> Path:
    """Create a uniquely named result file for ``url`` and write ``data`` to it."""
    fh = create_result_file(url, ext, config, now)
    write_and_close(fh, data)
    log.info(f"Saved result to {fh.name}")
    return Path(fh.name)
