"""Writing extracted records to ``result.json``."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Sequence

from selector_scraper.core.exceptions import ResultEncodeError, ResultFileCreateError
from selector_scraper.scraper.config import (
    RESULT_FILE_NAME,
    RESULT_JSON_INDENT,
    RESULT_TMP_FILE_NAME,
)
from selector_scraper.scraper.models import ExtractedRecord

logger = logging.getLogger(__name__)


def encode_results(records: Sequence[ExtractedRecord]) -> str:
    """Serialize *records* as an indented JSON array with a trailing newline.

    Raises:
        ResultEncodeError: If the records cannot be encoded.
    """
    try:
        payload = json.dumps(
            [record.to_dict() for record in records],
            indent=RESULT_JSON_INDENT,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as exc:
        raise ResultEncodeError(f"Failed to encode results: {exc}") from exc
    return payload + "\n"


def write_results(target_dir: Path, records: Sequence[ExtractedRecord]) -> Path:
    """Write *records* to ``result.json`` in *target_dir*.

    The payload is encoded first, written to a temporary file beside
    ``result.json`` and then moved over it with :func:`os.replace`, so a
    failure at any point never leaves a partial ``result.json`` behind.

    Returns:
        Path of the written file.

    Raises:
        ResultEncodeError: If the records cannot be encoded.
        ResultFileCreateError: If the file cannot be created, written or moved
            into place.
    """
    result_file = target_dir / RESULT_FILE_NAME
    try:
        payload = encode_results(records)
    except ResultEncodeError as exc:
        exc.path = str(result_file)
        raise

    tmp_file = target_dir / RESULT_TMP_FILE_NAME
    try:
        with tmp_file.open("w", encoding="utf-8") as fh:
            fh.write(payload)
        os.replace(tmp_file, result_file)
    except OSError as exc:
        tmp_file.unlink(missing_ok=True)
        raise ResultFileCreateError(
            f"Failed to write result file: {exc}", path=result_file
        ) from exc

    logger.debug("scraper: wrote %d records to %s", len(records), result_file)
    return result_file
