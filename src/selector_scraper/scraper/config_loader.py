"""Loading of ``setting.json`` from a target directory."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from selector_scraper.core.exceptions import (
    ConfigDecodeError,
    ConfigMissingPathError,
    PathNotDirectoryError,
    SettingFileIsDirectoryError,
    SettingFileMissingError,
    SettingFileUnreadableError,
)
from selector_scraper.scraper.config import SETTING_FILE_NAME
from selector_scraper.scraper.models import ScrapeConfig

logger = logging.getLogger(__name__)


def resolve_target_dir(target_path: Path | str | None) -> Path:
    """Return *target_path* as a directory :class:`Path`.

    Raises:
        ConfigMissingPathError: If *target_path* is ``None`` or empty.
        PathNotDirectoryError: If it does not exist or is not a directory.
    """
    if target_path is None or not str(target_path):
        raise ConfigMissingPathError()
    target_dir = Path(target_path)
    if not target_dir.exists():
        raise PathNotDirectoryError(target_dir, exists=False)
    if not target_dir.is_dir():
        raise PathNotDirectoryError(target_dir)
    return target_dir


def load_config(target_dir: Path) -> ScrapeConfig:
    """Read and decode ``setting.json`` from *target_dir*.

    Field emptiness is not checked here; see
    :func:`~selector_scraper.scraper.models.validate_config`.

    Raises:
        SettingFileMissingError: If the file does not exist.
        SettingFileIsDirectoryError: If a directory has the file's name.
        SettingFileUnreadableError: If the file cannot be read.
        ConfigDecodeError: If the content is not a JSON object of strings.
    """
    setting_file = target_dir / SETTING_FILE_NAME
    if not setting_file.exists():
        raise SettingFileMissingError(setting_file)
    if setting_file.is_dir():
        raise SettingFileIsDirectoryError(setting_file)

    try:
        with setting_file.open("rb") as fh:
            raw = fh.read()
    except OSError as exc:
        raise SettingFileUnreadableError(
            f"Failed to read setting file: {exc}", path=setting_file
        ) from exc

    try:
        config = ScrapeConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigDecodeError(
            f"Failed to decode setting file: {exc.error_count()} error(s): "
            f"{exc.errors()[0]['msg']}",
            path=setting_file,
        ) from exc

    logger.debug("scraper: loaded %s (url=%s)", setting_file, config.url)
    return config
