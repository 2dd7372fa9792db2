from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Optional, Union

from .codec import decode_save, encode_save
from .errors import SaveError
from .savefile import Savefile
from .settings import Settings

logger = logging.getLogger(__name__)


def load_savefile(path: Union[str, Path]) -> Savefile:
    """Read and decode the savefile at ``path``. I/O errors propagate unchanged."""
    path = Path(path)
    with path.open("rb") as f:
        data = f.read()
    save = decode_save(data)
    save.path = path
    logger.debug("Loaded savefile from %s (%d bytes)", path, len(data))
    return save


def write_savefile(save: Savefile, path: Union[str, Path, None] = None, settings: Optional[Settings] = None) -> Path:
    """Encode ``save`` and write it to ``path`` (default: where it was loaded from).

    The file is encoded completely before anything on disk is touched.
    """
    if path is None:
        if save.path is None:
            raise SaveError("Savefile has no path to write to")
        path = save.path
    path = Path(path)
    if settings is None:
        settings = Settings.load()
    data = encode_save(save)

    if settings.backup_on_write and path.exists():
        _backup(path)
    if settings.atomic_write:
        _atomic_write(path, data)
    else:
        with path.open("wb") as f:
            f.write(data)
    logger.info("Wrote savefile to %s (%d bytes)", path, len(data))
    return path


def _backup(path: Path) -> None:
    bak = path.with_suffix(path.suffix + ".bak")
    try:
        shutil.copy2(str(path), str(bak))
    except OSError as e:
        logger.warning("Failed to back up %s: %s", path, e)


def _atomic_write(path: Path, data: bytes) -> None:
    """Write to a temporary sibling, fsync it and rename it over ``path``."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    with tmp.open("wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(str(tmp), str(path))
