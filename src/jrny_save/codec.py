from __future__ import annotations

import logging
from typing import BinaryIO

from .errors import DecodeError
from .savefile import Savefile
from .stream import ByteReader, ByteWriter

logger = logging.getLogger(__name__)


def decode_save(data: bytes) -> Savefile:
    """Decode savefile bytes into a ``Savefile``.

    There is no magic number or checksum in the format, so success does not
    prove the bytes came from a savefile.
    """
    try:
        save = Savefile.read(ByteReader(data))
    except DecodeError as e:
        logger.debug("Failed to decode savefile: %s", e)
        raise
    logger.debug(
        "Decoded savefile: level=%s companions=%d companion_symbols=%d",
        save.current_level.name,
        len(save.companions),
        len(save.companion_symbols),
    )
    return save


def encode_save(save: Savefile) -> bytes:
    """Encode a ``Savefile`` back into its binary layout."""
    writer = ByteWriter()
    save.write(writer)
    return writer.getvalue()


def read_save(stream: BinaryIO) -> Savefile:
    return decode_save(stream.read())


def write_save(save: Savefile, stream: BinaryIO) -> None:
    stream.write(encode_save(save))
