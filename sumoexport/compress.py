"""Request body compression."""

from __future__ import annotations

import gzip
import zlib
from typing import BinaryIO, Union

from .config import CompressEncoding

_DEFLATE_BEST_SPEED = 1
_GZIP_DEFAULT_LEVEL = 6

Payload = Union[bytes, bytearray, memoryview, BinaryIO]


class Compressor:
    """Compresses payloads with gzip, raw deflate or not at all."""

    def __init__(self, encoding: Union[CompressEncoding, str]) -> None:
        try:
            self.encoding = CompressEncoding(encoding)
        except ValueError:
            raise ValueError(f"invalid format: {encoding}") from None

    def compress(self, data: Payload) -> bytes:
        """Return the data, read from bytes or a binary stream, compressed."""
        if isinstance(data, (bytes, bytearray, memoryview)):
            payload = bytes(data)
        else:
            payload = bytes(data.read())

        if self.encoding is CompressEncoding.GZIP:
            return gzip.compress(payload, compresslevel=_GZIP_DEFAULT_LEVEL, mtime=0)
        if self.encoding is CompressEncoding.DEFLATE:
            deflater = zlib.compressobj(_DEFLATE_BEST_SPEED, zlib.DEFLATED, -zlib.MAX_WBITS)
            return deflater.compress(payload) + deflater.flush()
        return payload