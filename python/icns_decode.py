#!/usr/bin/env python3
"""
ICNS Decoder - Parses an Apple ICNS container into chunk views.

Chunk payloads are memoryview slices of the input buffer. Chunks with a type
tag outside the standard size table are kept with size None.
"""

import struct
from collections import namedtuple

from constants import (
    ICNS_MAGIC,
    ICNS_HEADER_FORMAT,
    ICNS_HEADER_SIZE,
    ICNS_CHUNK_HEADER_FORMAT,
    ICNS_CHUNK_HEADER_SIZE,
    ICNS_TYPE_TO_SIZE,
)
from icon_validate import buffer_view
from icon_errors import (
    HeaderTooSmallError,
    InvalidMagicError,
    DeclaredSizeExceedsBufferError,
    ChunkHeaderTruncatedError,
    InvalidChunkLengthError,
    ChunkDataOutOfBoundsError,
)

ParsedIcnsImage = namedtuple('ParsedIcnsImage', ['type', 'size', 'data'])


class IcnsIcon:
    """Decoded ICNS chunks plus lookup helpers."""

    def __init__(self, images):
        self.images = images

    def get_image(self, size):
        """Return the data view of the first chunk mapped to size, or None."""
        for image in self.images:
            if image.size is not None and image.size == size:
                return image.data
        return None

    def get_info(self):
        for image in self.images:
            yield {
                'type': image.type,
                'size': image.size,
                'data_size': len(image.data),
            }

    def __len__(self):
        return len(self.images)

    def __iter__(self):
        return iter(self.images)


def decode_icns(buffer):
    """
    Parse an ICNS file held in memory.

    Args:
        buffer: bytes-like object holding the whole ICNS file

    Returns:
        IcnsIcon whose chunks reference slices of buffer
    """
    view = buffer_view(buffer)
    buffer_length = len(view)

    if buffer_length < ICNS_HEADER_SIZE:
        raise HeaderTooSmallError(buffer_length, ICNS_HEADER_SIZE)

    magic, total_size = struct.unpack_from(ICNS_HEADER_FORMAT, view, 0)
    if magic != ICNS_MAGIC:
        raise InvalidMagicError(magic)
    if total_size > buffer_length:
        raise DeclaredSizeExceedsBufferError(total_size, buffer_length)

    images = []
    offset = ICNS_HEADER_SIZE
    while offset < total_size:
        if buffer_length - offset < ICNS_CHUNK_HEADER_SIZE:
            raise ChunkHeaderTruncatedError(offset, buffer_length)

        raw_type, chunk_length = struct.unpack_from(ICNS_CHUNK_HEADER_FORMAT, view, offset)
        if chunk_length < ICNS_CHUNK_HEADER_SIZE:
            raise InvalidChunkLengthError(offset, chunk_length)
        if offset + chunk_length > buffer_length:
            raise ChunkDataOutOfBoundsError(offset, chunk_length, buffer_length)

        # latin-1 keeps any 4 bytes as a 4-character tag
        icon_type = raw_type.decode('latin-1')
        images.append(ParsedIcnsImage(
            type=icon_type,
            size=ICNS_TYPE_TO_SIZE.get(icon_type),
            data=view[offset + ICNS_CHUNK_HEADER_SIZE:offset + chunk_length],
        ))
        offset += chunk_length

    return IcnsIcon(images)
