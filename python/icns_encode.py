#!/usr/bin/env python3
"""
ICNS Encoder - Serializes image payloads into an Apple ICNS container.

Layout (big-endian):
    header   b'icns', total file size (u32)
    chunks   type tag (4 ASCII bytes), chunk length incl. header (u32), payload
"""

import struct

from constants import (
    ICNS_MAGIC,
    ICNS_HEADER_FORMAT,
    ICNS_HEADER_SIZE,
    ICNS_CHUNK_HEADER_FORMAT,
    ICNS_CHUNK_HEADER_SIZE,
    ICNS_SIZE_TO_TYPE,
    ICNS_REQUIRED_FIELDS,
)
from icon_errors import NoValidImagesError
from icon_validate import validate_images, byte_view


def is_encodable(image):
    """True if the image has a standard ICNS size and a non-empty payload."""
    return image['size'] in ICNS_SIZE_TO_TYPE and byte_view(image['data']).nbytes > 0


def build_chunk(image):
    icon_type = ICNS_SIZE_TO_TYPE[image['size']]
    data = byte_view(image['data'])
    header = struct.pack(
        ICNS_CHUNK_HEADER_FORMAT,
        icon_type.encode('ascii'),
        len(data) + ICNS_CHUNK_HEADER_SIZE,
    )
    return header + bytes(data)


def encode_icns(images):
    """
    Build an ICNS file from a list of image descriptors.

    Images with an unsupported size or empty data are skipped. The remaining
    images are written as chunks in their original order.

    Args:
        images: List of {'size', 'data'} mappings

    Returns:
        The complete ICNS file as bytes
    """
    validate_images(images, ICNS_REQUIRED_FIELDS)

    valid_images = [image for image in images if is_encodable(image)]
    if not valid_images:
        raise NoValidImagesError()

    chunks = [build_chunk(image) for image in valid_images]
    total_size = ICNS_HEADER_SIZE + sum(len(chunk) for chunk in chunks)

    header = struct.pack(ICNS_HEADER_FORMAT, ICNS_MAGIC, total_size)
    return b''.join([header] + chunks)
