#!/usr/bin/env python3
"""
ICO Encoder - Serializes image payloads into a Windows ICO container.

Layout (little-endian):
    header      reserved=0, type=1, image count
    directory   one 16-byte entry per image
    payloads    raw image data, concatenated in directory order
"""

import struct

from constants import (
    ICO_HEADER_FORMAT,
    ICO_HEADER_SIZE,
    ICO_DIRECTORY_ENTRY_FORMAT,
    ICO_DIRECTORY_ENTRY_SIZE,
    ICO_RESERVED,
    ICO_IMAGE_TYPE,
    ICO_COLOR_PLANES,
    ICO_BITS_PER_PIXEL,
    ICO_MAX_IMAGES,
    ICO_MAX_BYTE_DIMENSION,
    ICO_ZERO_BYTE_DIMENSIONS,
    ICO_REQUIRED_FIELDS,
)
from icon_errors import InvalidDimensionError, TooManyImagesError
from icon_validate import validate_images, byte_view


def dimension_to_byte(value):
    """Map a logical width/height to its on-disk byte (256 and 512 become 0)."""
    if value in ICO_ZERO_BYTE_DIMENSIONS:
        return 0
    return value


def check_dimensions(images):
    for index, image in enumerate(images):
        for field in ('width', 'height'):
            value = image[field]
            if isinstance(value, bool) or not isinstance(value, int) or not (
                1 <= value <= ICO_MAX_BYTE_DIMENSION or value in ICO_ZERO_BYTE_DIMENSIONS
            ):
                raise InvalidDimensionError(index, field, value)


def encode_ico(images):
    """
    Build an ICO file from a list of image descriptors.

    Args:
        images: List of {'width', 'height', 'data'} mappings, written in order

    Returns:
        The complete ICO file as bytes
    """
    validate_images(images, ICO_REQUIRED_FIELDS)

    count = len(images)
    if count > ICO_MAX_IMAGES:
        raise TooManyImagesError(count, ICO_MAX_IMAGES)
    check_dimensions(images)

    payloads = [byte_view(image['data']) for image in images]

    directory_size = count * ICO_DIRECTORY_ENTRY_SIZE
    total_image_bytes = sum(len(data) for data in payloads)
    buffer = bytearray(ICO_HEADER_SIZE + directory_size + total_image_bytes)

    struct.pack_into(ICO_HEADER_FORMAT, buffer, 0, ICO_RESERVED, ICO_IMAGE_TYPE, count)

    data_offset = ICO_HEADER_SIZE + directory_size
    data_offsets = []

    for index, (image, data) in enumerate(zip(images, payloads)):
        data_size = len(data)
        struct.pack_into(
            ICO_DIRECTORY_ENTRY_FORMAT,
            buffer,
            ICO_HEADER_SIZE + index * ICO_DIRECTORY_ENTRY_SIZE,
            dimension_to_byte(image['width']),
            dimension_to_byte(image['height']),
            0,  # Color palette
            0,  # Reserved
            ICO_COLOR_PLANES,
            ICO_BITS_PER_PIXEL,
            data_size,
            data_offset,
        )
        data_offsets.append(data_offset)
        data_offset += data_size

    for data, offset in zip(payloads, data_offsets):
        buffer[offset:offset + len(data)] = data

    return bytes(buffer)
