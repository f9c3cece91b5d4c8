#!/usr/bin/env python3
"""
ICO Decoder - Parses a Windows ICO container into image views.

Payloads are returned as memoryview slices of the input buffer; nothing is
copied, so the buffer must stay alive while they are in use.
"""

import struct
from collections import namedtuple

from constants import (
    ICO_HEADER_FORMAT,
    ICO_HEADER_SIZE,
    ICO_DIRECTORY_ENTRY_FORMAT,
    ICO_DIRECTORY_ENTRY_SIZE,
    ICO_RESERVED,
    ICO_IMAGE_TYPE,
    ICO_ZERO_BYTE_DECODED,
)
from icon_validate import buffer_view
from icon_errors import (
    HeaderTooSmallError,
    InvalidReservedFieldError,
    InvalidImageTypeError,
    NoImagesError,
    DirectoryTruncatedError,
    ImageDataOutOfBoundsError,
)

ParsedIcoImage = namedtuple('ParsedIcoImage', ['width', 'height', 'bpp', 'data_size', 'data'])


class IcoIcon:
    """Decoded ICO images plus lookup helpers."""

    def __init__(self, images):
        self.images = images

    def get_image(self, width, height):
        """Return the data view of the first image with these dimensions, or None."""
        for image in self.images:
            if image.width == width and image.height == height:
                return image.data
        return None

    def get_info(self):
        for image in self.images:
            yield {
                'width': image.width,
                'height': image.height,
                'bpp': image.bpp,
                'data_size': image.data_size,
            }

    def __len__(self):
        return len(self.images)

    def __iter__(self):
        return iter(self.images)


def byte_to_dimension(value):
    # 0 stands for 256 or 512; only 256 can be given back.
    return value if value != 0 else ICO_ZERO_BYTE_DECODED


def decode_ico(buffer):
    """
    Parse an ICO file held in memory.

    Args:
        buffer: bytes-like object holding the whole ICO file

    Returns:
        IcoIcon whose images reference slices of buffer
    """
    view = buffer_view(buffer)
    buffer_length = len(view)

    if buffer_length < ICO_HEADER_SIZE:
        raise HeaderTooSmallError(buffer_length, ICO_HEADER_SIZE)

    reserved, image_type, count = struct.unpack_from(ICO_HEADER_FORMAT, view, 0)
    if reserved != ICO_RESERVED:
        raise InvalidReservedFieldError(reserved)
    if image_type != ICO_IMAGE_TYPE:
        raise InvalidImageTypeError(image_type)
    if count == 0:
        raise NoImagesError()

    directory_end = ICO_HEADER_SIZE + count * ICO_DIRECTORY_ENTRY_SIZE
    if buffer_length < directory_end:
        raise DirectoryTruncatedError(count, buffer_length, directory_end)

    images = []
    for index in range(count):
        (
            width,
            height,
            _color_palette,
            _reserved,
            _color_planes,
            bpp,
            data_size,
            data_offset,
        ) = struct.unpack_from(
            ICO_DIRECTORY_ENTRY_FORMAT, view, ICO_HEADER_SIZE + index * ICO_DIRECTORY_ENTRY_SIZE
        )

        if data_offset + data_size > buffer_length:
            raise ImageDataOutOfBoundsError(index, data_offset, data_size, buffer_length)

        images.append(ParsedIcoImage(
            width=byte_to_dimension(width),
            height=byte_to_dimension(height),
            bpp=bpp,
            data_size=data_size,
            data=view[data_offset:data_offset + data_size],
        ))

    return IcoIcon(images)
