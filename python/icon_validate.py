#!/usr/bin/env python3
"""Input checks shared by the ICO and ICNS encoders and decoders."""

from collections.abc import Mapping

from icon_errors import (
    EmptyInputError,
    MissingFieldError,
    InvalidDataTypeError,
    InvalidBufferError,
)

BYTES_LIKE_TYPES = (bytes, bytearray, memoryview)


def byte_view(data):
    """Flat unsigned-byte view of data; len() of the result is its size in bytes."""
    return memoryview(data).cast('B')


def buffer_view(buffer):
    """Byte view of a buffer handed to a decoder."""
    try:
        return byte_view(buffer)
    except TypeError as e:
        raise InvalidBufferError(buffer) from e


def validate_images(images, required_fields):
    """
    Check a list of image descriptors before encoding.

    Args:
        images: List (or tuple) of mappings describing each image
        required_fields: Field names every image must carry

    Raises:
        EmptyInputError, MissingFieldError, InvalidDataTypeError
    """
    if not isinstance(images, (list, tuple)) or len(images) == 0:
        raise EmptyInputError()

    for index, image in enumerate(images):
        for field in required_fields:
            if not isinstance(image, Mapping) or field not in image:
                raise MissingFieldError(index, field)

        if 'data' not in image:
            continue
        data = image['data']
        if not isinstance(data, BYTES_LIKE_TYPES):
            raise InvalidDataTypeError(index, data)
        # cast('B') needs a contiguous buffer
        if isinstance(data, memoryview) and not data.c_contiguous:
            raise InvalidDataTypeError(index, data, "must be a contiguous buffer")
