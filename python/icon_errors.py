#!/usr/bin/env python3
"""Exceptions raised by the ICO and ICNS codecs."""


class IconError(ValueError):
    """Base class for every codec failure."""


# Input contract

class EmptyInputError(IconError):
    def __init__(self):
        super().__init__("At least one image is required")


class MissingFieldError(IconError):
    def __init__(self, index, field):
        self.index = index
        self.field = field
        super().__init__(f"Image at index {index} missing required field: {field}")


class InvalidDataTypeError(IconError):
    def __init__(self, index, value, reason="must be bytes-like"):
        self.index = index
        super().__init__(
            f"Image at index {index} data {reason}, got {type(value).__name__}"
        )


class InvalidDimensionError(IconError):
    def __init__(self, index, field, value):
        self.index = index
        self.field = field
        self.value = value
        super().__init__(
            f"Image at index {index} has unsupported {field} {value!r} (expected 1-256 or 512)"
        )


class TooManyImagesError(IconError):
    def __init__(self, count, limit):
        self.count = count
        super().__init__(f"Too many images for one ICO file: {count} > {limit}")


class NoValidImagesError(IconError):
    def __init__(self):
        super().__init__("No valid ICNS images provided")


# Malformed containers

class InvalidBufferError(IconError):
    def __init__(self, buffer):
        super().__init__(
            f"Expected a contiguous bytes-like buffer, got {type(buffer).__name__}"
        )


class HeaderTooSmallError(IconError):
    def __init__(self, buffer_length, required):
        self.buffer_length = buffer_length
        super().__init__(
            f"Buffer too small for header: {buffer_length} bytes, need at least {required}"
        )


class InvalidReservedFieldError(IconError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid ICO file: reserved field is {value}, expected 0")


class InvalidImageTypeError(IconError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid ICO file: image type is {value}, expected 1")


class NoImagesError(IconError):
    def __init__(self):
        super().__init__("Invalid ICO file: image count is 0")


class DirectoryTruncatedError(IconError):
    def __init__(self, count, buffer_length, required):
        self.count = count
        self.buffer_length = buffer_length
        super().__init__(
            f"ICO directory truncated: {count} entries need {required} bytes, buffer has {buffer_length}"
        )


class ImageDataOutOfBoundsError(IconError):
    def __init__(self, index, offset, length, buffer_length):
        self.index = index
        self.offset = offset
        self.length = length
        self.buffer_length = buffer_length
        super().__init__(
            f"Image {index} data out of bounds: offset {offset} + size {length} > buffer length {buffer_length}"
        )


class InvalidMagicError(IconError):
    def __init__(self, magic):
        self.magic = magic
        super().__init__(f"Invalid ICNS file: magic bytes {magic!r} != b'icns'")


class DeclaredSizeExceedsBufferError(IconError):
    def __init__(self, declared, buffer_length):
        self.declared = declared
        self.buffer_length = buffer_length
        super().__init__(
            f"ICNS declared size {declared} exceeds buffer length {buffer_length}"
        )


class ChunkHeaderTruncatedError(IconError):
    def __init__(self, offset, buffer_length):
        self.offset = offset
        self.buffer_length = buffer_length
        super().__init__(
            f"ICNS chunk header truncated at offset {offset} (buffer length {buffer_length})"
        )


class InvalidChunkLengthError(IconError):
    def __init__(self, offset, length):
        self.offset = offset
        self.length = length
        super().__init__(f"Invalid ICNS chunk length {length} at offset {offset}")


class ChunkDataOutOfBoundsError(IconError):
    def __init__(self, offset, length, buffer_length):
        self.offset = offset
        self.length = length
        self.buffer_length = buffer_length
        super().__init__(
            f"ICNS chunk at offset {offset} with length {length} extends past buffer length {buffer_length}"
        )
