#!/usr/bin/env python3
"""Shared constants for the ICO and ICNS codecs."""

# ICO (little-endian throughout)
ICO_HEADER_FORMAT = '<HHH'
ICO_HEADER_SIZE = 6
ICO_DIRECTORY_ENTRY_FORMAT = '<BBBBHHII'
ICO_DIRECTORY_ENTRY_SIZE = 16
ICO_RESERVED = 0
ICO_IMAGE_TYPE = 1
ICO_COLOR_PLANES = 1
ICO_BITS_PER_PIXEL = 32
ICO_MAX_IMAGES = 0xFFFF
ICO_MAX_BYTE_DIMENSION = 255
# Both are stored as 0 on disk; the decoder can only give back 256.
ICO_ZERO_BYTE_DIMENSIONS = (256, 512)
ICO_ZERO_BYTE_DECODED = 256

ICO_REQUIRED_FIELDS = ('width', 'height', 'data')

# ICNS (big-endian length fields)
ICNS_MAGIC = b'icns'
ICNS_HEADER_FORMAT = '>4sI'
ICNS_HEADER_SIZE = 8
ICNS_CHUNK_HEADER_FORMAT = '>4sI'
ICNS_CHUNK_HEADER_SIZE = 8

ICNS_SIZE_TO_TYPE = {
    16: 'icp3',
    32: 'icp4',
    64: 'icp6',
    128: 'ic07',
    256: 'ic08',
    512: 'ic09',
    1024: 'ic10',
}

ICNS_TYPE_TO_SIZE = {
    'icp3': 16,
    'icp4': 32,
    'icp6': 64,
    'ic07': 128,
    'ic08': 256,
    'ic09': 512,
    'ic10': 1024,
}

ICNS_REQUIRED_FIELDS = ('size', 'data')

# Payload sniffing for extracted file names (CLI only)
PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'
JP2_SIGNATURE = b'\x00\x00\x00\x0cjP  \r\n\x87\n'
J2K_CODESTREAM_SIGNATURE = b'\xff\x4f\xff\x51'

CONTAINER_ICO = 'ico'
CONTAINER_ICNS = 'icns'

# Files picked up from --input-dirs
IMAGE_SUFFIXES = ('.png', '.jp2', '.j2k', '.bmp')
