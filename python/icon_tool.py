#!/usr/bin/env python3
"""
Icon Tool - Build, extract and inspect ICO / ICNS icon containers.

CLI usage:
    python icon_tool.py ico --output-file <file> --input-files <file1> [<file2> ...]
    python icon_tool.py icns --output-file <file> --input-dirs <dir1> [<dir2> ...]
    python icon_tool.py decode --input-file <file> --output-dir <dir>
    python icon_tool.py info --input-file <file>
"""

import argparse
import itertools
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from constants import (
    CONTAINER_ICO,
    CONTAINER_ICNS,
    ICNS_MAGIC,
    ICNS_SIZE_TO_TYPE,
    PNG_SIGNATURE,
    JP2_SIGNATURE,
    J2K_CODESTREAM_SIGNATURE,
    IMAGE_SUFFIXES,
)
from icon_errors import NoValidImagesError
from ico_encode import encode_ico
from ico_decode import decode_ico
from icns_encode import encode_icns
from icns_decode import decode_icns


def is_hidden(path, root):
    return any(part.startswith('.') for part in path.relative_to(root).parts)


def collect_input_files(input_files=None, input_dirs=None):
    """
    Gather icon source images.

    Explicit files are taken as given. Directories are searched recursively
    for files with an image suffix, skipping hidden files and directories.
    Duplicates are dropped and the result is sorted so containers come out
    the same on every run.
    """
    found = {}

    for file_path in input_files or []:
        path = Path(file_path)
        if not path.is_file():
            raise ValueError(f"Input file does not exist: {file_path}")
        found.setdefault(path.resolve(), path)

    for input_dir in input_dirs or []:
        root = Path(input_dir)
        if not root.is_dir():
            raise ValueError(f"Input path is not a directory: {input_dir}")
        for path in root.rglob('*'):
            if path.suffix.lower() not in IMAGE_SUFFIXES or is_hidden(path, root):
                continue
            if path.is_file():
                found.setdefault(path.resolve(), path)

    if not found:
        raise ValueError("No input images found")
    return sorted(found.values())


def load_icon_images(files):
    """
    Read payload files and their pixel dimensions.

    Only the image header is read to get the dimensions; the payload bytes
    are embedded unchanged.

    Args:
        files: Paths of PNG (or other Pillow-readable) image files

    Returns:
        List of dicts with 'path', 'width', 'height' and 'data'
    """
    images = []
    for file_path in files:
        try:
            with Image.open(file_path) as image:
                width, height = image.size
        except UnidentifiedImageError as e:
            raise ValueError(f"Unrecognized image file: {file_path}") from e

        images.append({
            'path': Path(file_path),
            'width': width,
            'height': height,
            'data': Path(file_path).read_bytes(),
        })
    return images


def write_output(output_file, data):
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return output_path


def encode_ico_from_sources(output_file, input_files=None, input_dirs=None):
    """Create an ICO file from explicit files and/or recursive directories."""
    files = collect_input_files(input_files=input_files, input_dirs=input_dirs)
    images = load_icon_images(files)

    output_path = write_output(output_file, encode_ico(images))

    print(f"Created ICO file: {output_path}")
    print(f"Embedded {len(images)} images")
    return output_path


def encode_icns_from_sources(output_file, input_files=None, input_dirs=None):
    """Create an ICNS file from explicit files and/or recursive directories."""
    files = collect_input_files(input_files=input_files, input_dirs=input_dirs)

    images = []
    for image in load_icon_images(files):
        if image['width'] != image['height']:
            print(f"Warning: skipping {image['path']} (not square: {image['width']}x{image['height']})")
            continue
        if image['width'] not in ICNS_SIZE_TO_TYPE:
            print(f"Warning: skipping {image['path']} (no ICNS type for size {image['width']})")
            continue
        images.append({'size': image['width'], 'data': image['data']})

    if not images:
        raise NoValidImagesError()

    output_path = write_output(output_file, encode_icns(images))

    print(f"Created ICNS file: {output_path}")
    print(f"Embedded {len(images)} images")
    return output_path


def detect_container(data):
    """Return CONTAINER_ICNS or CONTAINER_ICO based on the leading bytes."""
    if data[:4] == ICNS_MAGIC:
        return CONTAINER_ICNS
    if data[:4] == b'\x00\x00\x01\x00':
        return CONTAINER_ICO
    raise ValueError("Unrecognized icon container: expected ICO or ICNS header")


def guess_extension(data):
    """Pick a file extension from the payload signature."""
    head = bytes(data[:12])
    if head.startswith(PNG_SIGNATURE):
        return 'png'
    if head.startswith(JP2_SIGNATURE) or head.startswith(J2K_CODESTREAM_SIGNATURE):
        return 'jp2'
    return 'bin'


def make_unique_filename(output_file):
    """Return output_file, or 'name (N).ext' with the first free N if it is taken."""
    candidate = output_file
    for counter in itertools.count(1):
        if not candidate.exists():
            return candidate
        candidate = output_file.with_name(f"{output_file.stem} ({counter}){output_file.suffix}")


def decode_icon_file(input_file, output_dir):
    """
    Extract every embedded image of an ICO or ICNS file.

    Args:
        input_file: Path to input ICO/ICNS file
        output_dir: Path to output directory

    Returns:
        List of written file paths, in container order
    """
    input_path = Path(input_file)
    output_path = Path(output_dir)

    if not input_path.is_file():
        raise ValueError(f"Input file does not exist: {input_file}")

    data = input_path.read_bytes()
    container = detect_container(data)

    output_path.mkdir(parents=True, exist_ok=True)

    if container == CONTAINER_ICO:
        entries = [
            (f"icon_{image.width}x{image.height}", image.data)
            for image in decode_ico(data)
        ]
    else:
        entries = [
            (f"icon_{image.size}_{image.type}" if image.size else f"icon_{image.type}", image.data)
            for image in decode_icns(data)
        ]

    written = []
    for index, (stem, payload) in enumerate(entries, start=1):
        output_file = make_unique_filename(output_path / f"{stem}.{guess_extension(payload)}")
        output_file.write_bytes(payload)
        written.append(output_file)
        print(f"Extracted image {index}: {output_file.name} ({len(payload)} bytes)")

    print(f"\nExtracted {len(written)} images to: {output_path}")
    return written


def read_icon_info(input_file):
    """Return (container, list of per-image info dicts) for an ICO/ICNS file."""
    input_path = Path(input_file)
    if not input_path.is_file():
        raise ValueError(f"Input file does not exist: {input_file}")

    data = input_path.read_bytes()
    container = detect_container(data)
    if container == CONTAINER_ICO:
        return container, list(decode_ico(data).get_info())
    return container, list(decode_icns(data).get_info())


def print_icon_info(input_file):
    container, info = read_icon_info(input_file)
    print(f"{input_file}: {container.upper()}, {len(info)} images")
    for index, entry in enumerate(info, start=1):
        if container == CONTAINER_ICO:
            print(f"  {index}: {entry['width']}x{entry['height']}, {entry['bpp']} bpp, {entry['data_size']} bytes")
        else:
            size = entry['size'] if entry['size'] is not None else "unknown"
            print(f"  {index}: {entry['type']} (size {size}), {entry['data_size']} bytes")


def add_input_arguments(parser):
    parser.add_argument(
        "--output-file",
        required=True,
        metavar="<file>",
        help="Output icon file path",
    )
    parser.add_argument(
        "--input-files",
        nargs="+",
        metavar="<file>",
        help="Input image file(s) to embed",
    )
    parser.add_argument(
        "--input-dirs",
        nargs="+",
        metavar="<dir>",
        help="Input directory(ies) to search recursively for images",
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="ICO / ICNS icon container tool")
    subparsers = parser.add_subparsers(dest="command")

    ico_parser = subparsers.add_parser("ico", help="Create an ICO file from image files")
    add_input_arguments(ico_parser)

    icns_parser = subparsers.add_parser("icns", help="Create an ICNS file from image files")
    add_input_arguments(icns_parser)

    decode_parser = subparsers.add_parser("decode", help="Extract images from an ICO or ICNS file")
    decode_parser.add_argument(
        "--input-file",
        required=True,
        metavar="<file>",
        help="Input ICO/ICNS file path",
    )
    decode_parser.add_argument(
        "--output-dir",
        required=True,
        metavar="<dir>",
        help="Output directory for extracted images",
    )

    info_parser = subparsers.add_parser("info", help="List the images in an ICO or ICNS file")
    info_parser.add_argument(
        "--input-file",
        required=True,
        metavar="<file>",
        help="Input ICO/ICNS file path",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command in ("ico", "icns"):
            if not args.input_files and not args.input_dirs:
                raise ValueError("Provide at least one of --input-files or --input-dirs")
            encode = encode_ico_from_sources if args.command == "ico" else encode_icns_from_sources
            encode(
                output_file=args.output_file,
                input_files=args.input_files,
                input_dirs=args.input_dirs,
            )
        elif args.command == "decode":
            decode_icon_file(args.input_file, args.output_dir)
        elif args.command == "info":
            print_icon_info(args.input_file)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
