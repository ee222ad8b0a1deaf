import logging
import re
from typing import BinaryIO, Iterable, Iterator, List

import fsspec
from fsspec.utils import infer_compression
import numpy as np

from sciencebeam_geometry.utils.drectangle import DRectangle


LOGGER = logging.getLogger(__name__)


class FileFormats:
    TEXT = 'text'
    BINARY = 'binary'


FILE_FORMATS = [FileFormats.TEXT, FileFormats.BINARY]


# four doubles, left, top, right, bottom
DRECTANGLE_DTYPE = np.dtype('<f8')
DRECTANGLE_BYTE_SIZE = 4 * DRECTANGLE_DTYPE.itemsize

# decimal or exponent notation, or the inf / nan spelling used when formatting
_NUMBER_PATTERN = (
    r'\s*('
    r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'
    r'|[-+]?inf'
    r'|nan'
    r')\s*'
)

DRECTANGLE_TEXT_PATTERN = re.compile(
    r'^\s*\[\s*'
    r'\(' + _NUMBER_PATTERN + r',' + _NUMBER_PATTERN + r'\)'
    r'\s*'
    r'\(' + _NUMBER_PATTERN + r',' + _NUMBER_PATTERN + r'\)'
    r'\s*\]\s*$'
)

COMMENT_PREFIX = '#'


class DRectangleFormatError(ValueError):
    pass


def format_drectangle(rect: DRectangle) -> str:
    return str(rect)


def parse_drectangle(text: str) -> DRectangle:
    m = DRECTANGLE_TEXT_PATTERN.match(text)
    if not m:
        raise DRectangleFormatError(
            'expected rectangle of the form "[(left, top) (right, bottom)]", but was: %r' % text
        )
    return DRectangle(*[float(value) for value in m.groups()])


def iter_parse_drectangles(lines: Iterable[str]) -> Iterator[DRectangle]:
    for line_no, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        try:
            yield parse_drectangle(line)
        except DRectangleFormatError as e:
            raise DRectangleFormatError('line %d: %s' % (line_no, e)) from e


def serialize_drectangle(rect: DRectangle) -> bytes:
    return np.array(rect.to_list(), dtype=DRECTANGLE_DTYPE).tobytes()


def deserialize_drectangle(data: bytes) -> DRectangle:
    if len(data) != DRECTANGLE_BYTE_SIZE:
        raise DRectangleFormatError(
            'expected %d bytes, but got %d' % (DRECTANGLE_BYTE_SIZE, len(data))
        )
    values = np.frombuffer(data, dtype=DRECTANGLE_DTYPE)
    return DRectangle(*values.tolist())


def write_drectangle(fp: BinaryIO, rect: DRectangle):
    fp.write(serialize_drectangle(rect))


def read_drectangle(fp: BinaryIO) -> DRectangle:
    data = fp.read(DRECTANGLE_BYTE_SIZE)
    LOGGER.debug('read %d bytes', len(data))
    return deserialize_drectangle(data)


def iter_read_drectangles(fp: BinaryIO) -> Iterator[DRectangle]:
    while True:
        data = fp.read(DRECTANGLE_BYTE_SIZE)
        if not data:
            return
        if len(data) != DRECTANGLE_BYTE_SIZE:
            raise DRectangleFormatError(
                'truncated rectangle, expected %d bytes, but got %d' % (
                    DRECTANGLE_BYTE_SIZE, len(data)
                )
            )
        yield deserialize_drectangle(data)


def open_drectangles_file(path_or_url: str, mode: str, file_format: str):
    if file_format not in FILE_FORMATS:
        raise ValueError('unsupported file format: %r' % file_format)
    if file_format == FileFormats.BINARY:
        mode += 'b'
    else:
        mode += 't'
    compression = infer_compression(path_or_url)
    LOGGER.debug(
        'path_or_url=%r, mode=%r, compression=%r', path_or_url, mode, compression
    )
    return fsspec.open(path_or_url, mode, compression=compression)


def read_drectangles_file(
        path_or_url: str, file_format: str = FileFormats.TEXT) -> List[DRectangle]:
    with open_drectangles_file(path_or_url, 'r', file_format) as fp:
        if file_format == FileFormats.BINARY:
            return list(iter_read_drectangles(fp))
        return list(iter_parse_drectangles(fp))


def write_drectangles_file(
        path_or_url: str,
        drectangles: Iterable[DRectangle],
        file_format: str = FileFormats.TEXT):
    with open_drectangles_file(path_or_url, 'w', file_format) as fp:
        for drectangle in drectangles:
            if file_format == FileFormats.BINARY:
                write_drectangle(fp, drectangle)
            else:
                fp.write(format_drectangle(drectangle) + '\n')
