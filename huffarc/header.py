# Copyright (c) 2025, huffarc developers; All Rights Reserved
# huffarc is published under the PSF license.
"""
Archive header format:

    [original size: u32]
    [vocabulary count: u32]
    vocabulary count times:  [symbol: u8] [frequency: u32]

Integers are stored in native byte order (standard sizes, no alignment).
"""
import struct

from huffarc.errors import CorruptStreamError, TruncatedArchiveError
from huffarc.frequency import FrequencyTable, NSYMBOLS

__all__ = ['encode_header', 'write_header', 'read_header', 'header_size']

_U32 = struct.Struct('=I')
_ENTRY = struct.Struct('=BI')

U32_MAX = (1 << 32) - 1


def header_size(table):
    "Return the number of bytes of the header describing `table`."
    return 2 * _U32.size + len(table) * _ENTRY.size


def encode_header(original_size, table):
    """encode_header(original_size, table) -> bytes

Return the header for an input of `original_size` bytes with the given
frequency table.  Raises `OverflowError` when a value does not fit into
32 bits.
"""
    if not 0 <= original_size <= U32_MAX:
        raise OverflowError("original size not in range(0, %d), got %d" %
                            (U32_MAX + 1, original_size))
    entries = list(table.entries())
    res = bytearray(_U32.pack(original_size))
    res.extend(_U32.pack(len(entries)))
    for sym, freq in entries:
        if freq > U32_MAX:
            raise OverflowError("frequency of symbol %d exceeds %d" %
                                (sym, U32_MAX))
        res.extend(_ENTRY.pack(sym, freq))
    return bytes(res)


def write_header(stream, original_size, table):
    """write_header(stream, original_size, table) -> int

Write the header to `stream` and return the number of bytes written.
"""
    data = encode_header(original_size, table)
    stream.write(data)
    return len(data)


def read_exact(stream, n, what):
    "Read exactly `n` bytes from `stream`, or raise TruncatedArchiveError."
    data = stream.read(n)
    if data is None or len(data) < n:
        raise TruncatedArchiveError("archive truncated while reading %s "
                                    "(%d of %d bytes)" %
                                    (what, len(data or b''), n))
    return data


def read_header(stream):
    """read_header(stream) -> tuple

Read a header from `stream` and return a tuple containing:

0. the original size (number of bytes to decode)
1. the frequency table
2. the number of header bytes read

Raises `TruncatedArchiveError` when the stream ends within the header, and
`CorruptStreamError` when the header is inconsistent.
"""
    original_size, = _U32.unpack(read_exact(stream, _U32.size,
                                            'original size'))
    count, = _U32.unpack(read_exact(stream, _U32.size, 'vocabulary count'))
    if count > NSYMBOLS:
        raise CorruptStreamError("vocabulary count %d exceeds %d" %
                                 (count, NSYMBOLS))

    entries = [_ENTRY.unpack(read_exact(stream, _ENTRY.size,
                                        'vocabulary entry %d' % i))
               for i in range(count)]
    try:
        table = FrequencyTable.from_entries(entries)
    except ValueError as e:
        raise CorruptStreamError("invalid vocabulary: %s" % e) from e

    if table.total != original_size:
        raise CorruptStreamError("frequencies sum up to %d, but original "
                                 "size is %d" % (table.total, original_size))

    return original_size, table, 2 * _U32.size + count * _ENTRY.size
