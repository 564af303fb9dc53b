# Copyright (c) 2025, huffarc developers; All Rights Reserved
# huffarc is published under the PSF license.
"""
Compress and decompress byte streams using a static Huffman code.

An archive consists of a header (see huffarc.header) followed by the
packed payload bits.
"""
import os
import logging

from huffarc.bitqueue import BitQueue
from huffarc.errors import OpenError, TruncatedArchiveError
from huffarc.frequency import (FrequencyTable, DEFAULT_CHUNK_SIZE,
                               check_chunk_size)
from huffarc.header import read_header, write_header
from huffarc.tree import HuffmanTree

__all__ = ['HuffmanArchiver']

logger = logging.getLogger(__name__)


def _open(f, mode, side):
    # return (file object, whether we own it)
    if isinstance(f, (str, bytes, os.PathLike)):
        try:
            return open(f, mode), True
        except OSError as e:
            raise OpenError(side, os.fsdecode(f), e.strerror or str(e)) from e
    return f, False


class HuffmanArchiver(object):
    """HuffmanArchiver(source, sink, chunk_size=65536)

Archiver which reads from `source` and writes to `sink`.  Both may be
either a path, or an open binary file object.  Paths are opened (and
closed by `.close()`) by the archiver itself; `OpenError` is raised
when this fails.  The source must be seekable for `.encode()`.

An archiver performs a single operation, `.encode()` or `.decode()`,
after which the size counters `original_size`, `payload_size` and
`header_size` are available.
"""
    def __init__(self, source, sink, chunk_size=DEFAULT_CHUNK_SIZE):
        check_chunk_size(chunk_size)
        self.chunk_size = chunk_size
        self._source, own_source = _open(source, 'rb', 'source')
        try:
            self._sink, own_sink = _open(sink, 'wb', 'sink')
        except OpenError:
            if own_source:
                self._source.close()
            raise
        self._owned = [f for f, own in [(self._source, own_source),
                                        (self._sink, own_sink)] if own]

        self._original_size = 0
        self._payload_size = 0
        self._header_size = 0
        # frequency table and Huffman tree of the last operation
        self.table = None
        self.tree = None

    @property
    def original_size(self):
        "size of the uncompressed data"
        return self._original_size

    @property
    def payload_size(self):
        "number of payload bytes written (encode) or consumed (decode)"
        return self._payload_size

    @property
    def header_size(self):
        "number of header bytes"
        return self._header_size

    def encode(self):
        "Compress all data from source and write the archive to sink."
        src, sink = self._source, self._sink
        start = src.tell()

        table = FrequencyTable.from_stream(src, self.chunk_size)
        self.table = table
        self.tree = tree = HuffmanTree(table)
        self._original_size = table.total
        self._header_size = write_header(sink, table.total, table)
        logger.debug("vocabulary: %d symbols, header: %d bytes",
                     len(table), self._header_size)

        src.seek(start)
        queue = BitQueue()
        payload_size = 0
        while True:
            chunk = src.read(self.chunk_size)
            if not chunk:
                break
            queue.encode(tree.codebook, chunk)
            data = queue.pack()
            sink.write(data)
            payload_size += len(data)

        # pad the last byte with 0 bits
        data = queue.flush()
        sink.write(data)
        payload_size += len(data)
        sink.flush()
        self._payload_size = payload_size
        logger.debug("encoded %d bytes into %d payload bytes",
                     self._original_size, payload_size)

    def decode(self):
        "Decompress the archive read from source and write the data to sink."
        src, sink = self._source, self._sink

        original_size, table, self._header_size = read_header(src)
        self._original_size = original_size
        logger.debug("vocabulary: %d symbols, header: %d bytes",
                     len(table), self._header_size)

        self.table = table
        self.tree = HuffmanTree(table)
        cursor = self.tree.cursor()
        queue = BitQueue()
        out = bytearray()
        payload_size = 0
        i = 0
        try:
            while i < original_size:
                if not queue:
                    b = src.read(1)
                    if not b:
                        raise TruncatedArchiveError(
                            "payload ended after %d of %d symbols" %
                            (i, original_size))
                    queue.unpack(b[0])
                    payload_size += 1
                sym = cursor.advance(queue)
                if sym is not None:
                    out.append(sym)
                    i += 1
                    if len(out) >= self.chunk_size:
                        sink.write(out)
                        out = bytearray()
        finally:
            # symbols decoded so far are written even when decoding fails
            sink.write(out)
            sink.flush()
            self._payload_size = payload_size
        logger.debug("decoded %d bytes from %d payload bytes",
                     original_size, payload_size)

    def close(self):
        "Close the files opened by the archiver."
        while self._owned:
            self._owned.pop().close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
