# Copyright (c) 2025, huffarc developers; All Rights Reserved
# huffarc is published under the PSF license.
"""
Byte frequency tables.
"""
from collections import Counter

__all__ = ['FrequencyTable', 'DEFAULT_CHUNK_SIZE', 'NSYMBOLS']

NSYMBOLS = 256

DEFAULT_CHUNK_SIZE = 1 << 16


def check_chunk_size(chunk_size):
    if not isinstance(chunk_size, int):
        raise TypeError("int expected for chunk_size, got '%s'" %
                        type(chunk_size).__name__)
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0, got %d" % chunk_size)


class FrequencyTable(object):
    """FrequencyTable(counts=None)

Immutable table mapping each of the 256 byte values to the number of
times it occurs.  `counts` is a sequence of 256 non-negative integers,
all zeros when omitted.
"""
    __slots__ = ('_counts',)

    def __init__(self, counts=None):
        if counts is None:
            counts = NSYMBOLS * [0]
        counts = tuple(counts)
        if len(counts) != NSYMBOLS:
            raise ValueError("%d counts expected, got %d" %
                             (NSYMBOLS, len(counts)))
        for c in counts:
            if not isinstance(c, int):
                raise TypeError("int expected for count, got '%s'" %
                                type(c).__name__)
            if c < 0:
                raise ValueError("count must be >= 0, got %d" % c)
        self._counts = counts

    @classmethod
    def from_bytes(cls, data):
        "Return the table of the bytes-like object `data`."
        counts = NSYMBOLS * [0]
        for sym, n in Counter(data).items():
            counts[sym] += n
        return cls(counts)

    @classmethod
    def from_stream(cls, stream, chunk_size=DEFAULT_CHUNK_SIZE):
        """Read the binary `stream` until end-of-input and return the table
of all bytes read.  The stream is left fully consumed.
"""
        check_chunk_size(chunk_size)
        counts = NSYMBOLS * [0]
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            for sym, n in Counter(chunk).items():
                counts[sym] += n
        return cls(counts)

    @classmethod
    def from_entries(cls, entries):
        """Return the table given an iterable of `(symbol, count)` pairs.
Raises `ValueError` when a symbol appears more than once.
"""
        counts = NSYMBOLS * [0]
        seen = set()
        for sym, n in entries:
            if not 0 <= sym < NSYMBOLS:
                raise ValueError("symbol not in range(%d), got %r" %
                                 (NSYMBOLS, sym))
            if sym in seen:
                raise ValueError("duplicate symbol %d" % sym)
            seen.add(sym)
            counts[sym] = n
        return cls(counts)

    def entries(self):
        "Iterate over `(symbol, count)` for all non-zero counts, ascending."
        for sym, n in enumerate(self._counts):
            if n:
                yield sym, n

    @property
    def total(self):
        "number of bytes counted"
        return sum(self._counts)

    def __getitem__(self, sym):
        return self._counts[sym]

    def __len__(self):
        # number of distinct symbols present
        return sum(1 for n in self._counts if n)

    def __iter__(self):
        return iter(self._counts)

    def __eq__(self, other):
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self._counts == other._counts

    def __hash__(self):
        return hash(self._counts)

    def __repr__(self):
        return '%s({%s})' % (type(self).__name__,
                             ', '.join('%d: %d' % e for e in self.entries()))
