# Copyright (c) 2025, huffarc developers; All Rights Reserved
# huffarc is published under the PSF license.
"""
Exceptions raised by huffarc.
"""


class ArchiveError(Exception):
    "Base class of all errors raised by huffarc."


class OpenError(ArchiveError):
    """OpenError(side, filename, reason)

Raised when the source or sink of an archiver cannot be opened.
`side` is either 'source' or 'sink'.
"""
    def __init__(self, side, filename, reason):
        if side not in ('source', 'sink'):
            raise ValueError("side must be 'source' or 'sink', got %r" % side)
        self.side = side
        self.filename = filename
        self.reason = reason
        ArchiveError.__init__(self, "couldn't open %s file %r: %s" %
                              (side, filename, reason))


class TruncatedArchiveError(ArchiveError, EOFError):
    "The archive ended before all required bytes could be read."


class CorruptStreamError(ArchiveError, ValueError):
    "The archive contents are inconsistent and cannot be decoded."
