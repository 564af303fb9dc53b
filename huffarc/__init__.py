# Copyright (c) 2025, huffarc developers; All Rights Reserved
# huffarc is published under the PSF license.
"""
This package compresses and decompresses byte streams using Huffman coding.
The frequencies of all byte values are counted in a first pass over the
input, and stored in the archive header.  In a second pass, each byte is
replaced by its Huffman code.  The decoder rebuilds the same Huffman tree
from the header, and walks it bit by bit.

Example:

    >>> from huffarc.util import compress, decompress
    >>> decompress(compress(b'abracadabra'))
    b'abracadabra'
"""
__version__ = '1.0.0'

from huffarc.errors import (ArchiveError, OpenError, TruncatedArchiveError,
                            CorruptStreamError)
from huffarc.frequency import FrequencyTable
from huffarc.tree import HuffmanTree, DecodeCursor
from huffarc.bitqueue import BitQueue
from huffarc.archiver import HuffmanArchiver

__all__ = ['HuffmanArchiver', 'FrequencyTable', 'HuffmanTree',
           'DecodeCursor', 'BitQueue', 'ArchiveError', 'OpenError',
           'TruncatedArchiveError', 'CorruptStreamError']


def test(verbosity=1):
    """test(verbosity=1) -> TextTestResult

Run self-test, and return `unittest.runner.TextTestResult` object.
"""
    from huffarc import test_huffarc
    return test_huffarc.run(verbosity=verbosity)
