# Copyright (c) 2025, huffarc developers; All Rights Reserved
# huffarc is published under the PSF license.
"""
Useful utilities for working with Huffman archives.
"""
import sys
from io import BytesIO

from huffarc.archiver import HuffmanArchiver
from huffarc.header import read_header

__all__ = ['compress', 'decompress', 'read_header', 'print_code']


def compress(__data):
    """compress(data, /) -> bytes

Return the archive (header and payload) of the bytes-like object `data`.
"""
    sink = BytesIO()
    HuffmanArchiver(BytesIO(__data), sink).encode()
    return sink.getvalue()


def decompress(__blob):
    """decompress(blob, /) -> bytes

Return the original data of the archive `blob`.
"""
    sink = BytesIO()
    HuffmanArchiver(BytesIO(__blob), sink).decode()
    return sink.getvalue()


_special_ascii = {0: 'NUL', 9: 'TAB', 10: 'LF', 13: 'CR', 127: 'DEL'}

def _disp_char(i):
    if 32 <= i < 127:
        return repr(chr(i))
    return _special_ascii.get(i, '')


def print_code(table, codebook, stream=None):
    """print_code(table, codebook, /, stream=None)

Print the frequency table along with the Huffman code in readable form
to `stream`, defaults to `sys.stdout`.  Symbols are listed with the most
frequent first.
"""
    if stream is None:
        stream = sys.stdout

    stream.write(' symbol     char    hex   frequency     Huffman code\n')
    stream.write(70 * '-' + '\n')
    for i in sorted(codebook, key=lambda c: (table[c], c), reverse=True):
        stream.write('%7r     %-4s    0x%02x %10i     %s\n' % (
            i, _disp_char(i), i, table[i], codebook[i].to01()))
    stream.flush()
