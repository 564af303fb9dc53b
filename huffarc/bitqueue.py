# Copyright (c) 2025, huffarc developers; All Rights Reserved
# huffarc is published under the PSF license.
"""
First-in first-out queue of bits, with conversion from and to bytes.

The bit-endianness is little: when a byte is unpacked, its least
significant bit becomes the first bit in the queue, and when bits are
packed, the first bit popped becomes the least significant bit of the
byte.  Hence packing and unpacking are exact inverses.
"""
from bitarray import bitarray

__all__ = ['BitQueue']


class BitQueue(object):
    """BitQueue()

Return an empty queue of bits.
"""
    __slots__ = ('_bits',)

    def __init__(self):
        self._bits = bitarray(0, 'little')

    def __len__(self):
        return len(self._bits)

    def __repr__(self):
        return 'BitQueue(%r)' % self._bits.to01()

    def append(self, bit):
        self._bits.append(bit)

    def extend(self, bits):
        "Append bits (bitarray, iterable of 0/1 or '01' string) to the back."
        self._bits.extend(bits)

    def encode(self, codebook, symbols):
        """Append the code of each symbol in `symbols`.  `codebook` maps
symbols to bitarrays.
"""
        if not symbols:
            return
        self._bits.encode(codebook, symbols)

    def popleft(self):
        "Remove and return the bit at the front (0 or 1)."
        if not self._bits:
            raise IndexError("pop from empty BitQueue")
        bit = self._bits[0]
        del self._bits[0]
        return bit

    def unpack(self, byte):
        "Append the 8 bits of the integer `byte`, least significant first."
        if not 0 <= byte < 256:
            raise ValueError("byte must be in range(0, 256), got %r" % byte)
        self._bits.frombytes(bytes((byte,)))

    def pack(self):
        """Remove all complete bytes (groups of 8 bits) from the front of the
queue and return them.  Remaining bits (less than 8) stay in the queue.
"""
        n = len(self._bits) - len(self._bits) % 8
        if n == 0:
            return b''
        res = self._bits[:n].tobytes()
        del self._bits[:n]
        return res

    def flush(self):
        "Pad the queue with 0 bits to a multiple of 8, and pack all bits."
        self._bits.fill()
        return self.pack()

    def to01(self):
        return self._bits.to01()
