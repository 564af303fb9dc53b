# Copyright (c) 2025, huffarc developers; All Rights Reserved
# huffarc is published under the PSF license.
"""
Command line interface:

    python -m huffarc [-c | -u] -f FILE -o FILE [-p] [-v]

On success, three numbers are printed: the input size, the output size and
the header size (in bytes).
"""
import sys
import logging
from argparse import ArgumentParser

from huffarc.archiver import HuffmanArchiver
from huffarc.errors import ArchiveError
from huffarc.util import print_code


def run(opts, stdout=None):
    if stdout is None:
        stdout = sys.stdout

    with HuffmanArchiver(opts.src, opts.dst) as archiver:
        if opts.uncompress:
            archiver.decode()
            sizes = (archiver.payload_size, archiver.original_size)
        else:
            archiver.encode()
            sizes = (archiver.original_size, archiver.payload_size)
            if opts.print_code:
                print_code(archiver.table, archiver.tree.codebook, stdout)

    for n in sizes + (archiver.header_size,):
        stdout.write('%d\n' % n)


def main(argv=None):
    p = ArgumentParser(prog='huffarc',
                       description="compress and uncompress files using "
                                   "Huffman coding")

    g = p.add_mutually_exclusive_group()
    g.add_argument('-c', '--compress', action="store_false",
                   dest='uncompress',
                   help="compress input file (default)")
    g.add_argument('-u', '--uncompress', action="store_true",
                   help="uncompress input file")
    p.set_defaults(uncompress=False)

    p.add_argument('-f', '--file', action="store", dest='src',
                   required=True, metavar='FILE',
                   help="input filename")

    p.add_argument('-o', '--output', action="store", dest='dst',
                   required=True, metavar='FILE',
                   help="output filename")

    p.add_argument('-p', '--print-code', action="store_true",
                   help="print Huffman code after compressing")

    p.add_argument('-v', '--verbose', action="store_true")

    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(name)s: %(message)s")

    try:
        run(args)
    except (ArchiveError, OSError) as e:
        sys.stderr.write('%s\n' % e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
