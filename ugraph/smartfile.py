"""Open graph files that may be compressed, remote or standard streams."""

import bz2
import gzip
import io
import os
import sys
from pathlib import Path

import pysam


COMPRESSED_SUFFIXES = {'gz': 'gzip', 'Z': 'gzip', 'bgz': 'gzip',
                       'bz': 'bzip2', 'bz2': 'bzip2'}

REMOTE_PREFIXES = ('s3:', 'http:', 'https:', 'ftp:')


def compressed_filename(filename):
    """Determine if the input file is in or needs to be in compressed format.

    Args:
        filename (str or file object): file name or file object

    Returns:
        compression format, if compressed, otherwise an empty string

    Examples:
        >>> compressed_filename('tinyG.txt')
        ''
        >>> compressed_filename('../tinyG.txt.gz')
        'gzip'
        >>> compressed_filename('mediumG.txt.bz2')
        'bzip2'

    """
    if not isinstance(filename, str):
        return ''

    parts = Path(filename).name.split('.')
    ext = parts[-1] if len(parts) > 1 else ''
    return COMPRESSED_SUFFIXES.get(ext, '')


def is_remote(filename):
    """Return True if filename names a remote resource readable through htslib.

    >>> is_remote('s3://bucket/tinyG.txt')
    True
    >>> is_remote('tinyG.txt')
    False

    """
    return isinstance(filename, str) and filename.startswith(REMOTE_PREFIXES)


def smartfile(filename, mode='r', encoding=None, errors=None, newline=None):
    """Return a text file object for filename, (de)compressing as needed.

    Args:
        filename (str, Path or file object): file name, '-' for stdin/stdout,
                                             or an already open file object
        mode (str): 'r' to read (default) or 'w' to write

    Returns:
        file object to read from or write to

    Raises:
        OSError: if a local file opened for reading does not exist
        ValueError: if the compression scheme is not supported

    """
    if isinstance(filename, Path):
        filename = str(filename)

    # Pass non-string filename objects back as file-objects (e.g. sys.stdin or sys.stdout)
    if not isinstance(filename, str):
        return filename

    if filename == '-':
        return sys.stdout if 'w' in mode else sys.stdin

    if is_remote(filename):
        f = pysam.HFile(filename, mode)
        return io.TextIOWrapper(f, encoding, errors, newline)

    filename = os.path.expanduser(filename)

    if 'r' in mode and not Path(filename).exists():
        raise OSError('file does not exist: {}'.format(filename))

    mode = mode.replace('b', '').replace('t', '') + 't'
    comp = compressed_filename(filename)

    if not comp:
        return open(filename, mode, encoding=encoding, errors=errors, newline=newline)
    elif comp == 'gzip':
        return gzip.open(filename, mode, encoding=encoding, errors=errors, newline=newline)
    elif comp == 'bzip2':
        return bz2.open(filename, mode, encoding=encoding, errors=errors, newline=newline)
    else:
        raise ValueError('Unknown compression scheme: %s' % comp)
