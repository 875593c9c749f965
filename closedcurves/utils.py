r"""@package closedcurves.utils

General utilities for argument checking and storing curves on disk.
"""

from tempfile import NamedTemporaryFile
import os
import os.path as op

import numpy as np


__all__ = [
    "isiterable",
    "save_to_file",
    "load_from_file",
]


def isiterable(obj):
    """Check whether an object is iterable.

    Note that this returns `True` for strings, which you may or may not intend
    to check for.
    """
    try:
        iter(obj)
    except TypeError:
        return False
    return True


def save_to_file(filename, data, overwrite=False, verbose=True,
                 showname='data', mkpath=True):
    r"""Save an object to disk.

    This uses `numpy.save()` to store a (pickled) object in a file. Use
    load_from_file() to restore the data afterwards.

    The data is first written to a temporary file in the target folder which
    is then renamed to the destination. A failure during writing (e.g. for
    unpicklable data) therefore leaves any existing file untouched.

    @param filename
        The file name to store the data in. An extension ``'.npy'`` will be
        added if not already there.
    @param overwrite
        Whether to overwrite an existing file with the same name. If `False`
        (default) and such a file exists, a `RuntimeError` is raised.
    @param verbose
        Whether to print when the file was written. Default is `True`.
    @param showname
        Name to print in the confirmation message in case `verbose==True`.
    @param mkpath
        If the parent folder(s) of the given filename don't exist, they are
        created if ``mkpath==True`` (default). Otherwise, an error is raised.

    @return The actual file name used (i.e. including the extension).
    """
    filename = op.expanduser(filename)
    if not filename.endswith('.npy'):
        filename += '.npy'
    path = op.abspath(op.normpath(op.dirname(filename)))
    if mkpath:
        os.makedirs(path, exist_ok=True)
    if op.exists(filename) and not overwrite:
        raise RuntimeError("File already exists.")
    tname = None
    try:
        with NamedTemporaryFile(dir=path, delete=False) as tfile:
            tname = tfile.name
            # 1-element object array to avoid 0-d array handling on load
            container = np.empty(1, dtype=object)
            container[0] = data
            np.save(tfile, container, allow_pickle=True)
        if op.exists(filename) and not overwrite:
            raise RuntimeError("File already exists.")
        os.replace(tname, filename)
        tname = None
        if verbose:
            print("%s saved to: %s" % (showname, filename))
    finally:
        if tname is not None and op.exists(tname):
            os.unlink(tname)
    return filename


def load_from_file(filename):
    r"""Load an object from disk.

    If the object had been stored using save_to_file(), the result should be a
    perfect copy of the object.
    """
    result = np.load(op.expanduser(filename), allow_pickle=True)
    if result.shape == (1,):
        return result[0]
    # Not a single value. Return as is.
    return result
