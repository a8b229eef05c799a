r"""
'    ___ ___ ________  ___________
'   /   |   \_____  \ \_   _____/
'  /    ~    \/   |   \ |    __)
'  \    Y    /    |    \|     \
'   \___|_  /\_______  /\___  /
'         \/         \/     \/
"""

import logging

# expose the lazy core
from .sequence import ISequence, LazySequence
from .transforms import map_, filter_, square, cube

# expose the main collection class
from .collection import Collection

# expose the factory functions
from .factories import from_iterable, from_range, repeat, empty, H

# expose the eager collaborators
from .extensions.fold import reduce_, for_each
from .extensions.search import find, some, every, contains
from .extensions.numeric import sum_, average, min_, max_
from .extensions.grouping import group_by, partition, unique, chunk
from .extensions.pairing import zip_, unzip, flat_map
from .extensions.compose import compose, pipe, curry

# expose protocol types
from .types import CONTINUE, STOP, SequenceState, Number, is_number

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "ISequence",
    "LazySequence",
    "map_",
    "filter_",
    "square",
    "cube",
    "Collection",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "H",
    "reduce_",
    "for_each",
    "find",
    "some",
    "every",
    "contains",
    "sum_",
    "average",
    "min_",
    "max_",
    "group_by",
    "partition",
    "unique",
    "chunk",
    "zip_",
    "unzip",
    "flat_map",
    "compose",
    "pipe",
    "curry",
    "CONTINUE",
    "STOP",
    "SequenceState",
    "Number",
    "is_number",
]
