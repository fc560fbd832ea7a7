'''Indicators for coordinate axis-specific operations and indexing'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from enum import Enum
from typing import Union


class CoordAxis(Enum):
    '''
    For making clear when a particular coordinate direction
    is chosen for a task, particularly when indexing
    '''
    X = 0
    Y = 1
    Z = 2
    W = 3

    # lowercase aliases for the lazy
    x = 0
    y = 1
    z = 2
    w = 3

def axis_index(axis : Union['CoordAxis', int, str]) -> int:
    '''Resolve an axis given as a CoordAxis, a name ("x", "Z", ...), or a plain integer into a basis position'''
    if isinstance(axis, CoordAxis):
        return axis.value
    elif isinstance(axis, str):
        try:
            return CoordAxis[axis].value
        except KeyError:
            raise ValueError(f'No coordinate axis named "{axis}"')
    elif isinstance(axis, int):
        return axis
    else:
        raise TypeError(f'Axis must be a CoordAxis, axis name, or integer index, not {type(axis)}')
