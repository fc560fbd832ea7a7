'''For re-expressing objects relative to a new choice of origin'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Protocol, TypeVar, Union, runtime_checkable
T = TypeVar('T')

import numpy as np

from ..arraytypes import Vector
from .points import Point


@runtime_checkable
class HasOrigin(Protocol):
    '''Interface for objects which are defined relative to some origin, which can be moved'''
    def move_origin_to(self, point : Point) -> 'HasOrigin':
        ...

def move_origin_to(point : Union[Point, Vector], obj : T) -> T:
    '''
    Move the local origin of an object to the given point

    Heuristically, this is equivalent to translating the object by the vector from
    "point" to the current origin; translationally invariant objects are unaffected
    '''
    if not isinstance(point, Point):
        point = Point(np.asarray(point))

    if isinstance(obj, HasOrigin):
        return obj.move_origin_to(point)
    elif isinstance(obj, Point):
        return Point(np.asarray(obj.coords) - np.asarray(point.coords))

    raise TypeError(f'Object of type {type(obj).__name__} has no origin which can be moved')
