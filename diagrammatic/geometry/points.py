'''For distinguishing positions in space (points) from the free vectors which displace them'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, Union
from dataclasses import dataclass

import numpy as np

from ..arraytypes import Vector
from .spaces import VectorSpace


@dataclass(frozen=True, eq=False)
class Point:
    '''
    A location in an affine space, stored as its displacement vector from the origin

    Unlike free vectors, points are affected by the translational part of transformations
    '''
    coords : Vector

    __array_ufunc__ = None # DEV: stops numpy from broadcasting over a Point when it appears on the right of an array operator

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({list(self._key())})'

    def _key(self) -> tuple:
        return tuple(np.asarray(self.coords).ravel().tolist())

    # comparison methods
    def __eq__(self, other : Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other : 'Point') -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() < other._key() # lexicographic order on coordinates

    def isclose(self, other : 'Point', **kwargs) -> bool:
        '''Whether this Point coincides with another, up to numerical tolerance'''
        return np.allclose(np.asarray(self.coords), np.asarray(other.coords), **kwargs)

    # affine arithmetic
    def __add__(self, displacement : Vector) -> 'Point':
        if isinstance(displacement, Point):
            raise TypeError('Cannot add two Points; only a vector may be added to a Point')
        return Point(np.asarray(self.coords) + np.asarray(displacement))
    __radd__ = __add__

    def __sub__(self, other : Union['Point', Vector]) -> Union[Vector, 'Point']:
        '''Difference of two Points is the vector between them; subtracting a vector from a Point yields a Point'''
        if isinstance(other, Point):
            return np.asarray(self.coords) - np.asarray(other.coords)
        return Point(np.asarray(self.coords) - np.asarray(other))

def origin(space : VectorSpace) -> Point:
    '''The Point at the origin of a vector space'''
    return Point(space.zero())
