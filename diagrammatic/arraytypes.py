'''Typehints specific to numpy and to the generic vector spaces transformations act on'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Annotated, Callable, Hashable, TypeAlias, TypeVar

S = TypeVar('S') # pure generics
T = TypeVar('T') # pure generics

import numpy as np
import numpy.typing as npt
from numbers import Number, Real


# Numeric typehints
Numeric = TypeVar('Numeric', bound=Number) # typehint a number-like generic type
RealValued = TypeVar('RealValued', bound=Real)

# Numpy array type annotations
Shape = tuple # the shape field of a numpy array
DType = TypeVar('DType', bound=np.generic) # the data type of a numpy array

Dims = TypeVar('Dims', bound=int) # intended to typehint the number of dimensions
DimsPlus = TypeVar('DimsPlus', bound=int) # intended to typehint the number of dimensions +1 (no easy way to do arithmetic to generic types yet)
M = TypeVar('M', bound=int) # typehint the size of a given dimension
N = TypeVar('N', bound=int) # typehint the size of a given dimension

# Generic vector space annotations
Vector = TypeVar('Vector') # an element of some vector space; concrete type depends on the space
BasisIndex = TypeVar('BasisIndex', bound=Hashable) # label of a single basis direction
VectorMap : TypeAlias = Callable[[Vector], Vector] # a (presumed linear) map from a vector space to itself
MatrixColumns : TypeAlias = list[list[Numeric]] # a square matrix stored as a list of columns

VectorN  = Annotated[npt.NDArray[DType], Shape[N]]
ArrayNxN = Annotated[npt.NDArray[DType], Shape[N, N]]
