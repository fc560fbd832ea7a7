'''
Interface for the finite-dimensional vector spaces which transformations act on,
along with a reference implementation of Euclidean n-space backed by numpy arrays
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, Callable, Iterator, Protocol, Sequence, Union, runtime_checkable
from dataclasses import dataclass

import numpy as np

from ..arraytypes import Shape, N, Numeric, Vector, BasisIndex


# Custom Exceptions
class DimensionMismatchError(ValueError):
    '''Raised when objects belonging to vector spaces of differing dimension are combined'''
    pass


@runtime_checkable
class VectorSpace(Protocol):
    '''
    The capabilities a vector space must provide for affine transformations to act on its elements

    Vectors themselves can be of any type; all arithmetic on them is routed through the space,
    so that the transformation algebra never needs to know how vectors are stored
    '''
    # DEV: only what the transformation algebra needs, not a full linear algebra interface
    def basis_indices(self) -> Sequence[BasisIndex]:
        '''Labels of each basis direction, in a fixed canonical order'''
        ...

    def zero(self) -> Vector:
        '''The additive identity of the space'''
        ...

    def tabulate(self, generator : Callable[[BasisIndex], Numeric]) -> Vector:
        '''Construct a vector whose component along each basis direction is given by "generator"'''
        ...

    def components(self, vector : Vector) -> Iterator[Numeric]:
        '''Iterate over the scalar components of a vector, in basis order'''
        ...

    def add(self, u : Vector, v : Vector) -> Vector:
        ...

    def negate(self, v : Vector) -> Vector:
        ...

    def scale(self, factor : Numeric, v : Vector) -> Vector:
        ...


# Operations available in any vector space
def dimension(obj : Any) -> int:
    '''
    Get the dimension of a vector space, or of the space some object (e.g. a Transformation) acts in

    Counted from the components of the zero vector, rather than from the basis labels,
    so that the value reflects what vectors of the space actually hold
    '''
    space = obj if isinstance(obj, VectorSpace) else getattr(obj, 'space', None)
    if space is None:
        raise TypeError(f'Cannot determine the vector space of object of type {type(obj).__name__}')

    return sum(1 for _ in space.components(space.zero()))

def unit(space : VectorSpace, index : BasisIndex) -> Vector:
    '''The unit vector pointing along the basis direction labelled by "index"'''
    return space.tabulate(lambda other_index : 1 if (other_index == index) else 0)

def basis(space : VectorSpace) -> list[Vector]:
    '''The standard basis of a vector space, as an ordered list of unit vectors'''
    return [unit(space, index) for index in space.basis_indices()]

def list_rep(space : VectorSpace, vector : Vector) -> list[Numeric]:
    '''Convert a vector to a list of its scalar components'''
    return list(space.components(vector))

def subtract(space : VectorSpace, u : Vector, v : Vector) -> Vector:
    return space.add(u, space.negate(v))

def inner_product(space : VectorSpace, u : Vector, v : Vector) -> Numeric:
    '''Standard (Euclidean) inner product of two vectors, taken over their components in the standard basis'''
    return sum(a * b for (a, b) in zip(space.components(u), space.components(v), strict=True))


# Concrete vector spaces
@dataclass(frozen=True)
class Euclidean:
    '''
    Real n-dimensional coordinate space, whose vectors are 1-D numpy arrays of length n

    Basis directions are labelled by integer positions 0, ..., n - 1
    '''
    dim : int
    dtype : Union[str, type] = 'float64'

    def __post_init__(self) -> None:
        if self.dim < 1:
            raise ValueError(f'Euclidean space must have positive dimension, not {self.dim}')

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.dim})'

    def coerce(self, vectorlike : Any) -> np.ndarray[Shape[N], Numeric]:
        '''Interpret an array-like as a vector in this space'''
        vector = np.asarray(vectorlike, dtype=self.dtype)
        if vector.shape != (self.dim,):
            raise DimensionMismatchError(f'Expected {self.dim}-element vector, received array of shape {vector.shape} instead')

        return vector

    # fulfilling VectorSpace contracts
    def basis_indices(self) -> tuple[int, ...]:
        return tuple(range(self.dim))

    def zero(self) -> np.ndarray[Shape[N], Numeric]:
        return np.zeros(self.dim, dtype=self.dtype)

    def tabulate(self, generator : Callable[[int], Numeric]) -> np.ndarray[Shape[N], Numeric]:
        return np.array([generator(i) for i in self.basis_indices()], dtype=self.dtype)

    def components(self, vector : np.ndarray[Shape[N], Numeric]) -> Iterator[Numeric]:
        return iter(np.asarray(vector).tolist()) # DEV: tolist() yields native Python scalars, keeping exact arithmetic in det()

    def add(self, u : np.ndarray[Shape[N], Numeric], v : np.ndarray[Shape[N], Numeric]) -> np.ndarray[Shape[N], Numeric]:
        return np.add(u, v)

    def negate(self, v : np.ndarray[Shape[N], Numeric]) -> np.ndarray[Shape[N], Numeric]:
        return np.negative(v)

    def scale(self, factor : Numeric, v : np.ndarray[Shape[N], Numeric]) -> np.ndarray[Shape[N], Numeric]:
        return np.multiply(factor, v)

R2 = Euclidean(2)
R3 = Euclidean(3)
