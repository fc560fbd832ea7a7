'''Invertible linear maps, and construction of common linear transformations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

import os
from typing import Optional, Self
from dataclasses import dataclass

import numpy as np

from ...arraytypes import Shape, Dims, Numeric, Vector, VectorMap
from ..spaces import VectorSpace, basis, inner_product, list_rep


VERIFY_CONTRACTS : bool = os.environ.get('DIAGRAMMATIC_VERIFY_CONTRACTS', '').lower() in ('1', 'true', 'yes')
'''Whether the trust-based Transformation constructors should spot-check the algebraic relationships they assume'''


# Custom Exceptions
class InverseContractError(ValueError):
    '''Raised when a pair of maps presumed to be inverses (or transposes) of one another is found not to be'''
    pass


def _identity(x : Vector) -> Vector:
    return x

def _composed(outer : VectorMap, inner : VectorMap) -> VectorMap:
    '''The map which applies "inner" first, then "outer"'''
    if outer is _identity: # DEV: skip identities so repeated composition doesn't nest closures
        return inner
    if inner is _identity:
        return outer

    def composite(x : Vector) -> Vector:
        return outer(inner(x))
    return composite


@dataclass(frozen=True)
class InvertibleLinearMap:
    '''
    A linear map paired with its inverse

    The two functions are ASSUMED to be exact linear inverses of one another;
    nothing is checked on construction (see verify_inverse() for an opt-in spot check)
    '''
    forward : VectorMap
    inverse : VectorMap

    def __call__(self, x : Vector) -> Vector:
        return self.forward(x)

    def apply(self, x : Vector) -> Vector:
        '''Apply the linear map to a vector'''
        return self.forward(x)

    def inverted(self) -> 'InvertibleLinearMap':
        '''The inverse linear map, obtained by swapping the forward and inverse parts'''
        return InvertibleLinearMap(forward=self.inverse, inverse=self.forward)

    def __mul__(self, other : 'InvertibleLinearMap') -> 'InvertibleLinearMap':
        '''Compose with another map; (self * other) applies "other" first, then "self"'''
        if not isinstance(other, InvertibleLinearMap):
            return NotImplemented

        return InvertibleLinearMap(
            forward=_composed(self.forward, other.forward),
            inverse=_composed(other.inverse, self.inverse), # note the reversed order
        )

    @classmethod
    def identity(cls) -> Self:
        '''The identity map, paired with itself'''
        return cls(forward=_identity, inverse=_identity)

    @property
    def is_identity(self) -> bool:
        '''Whether this map is structurally (not just numerically) the identity'''
        return (self.forward is _identity) and (self.inverse is _identity)

def linear_map(forward : VectorMap, inverse : VectorMap) -> InvertibleLinearMap:
    '''Create an invertible linear map from two functions which are assumed to be linear inverses'''
    return InvertibleLinearMap(forward=forward, inverse=inverse)

def identity_map() -> InvertibleLinearMap:
    return InvertibleLinearMap.identity()

def linv(lmap : InvertibleLinearMap) -> InvertibleLinearMap:
    '''Invert a linear map'''
    return lmap.inverted()

def lapp(lmap : InvertibleLinearMap, x : Vector) -> Vector:
    '''Apply a linear map to a vector'''
    return lmap.forward(x)

def compose_maps(*lmaps : InvertibleLinearMap) -> InvertibleLinearMap:
    '''Compose any number of linear maps; the rightmost map is applied first'''
    composite = identity_map()
    for lmap in lmaps:
        composite = composite * lmap

    return composite


# SAMPLED CONTRACT VERIFICATION
def probe_vectors(space : VectorSpace, n_probes : int=3, seed : Optional[int]=0) -> list[Vector]:
    '''
    Vectors to spot-check linear map contracts against: every basis vector of the space,
    followed by "n_probes" vectors with normally-distributed random components
    '''
    rng = np.random.default_rng(seed)
    probes = basis(space)
    for _ in range(n_probes):
        probes.append(space.tabulate(lambda _index : float(rng.standard_normal())))

    return probes

def _vectors_close(space : VectorSpace, u : Vector, v : Vector, rtol : float, atol : float) -> bool:
    return np.allclose(list_rep(space, u), list_rep(space, v), rtol=rtol, atol=atol)

def verify_inverse(
        lmap : InvertibleLinearMap,
        space : VectorSpace,
        n_probes : int=3,
        rtol : float=1E-5,
        atol : float=1E-8,
        seed : Optional[int]=0,
    ) -> None:
    '''
    Check, on a sample of probe vectors, that the forward and inverse parts of
    a linear map undo one another in both orders

    Raises InverseContractError at the first probe where either round trip fails
    '''
    for probe in probe_vectors(space, n_probes=n_probes, seed=seed):
        if not _vectors_close(space, lmap.inverse(lmap.forward(probe)), probe, rtol=rtol, atol=atol):
            raise InverseContractError(f'Inverse does not undo forward map at probe vector {list_rep(space, probe)}')
        if not _vectors_close(space, lmap.forward(lmap.inverse(probe)), probe, rtol=rtol, atol=atol):
            raise InverseContractError(f'Forward map does not undo inverse at probe vector {list_rep(space, probe)}')
    LOGGER.debug(f'Verified inverse pair on {len(space.basis_indices()) + n_probes} probe vectors in {space}')

def verify_transpose(
        lmap : InvertibleLinearMap,
        lmap_transpose : InvertibleLinearMap,
        space : VectorSpace,
        n_probes : int=3,
        rtol : float=1E-5,
        atol : float=1E-8,
        seed : Optional[int]=0,
    ) -> None:
    '''
    Check, on pairs of probe vectors, that one map is the transpose (adjoint) of another,
    i.e. that <L(x), y> == <x, L^T(y)> for the standard inner product

    Raises InverseContractError at the first pair of probes which violates this
    '''
    probes = probe_vectors(space, n_probes=n_probes, seed=seed)
    for x in probes:
        for y in probes:
            lhs = inner_product(space, lmap(x), y)
            rhs = inner_product(space, x, lmap_transpose(y))
            if not np.isclose(lhs, rhs, rtol=rtol, atol=atol):
                raise InverseContractError(
                    f'Supplied transpose is not adjoint to linear map: <L(x), y> = {lhs} but <x, L^T(y)> = {rhs}'
                )
    LOGGER.debug(f'Verified transpose pair on {len(probes)**2} probe vector pairs in {space}')


# CONSTRUCTION OF LINEAR MATRICES
def projector(direction_vector : np.ndarray[Shape[Dims], Numeric]) -> np.ndarray[Shape[Dims, Dims], Numeric]:
    '''
    Computes a linear transformation which, when applied to an arbitrary vector,
    yields the component of that vector parallel to the direction vector provided

    Returns matrix which represents the parallel projector transformation
    '''
    (dim,) = direction_vector.shape # implicitly enforce 1D shape for vector
    return np.outer(direction_vector, direction_vector) / np.inner(direction_vector, direction_vector)

def reflector(normal_vector : np.ndarray[Shape[Dims], Numeric]) -> np.ndarray[Shape[Dims, Dims], Numeric]:
    '''
    Computes a linear transformation which, when applied to an arbitrary vector,
    reflects it across the plane defined by the normal vector provided

    Returns an orthogonal and symmetric Householder matrix which represents the transformation
    '''
    (dim,) = normal_vector.shape # implicitly enforce 1D shape for vector
    return np.eye(dim, dtype=normal_vector.dtype) - 2*projector(normal_vector) # compute Householder reflection

def matrix_map(matrix : np.ndarray[Shape[Dims, Dims], Numeric], space : VectorSpace) -> VectorMap:
    '''
    Wrap a matrix as the function which left-multiplies vectors of a space by it,
    with rows and columns of the matrix taken in the basis order of the space
    '''
    positions = {index : i for (i, index) in enumerate(space.basis_indices())}
    def multiply(vector : Vector) -> Vector:
        image = matrix @ np.array(list_rep(space, vector))
        return space.tabulate(lambda index : image[positions[index]])
    return multiply

def matrix_linear_map(matrix : np.ndarray[Shape[Dims, Dims], Numeric], inverse_matrix : np.ndarray[Shape[Dims, Dims], Numeric], space : VectorSpace) -> InvertibleLinearMap:
    '''Create an invertible linear map from a matrix and its (assumed correct) inverse'''
    return InvertibleLinearMap(
        forward=matrix_map(matrix, space),
        inverse=matrix_map(inverse_matrix, space),
    )
