'''
Construction of transformations which can be defined generically over any vector space
(translations and uniform scalings), and of common coordinate-based transformations
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Any, AbstractSet, Mapping, Optional, Sequence, TypeVar, Union
T = TypeVar('T')

import numpy as np
from scipy.spatial.transform import Rotation

from ....arraytypes import Shape, Dims, Numeric, Vector
from ...axes import CoordAxis, axis_index
from ...spaces import VectorSpace, Euclidean, R2, DimensionMismatchError, dimension
from ...points import Point
from ..linear import InvertibleLinearMap, linear_map, matrix_linear_map, reflector
from .transformation import Transformation, from_linear, from_orthogonal, from_symmetric
from .application import transform
from .invariance import Deletable, TranslationInvariant


# Custom Exceptions
class ScaleByZeroError(ZeroDivisionError):
    '''Raised when attempting to construct a scaling by zero, which would collapse space and has no inverse'''
    pass

class SingularTransformationError(ValueError):
    '''Raised when attempting to construct a transformation from a linear map which has no inverse'''
    pass


def infer_space(obj : Any) -> VectorSpace:
    '''
    Determine which vector space an object lives in, by looking through any wrappers and containers
    until an object with a definite vector space (a Transformation or a numpy vector) is found
    '''
    if isinstance(obj, Transformation):
        return obj.space
    elif isinstance(obj, (TranslationInvariant, Deletable)):
        return infer_space(obj.value)
    elif isinstance(obj, Point):
        return infer_space(obj.coords)
    elif isinstance(obj, np.ndarray):
        if obj.ndim != 1:
            raise DimensionMismatchError(f'Can only infer vector space from 1-D arrays, not array of shape {obj.shape}')
        return Euclidean(len(obj))
    elif isinstance(obj, VectorSpace):
        return obj
    elif hasattr(obj, 'space'):
        return obj.space
    elif isinstance(obj, Mapping) and (len(obj) > 0):
        return infer_space(next(iter(obj.values())))
    elif isinstance(obj, (Sequence, AbstractSet)) and not isinstance(obj, (str, bytes)) and (len(obj) > 0):
        return infer_space(next(iter(obj)))

    raise TypeError(f'Unable to infer vector space of object of type {type(obj).__name__}; please supply one explicitly')


# TRANSLATIONS
def translation(vector : Vector, space : Optional[VectorSpace]=None) -> Transformation:
    '''
    Create a translation by the given vector

    If no vector space is given, it is inferred from the vector
    (array-likes are interpreted as vectors in Euclidean space of matching dimension)
    '''
    if space is None:
        if not isinstance(vector, np.ndarray):
            vector = np.asarray(vector, dtype=float)
        space = infer_space(vector)

    if isinstance(space, Euclidean):
        vector = space.coerce(vector)

    return Transformation(
        linear=InvertibleLinearMap.identity(),
        transpose=InvertibleLinearMap.identity(),
        translation=vector,
        space=space,
    )

def translate(vector : Vector, obj : T) -> T:
    '''Translate an object by a vector'''
    return transform(translation(vector, space=_space_or_none(obj)), obj)

def _space_or_none(obj : Any) -> Optional[VectorSpace]:
    try:
        return infer_space(obj)
    except TypeError:
        return None


# SCALINGS
def scaling(factor : Numeric, space : VectorSpace=R2, verify : Optional[bool]=None) -> Transformation:
    '''
    Create a uniform scaling transformation, which scales every direction by the same factor

    Parameters
    ----------
    factor : Numeric
        The (nonzero) factor to scale by
    space : VectorSpace, default R2
        The vector space the scaling acts on
    verify : bool, optional
        Whether to spot-check the inverse relationship of the underlying linear map

    Returns
    -------
    Transformation
        The scaling, which is its own transpose

    Raises
    ------
    ScaleByZeroError
        If "factor" is zero, since such a scaling cannot be inverted
    '''
    if factor == 0:
        raise ScaleByZeroError('Cannot scale by zero, as the resulting transformation would not be invertible')

    lmap = linear_map(
        forward=lambda x : space.scale(factor, x),
        inverse=lambda x : space.scale(1 / factor, x),
    )
    return from_symmetric(lmap, space, verify=verify)

def scale(factor : Numeric, obj : T, space : Optional[VectorSpace]=None) -> T:
    '''Scale an object uniformly in every direction by the given factor'''
    if factor == 0:
        raise ScaleByZeroError('Cannot scale by zero, as the resulting transformation would not be invertible')

    if space is None:
        space = _space_or_none(obj)
    if space is None: # nothing to locate the object in (e.g. an empty container), so use the same default as scaling()
        space = R2
    return transform(scaling(factor, space=space), obj)


# COORDINATE-BASED TRANSFORMATIONS
def from_matrix(
        matrix : np.ndarray[Shape[Dims, Dims], Numeric],
        space : Optional[VectorSpace]=None,
        verify : Optional[bool]=None,
    ) -> Transformation:
    '''
    Create a linear transformation from an arbitrary invertible matrix, whose inverse and transpose
    are computed numerically (rows and columns are taken in the basis order of the space)

    Raises SingularTransformationError if the matrix has no inverse
    '''
    matrix = np.asarray(matrix)
    (n_rows, n_cols) = matrix.shape # implicitly enforces 2-dimensionality
    if n_rows != n_cols:
        raise SingularTransformationError(f'Non-square {n_rows}x{n_cols} matrix cannot represent an invertible linear map')

    if space is None:
        space = Euclidean(n_cols)
    elif dimension(space) != n_cols:
        raise DimensionMismatchError(f'Cannot represent {n_rows}x{n_cols} matrix as a linear map of {space}')

    try:
        inverse_matrix = np.linalg.inv(matrix)
    except np.linalg.LinAlgError as err:
        raise SingularTransformationError('Matrix is singular, and cannot represent an invertible linear map') from err

    return from_linear(
        matrix_linear_map(matrix, inverse_matrix, space),
        matrix_linear_map(matrix.T, inverse_matrix.T, space),
        space,
        verify=verify,
    )

def rotation(
        angle_rad : float,
        axis : Optional[Union[CoordAxis, str, int, np.ndarray[Shape[3], Numeric]]]=None,
        space : VectorSpace=R2,
        verify : Optional[bool]=None,
    ) -> Transformation:
    '''
    Create a (right-handed) rotation by "angle_rad" radians

    In 2 dimensions, rotates counterclockwise about the origin, and "axis" is ignored
    In 3 dimensions, rotates about "axis", which may be either a coordinate axis (the z-axis by default) or an arbitrary vector
    '''
    dim = dimension(space)
    if dim == 2:
        if axis is not None:
            LOGGER.warning(f'Rotation axis {axis} has no meaning in 2 dimensions; ignoring')
        s = np.sin(angle_rad)
        c = np.cos(angle_rad)
        matrix = np.array([
            [c, -s],
            [s,  c],
        ])
        inverse_matrix = matrix.T
    elif dim == 3:
        if axis is None:
            axis = CoordAxis.Z
        if isinstance(axis, np.ndarray):
            axis_vector = axis / np.linalg.norm(axis)
        else:
            axis_vector = np.eye(3)[axis_index(axis)]
        rot = Rotation.from_rotvec(angle_rad * axis_vector)
        matrix = rot.as_matrix()
        inverse_matrix = rot.inv().as_matrix()
    else:
        raise DimensionMismatchError(f'Rotations are only defined here for 2 or 3 dimensions, not {dim}')

    return from_orthogonal(matrix_linear_map(matrix, inverse_matrix, space), space, verify=verify)

def reflection(
        normal_vector : np.ndarray[Shape[Dims], Numeric],
        space : Optional[VectorSpace]=None,
        verify : Optional[bool]=None,
    ) -> Transformation:
    '''
    Create a reflection across the hyperplane through the origin perpendicular to "normal_vector"

    Reflections are orthogonal, symmetric, and self-inverse all at once
    '''
    normal_vector = np.asarray(normal_vector, dtype=float)
    if space is None:
        space = Euclidean(len(normal_vector))
    householder = reflector(normal_vector)

    return from_symmetric(matrix_linear_map(householder, householder, space), space, verify=verify)

def shearing(
        factor : Numeric,
        along : Union[CoordAxis, str, int]=CoordAxis.X,
        toward : Union[CoordAxis, str, int]=CoordAxis.Y,
        space : VectorSpace=R2,
        verify : Optional[bool]=None,
    ) -> Transformation:
    '''
    Create a shear which displaces each point along the "along" axis in proportion
    to its coordinate on the "toward" axis, i.e. x_along -> x_along + factor * x_toward
    '''
    (i, j) = (axis_index(along), axis_index(toward))
    if i == j:
        raise ValueError('Shear axes must be distinct')

    dim = dimension(space)
    shear = np.eye(dim)
    shear[i, j] = factor
    unshear = np.eye(dim)
    unshear[i, j] = -factor

    return from_linear(
        matrix_linear_map(shear, unshear, space),
        matrix_linear_map(shear.T, unshear.T, space),
        space,
        verify=verify,
    )
