'''Extraction of explicit matrix representations (and the quantities derived from them) from Transformations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Any, Mapping, Sequence, TypeVar
from numbers import Number

import numpy as np

from ....arraytypes import Shape, DimsPlus, Numeric, Vector, MatrixColumns
from ...spaces import VectorSpace, basis, dimension, list_rep
from .transformation import Transformation

E = TypeVar('E')


# Custom Exceptions
class InvalidMatrixShapeError(ValueError):
    '''Raised when a matrix operation is invoked on a matrix of the wrong shape (e.g. a determinant of a non-square matrix)'''
    pass


# MATRIX REPRESENTATIONS
def identity_matrix(space : VectorSpace) -> list[Vector]:
    '''The identity matrix of a vector space, as a list of its basis (column) vectors'''
    return basis(space)
eye = identity_matrix

def on_basis(transformation : Transformation) -> tuple[list[Vector], Vector]:
    '''
    Get the images of each basis vector under the linear part of a transformation
    (i.e. its columns as a matrix) along with the translation vector
    '''
    return [transformation.linear(basis_vector) for basis_vector in basis(transformation.space)], transformation.translation

def matrix_columns(transformation : Transformation) -> MatrixColumns:
    '''
    Convert the linear part of a transformation to a matrix, represented as a
    list of columns; column i is the image of the i-th basis vector, as a list of scalars
    '''
    space = transformation.space
    return [
        list_rep(space, transformation.linear(basis_vector))
            for basis_vector in basis(space)
    ]
matrix_rep = matrix_columns

def homogeneous_matrix_columns(transformation : Transformation) -> MatrixColumns:
    '''
    Convert a transformation to a homogeneous matrix representation, as a list of columns
    whose final column is the translation vector

    The final row of the homogeneous matrix (always [0, ..., 0, 1]) is omitted,
    since this is the de facto standard representation for rendering backends
    '''
    return matrix_columns(transformation) + [list_rep(transformation.space, transformation.translation)]
matrix_hom_rep = homogeneous_matrix_columns

def affine_matrix(transformation : Transformation, dtype : Any=None) -> np.ndarray[Shape[DimsPlus, DimsPlus], Numeric]:
    '''
    The full [D + 1] x [D + 1] affine matrix of a transformation (final [0, ..., 0, 1] row included),
    for backends which consume numpy arrays and act on homogeneous coordinates

    Raises InvalidMatrixShapeError if the linear part does not map the space into itself
    '''
    *linear_columns, translation_column = homogeneous_matrix_columns(transformation)
    dim = _check_square(linear_columns)
    if len(translation_column) != dim:
        raise InvalidMatrixShapeError(f'Translation has {len(translation_column)} components, but the linear part acts in {dim} dimensions')

    # each column gains its entry from the final row: 0 beneath the linear part, 1 beneath the translation
    columns = [column + [0] for column in linear_columns] + [translation_column + [1]]
    return np.array(columns, dtype=dtype).T # columns were stored as rows


# DETERMINANTS
def _remove(n : int, items : Sequence[E]) -> list[E]:
    '''Copy of a sequence with the n-th element removed'''
    return list(items[:n]) + list(items[n + 1:])

def _check_square(matrix : MatrixColumns) -> int:
    '''Verify that a list-of-columns matrix is square and non-empty, returning its size'''
    n_cols = len(matrix)
    if n_cols == 0:
        raise InvalidMatrixShapeError('Cannot operate on an empty matrix')

    for (i, column) in enumerate(matrix):
        if len(column) != n_cols:
            raise InvalidMatrixShapeError(
                f'Matrix must be square; column {i} has {len(column)} entries, but there are {n_cols} columns'
            )
    return n_cols

def minor(i : int, j : int, matrix : MatrixColumns) -> MatrixColumns:
    '''
    The minor matrix of cofactor C(i, j) of a list-of-columns matrix,
    i.e. the matrix with column i and row j removed
    '''
    _check_square(matrix)
    return _remove(i, [_remove(j, column) for column in matrix])

def det(matrix : MatrixColumns) -> Numeric:
    '''
    The determinant of a square matrix, represented as a list of column vectors,
    computed by cofactor (Laplace) expansion along the first row

    Raises InvalidMatrixShapeError if the matrix is not square
    '''
    n = _check_square(matrix)
    if n == 1:
        return matrix[0][0]

    first_row = [column[0] for column in matrix]
    return sum(
        (-1)**i * first_row[i] * det(minor(i, 0, matrix))
            for i in range(n)
    )

def determinant(transformation : Transformation) -> Numeric:
    '''The determinant of the linear part of a Transformation'''
    return det(matrix_columns(transformation))

def avg_scale(transformation : Transformation) -> float:
    '''
    Compute the "average" amount of scaling performed by a transformation, taken as
    the n-th root of the absolute value of its determinant, where n is the dimension

    This works because the determinant is the factor by which a transformation scales area/volume,
    and satisfies the following properties (for a positive scale factor k):
    * avg_scale(scaling(k)) == k
    * avg_scale(t1 * t2) == avg_scale(t1) * avg_scale(t2)
    '''
    dim = dimension(transformation.space)
    scale = abs(determinant(transformation)) ** (1 / dim)
    LOGGER.debug(f'Average scale of transformation in {dim} dimensions is {scale}')

    return scale

def scale_from_transform(transformation : Transformation, value : Any) -> Any:
    '''
    Scale every numeric component of a value by the average scale of a transformation

    Intended for scalar-valued attributes (e.g. line widths) which should grow and shrink
    consistently with a transformation, independent of its actual action on coordinates.
    "value" may be a single number, a numpy array, or a Sequence or Mapping of such values
    '''
    factor = avg_scale(transformation)

    def _scaled(obj : Any) -> Any:
        if isinstance(obj, np.ndarray):
            return obj * factor
        elif isinstance(obj, Number):
            return obj * factor
        elif isinstance(obj, Mapping):
            return type(obj)({key : _scaled(val) for (key, val) in obj.items()})
        elif isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
            return type(obj)(_scaled(val) for val in obj)
        else:
            raise TypeError(f'Cannot scale non-numeric value of type {type(obj).__name__}')

    return _scaled(value)
