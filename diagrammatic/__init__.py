'''
A generic algebra of affine transformations (translations, rotations, scalings and shears)
over arbitrary finite-dimensional vector spaces, for use as the geometric core of diagram descriptions
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'
__version__ = '0.1.0'

from .geometry.spaces import (
    VectorSpace,
    Euclidean,
    R2,
    R3,
    DimensionMismatchError,
    dimension,
    basis,
    list_rep,
)
from .geometry.axes import CoordAxis
from .geometry.points import Point, origin
from .geometry.origin import HasOrigin, move_origin_to
from .geometry.transforms.linear import (
    InvertibleLinearMap,
    InverseContractError,
    linear_map,
    identity_map,
    linv,
    lapp,
    verify_inverse,
    verify_transpose,
)
from .geometry.transforms.affine import *
