'''
Transformations from the general affine group over an arbitrary vector space, which allows translations,
rotations, scalings and shears, along with their action on points, containers, functions, and wrappers
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .transformation import (
    Transformation,
    identity,
    invert,
    inv,
    transpose,
    transp,
    translation_of,
    transl,
    drop_translation,
    compose,
    apply,
    apply_to_point,
    papply,
    from_linear,
    from_orthogonal,
    from_symmetric,
)
from .matrices import (
    InvalidMatrixShapeError,
    identity_matrix,
    eye,
    on_basis,
    matrix_columns,
    matrix_rep,
    homogeneous_matrix_columns,
    matrix_hom_rep,
    affine_matrix,
    minor,
    det,
    determinant,
    avg_scale,
    scale_from_transform,
)
from .application import (
    NotTransformableError,
    Transformable,
    transform,
    act,
)
from .invariance import (
    TranslationInvariant,
    Deletable,
)
from .generic import (
    ScaleByZeroError,
    SingularTransformationError,
    infer_space,
    translation,
    translate,
    scaling,
    scale,
    from_matrix,
    rotation,
    reflection,
    shearing,
)
