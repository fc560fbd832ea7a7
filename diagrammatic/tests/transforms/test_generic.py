'''Unit tests for generic and coordinate-based Transformation constructors'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
import pytest
import numpy as np

from diagrammatic.geometry.axes import CoordAxis
from diagrammatic.geometry.spaces import R2, R3, Euclidean, DimensionMismatchError
from diagrammatic.geometry.points import Point
from diagrammatic.geometry.transforms.affine import (
    ScaleByZeroError,
    SingularTransformationError,
    TranslationInvariant,
    Deletable,
    infer_space,
    translation,
    translate,
    scaling,
    scale,
    from_matrix,
    rotation,
    reflection,
    shearing,
    apply,
    apply_to_point,
    invert,
    matrix_columns,
    determinant,
)


def P(*coords : float) -> Point:
    return Point(np.array(coords, dtype=float))


# TRANSLATIONS
def test_translation_infers_space() -> None:
    '''Test that translations infer the vector space from their translation vector'''
    assert translation((1, 2, 3)).space == R3

def test_translation_identity_linear() -> None:
    '''Test that translations have identity linear part and transpose'''
    t = translation((1.0, 2.0))
    assert t.linear.is_identity and t.transpose.is_identity

def test_translation_wrong_dimension() -> None:
    '''Test that translation vectors must match the dimension of an explicitly-given space'''
    with pytest.raises(DimensionMismatchError):
        _ = translation((1.0, 2.0), space=R3)

def test_translate() -> None:
    '''Test that translating an object moves points but not vectors'''
    (p, v) = translate((1.0, -1.0), (P(0.0, 0.0), np.array([5.0, 5.0])))
    assert (p == P(1.0, -1.0)) and np.allclose(v, [5.0, 5.0])

def test_translate_inverse() -> None:
    '''Test that the inverse of a translation translates by the opposite vector'''
    assert np.allclose(invert(translation((2.0, 7.0))).translation, [-2.0, -7.0])


# SCALINGS
def test_scaling_by_zero() -> None:
    '''Test that scaling by zero fails before any transformation is constructed'''
    with pytest.raises(ScaleByZeroError):
        _ = scaling(0)

def test_scaling_by_zero_is_zero_division() -> None:
    '''Test that scaling by zero is reported as a division by zero'''
    with pytest.raises(ZeroDivisionError):
        _ = scaling(0.0, space=R3)

def test_scale_by_zero() -> None:
    '''Test that scaling an object by zero fails loudly rather than collapsing it'''
    with pytest.raises(ScaleByZeroError):
        _ = scale(0, P(1.0, 1.0))

def test_scaling_symmetric() -> None:
    '''Test that scalings are their own transpose'''
    t = scaling(4.0)
    assert t.transpose is t.linear

def test_scaling_inverse() -> None:
    '''Test that inverse scalings divide by the scale factor'''
    assert np.allclose(apply(invert(scaling(4.0)), np.array([2.0, 8.0])), [0.5, 2.0])

def test_scale_infers_space() -> None:
    '''Test that scaling an object infers the space from the object itself'''
    assert scale(3.0, [P(1.0, 0.0, -1.0)]) == [P(3.0, 0.0, -3.0)]

def test_scale_translation_invariant() -> None:
    '''Test that space inference looks through wrappers'''
    assert scale(2.0, Deletable(TranslationInvariant(P(1.0, 1.0)))).unwrap() == TranslationInvariant(P(2.0, 2.0))

@pytest.mark.parametrize('empty', ([], (), {}, set(), frozenset()))
def test_scale_empty_container(empty : object) -> None:
    '''Test that scaling an empty container yields an empty container of the same type'''
    scaled = scale(2.0, empty)
    assert (scaled == empty) and (type(scaled) is type(empty))

def test_scale_without_space() -> None:
    '''Test that objects with no inferable vector space are scaled in the plane by default'''
    assert scale(2.0, lambda p : p)(P(1.0, 2.0)).isclose(P(1.0, 2.0))
    assert scale(2.0, Point((1.0, 2.0))) == P(2.0, 4.0) # coordinates needn't be an array

def test_scale_custom_transformable() -> None:
    '''Test that custom transformable objects which carry no vector space can still be scaled'''
    class Tally:
        def __init__(self, n_transforms : int=0) -> None:
            self.n_transforms = n_transforms

        def transform(self, transformation) -> 'Tally':
            return Tally(self.n_transforms + 1)

    assert scale(3.0, Tally()).n_transforms == 1


# SPACE INFERENCE
@pytest.mark.parametrize(
    'obj, expected_space',
    [
        (np.zeros(3), R3),
        (P(1.0, 2.0), R2),
        (scaling(2.0, space=Euclidean(4)), Euclidean(4)),
        ({'a' : [P(0.0, 0.0)]}, R2),
        (frozenset({P(1.0, 1.0, 1.0)}), R3),
        (R2, R2),
    ]
)
def test_infer_space(obj : object, expected_space : Euclidean) -> None:
    '''Test that vector spaces are found within various objects'''
    assert infer_space(obj) == expected_space

@pytest.mark.parametrize('obj', ([], 'abc', np.zeros((2, 2))))
def test_infer_space_fails(obj : object) -> None:
    '''Test that objects with no definite vector space are refused'''
    with pytest.raises((TypeError, DimensionMismatchError)):
        _ = infer_space(obj)


# ROTATIONS
def test_rotation_2d() -> None:
    '''Test that planar rotations are counterclockwise'''
    assert apply_to_point(rotation(np.pi / 2), P(1.0, 0.0)).isclose(P(0.0, 1.0))

def test_rotation_2d_ignores_axis(caplog : pytest.LogCaptureFixture) -> None:
    '''Test that supplying an axis for a planar rotation is tolerated, with a warning'''
    with caplog.at_level(logging.WARNING):
        t = rotation(np.pi, axis=CoordAxis.X)
    assert ('ignoring' in caplog.text) and apply_to_point(t, P(1.0, 0.0)).isclose(P(-1.0, 0.0))

@pytest.mark.parametrize(
    'axis, start, end',
    [
        (CoordAxis.X, (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
        ('y', (0.0, 0.0, 1.0), (1.0, 0.0, 0.0)),
        (2, (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
        (np.array([0.0, 0.0, 5.0]), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
    ]
)
def test_rotation_3d(axis, start : tuple[float, ...], end : tuple[float, ...]) -> None:
    '''Test that quarter-turns about each axis follow the right-hand rule'''
    assert apply_to_point(rotation(np.pi / 2, axis=axis, space=R3), P(*start)).isclose(P(*end))

def test_rotation_orthogonal() -> None:
    '''Test that rotations take their inverse as their transpose, and preserve volume and orientation'''
    t = rotation(0.9, axis=np.array([1.0, 2.0, 3.0]), space=R3)
    linear_part = np.array(matrix_columns(t)).T
    assert np.allclose(linear_part.T @ linear_part, np.eye(3)) and (determinant(t) == pytest.approx(1.0))

def test_rotation_unsupported_dimension() -> None:
    '''Test that rotations are refused outside of 2 and 3 dimensions'''
    with pytest.raises(DimensionMismatchError):
        _ = rotation(1.0, space=Euclidean(4))

def test_bad_axis_name() -> None:
    '''Test that unknown axis names are refused'''
    with pytest.raises(ValueError):
        _ = rotation(1.0, axis='q', space=R3)


# REFLECTIONS, SHEARS, AND GENERAL MATRICES
def test_reflection() -> None:
    '''Test that reflections flip the normal direction, fix the mirror plane, and are their own inverse'''
    t = reflection(np.array([0.0, 1.0]))
    assert apply_to_point(t, P(3.0, 2.0)).isclose(P(3.0, -2.0))
    assert apply_to_point(invert(t), P(3.0, 2.0)).isclose(P(3.0, -2.0))

def test_shearing() -> None:
    '''Test that shears displace along one axis in proportion to another'''
    t = shearing(0.5, along='x', toward='y')
    assert apply_to_point(t, P(0.0, 2.0)).isclose(P(1.0, 2.0)) and apply_to_point(t, P(3.0, 0.0)).isclose(P(3.0, 0.0))

def test_shearing_same_axis() -> None:
    '''Test that shears require distinct axes'''
    with pytest.raises(ValueError):
        _ = shearing(1.0, along=CoordAxis.Y, toward=CoordAxis.Y)

def test_from_matrix_singular() -> None:
    '''Test that singular matrices are refused'''
    with pytest.raises(SingularTransformationError):
        _ = from_matrix(np.array([[1.0, 2.0], [2.0, 4.0]]))

def test_from_matrix_non_square() -> None:
    '''Test that non-square matrices are refused'''
    with pytest.raises(SingularTransformationError):
        _ = from_matrix(np.ones((2, 3)))

def test_from_matrix_inverse() -> None:
    '''Test that general matrix transformations are correctly inverted'''
    matrix = np.array([[2.0, 1.0], [1.0, 1.0]])
    t = from_matrix(matrix)
    p = P(0.3, -0.7)
    assert apply_to_point(invert(t), apply_to_point(t, p)).isclose(p)
