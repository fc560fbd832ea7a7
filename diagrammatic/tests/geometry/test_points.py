'''Unit tests for Points and moving origins'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest
import numpy as np

from diagrammatic.geometry.spaces import R2, R3
from diagrammatic.geometry.points import Point, origin
from diagrammatic.geometry.origin import HasOrigin, move_origin_to
from diagrammatic.geometry.transforms.affine import (
    TranslationInvariant,
    identity,
    translation,
    apply_to_point,
)


def test_point_displacement() -> None:
    '''Test that the difference between two Points is the vector from one to the other'''
    diff = Point(np.array([4.0, 6.0])) - Point(np.array([1.0, 2.0]))
    assert isinstance(diff, np.ndarray) and np.allclose(diff, [3.0, 4.0])

def test_point_plus_vector() -> None:
    '''Test that adding a vector to a Point (from either side) yields a new Point'''
    p = Point(np.array([1.0, 2.0]))
    v = np.array([0.5, 0.5])
    assert (p + v == Point(np.array([1.5, 2.5]))) and (v + p == Point(np.array([1.5, 2.5])))

def test_point_minus_vector() -> None:
    '''Test that subtracting a vector from a Point yields a Point'''
    assert Point(np.array([1.0, 2.0])) - np.array([1.0, 1.0]) == Point(np.array([0.0, 1.0]))

def test_cannot_add_points() -> None:
    '''Test that two Points cannot be summed, as this has no meaning in an affine space'''
    with pytest.raises(TypeError):
        _ = Point(np.zeros(2)) + Point(np.ones(2))

def test_point_hashable() -> None:
    '''Test that Points with equal coordinates collapse within sets'''
    points = {Point(np.array([1.0, 2.0])), Point(np.array([1.0, 2.0])), Point(np.array([2.0, 1.0]))}
    assert len(points) == 2

def test_point_ordering() -> None:
    '''Test that Points are ordered lexicographically by coordinate'''
    points = [Point(np.array([1.0, 2.0])), Point(np.array([0.0, 5.0])), Point(np.array([1.0, 1.0]))]
    assert [list(p.coords) for p in sorted(points)] == [[0.0, 5.0], [1.0, 1.0], [1.0, 2.0]]

@pytest.mark.parametrize('space', (R2, R3))
def test_origin(space) -> None:
    '''Test that the origin lies at the zero vector'''
    assert np.allclose(origin(space).coords, np.zeros(space.dim))

def test_move_origin_point() -> None:
    '''Test that moving the origin shifts Points in the opposite direction'''
    assert move_origin_to(Point(np.array([1.0, 1.0])), Point(np.array([3.0, 2.0]))) == Point(np.array([2.0, 1.0]))

def test_move_origin_transformation() -> None:
    '''Test that moving the origin of a transformation post-composes it with the opposite translation'''
    moved = move_origin_to(Point(np.array([1.0, 2.0])), identity(R2))
    assert apply_to_point(moved, origin(R2)).isclose(Point(np.array([-1.0, -2.0])))

def test_move_origin_accepts_vector() -> None:
    '''Test that new origins may be given as bare position vectors'''
    moved = move_origin_to(np.array([1.0, 2.0]), translation((1.0, 2.0)))
    assert np.allclose(moved.translation, [0.0, 0.0])

def test_move_origin_translation_invariant() -> None:
    '''Test that moving the origin has no effect on translationally invariant objects'''
    wrapped = TranslationInvariant(Point(np.array([3.0, 4.0])))
    assert isinstance(wrapped, HasOrigin) and (move_origin_to(Point(np.array([10.0, -7.0])), wrapped) == wrapped)

def test_move_origin_unsupported() -> None:
    '''Test that objects with no notion of origin are rejected'''
    with pytest.raises(TypeError):
        _ = move_origin_to(Point(np.zeros(2)), 'not geometric')
