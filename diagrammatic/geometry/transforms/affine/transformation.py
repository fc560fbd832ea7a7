'''
General affine transformations over an arbitrary vector space, represented
by an invertible linear map, the transpose of that map, and a translation
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Optional, Self, Union
from dataclasses import dataclass
from functools import reduce

from ....arraytypes import Vector
from ...spaces import VectorSpace, DimensionMismatchError, dimension
from ...points import Point
from .. import linear
from ..linear import InvertibleLinearMap, verify_inverse, verify_transpose


@dataclass(frozen=True, eq=False) # DEV: equality of the underlying functions is undecidable, so fall back to identity
class Transformation:
    '''
    An affine transformation of the vector space "space"

    By the transpose of a linear map we mean the linear map corresponding to the transpose of its matrix
    representation; scalings are their own transpose, while the transpose of a rotation is its inverse.
    The transpose is tracked separately because, under a linear map L, normal vectors transform
    according to the inverse transpose of L rather than according to L itself

    Transformations are values; every operation returns a new Transformation and none mutate in place
    '''
    linear : InvertibleLinearMap
    transpose : InvertibleLinearMap
    translation : Vector
    space : VectorSpace

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(space={self.space!r}, translation={list(self.space.components(self.translation))})'

    @classmethod
    def identity(cls, space : VectorSpace) -> Self:
        '''The transformation which leaves everything in place'''
        return cls(
            linear=InvertibleLinearMap.identity(),
            transpose=InvertibleLinearMap.identity(),
            translation=space.zero(),
            space=space,
        )

    # algebraic operations
    def inverted(self) -> 'Transformation':
        '''The transformation which undoes this one'''
        linear_inv = self.linear.inverted()
        return Transformation(
            linear=linear_inv,
            transpose=self.transpose.inverted(),
            translation=self.space.negate(linear_inv(self.translation)),
            space=self.space,
        )

    def drop_translation(self) -> 'Transformation':
        '''A copy of this transformation with the translational component removed, leaving only the linear part'''
        return Transformation(
            linear=self.linear,
            transpose=self.transpose,
            translation=self.space.zero(),
            space=self.space,
        )

    def _check_same_space(self, other : 'Transformation') -> None:
        if (self.space is other.space) or (self.space == other.space):
            return

        if dimension(self.space) != dimension(other.space):
            raise DimensionMismatchError(
                f'Cannot compose transformation of {self.space} with transformation of {other.space}'
            )
        raise DimensionMismatchError( # DEV: equal dimension isn't enough, since the two spaces may store vectors differently
            f'Cannot compose transformations of distinct (though equidimensional) spaces {self.space} and {other.space}'
        )

    def __mul__(self, other : 'Transformation') -> 'Transformation':
        '''Compose with another transformation; (self * other) performs "other" first, then "self"'''
        if not isinstance(other, Transformation):
            return NotImplemented
        self._check_same_space(other)

        return Transformation(
            linear=self.linear * other.linear,
            transpose=other.transpose * self.transpose, # transpose of a product reverses the order of its factors
            translation=self.space.add(self.translation, self.linear(other.translation)),
            space=self.space,
        )

    # application to vectors and points
    def apply(self, vector : Vector) -> Vector:
        '''
        Apply to a free vector; the translational component has no
        effect, since vectors are invariant under translation
        '''
        return self.linear(vector)

    def apply_to_point(self, point : Union[Point, Vector]) -> Union[Point, Vector]:
        '''
        Apply to a position, which (unlike a free vector) is also translated

        Accepts either a Point (returning a Point) or the bare position vector of one (returning a vector)
        '''
        if isinstance(point, Point):
            return Point(self.apply_to_point(point.coords))
        return self.space.add(self.linear(point), self.translation)

    # fulfilling Transformable contracts
    def transform(self, transformation : 'Transformation') -> 'Transformation':
        return transformation * self

    # fulfilling HasOrigin contracts
    def move_origin_to(self, point : Point) -> 'Transformation':
        '''Re-express this transformation relative to a new origin at "point"'''
        shift = Transformation(
            linear=InvertibleLinearMap.identity(),
            transpose=InvertibleLinearMap.identity(),
            translation=self.space.negate(point.coords),
            space=self.space,
        )
        return shift * self


# Functional interface
def identity(space : VectorSpace) -> Transformation:
    return Transformation.identity(space)

def invert(transformation : Transformation) -> Transformation:
    '''Invert a transformation'''
    return transformation.inverted()
inv = invert

def transpose(transformation : Transformation) -> InvertibleLinearMap:
    '''Get the transpose of a transformation (ignoring the translation component)'''
    return transformation.transpose
transp = transpose

def translation_of(transformation : Transformation) -> Vector:
    '''Get the translational component of a transformation'''
    return transformation.translation
transl = translation_of

def drop_translation(transformation : Transformation) -> Transformation:
    '''Drop the translational component of a transformation, leaving only the linear part'''
    return transformation.drop_translation()

def compose(*transformations : Transformation, space : Optional[VectorSpace]=None) -> Transformation:
    '''
    Compose any number of transformations, in the same order as they'd be written as matrices;
    compose(t1, t2) is the transformation which performs first t2, then t1

    Composing no transformations gives the identity, which requires "space" to be given
    If "space" is given alongside transformations, they must all act on that space
    '''
    if space is not None:
        transformations = (Transformation.identity(space), *transformations)
    if not transformations:
        raise TypeError('Composing zero transformations requires a vector space in which to build the identity')

    return reduce(lambda outer, inner : outer * inner, transformations)

def apply(transformation : Transformation, vector : Vector) -> Vector:
    '''Apply a transformation to a free vector (translation has no effect)'''
    return transformation.apply(vector)

def apply_to_point(transformation : Transformation, point : Union[Point, Vector]) -> Union[Point, Vector]:
    '''Apply a transformation to a point'''
    return transformation.apply_to_point(point)
papply = apply_to_point


# Construction from linear maps
def from_linear(
        lmap : InvertibleLinearMap,
        lmap_transpose : InvertibleLinearMap,
        space : VectorSpace,
        verify : Optional[bool]=None,
    ) -> Transformation:
    '''
    Create a general affine transformation from an invertible linear map and its transpose
    The translational component is zero

    Parameters
    ----------
    lmap : InvertibleLinearMap
        The linear part of the transformation
    lmap_transpose : InvertibleLinearMap
        The transpose of "lmap"; ASSUMED to be correct, and not derived or checked unless verification is requested
    space : VectorSpace
        The vector space the transformation acts on
    verify : bool, optional
        Whether to spot-check the inverse and transpose relationships on a handful of probe vectors
        If None (the default), falls back to the module-wide linear.VERIFY_CONTRACTS flag

    Returns
    -------
    Transformation
        The linear transformation, with zero translation
    '''
    if verify is None:
        verify = linear.VERIFY_CONTRACTS

    if verify:
        verify_inverse(lmap, space)
        verify_inverse(lmap_transpose, space)
        verify_transpose(lmap, lmap_transpose, space)

    return Transformation(
        linear=lmap,
        transpose=lmap_transpose,
        translation=space.zero(),
        space=space,
    )

def from_orthogonal(lmap : InvertibleLinearMap, space : VectorSpace, verify : Optional[bool]=None) -> Transformation:
    '''Create a transformation from an orthogonal linear map, i.e. one whose inverse is also its transpose'''
    return from_linear(lmap, lmap.inverted(), space, verify=verify)

def from_symmetric(lmap : InvertibleLinearMap, space : VectorSpace, verify : Optional[bool]=None) -> Transformation:
    '''Create a transformation from a symmetric linear map, i.e. one which is its own transpose'''
    return from_linear(lmap, lmap, space, verify=verify)
