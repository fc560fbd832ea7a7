'''Wrappers which modify how (or whether) transformations act upon the objects they contain'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, Generic, TypeVar
from dataclasses import dataclass, replace

from ...points import Point
from .transformation import Transformation
from .application import transform

T = TypeVar('T')


@dataclass(frozen=True)
class TranslationInvariant(Generic[T]):
    '''
    Wrapper which makes a transformable object translationally invariant;
    the translational component of transformations will no longer affect the wrapped object
    '''
    value : T

    def unwrap(self) -> T:
        return self.value

    def __add__(self, other : 'TranslationInvariant[T]') -> 'TranslationInvariant[T]':
        '''Combine wrapped values, as the wrapped values themselves would be combined'''
        if not isinstance(other, TranslationInvariant):
            return NotImplemented
        return TranslationInvariant(self.value + other.value)

    # fulfilling Transformable contracts
    def transform(self, transformation : Transformation) -> 'TranslationInvariant[T]':
        return TranslationInvariant(transform(transformation.drop_translation(), self.value))

    # fulfilling HasOrigin contracts
    def move_origin_to(self, point : Point) -> 'TranslationInvariant[T]':
        '''Moving the origin has no effect on translationally invariant objects'''
        return self

@dataclass(frozen=True)
class Deletable(Generic[T]):
    '''
    A transformable value carrying markers which record how many times it has been deleted
    from the left and right (for use in monoids whose elements can cancel each other out)

    Transformations act on the wrapped value only; markers are left unchanged
    '''
    value : T
    left : int = 0
    right : int = 0

    def unwrap(self) -> T:
        return self.value

    def delete_left(self) -> 'Deletable[T]':
        return replace(self, left=self.left + 1)

    def delete_right(self) -> 'Deletable[T]':
        return replace(self, right=self.right + 1)

    # fulfilling Transformable contracts
    def transform(self, transformation : Transformation) -> 'Deletable[T]':
        return replace(self, value=transform(transformation, self.value))
