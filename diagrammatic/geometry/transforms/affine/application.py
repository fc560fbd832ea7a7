'''Utilities for applying affine transformations to other objects (not necessarily just points!)'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import (
    Any,
    AbstractSet, # covers both set and frozenset
    Callable,
    Mapping,
    MutableMapping,
    Protocol,
    Sequence,
    TypeVar,
    runtime_checkable,
)
T = TypeVar('T')

from copy import copy

import numpy as np

from ...points import Point
from ..linear import InvertibleLinearMap
from .transformation import Transformation


# Custom Exceptions
class NotTransformableError(TypeError):
    '''Raised when attempting to transform an object which has no notion of how to be transformed'''
    pass


@runtime_checkable
class Transformable(Protocol):
    '''Interface for objects that can undergo an affine transformation'''
    def transform(self, transformation : Transformation) -> 'Transformable':
        # DEVNOTE: returned object should be of the same type as self, and live in the same vector space
        ...

def _conjugated(transformation : Transformation, func : Callable[..., Any]) -> Callable[..., Any]:
    '''
    Transform a function by conjugation, i.e. reverse-transform its arguments and forward-transform its result

    Intuitively: if someone shrinks you, you see your environment enlarged; if you rotate right, you see
    your environment rotating left. All arguments (positional and keyword) are reverse-transformed
    '''
    inverse = transformation.inverted() # computed once, rather than on every call

    def conjugate(*args, **kwargs) -> Any:
        return transform(
            transformation,
            func(
                *(transform(inverse, arg) for arg in args),
                **{key : transform(inverse, val) for (key, val) in kwargs.items()},
            ),
        )
    conjugate.__wrapped__ = func

    return conjugate

def transform(transformation : Transformation, obj : T) -> T:
    '''
    Apply an affine transformation to an object, recursing into containers as necessary

    Parameters
    ----------
    transformation : Transformation
        The affine transformation to apply
    obj : Any
        The object to be transformed. Supported, in order of precedence, are:
        * Transformable objects (including Transformations themselves, which are composed onto)
        * Points, which feel both the linear and translational parts of the transformation
        * numpy arrays, treated as free vectors (only the linear part acts on them)
        * Sequences (tuples, lists, etc), whose members are each transformed, preserving order and type
        * sets and frozensets, whose members are each transformed (members which coincide afterwards are merged)
        * Mappings, whose values (but NOT keys) are each transformed; immutable mappings are rebuilt
          with their own type where it accepts a dict, and as plain dicts otherwise
        * callables, which are transformed by conjugation (see _conjugated())

    Returns
    -------
    Any
        The transformed object, of the same type as the initial object
        (except for callables, which are returned as a new function)

    Raises
    ------
    NotTransformableError
        If the object (or any of its members) is not of any of the types above,
        or is a class or a bare InvertibleLinearMap
    '''
    if isinstance(obj, type):
        raise NotTransformableError(f'Cannot transform the class {obj.__name__} itself, only its instances') # DEVNOTE: classes would otherwise pass the Transformable check via their unbound transform() methods
    elif isinstance(obj, InvertibleLinearMap):
        raise NotTransformableError('Bare linear maps carry no vector space or transpose; wrap them into a Transformation (e.g. via from_linear()) first')
    elif isinstance(obj, Transformable):
        return obj.transform(transformation)
    elif isinstance(obj, Point):
        return transformation.apply_to_point(obj)
    elif isinstance(obj, np.ndarray):
        return transformation.apply(obj)

    # recursive iteration over containers, as necessary
    elif isinstance(obj, (str, bytes)):
        raise NotTransformableError(f'Cannot transform textual object of type {type(obj).__name__}') # DEVNOTE: would otherwise recurse forever, as single characters are Sequences of themselves
    elif isinstance(obj, Sequence):
        members = [transform(transformation, value) for value in obj]
        if hasattr(obj, '_fields'): # namedtuples take members positionally
            return type(obj)(*members)
        return type(obj)(members)
    elif isinstance(obj, AbstractSet):
        set_type = type(obj) if isinstance(obj, (set, frozenset)) else frozenset
        return set_type(transform(transformation, value) for value in obj)
    elif isinstance(obj, Mapping):
        if isinstance(obj, MutableMapping):
            transformed = copy(obj) # preserves mapping type and any extra state (e.g. defaultdict factories)
            for (key, value) in obj.items():
                transformed[key] = transform(transformation, value)
            return transformed

        transformed = {key : transform(transformation, value) for (key, value) in obj.items()}
        try:
            return type(obj)(transformed) # immutable mappings must be rebuilt whole
        except TypeError: # no constructor from a dict is available, so a plain dict is the best that can be done
            return transformed
    elif callable(obj):
        return _conjugated(transformation, obj)

    raise NotTransformableError(f'Object of type {type(obj).__name__} does not support affine transformation')
act = transform # transformations act on transformable objects as a monoid action
