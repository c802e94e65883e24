"""
Reflective access to private state.

Tests sometimes need to verify internal state that a class does not expose
publicly: storage held by an implementor object, cached flags, counters.
These helpers resolve such members by name following Python's privacy
conventions, so that callers can write ``get_field(matrix, "implementor")``
regardless of whether the attribute is stored as ``implementor``,
``_implementor`` or the name-mangled ``_Matrix__implementor``.

Lookup order for a field named ``name`` on a class ``C``:

1. ``name``
2. ``_name``
3. ``_C__name`` for each class ``C`` in the MRO (starting at the first base
   class for the ``*_base_*`` variants)

Methods and properties are looked up on the declaring types, never through
instance attributes.
"""

from typing import Any, Iterator, List, Type

_MISSING = object()


def _mro(cls: Type, skip_own: bool) -> List[Type]:
    mro = [c for c in cls.__mro__ if c is not object]
    if skip_own:
        mro = mro[1:]
    return mro


def _field_candidates(name: str, classes: List[Type]) -> Iterator[str]:
    yield name
    if not name.startswith('_'):
        yield '_' + name
    bare = name.lstrip('_')
    for c in classes:
        yield f"_{c.__name__.lstrip('_')}__{bare}"


def _lookup_field(obj: Any, name: str, skip_own: bool):
    classes = _mro(type(obj), skip_own)
    instance_dict = getattr(obj, '__dict__', {})
    for candidate in _field_candidates(name, classes):
        if candidate in instance_dict:
            return candidate, instance_dict[candidate]
        # Slots and class-level attributes
        for c in classes:
            if candidate in vars(c) and not isinstance(vars(c)[candidate], property):
                value = getattr(obj, candidate, _MISSING)
                if value is not _MISSING and not callable(value):
                    return candidate, value
    raise AttributeError(
        f"Field '{name}' not found in {type(obj).__name__}"
        + (" base types" if skip_own else ""))


def _lookup_declared(cls: Type, name: str, skip_own: bool, kind: type = None):
    for c in _mro(cls, skip_own):
        for candidate in (name, '_' + name.lstrip('_'), f"_{c.__name__.lstrip('_')}__{name.lstrip('_')}"):
            member = vars(c).get(candidate, _MISSING)
            if member is _MISSING:
                continue
            if kind is None or isinstance(member, kind):
                return member
    raise AttributeError(
        f"Member '{name}' not declared in {cls.__name__}"
        + (" base types" if skip_own else ""))


def get_field(obj: Any, field_name: str) -> Any:
    """
    Get the value of a field having the specified name in the given object.

    Parameters
    ----------
    obj : object
        The object whose type supports the field
    field_name : str
        Name of the field, without privacy prefixes

    Returns
    -------
    object
        The value of the field

    Raises
    ------
    AttributeError
        If no matching field exists
    """
    return _lookup_field(obj, field_name, skip_own=False)[1]


def get_base_field(obj: Any, field_name: str) -> Any:
    """
    Get the value of a field declared by a base type of the given object.

    Only name-mangled fields are resolved by declaring type, so for plain
    or single-underscore names this is equivalent to :func:`get_field`.
    """
    return _lookup_field(obj, field_name, skip_own=True)[1]


def set_field(obj: Any, value: Any, field_name: str):
    """Set the value of an existing field having the specified name."""
    attribute, _ = _lookup_field(obj, field_name, skip_own=False)
    setattr(obj, attribute, value)


def get_property(obj: Any, property_name: str) -> Any:
    """Get the value of a property declared by the type of ``obj``."""
    prop = _lookup_declared(type(obj), property_name, skip_own=False, kind=property)
    return prop.fget(obj)


def execute_member(obj: Any, method_name: str, *args, **kwargs) -> Any:
    """Execute the specified method declared by the type of ``obj``."""
    method = _lookup_declared(type(obj), method_name, skip_own=False)
    if not callable(method):
        raise AttributeError(f"Member '{method_name}' of {type(obj).__name__} is not callable")
    return method(obj, *args, **kwargs)


def execute_base_member(obj: Any, method_name: str, *args, **kwargs) -> Any:
    """Execute the specified method as declared by a base type of ``obj``."""
    method = _lookup_declared(type(obj), method_name, skip_own=True)
    if not callable(method):
        raise AttributeError(f"Member '{method_name}' of {type(obj).__name__} is not callable")
    return method(obj, *args, **kwargs)


def execute_static_member(cls: Type, method_name: str, *args, **kwargs) -> Any:
    """Execute the specified static or class method of ``cls``."""
    member = _lookup_declared(cls, method_name, skip_own=False,
                              kind=(staticmethod, classmethod))
    return member.__get__(None, cls)(*args, **kwargs)
