"""
Conversion of Python values to canvases.

``to_canvas`` is a single-dispatch function: register an implementation for
a type to control how its values are drawn.

    >>> from boxgrid.convert import to_canvas
    >>> print(to_canvas([1, 2]))
    ╭      ╮
    │ 1  2 │
    ╰      ╯

Containers are drawn with the presets from ``boxgrid.compose``. A container
that contains itself is drawn as ``[...]``, ``(...)`` or ``{...}`` at the
point where it recurs.
"""

from functools import singledispatch
from typing import Any, FrozenSet, Iterable, List, Mapping, Tuple

from .canvas import Canvas
from .compose import pretty_list, pretty_map, pretty_tuple

Seen = FrozenSet[int]


@singledispatch
def to_canvas(value: Any, seen: Seen = frozenset()) -> Canvas:
    """
    Draw a value as a canvas.

    Args:
        value: Any value. Unregistered types are drawn with ``repr``.
        seen: Ids of the containers currently being drawn.

    Returns:
        Canvas for the value.
    """
    return Canvas.from_string(repr(value))


@to_canvas.register(Canvas)
def _canvas(value: Canvas, seen: Seen = frozenset()) -> Canvas:
    return value


@to_canvas.register(str)
def _str(value: str, seen: Seen = frozenset()) -> Canvas:
    return Canvas.from_string(value)


@to_canvas.register(bool)
@to_canvas.register(int)
@to_canvas.register(float)
@to_canvas.register(type(None))
def _scalar(value: Any, seen: Seen = frozenset()) -> Canvas:
    return Canvas.from_string(str(value))


@to_canvas.register(list)
def _list(value: list, seen: Seen = frozenset()) -> Canvas:
    if id(value) in seen:
        return Canvas.from_string("[...]")
    return pretty_list(from_list(value, seen | {id(value)}))


@to_canvas.register(tuple)
def _tuple(value: tuple, seen: Seen = frozenset()) -> Canvas:
    if id(value) in seen:
        return Canvas.from_string("(...)")
    return pretty_tuple(from_list(value, seen | {id(value)}))


@to_canvas.register(dict)
def _dict(value: dict, seen: Seen = frozenset()) -> Canvas:
    if id(value) in seen:
        return Canvas.from_string("{...}")
    return pretty_map(from_mapping(value, seen | {id(value)}))


@to_canvas.register(set)
@to_canvas.register(frozenset)
def _set(value: Any, seen: Seen = frozenset()) -> Canvas:
    # Sets have no order of their own.
    return pretty_list(from_list(sorted(value, key=repr), seen))


def from_list(values: Iterable[Any], seen: Seen = frozenset()) -> List[Canvas]:
    """Convert every value of an iterable."""
    return [to_canvas(value, seen) for value in values]


def from_matrix(rows: Iterable[Iterable[Any]], seen: Seen = frozenset()) -> List[List[Canvas]]:
    """Convert every value of a list of rows."""
    return [from_list(row, seen) for row in rows]


def from_mapping(mapping: Mapping[Any, Any], seen: Seen = frozenset()) -> List[Tuple[Canvas, Canvas]]:
    """Convert the keys and values of a mapping into (key, value) canvas pairs."""
    return [(to_canvas(key, seen), to_canvas(value, seen)) for key, value in mapping.items()]
