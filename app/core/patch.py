"""
Partial update helper: copy the present fields of a patch onto a target.

A field is present when its value is not None. Zero values (0, "", False)
are present and overwrite the target.
"""
import dataclasses
from typing import Any, Iterable, Mapping, Optional, TypeVar

T = TypeVar("T")


def declared_fields(obj: Any) -> tuple:
    """Field names declared by a pydantic model, dataclass or mapping."""
    if isinstance(obj, Mapping):
        return tuple(obj.keys())
    model_fields = getattr(type(obj), "model_fields", None)
    if model_fields is not None:
        return tuple(model_fields)
    if dataclasses.is_dataclass(obj):
        return tuple(f.name for f in dataclasses.fields(obj))
    raise TypeError(f"Cannot determine fields of {type(obj).__name__}; pass them explicitly")


def _read(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _is_writable(target: Any, name: str) -> bool:
    if not hasattr(target, name):
        return False
    attr = getattr(type(target), name, None)
    if isinstance(attr, property):
        return attr.fset is not None
    return True


def copy_non_null_fields(source: Any, target: T, fields: Optional[Iterable[str]] = None) -> T:
    """
    Overlay every non-None field of ``source`` onto ``target``.

    Args:
        source: The patch (model instance, dataclass or mapping). Never modified.
        target: The object receiving the values. Modified in place.
        fields: Field names to consider. Defaults to the fields declared on
            ``source``.

    Fields missing from ``target`` or read-only on it are skipped.

    Returns:
        The same ``target`` instance.
    """
    names = declared_fields(source) if fields is None else fields
    for name in names:
        value = _read(source, name)
        if value is None or not _is_writable(target, name):
            continue
        setattr(target, name, value)
    return target
