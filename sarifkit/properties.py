"""Property bags and the JSON encoding shared by every SARIF object."""

from __future__ import annotations

import json
import re
import types
from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, NamedTuple, TypeVar, Union, get_args, get_origin

_T = TypeVar("_T", bound="PropertyBag")

# How a field is left out of the JSON form:
#   "empty": left out when None or an empty list/dict
#   "zero":  left out when falsy
#   "never": always written, None as null
_OMIT_EMPTY = "empty"
_OMIT_ZERO = "zero"
_OMIT_NEVER = "never"

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_TIME_RE = re.compile(
    r"^(?P<main>\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<tz>[Zz]|[+-]\d{2}:\d{2})$"
)

_NONE_TYPE = type(None)

# Every PropertyBag subclass, by class name, so that annotations written as
# text can be resolved without evaluating them.
_REGISTRY: dict[str, type] = {}

_SIMPLE_NAMES = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "datetime": datetime,
    "Any": Any,
    "object": Any,
}
_LIST_NAMES = {"list", "List", "Sequence", "MutableSequence", "tuple", "Tuple"}
_DICT_NAMES = {"dict", "Dict", "Mapping", "MutableMapping"}

_TOKEN_RE = re.compile(r"\s*(?:([A-Za-z_][\w.]*)|(\S))")


def _sarif_field(json_name=None, *, omit=_OMIT_EMPTY, default=None, default_factory=None):
    """A dataclass field carrying its JSON name and omission rule."""
    metadata = {"json": json_name, "omit": omit}
    if default_factory is not None:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _non_negative(value, name):
    """Return ``value`` if it can stand as an unsigned index, else raise."""
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _camel_case(name):
    head, *rest = name.rstrip("_").split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _format_time(moment):
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{mins:02d}"


def _parse_time(text):
    match = _TIME_RE.match(text)
    if match is None:
        raise ValueError(f"not an RFC 3339 time: {text!r}")
    frac = (match["frac"] or "").ljust(6, "0")[:6]
    tz = match["tz"]
    if tz in ("Z", "z"):
        tz = "+00:00"
    main = match["main"].replace("t", "T")
    return datetime.fromisoformat(f"{main}.{frac}{tz}")


# Resolved hints take one of these forms:
#   Any, a class, ("list", item_hint) or ("dict", value_hint).


def _make_union(options):
    present = [option for option in options if option is not _NONE_TYPE]
    return present[0] if len(present) == 1 else Any


def _build_hint(name, args):
    base = name.rsplit(".", 1)[-1]
    if base in ("None", "NoneType"):
        return _NONE_TYPE
    if base == "Optional":
        return _make_union(args)
    if base == "Union":
        return _make_union(args)
    if base in _LIST_NAMES:
        return ("list", args[0] if args else Any)
    if base in _DICT_NAMES:
        return ("dict", args[1] if len(args) == 2 else Any)
    if base in _SIMPLE_NAMES:
        return _SIMPLE_NAMES[base]
    return _REGISTRY.get(base, Any)


class _AnnotationParser:
    """Reads an annotation written as text into a resolved hint."""

    def __init__(self, text):
        cleaned = text.replace("'", "").replace('"', "")
        self._tokens = [name or symbol for name, symbol in _TOKEN_RE.findall(cleaned)]
        self._pos = 0

    def _peek(self):
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self):
        token = self._peek()
        if token is None:
            raise ValueError("unexpected end of annotation")
        self._pos += 1
        return token

    def parse(self):
        hint = self._union()
        if self._peek() is not None:
            raise ValueError("trailing text in annotation")
        return hint

    def _union(self):
        parts = [self._primary()]
        while self._peek() == "|":
            self._next()
            parts.append(self._primary())
        return parts[0] if len(parts) == 1 else _make_union(parts)

    def _primary(self):
        name = self._next()
        if not (name[0].isalpha() or name[0] == "_"):
            raise ValueError(f"unexpected {name!r} in annotation")
        args = []
        if self._peek() == "[":
            self._next()
            args.append(self._union())
            while self._peek() == ",":
                self._next()
                args.append(self._union())
            if self._next() != "]":
                raise ValueError("unclosed bracket in annotation")
        return _build_hint(name, args)


def _resolve_hint(hint):
    if hint is Any:
        return Any
    if isinstance(hint, str):
        try:
            resolved = _AnnotationParser(hint).parse()
        except ValueError:
            return Any
        return Any if resolved is _NONE_TYPE else resolved
    if hint is None or hint is _NONE_TYPE:
        return Any
    origin = get_origin(hint)
    if origin in (Union, types.UnionType):
        return _make_union([_resolve_hint(arg) if arg is not _NONE_TYPE else _NONE_TYPE
                            for arg in get_args(hint)])
    if origin in (list, tuple):
        args = get_args(hint)
        return ("list", _resolve_hint(args[0]) if args else Any)
    if origin is dict:
        args = get_args(hint)
        return ("dict", _resolve_hint(args[1]) if len(args) == 2 else Any)
    if hint in (list, tuple):
        return ("list", Any)
    if hint is dict:
        return ("dict", Any)
    if isinstance(hint, type):
        return hint
    return Any


class _FieldSpec(NamedTuple):
    attr: str
    json_name: str
    omit: str
    hint: Any


@lru_cache(maxsize=None)
def _field_specs(cls):
    specs = []
    for item in fields(cls):
        json_name = item.metadata.get("json") or _camel_case(item.name)
        omit = item.metadata.get("omit", _OMIT_EMPTY)
        specs.append(_FieldSpec(item.name, json_name, omit, _resolve_hint(item.type)))
    return tuple(specs)


def _omitted(value, omit):
    if omit == _OMIT_NEVER:
        return False
    if omit == _OMIT_ZERO:
        return not value
    if value is None:
        return True
    return isinstance(value, (list, tuple, dict)) and not value


def _encode(value):
    if isinstance(value, PropertyBag):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _encode(item) for key, item in value.items()}
    if isinstance(value, datetime):
        return _format_time(value)
    return value


def _decode(hint, value, path):
    if value is None or hint is Any:
        return value
    if isinstance(hint, tuple):
        kind, item_hint = hint
        if kind == "list":
            if not isinstance(value, list):
                raise ValueError(f"{path}: expected an array")
            return [_decode(item_hint, item, f"{path}[{n}]") for n, item in enumerate(value)]
        if not isinstance(value, dict):
            raise ValueError(f"{path}: expected an object")
        return {key: _decode(item_hint, item, f"{path}.{key}") for key, item in value.items()}
    if isinstance(hint, type):
        if issubclass(hint, PropertyBag):
            return hint.from_dict(value)
        if hint is datetime:
            if not isinstance(value, str):
                raise ValueError(f"{path}: expected a time string")
            return _parse_time(value)
        if hint is bool:
            if not isinstance(value, bool):
                raise ValueError(f"{path}: expected a boolean")
            return value
        if hint is int:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{path}: expected an integer")
            return value
        if hint is float:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{path}: expected a number")
            return float(value)
        if hint is str:
            if not isinstance(value, str):
                raise ValueError(f"{path}: expected a string")
            return value
    return value


@dataclass
class PropertyBag:
    """A free-form set of properties; also the base of every SARIF object."""

    properties: dict[str, Any] | None = field(default_factory=dict, kw_only=True)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _REGISTRY[cls.__name__] = cls

    def add(self, key, value):
        """Store ``value`` under ``key``."""
        if self.properties is None:
            self.properties = {}
        self.properties[key] = value

    def add_string(self, key, value):
        if not isinstance(value, str):
            raise TypeError(f"property {key!r} must be a string")
        self.add(key, value)

    def add_boolean(self, key, value):
        if not isinstance(value, bool):
            raise TypeError(f"property {key!r} must be a boolean")
        self.add(key, value)

    def add_integer(self, key, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"property {key!r} must be an integer")
        self.add(key, value)

    def to_dict(self):
        """The JSON-ready dictionary form, with empty optional fields left out."""
        out = {}
        for spec in _field_specs(type(self)):
            value = getattr(self, spec.attr)
            if _omitted(value, spec.omit):
                continue
            out[spec.json_name] = _encode(value)
        return out

    def to_json(self, indent=None):
        """Serialise to JSON text; compact unless ``indent`` is given."""
        if indent is None:
            text = json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
        else:
            text = json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)
        return text.translate(_JSON_ESCAPES)

    @classmethod
    def from_dict(cls: type[_T], data) -> _T:
        """Build an instance from its dictionary form; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ValueError(f"{cls.__name__}: expected an object")
        kwargs = {}
        for spec in _field_specs(cls):
            if spec.json_name in data:
                kwargs[spec.attr] = _decode(
                    spec.hint, data[spec.json_name], f"{cls.__name__}.{spec.json_name}"
                )
        return cls(**kwargs)


_REGISTRY[PropertyBag.__name__] = PropertyBag