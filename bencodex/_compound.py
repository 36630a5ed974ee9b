"""Compound kinds (LIST and DICTIONARY) plus lazily-held children.

Encodings (measured, never produced):

    LIST        l <item>* e
    DICTIONARY  d (<key> <value>)* e

Dictionary keys are BINARY or TEXT.  Canonical key order puts every BINARY
key before every TEXT key; within a kind, keys sort by their bytes (UTF-8
for TEXT).

A compound's fingerprint is computed from its children's fingerprints,
never from their encodings:

    LIST        digest = SHA-1(b"l" || fp(item_0) || fp(item_1) || ...)
    DICTIONARY  digest = SHA-1(b"d" || fp(k_0) || fp(v_0) || fp(k_1) || ...)

where fp() is Fingerprint.serialize().  Compounds are persistent: set()
and remove() return a new compound that shares every untouched child, and
each compound memoizes its own fingerprint, so re-fingerprinting after a
localized change only walks the path that changed.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List as ListType,
    Mapping,
    Optional,
    Tuple,
    Union,
)

import structlog

from ._constants import MARKER_DICTIONARY, MARKER_END, MARKER_LIST
from ._errors import ERR_FINGERPRINT, BencodexError
from ._fingerprint import Fingerprint, new_hasher
from ._integer import Integer
from ._kinds import ValueKind
from ._scalars import FALSE, NULL, TRUE, Binary, Boolean, Null, Text

log = structlog.get_logger(__name__)

_LIST_FRAMING = len(MARKER_LIST) + len(MARKER_END)
_DICTIONARY_FRAMING = len(MARKER_DICTIONARY) + len(MARKER_END)

Key = Union[Binary, Text]


# ── Lazily-held children ──────────────────────────────────────

class Indirect:
    """A child known only by its fingerprint until someone needs it.

    The loader receives the fingerprint and must return the value it
    identifies.  Kind, encoding length and fingerprint never need a load.
    """

    __slots__ = ("_fingerprint", "_loader", "_loaded")

    def __init__(self, fingerprint: Fingerprint, loader: Callable[[Fingerprint], Any]) -> None:
        self._fingerprint = fingerprint
        self._loader = loader
        self._loaded: Optional[Any] = None

    @classmethod
    def of(cls, value: Any, loader: Callable[[Fingerprint], Any]) -> "Indirect":
        return cls(to_value(value).fingerprint, loader)

    @property
    def kind(self) -> ValueKind:
        return self._fingerprint.kind

    @property
    def encoding_length(self) -> int:
        return self._fingerprint.encoding_length

    @property
    def fingerprint(self) -> Fingerprint:
        return self._fingerprint

    @property
    def loaded(self) -> bool:
        return self._loaded is not None

    def load(self) -> Any:
        """Load (once) and return the value, checking it against the fingerprint."""
        if self._loaded is None:
            value = to_value(self._loader(self._fingerprint))
            if value.fingerprint != self._fingerprint:
                raise BencodexError(
                    ERR_FINGERPRINT,
                    "loaded value does not match fingerprint {}".format(self._fingerprint),
                )
            log.debug("indirect.loaded", fingerprint=str(self._fingerprint))
            self._loaded = value
        return self._loaded

    def inspect(self, load_all: bool = False) -> str:
        if load_all:
            return self.load().inspect(True)
        if self._loaded is not None:
            return self._loaded.inspect(False)
        return "<unloaded {}>".format(self._fingerprint)

    def __repr__(self) -> str:
        return "bencodex.Indirect {}".format(self._fingerprint)


def _resolve(child: Any) -> Any:
    return child.load() if isinstance(child, Indirect) else child


def _same(a: Any, b: Any) -> bool:
    # Indirect children are compared by fingerprint so that equality never
    # forces a load.
    if isinstance(a, Indirect) or isinstance(b, Indirect):
        return a.fingerprint == b.fingerprint
    return a == b


# ── LIST ──────────────────────────────────────────────────────

class List:
    """An immutable ordered sequence of values."""

    __slots__ = ("_items", "_fingerprint", "_encoding_length")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: Tuple[Any, ...] = tuple(_child(item) for item in items)
        self._fingerprint: Optional[Fingerprint] = None
        self._encoding_length: Optional[int] = None

    @property
    def kind(self) -> ValueKind:
        return ValueKind.LIST

    @property
    def encoding_length(self) -> int:
        if self._encoding_length is None:
            self._encoding_length = _LIST_FRAMING + sum(item.encoding_length for item in self._items)
        return self._encoding_length

    @property
    def fingerprint(self) -> Fingerprint:
        if self._fingerprint is None:
            h = new_hasher()
            h.update(MARKER_LIST)
            for item in self._items:
                h.update(item.fingerprint.serialize())
            self._fingerprint = Fingerprint(ValueKind.LIST, self.encoding_length, h.digest())
        return self._fingerprint

    def inspect(self, load_all: bool = False) -> str:
        if not self._items:
            return "[]"
        return "[" + ", ".join(item.inspect(load_all) for item in self._items) + "]"

    # ── Sequence access ───────────────────────────────────────

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return _resolve(self._items[index])

    def __iter__(self) -> Iterator[Any]:
        for item in self._items:
            yield _resolve(item)

    def set(self, index: int, value: Any) -> "List":
        """Return a copy with the item at *index* replaced."""
        items = list(self._items)
        items[index] = _child(value)
        return List(items)

    def append(self, value: Any) -> "List":
        return List(self._items + (_child(value),))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        if len(self._items) != len(other._items):
            return False
        return all(_same(a, b) for a, b in zip(self._items, other._items))

    def __hash__(self) -> int:
        return hash(self.fingerprint)

    def __repr__(self) -> str:
        return "bencodex.List {}".format(self.inspect(False))


# ── DICTIONARY ────────────────────────────────────────────────

def _key_order(key: Key) -> Tuple[int, bytes]:
    if isinstance(key, Binary):
        return (0, key.value)
    return (1, key.utf8)


def _as_key(key: Any) -> Key:
    if isinstance(key, (Binary, Text)):
        return key
    if isinstance(key, (bytes, bytearray, memoryview)):
        return Binary(key)
    if isinstance(key, str):
        return Text(key)
    raise TypeError("dictionary key must be Binary or Text, not {}".format(type(key).__name__))


class Dictionary:
    """An immutable mapping from BINARY/TEXT keys to values.

    Iteration always follows canonical key order, whatever order the input
    came in.
    """

    __slots__ = ("_map", "_keys", "_fingerprint", "_encoding_length")

    def __init__(self, pairs: Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]] = ()) -> None:
        if isinstance(pairs, Dictionary):
            pairs = pairs._map.items()
        elif isinstance(pairs, Mapping):
            pairs = pairs.items()
        mapping: Dict[Key, Any] = {}
        for k, v in pairs:
            mapping[_as_key(k)] = _child(v)
        self._map = mapping
        self._keys: ListType[Key] = sorted(mapping, key=_key_order)
        self._fingerprint: Optional[Fingerprint] = None
        self._encoding_length: Optional[int] = None

    @property
    def kind(self) -> ValueKind:
        return ValueKind.DICTIONARY

    @property
    def encoding_length(self) -> int:
        if self._encoding_length is None:
            self._encoding_length = _DICTIONARY_FRAMING + sum(
                k.encoding_length + self._map[k].encoding_length for k in self._keys
            )
        return self._encoding_length

    @property
    def fingerprint(self) -> Fingerprint:
        if self._fingerprint is None:
            h = new_hasher()
            h.update(MARKER_DICTIONARY)
            for k in self._keys:
                h.update(k.fingerprint.serialize())
                h.update(self._map[k].fingerprint.serialize())
            self._fingerprint = Fingerprint(ValueKind.DICTIONARY, self.encoding_length, h.digest())
        return self._fingerprint

    def inspect(self, load_all: bool = False) -> str:
        if not self._keys:
            return "{}"
        parts = ["{}: {}".format(k.inspect(), self._map[k].inspect(load_all)) for k in self._keys]
        return "{" + ", ".join(parts) + "}"

    # ── Mapping access ────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Key]:
        return iter(self._keys)

    def __contains__(self, key: object) -> bool:
        try:
            return _as_key(key) in self._map
        except TypeError:
            return False

    def __getitem__(self, key: Any) -> Any:
        return _resolve(self._map[_as_key(key)])

    def get(self, key: Any, default: Any = None) -> Any:
        k = _as_key(key)
        if k not in self._map:
            return default
        return _resolve(self._map[k])

    def keys(self) -> ListType[Key]:
        return list(self._keys)

    def values(self) -> ListType[Any]:
        return [_resolve(self._map[k]) for k in self._keys]

    def items(self) -> ListType[Tuple[Key, Any]]:
        return [(k, _resolve(self._map[k])) for k in self._keys]

    def set(self, key: Any, value: Any) -> "Dictionary":
        """Return a copy with *key* bound to *value*."""
        mapping = dict(self._map)
        mapping[_as_key(key)] = _child(value)
        return Dictionary(mapping)

    def remove(self, key: Any) -> "Dictionary":
        """Return a copy without *key*.  Raises KeyError if it is absent."""
        k = _as_key(key)
        if k not in self._map:
            raise KeyError(key)
        mapping = dict(self._map)
        del mapping[k]
        return Dictionary(mapping)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        if self._keys != other._keys:
            return False
        return all(_same(self._map[k], other._map[k]) for k in self._keys)

    def __hash__(self) -> int:
        return hash(self.fingerprint)

    def __repr__(self) -> str:
        return "bencodex.Dictionary {}".format(self.inspect(False))


# ── Lifting native Python data ────────────────────────────────

VALUE_TYPES = (Null, Boolean, Integer, Binary, Text, List, Dictionary)


def to_value(obj: Any) -> Any:
    """Lift native Python data into Bencodex values.

    None, bool, int, bytes, str, list/tuple and dict map onto the seven
    kinds; values pass through untouched.
    """
    if isinstance(obj, VALUE_TYPES):
        return obj
    if obj is None:
        return NULL
    # bool before int, same subclass trap as in Integer().
    if isinstance(obj, bool):
        return TRUE if obj else FALSE
    if isinstance(obj, int):
        return Integer(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return Binary(obj)
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, (list, tuple)):
        return List(obj)
    if isinstance(obj, Mapping):
        return Dictionary(obj)
    raise TypeError("no Bencodex kind for {}".format(type(obj).__name__))


def _child(obj: Any) -> Any:
    # Compounds may hold Indirect children; nothing else can.
    if isinstance(obj, Indirect):
        return obj
    return to_value(obj)
