from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

# ======================================
# Atoms
# ======================================

# Variant precedence for the total order. Only consistency matters.
SYMBOL_RANK = 0
STRING_RANK = 1
TABLE_RANK = 2
SUBSTITUTION_RANK = 3

class Atom:
    """Base of the four atom variants.

    Every atom carries a precomputed ordering key and hash, built from the
    cached keys of its children at construction time. Comparison and hashing
    are therefore structural without re-walking the tree.
    """
    rank = -1

    def __eq__(self, other: Any):
        if not isinstance(other, Atom): return NotImplemented
        if self is other: return True
        return self._hash == other._hash and self._key == other._key  # type: ignore[attr-defined]

    def __ne__(self, other: Any):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __lt__(self, other: Any):
        if not isinstance(other, Atom): return NotImplemented
        return self._key < other._key  # type: ignore[attr-defined]

    def __le__(self, other: Any):
        if not isinstance(other, Atom): return NotImplemented
        return self._key <= other._key  # type: ignore[attr-defined]

    def __gt__(self, other: Any):
        if not isinstance(other, Atom): return NotImplemented
        return self._key > other._key  # type: ignore[attr-defined]

    def __ge__(self, other: Any):
        if not isinstance(other, Atom): return NotImplemented
        return self._key >= other._key  # type: ignore[attr-defined]

    def __hash__(self): return self._hash  # type: ignore[attr-defined]

@dataclass(frozen=True, eq=False)
class _TextAtom(Atom):
    text: str
    _key: Tuple = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"{self.__class__.__name__} payload must be str, got {type(self.text).__name__}")
        key = (self.rank, self.text)
        object.__setattr__(self, "_key", key)
        object.__setattr__(self, "_hash", hash(key))

    def __str__(self): return self.text

@dataclass(frozen=True, eq=False)
class Symbol(_TextAtom):
    rank = SYMBOL_RANK
    def __repr__(self): return f"Symbol({self.text!r})"

@dataclass(frozen=True, eq=False)
class String(_TextAtom):
    rank = STRING_RANK
    def __repr__(self): return f"String({self.text!r})"

@dataclass(frozen=True, eq=False)
class Substitution(_TextAtom):
    rank = SUBSTITUTION_RANK
    def __str__(self): return f"${self.text}"
    def __repr__(self): return f"Substitution({self.text!r})"

Pair = Tuple[Atom, Atom]

@dataclass(frozen=True, eq=False)
class Table(Atom):
    """Ordered, unique-keyed mapping from Atom to Atom.

    ``pairs`` is kept sorted by key; build tables through ``make_table`` so
    that duplicate keys are collapsed (last write wins) and the order holds.
    """
    pairs: Tuple[Pair, ...] = ()
    _key: Tuple = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)
    _index: Dict[Atom, Atom] = field(init=False, repr=False)
    rank = TABLE_RANK

    def __post_init__(self):
        key = (self.rank, tuple((k._key, v._key) for k, v in self.pairs))  # type: ignore[attr-defined]
        object.__setattr__(self, "_key", key)
        object.__setattr__(self, "_hash", hash((self.rank, tuple((k._hash, v._hash) for k, v in self.pairs))))  # type: ignore[attr-defined]
        object.__setattr__(self, "_index", dict(self.pairs))

    def __repr__(self): return f"{self.__class__.__name__}({list(self.pairs)!r})"

    def __len__(self): return len(self.pairs)
    def __iter__(self) -> Iterator[Pair]: return iter(self.pairs)
    def __contains__(self, key: Any) -> bool: return key in self._index

    def get(self, key: Atom, default: Optional[Atom] = None) -> Optional[Atom]:
        return self._index.get(key, default)

    def keys(self) -> List[Atom]: return [k for k, _ in self.pairs]
    def values(self) -> List[Atom]: return [v for _, v in self.pairs]

    def with_entry(self, key: Atom, value: Atom) -> 'Table':
        return make_table(self.pairs + ((key, value),))

    def without(self, key: Atom) -> 'Table':
        return Table(tuple(p for p in self.pairs if p[0] != key))

    def pattern(self) -> Optional[Pair]:
        """The Substitution-keyed entry, if any.

        Substitutions rank last, so when present it sits at the end.
        """
        if self.pairs and isinstance(self.pairs[-1][0], Substitution):
            return self.pairs[-1]
        return None

    def substitution_keys(self) -> List[Substitution]:
        return [k for k, _ in self.pairs if isinstance(k, Substitution)]

# ======================================
# Constructors
# ======================================

def make_symbol(text: str) -> Symbol: return Symbol(text)
def make_string(text: str) -> String: return String(text)
def make_substitution(text: str) -> Substitution: return Substitution(text)

def collect_pairs(pairs: Union[Mapping[Atom, Atom], Iterable[Pair]]) -> Tuple[Pair, ...]:
    items = pairs.items() if isinstance(pairs, dict) else pairs
    merged: Dict[Atom, Atom] = {}
    for key, value in items:
        if not isinstance(key, Atom) or not isinstance(value, Atom):
            raise TypeError(f"Table entries must be atoms, got {key!r} = {value!r}")
        merged.pop(key, None)
        merged[key] = value
    return tuple(sorted(merged.items(), key=lambda kv: kv[0]._key))  # type: ignore[attr-defined]

def make_table(pairs: Union[Mapping[Atom, Atom], Iterable[Pair]] = ()) -> Table:
    return Table(collect_pairs(pairs))
