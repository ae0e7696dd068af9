"""Query string of a request (``/search?q=rust&page=2``).

Parsed once into ordered ``(name, value)`` pairs; repeated names keep
every value in the order the client sent them.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qsl


class QueryParams(Mapping[str, str]):
    """Read-only view of the query string.

    Indexing returns the first value sent for a name. Blank values
    (``?q=``) are kept, so ``"q" in params`` still holds for them.
    """

    __slots__ = ("_pairs", "_raw")

    def __init__(self, query_string: bytes = b"") -> None:
        self._raw = query_string
        self._pairs: tuple[tuple[str, str], ...] = tuple(
            parse_qsl(query_string.decode("latin-1"), keep_blank_values=True)
        )

    def __getitem__(self, key: str) -> str:
        for name, value in self._pairs:
            if name == key:
                return value
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self._pairs))

    def __len__(self) -> int:
        return len({name for name, _ in self._pairs})

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """First value of *key* as an int; *default* when absent or not an integer."""
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    @property
    def raw(self) -> bytes:
        return self._raw
