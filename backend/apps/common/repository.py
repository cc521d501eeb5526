"""Generic document repository on top of a Redis client.

Documents are stored as JSON strings under ``<prefix>:<id>``. Secondary
indexes are declared up front as ``IndexField`` data and kept in plain Redis
structures next to the documents:

* ``TAG``     -> one set per value       ``idx:<prefix>:<path>:<value>``
* ``NUMERIC`` -> one sorted set per path ``idx:<prefix>:<path>``
* ``TEXT``    -> one set per token       ``idx:<prefix>:<path>:<token>``

Paths are dotted and may traverse lists (``products.description`` indexes the
description of every embedded product).
"""
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
)

from .logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__).bind(component="common", layer="repository")

_TOKEN_RE = re.compile(r"\w+", re.UNICODE)


class IndexKind(str, Enum):
    TAG = "tag"
    NUMERIC = "numeric"
    TEXT = "text"


@dataclass(frozen=True)
class IndexField:
    path: str
    kind: IndexKind


class DocumentMapperProtocol(Protocol[T]):
    def to_document(self, obj: T) -> Dict[str, Any]:
        ...

    def from_document(self, document: Dict[str, Any]) -> T:
        ...


def tokenize(text: Any) -> List[str]:
    if text is None:
        return []
    return _TOKEN_RE.findall(str(text).lower())


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def extract_values(document: Any, path: str) -> List[Any]:
    """Collect the scalar values found at ``path``, flattening any lists on the way."""
    current: List[Any] = [document]
    for part in path.split("."):
        following: List[Any] = []
        for node in current:
            if isinstance(node, list):
                candidates = node
            else:
                candidates = [node]
            for candidate in candidates:
                if isinstance(candidate, dict) and candidate.get(part) is not None:
                    following.append(candidate[part])
        current = following
    values: List[Any] = []
    for node in current:
        if isinstance(node, list):
            values.extend(v for v in node if v is not None)
        else:
            values.append(node)
    return values


class DocumentRepository(Generic[T]):
    id_field = "id"

    def __init__(
        self,
        client,
        mapper: DocumentMapperProtocol[T],
        *,
        prefix: str,
        indexes: Sequence[IndexField] = (),
    ):
        self.client = client
        self.mapper = mapper
        self.prefix = prefix
        self.indexes = tuple(indexes)
        self.logger = logger.bind(prefix=prefix)

    # keys

    def _key(self, doc_id: str) -> str:
        return f"{self.prefix}:{doc_id}"

    @property
    def _ids_key(self) -> str:
        return f"idx:{self.prefix}:@ids"

    def _index_key(self, path: str, value: Optional[str] = None) -> str:
        base = f"idx:{self.prefix}:{path}"
        return base if value is None else f"{base}:{value}"

    def _index_field(self, path: str, kind: IndexKind) -> IndexField:
        for field in self.indexes:
            if field.path == path and field.kind == kind:
                return field
        raise ValueError(f"No {kind.value} index declared for '{path}'")

    # reads

    def _load_document(self, doc_id: str) -> Optional[Dict[str, Any]]:
        raw = self.client.get(self._key(doc_id))
        if raw is None:
            return None
        return json.loads(raw)

    def get(self, doc_id: str) -> Optional[T]:
        document = self._load_document(str(doc_id))
        if document is None:
            return None
        return self.mapper.from_document(document)

    def get_many(self, doc_ids: Iterable[Any]) -> List[T]:
        """Load documents in the given order, skipping ids with no document."""
        ids = [_as_text(doc_id) for doc_id in doc_ids]
        if not ids:
            return []
        raws = self.client.mget([self._key(doc_id) for doc_id in ids])
        return [self.mapper.from_document(json.loads(raw)) for raw in raws if raw is not None]

    def count(self) -> int:
        return int(self.client.scard(self._ids_key))

    def find_by_tag(self, path: str, value: Any) -> List[T]:
        self._index_field(path, IndexKind.TAG)
        members = self.client.smembers(self._index_key(path, str(value)))
        return self.get_many(sorted(_as_text(m) for m in members))

    def find_by_range(
        self,
        path: str,
        minimum: Optional[Any] = None,
        maximum: Optional[Any] = None,
    ) -> List[T]:
        """Documents whose numeric ``path`` lies within the inclusive bounds, ascending."""
        self._index_field(path, IndexKind.NUMERIC)
        low = "-inf" if minimum is None else float(minimum)
        high = "+inf" if maximum is None else float(maximum)
        ids = self.client.zrangebyscore(self._index_key(path), low, high)
        return self.get_many(ids)

    def search_text(self, path: str, query: str) -> List[T]:
        """Documents whose ``path`` text contains every word of ``query``."""
        self._index_field(path, IndexKind.TEXT)
        tokens = sorted(set(tokenize(query)))
        if not tokens:
            return []
        members = self.client.sinter([self._index_key(path, t) for t in tokens])
        return self.get_many(sorted(_as_text(m) for m in members))

    # writes

    def _index_ops(self, pipe, doc_id: str, document: Dict[str, Any], *, remove: bool) -> None:
        for field in self.indexes:
            values = extract_values(document, field.path)
            if field.kind == IndexKind.NUMERIC:
                key = self._index_key(field.path)
                if remove:
                    pipe.zrem(key, doc_id)
                elif values:
                    # a document sits once per numeric index; lists use their first value
                    pipe.zadd(key, {doc_id: float(values[0])})
                continue
            if field.kind == IndexKind.TAG:
                members = {str(v) for v in values}
            else:
                members = {token for v in values for token in tokenize(v)}
            for member in members:
                key = self._index_key(field.path, member)
                if remove:
                    pipe.srem(key, doc_id)
                else:
                    pipe.sadd(key, doc_id)

    def save(self, obj: T) -> T:
        document = self.mapper.to_document(obj)
        doc_id = document.get(self.id_field)
        if doc_id in (None, ""):
            raise ValueError(f"Document is missing '{self.id_field}'")
        doc_id = str(doc_id)
        key = self._key(doc_id)

        def write(pipe) -> bool:
            # WATCH is active: the read sees the document this write replaces
            raw = pipe.get(key)
            previous = json.loads(raw) if raw is not None else None
            pipe.multi()
            if previous is not None:
                self._index_ops(pipe, doc_id, previous, remove=True)
            pipe.set(key, json.dumps(document))
            pipe.sadd(self._ids_key, doc_id)
            self._index_ops(pipe, doc_id, document, remove=False)
            return previous is not None

        replaced = self.client.transaction(write, key, value_from_callable=True)
        self.logger.debug("Document saved", doc_id=doc_id, replaced=replaced)
        return obj

    def delete_all(self) -> int:
        """Remove every document and index key under this repository's prefix."""
        removed = self.count()
        keys = list(self.client.scan_iter(match=f"{self.prefix}:*"))
        keys.extend(self.client.scan_iter(match=f"idx:{self.prefix}:*"))
        if keys:
            self.client.delete(*keys)
        self.logger.info("Deleted all documents", removed=removed)
        return removed
