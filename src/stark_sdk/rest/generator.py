"""Iterador preguiçoso sobre listagens paginadas por cursor."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ResourceStream(Generic[T]):
    """Sequência pull-based de entidades de um endpoint de listagem.

    Nenhuma requisição é feita na construção; cada página é buscada somente
    quando `next()` precisa de mais itens. Com `limit`, a sequência para
    exatamente após `limit` itens e cada página pede `min(restante,
    page_size)`.

    O estado (cursor e restante) só avança depois que a página foi obtida e
    desserializada. Se a busca falhar, o erro propaga e um novo `next()`
    tenta a mesma página de novo; itens já entregues continuam válidos.

    Não é thread-safe: não iterar a mesma instância de várias threads.
    """

    def __init__(
        self,
        fetch_page: Callable[[str | None, int], tuple[list[T], str | None]],
        *,
        limit: int | None = None,
        page_size: int = 100,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size deve ser >= 1")
        self._fetch_page = fetch_page
        self._remaining = limit
        self._page_size = page_size
        self._cursor: str | None = None
        self._buffer: deque[T] = deque()
        self._last_page = False
        self.pages_fetched = 0

    @property
    def cursor(self) -> str | None:
        """Cursor da próxima página (None antes da primeira ou no fim)."""
        return self._cursor

    def __iter__(self) -> ResourceStream[T]:
        return self

    def __next__(self) -> T:
        if self._remaining is not None and self._remaining <= 0:
            raise StopIteration
        while not self._buffer:
            if self._last_page:
                raise StopIteration
            self._load_next_page()
        if self._remaining is not None:
            self._remaining -= 1
        return self._buffer.popleft()

    def _load_next_page(self) -> None:
        size = self._page_size
        if self._remaining is not None:
            size = min(self._remaining, self._page_size)

        entities, cursor = self._fetch_page(self._cursor, size)

        self._buffer.extend(entities)
        self._cursor = cursor or None
        self._last_page = not cursor
        self.pages_fetched += 1
        logger.debug(
            "stark_page_loaded",
            extra={
                "page": self.pages_fetched,
                "count": len(entities),
                "requested": size,
                "has_cursor": cursor is not None and cursor != "",
            },
        )
