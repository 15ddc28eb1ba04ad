"""Lazy cursor over a cursor-paginated OneLogin list endpoint."""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Generic, Iterator, List, Mapping, Optional, TypeVar

from .constants import MAX_PAGE_SIZE
from .exceptions import ApiError, ResponseShapeError
from .responses import get_after_cursor, parse_json, require_data

if TYPE_CHECKING:
    from .client import ApiClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Cursor(Generic[T]):
    """Forward-only, lazily fetched sequence of records.

    The first page is requested on first consumption; page N+1 is requested
    only once page N has been drained and the server returned an
    ``after_cursor``. Records keep server order. A cursor cannot be rewound:
    build a new one to start over.

    Failed page fetches stop the cursor and are recorded in the owning
    client's error status instead of being raised.

    Usage:
        cursor = Cursor(client, url, User.from_dict, params={"email": "a@b.c"})
        for user in cursor:
            print(user.id)
    """

    def __init__(
        self,
        client: "ApiClient",
        url: str,
        model: Callable[[Dict[str, Any]], T],
        params: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = None,
    ):
        """Initialize the cursor.

        Args:
            client: Client used for authenticated requests and error capture
            url: List endpoint URL
            model: Builds a record from one element of ``data``
            params: Base query parameters, copied and never mutated
            limit: Maximum number of records to yield across all pages. When
                omitted, a ``limit`` query parameter is used as the cap.
        """
        base_params = dict(params or {})
        if limit is None and base_params.get("limit") is not None:
            limit = int(base_params["limit"])
        if limit is not None and limit > MAX_PAGE_SIZE:
            # The server caps pages itself; enforce the total client-side.
            base_params.pop("limit", None)

        self._client = client
        self.url = url
        self._model = model
        self._params: Dict[str, Any] = base_params
        self.limit = limit

        self._buffer: List[T] = []
        self._index = 0
        self._after_cursor: Optional[str] = None
        self._yielded = 0
        self.exhausted = False
        self.pages_fetched = 0

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self._params)

    @property
    def after_cursor(self) -> Optional[str]:
        return self._after_cursor

    def _cap_reached(self) -> bool:
        return self.limit is not None and self._yielded >= self.limit

    def _stop(self) -> None:
        self.exhausted = True
        self._buffer = []
        self._index = 0

    def _fetch_page(self) -> bool:
        params = dict(self._params)
        if self._after_cursor:
            params["after_cursor"] = self._after_cursor

        try:
            resp = self._client.request("GET", self.url, params=params)
            content = parse_json(resp)
            data = require_data(content, self.url)
            records = [self._model(item) for item in data]
        except ResponseShapeError as e:
            self._stop()
            self._client.record_error(e)
            raise
        except ApiError as e:
            self._stop()
            self._client.record_error(e)
            logger.warning(f"Pagination stopped after {self.pages_fetched} page(s): {e}")
            return False

        self.pages_fetched += 1
        self._buffer = records
        self._index = 0
        self._after_cursor = get_after_cursor(content)
        if self._after_cursor is None:
            self.exhausted = True
        logger.debug(
            f"Fetched page {self.pages_fetched} of {self.url}: {len(records)} record(s), "
            f"more={'yes' if self._after_cursor else 'no'}"
        )
        return True

    def has_more(self) -> bool:
        """Return True if another record is available, fetching pages as needed."""
        if self._cap_reached():
            return False
        while self._index >= len(self._buffer):
            if self.exhausted:
                return False
            if not self._fetch_page():
                return False
        return True

    def advance(self) -> T:
        """Return the next record.

        Raises:
            StopIteration: When the sequence is finished
        """
        if not self.has_more():
            raise StopIteration
        record = self._buffer[self._index]
        self._index += 1
        self._yielded += 1
        if self._cap_reached():
            # Drop the rest of the page; no further pages are requested.
            self._stop()
        return record

    def take_all(self) -> List[T]:
        return list(self)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self.advance()
