"""Client-side view state: a fetched snapshot plus search, filter and paging.

One ``ViewState`` backs each dashboard list. It owns the raw items returned by
the repository and recomputes everything else (filtered rows, the current
page, chart buckets) from its state whenever a snapshot is taken. Fetches are
coroutines; when two overlap, only the most recently issued one may write.
"""

import logging
import math
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from tutor_desk.app.core.errors import StorageError, ValidationError
from tutor_desk.app.core.settings import get_settings
from tutor_desk.app.schemas.common import ReadResult
from tutor_desk.app.services.aggregation import count_by_day

logger = logging.getLogger(__name__)

T = TypeVar("T")

ALL_FILTER = "All"

Fetcher = Callable[[], Awaitable[ReadResult]]
Deleter = Callable[[str], Awaitable[bool]]


@dataclass(frozen=True)
class ViewSnapshot(Generic[T]):
    items: tuple[T, ...]
    filtered_items: tuple[T, ...]
    paged_items: tuple[T, ...]
    current_page: int
    total_pages: int
    loading: bool
    load_error: Optional[str]
    chart_data: tuple[dict, ...]
    active_filter: str
    search_text: str
    pending_delete_id: Optional[str]
    create_form_open: bool


@dataclass
class ChartSpec(Generic[T]):
    timestamp: Callable[[T], datetime]
    label: Callable[[datetime], str]
    chronological: bool = False


class ViewState(Generic[T]):
    def __init__(
        self,
        fetch: Fetcher,
        *,
        delete: Optional[Deleter] = None,
        search_field: Optional[Callable[[T], Optional[str]]] = None,
        filters: Optional[Mapping[str, Callable[[T], bool]]] = None,
        chart: Optional[ChartSpec[T]] = None,
        page_size: Optional[int] = None,
    ):
        self._fetch = fetch
        self._delete = delete
        self._search_field = search_field
        self._filters = dict(filters or {})
        self._chart = chart
        self.page_size = page_size or get_settings().page_size

        self.items: list[T] = []
        self.loading = False
        self.load_error: Optional[str] = None
        self.active_filter = ALL_FILTER
        self.search_text = ""
        self.pending_delete_id: Optional[str] = None
        self.create_form_open = False
        self._current_page = 1
        self._latest_token = 0

    @property
    def filter_names(self) -> list[str]:
        return [ALL_FILTER, *self._filters]

    # -- derived state --

    def filtered_items(self) -> list[T]:
        rows = self.items
        predicate = self._filters.get(self.active_filter)
        if predicate is not None:
            rows = [item for item in rows if predicate(item)]
        if self._search_field is not None and self.search_text:
            needle = self.search_text.lower()
            rows = [item for item in rows if needle in (self._search_field(item) or "").lower()]
        return list(rows)

    def total_pages(self) -> int:
        return math.ceil(len(self.filtered_items()) / self.page_size)

    @property
    def current_page(self) -> int:
        # Clamped on read so a refetch that shrinks the list never strands the page
        return max(1, min(self._current_page, self.total_pages()))

    def paged_items(self) -> list[T]:
        start = (self.current_page - 1) * self.page_size
        return self.filtered_items()[start : start + self.page_size]

    def chart_data(self) -> list[dict]:
        if self._chart is None:
            return []
        return count_by_day(
            self.filtered_items(),
            self._chart.timestamp,
            self._chart.label,
            chronological=self._chart.chronological,
        )

    def snapshot(self) -> ViewSnapshot[T]:
        return ViewSnapshot(
            items=tuple(self.items),
            filtered_items=tuple(self.filtered_items()),
            paged_items=tuple(self.paged_items()),
            current_page=self.current_page,
            total_pages=self.total_pages(),
            loading=self.loading,
            load_error=self.load_error,
            chart_data=tuple(self.chart_data()),
            active_filter=self.active_filter,
            search_text=self.search_text,
            pending_delete_id=self.pending_delete_id,
            create_form_open=self.create_form_open,
        )

    # -- intents --

    async def refetch(self) -> bool:
        """Replace the items wholesale. Returns False when a newer fetch superseded this one."""
        self._latest_token += 1
        token = self._latest_token
        self.loading = True
        try:
            result = await self._fetch()
        finally:
            if token == self._latest_token:
                self.loading = False
        if token != self._latest_token:
            logger.debug("Discarding stale fetch %s (latest is %s)", token, self._latest_token)
            return False
        self.items = list(result.items)
        self.load_error = result.error
        return True

    def set_filter(self, name: str) -> None:
        if name != ALL_FILTER and name not in self._filters:
            raise ValueError(f"Unknown filter {name!r}; expected one of {self.filter_names}")
        self.active_filter = name
        self._current_page = 1

    def set_search_text(self, text: str) -> None:
        self.search_text = text
        self._current_page = 1

    def set_page(self, page: int) -> None:
        self._current_page = max(1, min(page, max(self.total_pages(), 1)))

    def request_delete(self, id: str) -> None:
        self.pending_delete_id = id

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    async def confirm_delete(self) -> None:
        if self.pending_delete_id is None:
            return
        if self._delete is None:
            raise RuntimeError("This view has no delete operation")
        try:
            await self._delete(self.pending_delete_id)
        except StorageError as exc:
            logger.error("Delete of %s failed: %s", self.pending_delete_id, exc)
        await self.refetch()
        self.pending_delete_id = None

    def open_create_form(self) -> None:
        self.create_form_open = True

    def close_create_form(self) -> None:
        self.create_form_open = False


@dataclass
class CreateForm:
    """Create overlay attached to a view: required-field check, busy flag, inline error."""

    view: ViewState
    create: Callable[[dict], Awaitable[Any]]
    required: Mapping[str, str] = field(default_factory=dict)
    validate: Optional[Callable[[dict], None]] = None
    busy: bool = False
    error: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.view.create_form_open

    def open(self) -> None:
        self.error = None
        self.view.open_create_form()

    def cancel(self) -> None:
        self.error = None
        self.view.close_create_form()

    def _check(self, values: dict) -> None:
        for key, label in self.required.items():
            value = values.get(key)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(f"{label} is required")
        if self.validate is not None:
            self.validate(values)

    async def submit(self, values: dict) -> Any:
        """Create the entity; on success close the overlay and refetch the view."""
        self.busy = True
        self.error = None
        try:
            self._check(values)
            created = await self.create(values)
        except (ValidationError, StorageError) as exc:
            self.error = exc.message
            return None
        finally:
            self.busy = False
        self.view.close_create_form()
        await self.view.refetch()
        return created

