"""
Event data provider: fetch, validate, parse, cache, with retry and fallback.
"""

from typing import Optional, TYPE_CHECKING

from shared.logging import get_logger
from shared.errors import ExternalServiceError
from shared.retry import RetryConfig, RetryError, run_with_retry
from ..adapters.event_source_client import EventSourceClient
from ..caching.snapshot_cache import SnapshotCache
from ..domain.models import DataOutcome, ProviderResult, Snapshot
from ..domain.parser import SnapshotParser
from ..errors import EventDataError, FaultKind
from ..validation.schema_validator import SchemaValidator

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


def default_retry_config() -> RetryConfig:
    """Three retries after the first try, waiting 2s, 4s and 8s."""
    return RetryConfig(
        max_attempts=4,
        base_delay=2.0,
        exponential_base=2.0,
        jitter=False
    )


class EventDataProvider:
    """Produces the (events, venues) snapshot for every API call.

    One ``load()`` runs the whole cycle (both fetches, validation, parsing)
    inside a single retry loop. Every fault is raised as an
    :class:`EventDataError` tagged with its :class:`FaultKind`. When the loop
    gives up, the last cached snapshot is returned, or an empty one when the
    cache is cold. ``load()`` never raises on pipeline failure.

    Validation faults are tagged non-retryable but are still retried unless
    ``retry_validation_failures`` is False, in which case they fall back to
    the cache straight away.
    """

    def __init__(
        self,
        source_client: EventSourceClient,
        cache: SnapshotCache,
        *,
        validator: Optional[SchemaValidator] = None,
        parser: Optional[SnapshotParser] = None,
        retry_config: Optional[RetryConfig] = None,
        retry_validation_failures: bool = True,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.source_client = source_client
        self.cache = cache
        self.validator = validator or SchemaValidator()
        self.parser = parser or SnapshotParser()
        self.retry_config = retry_config or default_retry_config()
        self.retry_validation_failures = retry_validation_failures
        self.metrics = metrics
        self.logger = get_logger("events.data_provider")

    async def get_data(self) -> Snapshot:
        """Snapshot for one API call: fresh, cached or empty."""
        result = await self.load()
        return result.snapshot

    async def load(self) -> ProviderResult:
        """Run one data cycle and report how the snapshot was obtained."""
        if not self.metrics:
            return await self._load()

        with self.metrics.time_operation("event_data_cycle_duration_seconds"):
            result = await self._load()
        self.metrics.increment_counter("event_data_cycles_total", outcome=result.outcome.value)
        return result

    async def _load(self) -> ProviderResult:
        attempts = 0

        async def cycle() -> Snapshot:
            nonlocal attempts
            attempts += 1
            return await self._run_cycle()

        try:
            snapshot = await run_with_retry(
                cycle,
                name="event_data",
                config=self.retry_config,
                should_retry=self._should_retry,
                on_retry=self._on_retry
            )
        except RetryError as exc:
            return self._fallback(exc, attempts)

        self.cache.store(snapshot)
        self.logger.info(
            "Event data refreshed",
            events=len(snapshot.events),
            venues=len(snapshot.venues),
            attempts=attempts
        )
        return ProviderResult(snapshot=snapshot, outcome=DataOutcome.FRESH, attempts=attempts)

    async def _run_cycle(self) -> Snapshot:
        """Fetch both documents, validate, parse. Raises EventDataError."""
        try:
            event_data = await self.source_client.fetch_event_data()
            schema_data = await self.source_client.fetch_schema()
        except ExternalServiceError as exc:
            raise EventDataError(FaultKind.FETCH, exc.message, details=exc.details) from exc

        if event_data is None or schema_data is None:
            missing = [
                name for name, doc in (("event data", event_data), ("schema data", schema_data))
                if doc is None
            ]
            raise EventDataError(
                FaultKind.FETCH,
                f"Failed to fetch {' and '.join(missing)}",
                details={"missing": missing}
            )

        verdict = self.validator.validate(event_data, schema_data)
        if not verdict.valid:
            raise EventDataError(
                FaultKind.VALIDATION,
                "Event data failed schema validation",
                details={"errors": verdict.errors}
            )

        return self.parser.parse(event_data)

    def _should_retry(self, exc: Exception) -> bool:
        if self.retry_validation_failures:
            return True
        return getattr(exc, "retryable", True)

    def _on_retry(self, attempt: int, delay: float, exc: Exception) -> None:
        if self.metrics:
            kind = exc.kind.value if isinstance(exc, EventDataError) else "unexpected"
            self.metrics.increment_counter("event_data_retries_total", fault_kind=kind)

    def _fallback(self, exc: RetryError, attempts: int) -> ProviderResult:
        last = exc.last_exception
        self.logger.error(
            "Event data unavailable, falling back to cache",
            attempts=attempts,
            fault_kind=last.kind.value if isinstance(last, EventDataError) else "unexpected",
            error=str(last)
        )

        cached = self.cache.load()
        if cached is not None:
            return ProviderResult(snapshot=cached, outcome=DataOutcome.CACHED, attempts=attempts)

        self.logger.warning("No cached event data, returning empty collections")
        return ProviderResult(snapshot=Snapshot.empty(), outcome=DataOutcome.EMPTY, attempts=attempts)
