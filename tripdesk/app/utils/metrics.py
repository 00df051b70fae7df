"""Prometheus metrics for itinerary editing, persistence and catalog lookups."""

from prometheus_client import Counter, Histogram

itinerary_mutations_total = Counter(
    "itinerary_mutations_total",
    "Total itinerary mutations",
    ["operation", "outcome"],
)

itinerary_saves_total = Counter(
    "itinerary_saves_total",
    "Total itinerary save attempts",
    ["backend", "outcome"],
)

catalog_lookup_latency_ms = Histogram(
    "catalog_lookup_latency_ms",
    "Catalog lookup latency in milliseconds",
    ["kind"],
    buckets=[1, 5, 10, 50, 100, 200, 500, 1000, 2000],
)


class PrometheusItineraryMetrics:
    """Prometheus-based itinerary metrics implementation."""

    def inc_mutation(self, operation: str, outcome: str) -> None:
        """Increment mutation counter."""
        itinerary_mutations_total.labels(operation=operation, outcome=outcome).inc()

    def inc_save(self, backend: str, outcome: str) -> None:
        """Increment save counter."""
        itinerary_saves_total.labels(backend=backend, outcome=outcome).inc()

    def record_lookup_latency(self, kind: str, latency_ms: float) -> None:
        """Record catalog lookup latency."""
        catalog_lookup_latency_ms.labels(kind=kind).observe(latency_ms)
