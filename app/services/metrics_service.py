"""
Prometheus registry and domain metrics.

HTTP metrics live in the metrics blueprint; this module holds the
registry selection and the optimizer metrics so services can record
without importing Flask blueprints.
"""
import os

from prometheus_client import Counter, Histogram, CollectorRegistry, REGISTRY, multiprocess

# Check if running in multi-process mode (Gunicorn)
MULTIPROCESS_MODE = os.environ.get('PROMETHEUS_MULTIPROC_DIR') is not None

if MULTIPROCESS_MODE:
    registry = CollectorRegistry()
    multiprocess.MultiProcessCollector(registry)
else:
    registry = REGISTRY

# Metrics register against the default registry unless running multi-process,
# where the collector aggregates worker files instead.
METRICS_REGISTRY = registry if not MULTIPROCESS_MODE else None

optimizer_runs_total = Counter(
    'optimizer_runs_total',
    'Total optimizer runs',
    registry=METRICS_REGISTRY
)

optimizer_rounds = Histogram(
    'optimizer_rounds',
    'Search rounds per optimizer run',
    registry=METRICS_REGISTRY,
    buckets=(1, 2, 3, 5, 10, 25, 50, 100)
)

optimizer_promotions_applied_total = Counter(
    'optimizer_promotions_applied_total',
    'Promotions chosen by the optimizer',
    registry=METRICS_REGISTRY
)


def record_optimizer_run(rounds: int, promotions: int) -> None:
    optimizer_runs_total.inc()
    optimizer_rounds.observe(rounds)
    optimizer_promotions_applied_total.inc(promotions)
