"""
Prometheus endpoint and HTTP instrumentation.

Optimizer metrics are defined in metrics_service; this module adds
per-endpoint request counts and latencies and serves /metrics.
"""
import time

from flask import Blueprint, Response, request, g
from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST

from app.services.metrics_service import METRICS_REGISTRY, registry

metrics_bp = Blueprint('metrics', __name__)

terminal_http_requests_total = Counter(
    'terminal_http_requests_total',
    'HTTP requests served by the store terminal',
    ['method', 'endpoint', 'http_status'],
    registry=METRICS_REGISTRY
)

terminal_http_request_seconds = Histogram(
    'terminal_http_request_seconds',
    'HTTP request latency in seconds',
    ['method', 'endpoint'],
    registry=METRICS_REGISTRY,
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5)
)

terminal_http_requests_in_flight = Gauge(
    'terminal_http_requests_in_flight',
    'HTTP requests currently being processed',
    registry=METRICS_REGISTRY
)


def setup_metrics_instrumentation(app):
    """Register request hooks that feed the HTTP metrics."""

    @app.before_request
    def start_request_timer():
        g._metrics_started = time.perf_counter()
        terminal_http_requests_in_flight.inc()

    @app.after_request
    def record_request_metrics(response):
        started = g.pop('_metrics_started', None)
        if started is None:
            return response

        endpoint = request.endpoint or 'unknown'
        terminal_http_request_seconds.labels(
            method=request.method, endpoint=endpoint
        ).observe(time.perf_counter() - started)
        terminal_http_requests_total.labels(
            method=request.method, endpoint=endpoint, http_status=response.status_code
        ).inc()
        terminal_http_requests_in_flight.dec()
        return response


@metrics_bp.route('/metrics')
def metrics():
    """Prometheus exposition. Not authenticated; keep it on an internal network."""
    return Response(generate_latest(registry), mimetype=CONTENT_TYPE_LATEST)
