"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "talardnad_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "talardnad_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_errors_total = Counter(
    "talardnad_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

# ============================================================
# Payment Gateway Metrics
# ============================================================

payment_gateway_requests_total = Counter(
    "talardnad_payment_gateway_requests_total",
    "Total payment gateway requests",
    ["outcome"],
)

payment_gateway_request_duration_seconds = Histogram(
    "talardnad_payment_gateway_request_duration_seconds",
    "Payment gateway request duration in seconds",
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

# ============================================================
# Business Metrics
# ============================================================

market_create_total = Counter(
    "talardnad_market_create_total",
    "Market create attempts by outcome",
    ["outcome"],
)

users_registered_total = Counter(
    "talardnad_users_registered_total",
    "Total registered users",
)

payments_total = Counter(
    "talardnad_payments_total",
    "Total recorded payments",
    ["status"],
)
