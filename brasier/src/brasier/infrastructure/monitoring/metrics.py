"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "brasier_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "brasier_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# ============================================================
# Blockchain Metrics
# ============================================================

blockchain_requests_total = Counter(
    "brasier_blockchain_requests_total",
    "Total ledger RPC requests by outcome",
    ["operation", "outcome"],
)

blockchain_request_duration_seconds = Histogram(
    "brasier_blockchain_request_duration_seconds",
    "Ledger RPC request duration in seconds",
    ["operation"],
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

# ============================================================
# Business Metrics
# ============================================================

verifications_total = Counter(
    "brasier_verifications_total",
    "Burn verifications by outcome",
    ["outcome"],
)

claims_recorded_total = Counter(
    "brasier_claims_recorded_total",
    "Burn claims written to the ledger",
)

claim_conflicts_total = Counter(
    "brasier_claim_conflicts_total",
    "Claim inserts rejected by the uniqueness constraint",
)
