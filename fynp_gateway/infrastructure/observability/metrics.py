"""Prometheus metrics for calculator usage and eligibility distribution"""

from prometheus_client import Counter, Histogram

from fynp_gateway.utils.currency import CRORE, LAKH

# Calculation metrics
calculation_counter = Counter(
    "fynp_calculation_total",
    "Total loan calculations served",
    ["calculator"],  # emi | emi_compare | eligibility | tax_savings | offers_compare | loan_configuration
)

degenerate_input_counter = Counter(
    "fynp_degenerate_input_total",
    "Calculations that returned a zero result for out-of-domain input",
    ["calculator"],
)

eligibility_bucket_counter = Counter(
    "fynp_eligibility_bucket_total",
    "Maximum eligible loan amounts by bucket",
    ["bucket"],  # 0, <5L, 5L-25L, 25L-1Cr, 1Cr+
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(calculator: str, degenerate: bool) -> None:
    """Count a served calculation, flagging zero results from degenerate input"""
    calculation_counter.labels(calculator=calculator).inc()
    if degenerate:
        degenerate_input_counter.labels(calculator=calculator).inc()


def record_eligibility(max_principal: float) -> None:
    """Bucket eligible loan amounts for distribution analysis"""
    if max_principal <= 0:
        bucket = "0"
    elif max_principal < 5 * LAKH:
        bucket = "<5L"
    elif max_principal < 25 * LAKH:
        bucket = "5L-25L"
    elif max_principal < CRORE:
        bucket = "25L-1Cr"
    else:
        bucket = "1Cr+"

    eligibility_bucket_counter.labels(bucket=bucket).inc()
