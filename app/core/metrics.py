from prometheus_client import Counter

GENERATION_REQUESTS = Counter(
    "generation_requests_total",
    "Generation calls sent to the text provider",
    ["kind", "outcome"],
)

ACTIVITY_LOG_FAILURES = Counter(
    "activity_log_failures_total",
    "Activity log writes that failed after content was generated",
)
