# app/observability/metrics.py
from fastapi import APIRouter
from starlette.responses import Response

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

router = APIRouter(tags=["observability"])

intake_counter = Counter(
    "workshop_intake_total",
    "Public form submissions",
    ["kind", "result"],  # kind: quote|application|contact, result: created|rejected
)

upload_counter = Counter(
    "workshop_upload_total",
    "File uploads through the guard",
    ["result"],  # stored|too_large|unsupported_type|empty|error
)

upload_size_hist = Histogram(
    "workshop_upload_size_bytes",
    "Size of accepted uploads",
    buckets=(1e4, 1e5, 5e5, 1e6, 2.5e6, 5e6, 1e7),
)

transition_counter = Counter(
    "workshop_status_transition_total",
    "Status transition requests",
    ["entity", "result"],  # result: applied|rejected|conflict
)


@router.get("/metrics", include_in_schema=True)
def metrics() -> Response:
    # Prometheus expects text/plain; version=0.0.4
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
