import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from opentelemetry import trace

from dhmz_relay.relay.fetcher import UpstreamFetcher, UpstreamUnavailable, get_fetcher
from dhmz_relay.utils.exception_logging import log_exception_with_details
from dhmz_relay.utils.traced_requests import traced_request
from dhmz_relay.vars import RELAY_PATH, UPSTREAM_URL

router = APIRouter()
tracer = trace.get_tracer(__name__)
logger = logging.getLogger("uvicorn.error")

# Passed as raw headers so Starlette does not append a charset to text/xml
RELAY_HEADERS = {
    "Content-Type": "text/xml",
    "Access-Control-Allow-Origin": "*",
}


async def relay_upstream(fetcher: UpstreamFetcher, url: str = UPSTREAM_URL) -> Response:
    """
    Fetch ``url`` once and map the outcome onto the relay response.

    Any upstream response, whatever its status code, is relayed as 200 with the
    upstream bytes. Only a failure to obtain a response at all yields 502.
    """
    with traced_request(
        tracer, "relay_request", url, f"[Relay] Fetching {url}"
    ) as span:
        try:
            body = await fetcher.fetch(url)
        except UpstreamUnavailable as e:
            log_exception_with_details(logger, "[Relay]", e, level=logging.WARNING)
            span.set_attribute("relay.error", e.reason)
            return Response(status_code=502)

        span.set_attribute("relay.body_bytes", len(body))
        return Response(content=body, status_code=200, headers=dict(RELAY_HEADERS))


@router.get(RELAY_PATH)
async def relay_feed(fetcher: UpstreamFetcher = Depends(get_fetcher)):
    """Relay the upstream XML feed with a permissive CORS header."""
    return await relay_upstream(fetcher)
