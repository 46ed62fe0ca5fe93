from typing import Any
import logging

import httpx

from .result import FailureReason, Result

logger = logging.getLogger(__name__)


async def fetch_json(
    url: str,
    headers: dict[str, str],
    params: dict[str, Any] | None = None,
    timeout: float = 30.0,
) -> Result[Any]:
    """GET `url` and return the decoded JSON body.

    Never raises: transport errors, non-2xx statuses and undecodable bodies
    come back as a failed `Result` tagged with the matching `FailureReason`.
    """
    async with httpx.AsyncClient(follow_redirects=True) as client:
        try:
            response = await client.get(url, headers=headers, params=params, timeout=timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"[HTTP] {url} returned status {status}")
            return Result.failure(FailureReason.BAD_STATUS, f"HTTP {status}")
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(f"[HTTP] request to {url} failed: {e!r}")
            return Result.failure(FailureReason.NETWORK_ERROR, str(e) or type(e).__name__)

    try:
        return Result.success(response.json())
    except ValueError as e:
        logger.warning(f"[HTTP] {url} returned a body that is not JSON: {e}")
        return Result.failure(FailureReason.PARSE_ERROR, str(e))
