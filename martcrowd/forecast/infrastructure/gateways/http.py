"""
Single-attempt JSON GET shared by the network gateways.
"""
from typing import Any, Dict, Optional
import httpx

USER_AGENT = "martcrowd/0.1"


async def get_json(
    url: str,
    params: Dict[str, Any],
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> Any:
    """
    Performs one GET request and decodes the JSON body.
    Raises httpx.HTTPError on transport errors and non-2xx statuses,
    ValueError on an undecodable body.
    """
    if client is not None:
        response = await client.get(url, params=params)
    else:
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        async with httpx.AsyncClient(timeout=timeout, headers=headers) as owned:
            response = await owned.get(url, params=params)

    response.raise_for_status()
    return response.json()
