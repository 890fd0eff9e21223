# src/create_typerestjs/registry.py
"""Best-effort lookup of the latest published framework version.

The lookup is a single GET against the npm registry, bounded by a deadline.
It never raises: any failure yields the configured fallback version so the
generator never stalls on a registry outage.
"""

from __future__ import annotations

import asyncio

import httpx

from .config import GeneratorConfig

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"
DEFAULT_VERSION = "1.0.0"


async def _fetch_latest(client: httpx.AsyncClient, url: str) -> str:
    response = await client.get(url)
    response.raise_for_status()
    return response.json()["dist-tags"]["latest"]


async def resolve_version(
    package: str,
    *,
    registry_url: str = DEFAULT_REGISTRY_URL,
    timeout: float = 3.0,
    fallback: str = DEFAULT_VERSION,
) -> str:
    """Return the ``latest`` dist-tag of *package*, or *fallback*.

    Args:
        package: Package name on the registry.
        registry_url: Registry base URL.
        timeout: Overall deadline in seconds for the whole request.
        fallback: Value returned on timeout, transport error, HTTP error
            status, non-JSON body or a missing/empty tag.

    ``asyncio.wait_for`` cancels the in-flight request at the deadline; the
    client context manager closes the connection on every exit path.
    """
    url = f"{registry_url.rstrip('/')}/{package}"
    try:
        async with httpx.AsyncClient() as client:
            latest = await asyncio.wait_for(_fetch_latest(client, url), timeout)
    except Exception:
        return fallback

    if not isinstance(latest, str) or not latest:
        return fallback
    return latest


async def resolve_configured_version(config: GeneratorConfig) -> str:
    return await resolve_version(
        config.registry_package,
        registry_url=config.registry_url,
        timeout=config.registry_timeout,
        fallback=config.fallback_version,
    )

