# I/O seams: fetching web manifests over HTTP and reading/writing app
# manifests on disk. Failures propagate to the caller; nothing here retries.

import asyncio
import logging
from pathlib import Path
from typing import Any

import httpx

from twa_manifest.config import get_settings
from twa_manifest.manifest import AppManifest
from twa_manifest.normalizer import WarningLog, from_web_manifest_json

logger = logging.getLogger(__name__)


async def fetch_json(url: str, client: httpx.AsyncClient | None = None) -> Any:
    """GET ``url`` and decode the JSON body.

    Raises:
        httpx.HTTPError: transport failure or non-2xx status.
        json.JSONDecodeError: the body is not JSON.
    """
    if client is not None:
        resp = await client.get(url)
        resp.raise_for_status()
        return resp.json()

    settings = get_settings()
    async with httpx.AsyncClient(
        timeout=settings.fetch_timeout,
        follow_redirects=settings.follow_redirects,
        headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
    ) as own_client:
        resp = await own_client.get(url)
        resp.raise_for_status()
        return resp.json()


async def read_text(path: str | Path) -> str:
    return await asyncio.to_thread(Path(path).read_text, encoding="utf-8")


async def write_text(path: str | Path, content: str) -> None:
    await asyncio.to_thread(Path(path).write_text, content, encoding="utf-8")


async def from_web_manifest(
    url: str,
    client: httpx.AsyncClient | None = None,
    log: WarningLog = logger,
) -> AppManifest:
    """Fetch the web manifest at ``url`` and derive an AppManifest from it."""
    web_manifest = await fetch_json(url, client=client)
    logger.debug("Fetched web manifest from %s", url)
    return from_web_manifest_json(url, web_manifest, log=log)


async def load_from_file(path: str | Path) -> AppManifest:
    """Load an app manifest saved by :func:`save_to_file` (or an older tool version)."""
    return AppManifest.from_json(await read_text(path))


async def save_to_file(manifest: AppManifest, path: str | Path) -> None:
    logger.info("Saving app manifest to: %s", path)
    await write_text(path, manifest.to_json())
