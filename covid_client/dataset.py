"""Dataset client - download the source CSVs."""

import asyncio
from pathlib import Path

from loguru import logger

from covid_client.base import BaseClient


class DatasetClient(BaseClient):
    """Client for downloading COVID CSV datasets."""

    async def download(self, url: str, dest: Path) -> Path:
        """Download url to dest, replacing it only after a complete transfer."""
        dest.parent.mkdir(parents=True, exist_ok=True)
        partial = dest.with_name(dest.name + ".part")
        logger.info("Downloading {} -> {}", url, dest)
        size = await self._stream_to(url, partial)
        partial.replace(dest)
        logger.info("Downloaded {} ({:.1f} MB)", dest, size / 1_000_000)
        return dest

    async def download_all(self, targets: dict[str, Path]) -> list[Path]:
        """Download several {url: dest} targets concurrently."""
        return await asyncio.gather(*(self.download(url, dest) for url, dest in targets.items()))


async def _download_async(targets: dict[str, Path]) -> list[Path]:
    async with DatasetClient() as client:
        return await client.download_all(targets)


def download_datasets(targets: dict[str, Path]) -> list[Path]:
    """Main download entry point."""
    return asyncio.run(_download_async(targets))
