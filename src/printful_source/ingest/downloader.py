"""
Best-effort image downloader.

Files are named ``{owner_id}_{basename}`` where basename is the lowercased
last path segment of the URL without its query string. A file that already
exists is never fetched again, so two URLs sharing a basename under the same
owner resolve to whichever was downloaded first.

Downloads fail open: on a transport error the partial file is removed, the
error is logged, and the caller still gets the target path back.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

import aiohttp
from loguru import logger

CHUNK_SIZE = 64 * 1024


class DownloadStatus(str, Enum):
    DOWNLOADED = "downloaded"
    CACHED = "cached"
    FAILED = "failed"


@dataclass(frozen=True)
class DownloadResult:
    path: Path
    status: DownloadStatus

    @property
    def ok(self) -> bool:
        return self.status is not DownloadStatus.FAILED


def asset_filename(owner_id, url: str) -> str:
    basename = url.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1].lower()
    return f"{owner_id}_{basename}"


class AssetDownloader:
    """Streams remote assets into one directory, skipping files already present."""

    def __init__(self, session: aiohttp.ClientSession, directory: Path):
        self.session = session
        self.directory = Path(directory)
        self._locks: Dict[Path, asyncio.Lock] = {}
        self._users: Dict[Path, int] = {}

    def target_path(self, owner_id, url: str) -> Path:
        return (self.directory / asset_filename(owner_id, url)).resolve()

    async def fetch(self, owner_id, url: Optional[str]) -> Optional[DownloadResult]:
        """
        Resolve ``url`` to a local file owned by ``owner_id``.

        Returns:
            None when there is no URL, otherwise a DownloadResult whose path is
            set even if the download failed
        """
        if not url:
            return None

        file_path = self.target_path(owner_id, url)
        # Same target from concurrent callers: the second waits, then hits the cache
        lock = self._locks.setdefault(file_path, asyncio.Lock())
        self._users[file_path] = self._users.get(file_path, 0) + 1
        try:
            async with lock:
                if file_path.exists():
                    logger.debug(f"Image {file_path.name} already downloaded")
                    return DownloadResult(file_path, DownloadStatus.CACHED)

                return await self._stream(url, file_path)
        finally:
            # Drop the lock once nobody holds or waits on it
            self._users[file_path] -= 1
            if not self._users[file_path]:
                del self._users[file_path]
                del self._locks[file_path]

    async def _stream(self, url: str, file_path: Path) -> DownloadResult:
        logger.debug(f"Downloading {url}")
        try:
            async with self.session.get(url) as resp:
                resp.raise_for_status()
                with open(file_path, "wb") as fh:
                    async for chunk in resp.content.iter_chunked(CHUNK_SIZE):
                        # Disk writes run off the event loop
                        await asyncio.to_thread(fh.write, chunk)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            logger.error(f"Error on processing image {file_path.name}: {e}")
            file_path.unlink(missing_ok=True)
            logger.debug(f"Removed partial file {file_path}")
            return DownloadResult(file_path, DownloadStatus.FAILED)

        logger.debug(f"Download finished: {file_path.name}")
        return DownloadResult(file_path, DownloadStatus.DOWNLOADED)
