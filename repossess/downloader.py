import asyncio
import logging

import aiofiles
import aiohttp

from .errors import DownloadFailedError
from .repo import classify, synthesize_archive_url
from .schemas import DEFAULT_BRANCH, RepoDescriptor

ARCHIVE_FILENAME = 'repo.zip'
CHUNK_SIZE = 1024
DOWNLOAD_TIMEOUT = aiohttp.ClientTimeout(total=5 * 60)

logger = logging.getLogger(__name__)


class ArchiveDownloader:
    def __init__(
        self,
        repo_url: str,
        *,
        branch: str = DEFAULT_BRANCH,
        chunk_size: int = CHUNK_SIZE,
        timeout: aiohttp.ClientTimeout = DOWNLOAD_TIMEOUT,
    ) -> None:
        self._repo = classify(repo_url, branch)
        self._archive_url = synthesize_archive_url(self._repo)
        self._chunk_size = chunk_size
        self._timeout = timeout

    @property
    def repo(self) -> RepoDescriptor:
        return self._repo

    @property
    def archive_url(self) -> str:
        return self._archive_url

    async def download(self, destination: str = ARCHIVE_FILENAME) -> str:
        """Fetch the branch archive and write it to ``destination``.

        An existing file at ``destination`` is overwritten. Request, timeout
        and file write failures are raised as ``DownloadFailedError``.
        """
        logger.debug('Requesting %s', self._archive_url)
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(self._archive_url) as resp:
                    resp.raise_for_status()
                    written = await self.__write_chunks(destination, resp)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as err:
            raise DownloadFailedError(
                self._archive_url, str(err) or type(err).__name__,
            ) from err
        logger.info(
            'Saved %s (%d bytes) to %s',
            self._archive_url, written, destination,
        )
        return destination

    async def __write_chunks(
        self,
        path: str,
        resp: aiohttp.ClientResponse,
    ) -> int:
        written = 0
        async with aiofiles.open(path, 'wb') as file_d:
            while not resp.content.at_eof():
                chunk = await resp.content.read(self._chunk_size)
                await file_d.write(chunk)
                written += len(chunk)
        return written
