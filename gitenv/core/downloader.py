"""Remote artifact downloads."""

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

import requests
from loguru import logger

from .errors import DownloadError


class Downloader(ABC):
    """Fetches a URL into a local file."""

    @abstractmethod
    def download(self, url: str, destination: Path, mode: int = 0o644) -> Path:
        """Download ``url`` to ``destination``.

        The destination is only replaced once the full body has been received,
        so a failed download leaves any existing file untouched. The saved file
        gets permission bits ``mode``.

        Raises:
            DownloadError: On any network or HTTP failure
        """


class HttpDownloader(Downloader):
    """``requests``-backed downloader."""

    CHUNK_SIZE = 64 * 1024

    def __init__(self, timeout: float | None = 30.0) -> None:
        self.timeout = timeout
        self.logger = logger.bind(component="HttpDownloader")

    def download(self, url: str, destination: Path, mode: int = 0o644) -> Path:
        self.logger.debug(f"Downloading {url} -> {destination}")
        try:
            response = requests.get(url, timeout=self.timeout, stream=True)
            response.raise_for_status()
        except requests.RequestException as e:
            raise DownloadError(url, str(e)) from e

        try:
            fd, tmp_name = tempfile.mkstemp(dir=destination.parent, prefix=f".{destination.name}.")
            tmp_path = Path(tmp_name)
            try:
                with os.fdopen(fd, "wb") as f:
                    for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
                # mkstemp always creates 0600
                os.chmod(tmp_path, mode)
                os.replace(tmp_path, destination)
            except requests.RequestException as e:
                tmp_path.unlink(missing_ok=True)
                raise DownloadError(url, str(e)) from e
            except OSError:
                tmp_path.unlink(missing_ok=True)
                raise
        finally:
            response.close()

        self.logger.debug(f"Saved {destination}")
        return destination
