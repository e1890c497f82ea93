from logging import Logger
from typing import Optional

import httpx

from anarchic_image_hosting_cli.errors import NetworkFailure
from anarchic_image_hosting_cli.utils import FilePayload, UploadOutcome


class UploadClient:
    """Sends one file as a single-part multipart/form-data POST."""

    def __init__(self, logger: Logger, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.logger = logger
        # None means wait indefinitely; httpx would otherwise default to 5s.
        self.timeout = timeout
        self.transport = transport

    def build_files(self, payload: FilePayload) -> dict:
        files = {"file": (payload.name, payload.content)}
        self.logger.debug(f"Created multipart form with file part: {payload.name}")
        return files

    async def upload(self, url: str, payload: FilePayload) -> UploadOutcome:
        files = self.build_files(payload)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                self.logger.debug(f"Sending request to URL: {url}")
                response = await client.post(url, files=files)
        except httpx.TimeoutException as e:
            raise NetworkFailure(f"Request to {url} timed out after {self.timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkFailure(f"Request to {url} failed: {e!r}") from e

        self.logger.debug(f"Received status {response.status_code} ({len(response.content)} bytes)")
        return UploadOutcome(status_code=response.status_code, text=response.text)
