"""
Cloud resource resolution from the GCE metadata server.

A one-shot, blocking lookup of the project ID and region, used to attach a
`logName` and monitored `resource` to every entry of a resolving emitter.
https://cloud.google.com/run/docs/container-contract#metadata-server
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from .config import RunLoggerSettings
from .exceptions import MetadataFetchError
from .record import ResourceDescriptor

logger = logging.getLogger(__name__)

METADATA_HEADERS = {"Metadata-Flavor": "Google"}
PROJECT_ID_PATH = "project/project-id"
REGION_PATH = "instance/region"
RESOURCE_TYPE = "cloud_run_revision"


class MetadataClient:
    """Synchronous metadata server client.

    Args:
        base_url: Metadata server base URL
        timeout: Request timeout in seconds
        client: Pre-built httpx client (mainly for tests); not closed by us
    """

    def __init__(
        self,
        base_url: str = "http://metadata.google.internal/computeMetadata/v1",
        timeout: float = 5.0,
        client: Optional[httpx.Client] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    def get(self, path: str) -> str:
        """Fetch a metadata value as stripped text.

        Raises:
            MetadataFetchError: On transport errors, non-2xx status or empty values
        """
        url = f"{self._base_url}/{path}"
        try:
            if self._client is not None:
                response = self._client.get(url, headers=METADATA_HEADERS)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.get(url, headers=METADATA_HEADERS)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise MetadataFetchError(path=path, reason=f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise MetadataFetchError(path=path, reason=str(exc) or type(exc).__name__) from exc

        value = response.text.strip()
        if not value:
            raise MetadataFetchError(path=path, reason="empty response")
        return value

    def project_id(self) -> str:
        return self.get(PROJECT_ID_PATH)

    def region(self) -> str:
        # Returned as "projects/<number>/regions/<region>"
        return self.get(REGION_PATH).rsplit("/", 1)[-1]


def fetch_resource_descriptor(
    settings: Optional[RunLoggerSettings] = None,
    *,
    client: Optional[httpx.Client] = None,
) -> ResourceDescriptor:
    """Resolve the Cloud Run resource descriptor for this instance.

    Raises:
        MetadataFetchError: If the project ID or region cannot be fetched
    """
    settings = settings or RunLoggerSettings()
    metadata = MetadataClient(settings.metadata_url, settings.metadata_timeout, client=client)

    project_id = metadata.project_id()
    region = metadata.region()
    logger.debug("Resolved metadata project=%s region=%s", project_id, region)

    labels = {"project_id": project_id, "location": region}
    if settings.service:
        labels["service_name"] = settings.service
    if settings.revision:
        labels["revision_name"] = settings.revision
    if settings.configuration:
        labels["configuration_name"] = settings.configuration

    return ResourceDescriptor(
        log_name=f"projects/{project_id}/logs/{quote(settings.log_name, safe='')}",
        resource_type=RESOURCE_TYPE,
        labels=labels,
    )
