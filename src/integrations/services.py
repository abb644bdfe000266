"""Collaborator clients, built once at startup and shared by all handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.errors import ServiceInitError
from src.integrations.drive import DriveLister
from src.integrations.firestore import DocumentStore
from src.integrations.google_auth import GoogleApis
from src.integrations.sheets import SheetsReader
from src.integrations.storage import ObjectStore
from src.integrations.vertex import GenerativeModel

if TYPE_CHECKING:
    from src.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Services:
    """Handles to every external collaborator.

    Handlers receive this container through the aiohttp app; tests build
    it from fakes.
    """

    documents: DocumentStore
    objects: ObjectStore
    model: GenerativeModel
    sheets: SheetsReader
    drive: DriveLister

    async def close(self) -> None:
        """Release client transports. Errors are logged, not raised."""
        try:
            await self.documents.close()
        except Exception:
            logger.exception("Failed to close documents client")
        try:
            self.objects.close()
        except Exception:
            logger.exception("Failed to close objects client")


def init_services(settings: Settings) -> Services:
    """Construct all collaborator clients.

    Raises:
        ServiceInitError: naming the first client that failed to build.
    """
    try:
        documents = DocumentStore.connect(settings.google_cloud_project)
    except Exception as exc:
        raise ServiceInitError("Firestore", exc) from exc
    logger.info("Firestore initialized")

    try:
        objects = ObjectStore.connect(settings.google_cloud_project, settings.gcs_bucket_name)
    except Exception as exc:
        raise ServiceInitError("Cloud Storage", exc) from exc
    logger.info("Cloud Storage initialized (bucket=%s)", settings.gcs_bucket_name)

    try:
        model = GenerativeModel.connect(
            settings.google_cloud_project, settings.google_cloud_region
        )
    except Exception as exc:
        raise ServiceInitError("Vertex AI", exc) from exc
    logger.info("Vertex AI initialized (region=%s)", settings.google_cloud_region)

    try:
        apis = GoogleApis.from_default()
        sheets = SheetsReader(apis.sheets())
        drive = DriveLister(apis.drive())
    except Exception as exc:
        raise ServiceInitError("Google APIs", exc) from exc
    logger.info("Google APIs initialized")

    return Services(
        documents=documents,
        objects=objects,
        model=model,
        sheets=sheets,
        drive=drive,
    )
