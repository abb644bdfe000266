"""Google Workspace API credentials and service builder.

Unlike the Cloud clients, Sheets and Drive are reached through the
discovery-based ``googleapiclient``. Credentials come from the
application-default chain (``GOOGLE_APPLICATION_CREDENTIALS`` or the
runtime's service account).
"""

import logging

import google.auth
from google.auth.credentials import Credentials
from googleapiclient.discovery import build

logger = logging.getLogger(__name__)


class GoogleApis:
    """Application-default credentials plus API service builders."""

    SCOPES = [
        "https://www.googleapis.com/auth/spreadsheets",
        "https://www.googleapis.com/auth/drive.readonly",
    ]

    def __init__(self, credentials: Credentials) -> None:
        self._credentials = credentials

    @classmethod
    def from_default(cls) -> "GoogleApis":
        """Resolve application-default credentials with the gateway's scopes.

        Raises ``google.auth.exceptions.DefaultCredentialsError`` when no
        credentials can be found.
        """
        credentials, project = google.auth.default(scopes=cls.SCOPES)
        logger.debug("Google API credentials resolved (project=%s)", project)
        return cls(credentials)

    # -- service builders -----------------------------------------------------

    def sheets(self):  # noqa: ANN201
        """Build a Sheets API service."""
        return build("sheets", "v4", credentials=self._credentials, cache_discovery=False)

    def drive(self):  # noqa: ANN201
        """Build a Drive API service."""
        return build("drive", "v3", credentials=self._credentials, cache_discovery=False)
