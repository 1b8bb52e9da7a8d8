"""
Google Sheets adapter: the only code that talks to the spreadsheet.

Every call is a blocking googleapiclient request. Callers on the event loop
should go through asyncio.to_thread. API and transport errors are re-raised
as StoreFailure so the routers never see googleapiclient types.
"""

import logging
import os

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from order_tracker.config import Settings
from order_tracker.exceptions import StoreConfigurationError, StoreFailure

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def _service_account_info(settings: Settings) -> dict:
    return {
        "type": "service_account",
        "project_id": settings.google_project_id,
        "private_key_id": settings.google_private_key_id,
        # Hosting dashboards store the PEM with escaped newlines
        "private_key": settings.google_private_key.replace("\\n", "\n"),
        "client_email": settings.google_client_email,
        "client_id": settings.google_client_id,
        "auth_uri": "https://accounts.google.com/o/oauth2/auth",
        "token_uri": "https://oauth2.googleapis.com/token",
        "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
        "client_x509_cert_url": settings.google_client_x509_cert_url,
    }


def load_credentials(settings: Settings) -> Credentials:
    """Build service-account credentials from the environment or the local key file."""
    try:
        if settings.google_private_key:
            logger.info("Using service account credentials from environment")
            return Credentials.from_service_account_info(
                _service_account_info(settings), scopes=SCOPES
            )
        logger.info("Using service account key file %s", settings.service_account_file)
        if not os.path.exists(settings.service_account_file):
            raise StoreConfigurationError(
                f"Service account key file not found: {settings.service_account_file}"
            )
        return Credentials.from_service_account_file(settings.service_account_file, scopes=SCOPES)
    except (ValueError, KeyError, GoogleAuthError) as e:
        raise StoreConfigurationError(f"Invalid service account credentials: {e}") from e


class SheetsClient:
    """Range-level access to a single spreadsheet."""

    def __init__(self, spreadsheet_id: str, service):
        self.spreadsheet_id = spreadsheet_id
        self._values = service.spreadsheets().values()

    @classmethod
    def from_settings(cls, settings: Settings) -> "SheetsClient":
        credentials = load_credentials(settings)
        try:
            service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        except Exception as e:
            raise StoreConfigurationError(f"Could not build Sheets service: {e}") from e
        return cls(settings.spreadsheet_id, service)

    def get_values(self, range_name: str) -> list[list[str]]:
        try:
            result = self._values.get(
                spreadsheetId=self.spreadsheet_id, range=range_name
            ).execute()
        except (HttpError, GoogleAuthError, httplib2.HttpLib2Error, OSError) as e:
            raise StoreFailure(f"Could not read {range_name}") from e
        return result.get("values", [])

    def append_values(self, range_name: str, rows: list[list[str]]) -> None:
        try:
            self._values.append(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption="RAW",
                body={"values": rows},
            ).execute()
        except (HttpError, GoogleAuthError, httplib2.HttpLib2Error, OSError) as e:
            raise StoreFailure(f"Could not append to {range_name}") from e

    def update_values(self, range_name: str, rows: list[list[str]]) -> None:
        try:
            self._values.update(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption="RAW",
                body={"values": rows},
            ).execute()
        except (HttpError, GoogleAuthError, httplib2.HttpLib2Error, OSError) as e:
            raise StoreFailure(f"Could not update {range_name}") from e
