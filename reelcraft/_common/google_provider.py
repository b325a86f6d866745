import json
import os
from typing import Any

from google.genai import Client

from reelcraft.core import Provider
from reelcraft.core.exceptions import UnauthorizedError

API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")
SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]


class GoogleProvider(Provider):
    vertexai: bool
    project: str | None
    location: str
    api_key: str | None
    service_account_info: str | dict | None
    service_account_file: str | None
    access_token: str | None
    nparams: dict[str, Any] | None

    _credentials: Any

    def __init__(
        self,
        vertexai: bool = False,
        project: str | None = None,
        location: str = "us-central1",
        api_key: str | None = None,
        service_account_info: str | dict | None = None,
        service_account_file: str | None = None,
        access_token: str | None = None,
        nparams: dict[str, Any] | None = None,
        **kwargs,
    ):
        self.vertexai = vertexai
        self.project = project
        self.location = location
        self.api_key = api_key
        self.service_account_info = service_account_info
        self.service_account_file = service_account_file
        self.access_token = access_token
        self.nparams = nparams
        self._credentials = None
        super().__init__(**kwargs)

    def _get_api_key(self) -> str | None:
        # Read on every call, never cached.
        if self.api_key:
            return self.api_key
        for name in API_KEY_ENV_VARS:
            value = os.environ.get(name)
            if value:
                return value
        return None

    def _get_client(self) -> Client:
        if self.vertexai:
            return Client(
                vertexai=True,
                credentials=self._get_credentials(),
                project=self._get_project_or_default(self.project),
                location=self.location,
                **self.nparams or {},
            )
        api_key = self._get_api_key()
        if not api_key:
            raise UnauthorizedError(
                "No API key configured. Set one of "
                f"{', '.join(API_KEY_ENV_VARS)}."
            )
        return Client(api_key=api_key, **self.nparams or {})

    def _get_credentials(self):
        if self._credentials is None:
            self._credentials = self._load_credentials()
        return self._credentials

    def _load_credentials(self):
        from google.oauth2 import credentials, service_account

        if self.service_account_info is not None:
            info = self.service_account_info
            if isinstance(info, str):
                info = json.loads(info)
            return service_account.Credentials.from_service_account_info(
                info, scopes=SCOPES
            )
        if self.service_account_file is not None:
            return service_account.Credentials.from_service_account_file(
                self.service_account_file, scopes=SCOPES
            )
        if self.access_token is not None:
            return credentials.Credentials(self.access_token)
        import google.auth

        default_credentials, _ = google.auth.default(scopes=SCOPES)
        return default_credentials

    def _get_token(self) -> str:
        import google.auth.transport.requests

        credentials = self._get_credentials()
        if not credentials.valid:
            credentials.refresh(google.auth.transport.requests.Request())
        if credentials.token:
            return credentials.token
        raise UnauthorizedError("Unable to obtain access token")

    def _get_project_or_default(self, project: str | None) -> str:
        if project:
            return project
        import google.auth

        _, default_project = google.auth.default()
        return default_project
