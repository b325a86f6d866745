import logging
from typing import Any

from google.genai import types

from reelcraft._common.google_provider import GoogleProvider
from reelcraft.core import Response

from .._template import build_enhance_request

logger = logging.getLogger(__name__)


class Google(GoogleProvider):
    model: str

    def __init__(
        self,
        vertexai: bool = False,
        project: str | None = None,
        location: str = "us-central1",
        model: str = "gemini-2.5-flash",
        api_key: str | None = None,
        service_account_info: str | dict | None = None,
        service_account_file: str | None = None,
        access_token: str | None = None,
        nparams: dict[str, Any] | None = None,
        **kwargs,
    ):
        self.model = model
        super().__init__(
            vertexai=vertexai,
            project=project,
            location=location,
            api_key=api_key,
            service_account_info=service_account_info,
            service_account_file=service_account_file,
            access_token=access_token,
            nparams=nparams,
            **kwargs,
        )

    def enhance(self, prompt: str, **kwargs: Any) -> Response[str]:
        if not prompt or not prompt.strip():
            return Response(result=prompt)
        try:
            response = self._get_client().models.generate_content(
                model=self.model, contents=build_enhance_request(prompt)
            )
        except Exception as e:
            logger.warning("Prompt enhancement failed: %s", e)
            return Response(result=prompt)
        return Response(result=self._convert_result(response, prompt))

    async def aenhance(self, prompt: str, **kwargs: Any) -> Response[str]:
        if not prompt or not prompt.strip():
            return Response(result=prompt)
        try:
            client = self._get_client()
            response = await client.aio.models.generate_content(
                model=self.model, contents=build_enhance_request(prompt)
            )
        except Exception as e:
            logger.warning("Prompt enhancement failed: %s", e)
            return Response(result=prompt)
        return Response(result=self._convert_result(response, prompt))

    def _convert_result(
        self, response: types.GenerateContentResponse, prompt: str
    ) -> str:
        try:
            text = response.text
        except ValueError as e:
            logger.warning("Prompt enhancement returned no text: %s", e)
            return prompt
        if not text or not text.strip():
            logger.warning("Prompt enhancement returned an empty response")
            return prompt
        return text.strip()
