import pytest

from common.sync_and_async_client import SyncAndAsyncClient
from reelcraft.ai.prompt_enhancement import (
    PromptEnhancement,
    build_enhance_request,
)
from reelcraft.ai.prompt_enhancement.providers.google import Google


class FakeResponse:
    def __init__(self, text: str | None):
        self.text = text


class FakeModels:
    def __init__(
        self, text: str | None = None, error: Exception | None = None
    ):
        self.text = text
        self.error = error
        self.requests: list[dict] = []

    def generate_content(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text)


class FakeAsyncModels:
    def __init__(self, models: FakeModels):
        self.models = models

    async def generate_content(self, **kwargs):
        return self.models.generate_content(**kwargs)


class FakeAio:
    def __init__(self, models: FakeModels):
        self.models = FakeAsyncModels(models)


class FakeClient:
    def __init__(self, models: FakeModels):
        self.models = models
        self.aio = FakeAio(models)


class PromptEnhancementSyncAndAsyncClient(SyncAndAsyncClient):
    def __init__(self, models: FakeModels, async_call: bool, monkeypatch):
        monkeypatch.setattr(
            Google, "_get_client", lambda self: FakeClient(models)
        )
        self.client = PromptEnhancement(
            __unpack__=True,
            __provider__=dict(type="google", parameters={"api_key": "k"}),
        )
        self.async_call = async_call

    async def enhance(self, **kwargs):
        return await self._execute_method(**kwargs)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "async_call",
    [False, True],
)
async def test_enhance(async_call: bool, monkeypatch):
    models = FakeModels(text="  A slow dolly shot of a red fox.\n")
    client = PromptEnhancementSyncAndAsyncClient(
        models, async_call, monkeypatch
    )

    result = await client.enhance(prompt="a fox")
    assert result == "A slow dolly shot of a red fox."
    assert models.requests == [
        {
            "model": "gemini-2.5-flash",
            "contents": build_enhance_request("a fox"),
        }
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "async_call",
    [False, True],
)
@pytest.mark.parametrize(
    "models",
    [
        FakeModels(error=RuntimeError("quota exceeded")),
        FakeModels(text=""),
        FakeModels(text=None),
    ],
)
async def test_enhance_falls_back(
    async_call: bool, models: FakeModels, monkeypatch
):
    client = PromptEnhancementSyncAndAsyncClient(
        models, async_call, monkeypatch
    )

    assert await client.enhance(prompt="a fox") == "a fox"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "async_call",
    [False, True],
)
async def test_enhance_blank_prompt(async_call: bool, monkeypatch):
    models = FakeModels(text="unused")
    client = PromptEnhancementSyncAndAsyncClient(
        models, async_call, monkeypatch
    )

    assert await client.enhance(prompt="  ") == "  "
    assert models.requests == []


@pytest.mark.asyncio
async def test_enhance_without_provider():
    component = PromptEnhancement(__unpack__=True)
    assert component.enhance(prompt="a fox") == "a fox"
    assert await component.aenhance(prompt="a fox") == "a fox"


def test_enhance_request():
    request = build_enhance_request("a neon city")
    assert request.startswith("You are an expert prompt engineer")
    assert request.endswith("User Prompt: a neon city")
