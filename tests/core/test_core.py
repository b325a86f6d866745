import logging

import pytest

from reelcraft.ai.video_generation.providers.google import Google
from reelcraft.core import (
    MANIFEST_FILE,
    Component,
    Loader,
    Manifest,
    Provider,
    Response,
    configure_logging,
    operation,
)
from reelcraft.core.exceptions import BadRequestError, LoadError


class Echo(Component):
    @operation()
    def echo(self, text: str, suffix: str | None = None) -> Response[str]:
        return Response(result=f"fallback:{text}")

    @operation()
    async def aecho(
        self, text: str, suffix: str | None = None
    ) -> Response[str]:
        return Response(result=f"fallback:{text}")


class Upper(Provider):
    def __init__(self, **kwargs):
        self.calls: list[dict] = []
        super().__init__(**kwargs)

    def echo(self, **kwargs) -> Response[str]:
        self.calls.append(kwargs)
        return Response(result=kwargs["text"].upper(), native={"raw": 1})


class Silent(Provider):
    pass


@pytest.mark.asyncio
async def test_operation_routes_to_provider():
    provider = Upper()
    component = Echo(__provider__=provider)
    response = component.echo("hi")
    assert response.result == "HI"
    assert response.native is None
    assert response.context is None
    assert provider.calls == [{"text": "hi"}]

    assert Echo(__provider__=Upper(), __unpack__=True).echo("hi") == "HI"
    assert await Echo(__provider__=Upper(), __unpack__=True).aecho("a") == "A"


@pytest.mark.asyncio
async def test_operation_falls_back_to_component():
    component = Echo(__provider__=Silent(), __unpack__=True)
    assert component.echo("hi") == "fallback:hi"
    assert await component.aecho("hi") == "fallback:hi"
    assert Echo(__unpack__=True).echo("hi") == "fallback:hi"


def test_native_response_kept():
    component = Echo(__provider__=Upper(), __native__=True)
    assert component.echo("hi").native == {"raw": 1}


def test_load_provider_instance():
    provider = Loader.load_provider_instance(
        "reelcraft.ai.video_generation.providers.google",
        {"api_key": "k", "poll_interval": 1},
    )
    assert isinstance(provider, Google)
    assert provider.poll_interval == 1
    assert provider.api_key == "k"


def test_load_class_errors():
    with pytest.raises(LoadError):
        Loader.load_class("reelcraft.missing_module", Provider)
    with pytest.raises(LoadError):
        Loader.load_class("reelcraft.core:Missing", Provider)
    with pytest.raises(LoadError):
        Loader.load_class("reelcraft.core.exceptions", Provider)


def test_manifest(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    manifest = Manifest.load()
    assert manifest.log_level == "INFO"
    assert manifest.video_generation.to_binding() == {
        "type": "google",
        "parameters": {},
    }

    (tmp_path / MANIFEST_FILE).write_text(
        "log_level: debug\n"
        "video_generation:\n"
        "  type: google\n"
        "  parameters:\n"
        "    vertexai: true\n"
        "    project: my-project\n"
        "    poll_interval: 5\n"
    )
    manifest = Manifest.load()
    assert manifest.log_level == "debug"
    assert manifest.video_generation.parameters == {
        "vertexai": True,
        "project": "my-project",
        "poll_interval": 5,
    }
    assert manifest.prompt_enhancement.type == "google"


def test_manifest_explicit_path(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("")
    assert Manifest.load(str(path)) == Manifest()
    with pytest.raises(FileNotFoundError):
        Manifest.load(str(tmp_path / "missing.yaml"))


def test_configure_logging():
    logger = configure_logging("debug")
    handlers = len(logger.handlers)
    assert logger.level == logging.DEBUG
    logger = configure_logging(logging.WARNING)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == handlers


def test_configure_logging_unknown_level():
    with pytest.raises(BadRequestError) as exc_info:
        configure_logging("bogus")
    assert str(exc_info.value) == "Unknown log level: bogus"
