from __future__ import annotations

import logging
import uuid
from typing import Any

from ._context import Context
from ._loader import Loader
from ._operation import Operation
from ._provider import Provider
from ._response import Response
from .exceptions import NotSupportedError

logger = logging.getLogger(__name__)


class Component:
    """Front end of a capability, backed by a bound provider.

    Keyword flags:
        __provider__: Provider instance, provider type name, or
            `dict(type=..., parameters=...)` loaded from the component's
            `providers` package.
        __unpack__: Return `Response.result` instead of the response.
        __native__: Keep the raw provider payload in `Response.native`.
    """

    __provider__: Provider
    __type__: str
    __unpack__: bool
    __native__: bool

    def __init__(self, **kwargs):
        self.__type__ = kwargs.pop("__type__", self.__class__.__module__)
        self.__unpack__ = kwargs.pop("__unpack__", False)
        self.__native__ = kwargs.pop("__native__", False)
        provider = kwargs.pop("__provider__", None)
        if provider is not None:
            self.__bind__(provider)

    def __bind__(self, provider: Provider | dict | str) -> None:
        if not isinstance(provider, Provider):
            provider = self._load_provider(provider)
        provider.__component__ = self
        self.__provider__ = provider

    def __setup__(self, context: Context | None = None) -> None:
        self.__provider__.__setup__(context=context)

    async def __asetup__(self, context: Context | None = None) -> None:
        await self.__provider__.__asetup__(context=context)

    def __run__(
        self,
        operation: Operation | None = None,
        context: dict | Context | None = None,
        **kwargs,
    ) -> Any:
        if not hasattr(self, "__provider__"):
            raise NotSupportedError(str(operation))
        response = self.__provider__.__run__(
            operation=operation,
            context=self._init_context(context),
            **kwargs,
        )
        return self._finalize(response)

    async def __arun__(
        self,
        operation: Operation | None = None,
        context: dict | Context | None = None,
        **kwargs,
    ) -> Any:
        if not hasattr(self, "__provider__"):
            raise NotSupportedError(str(operation))
        response = await self.__provider__.__arun__(
            operation=operation,
            context=self._init_context(context),
            **kwargs,
        )
        return self._finalize(response)

    def __supports__(self, feature: str) -> bool:
        return self.__provider__.__supports__(feature)

    def _load_provider(self, provider: dict | str) -> Provider:
        if isinstance(provider, str):
            type, parameters = provider, {}
        else:
            type = provider["type"]
            parameters = dict(provider.get("parameters") or {})
        package = self.__class__.__module__.rsplit(".", 1)[0]
        logger.debug("Binding %s provider %s", package, type)
        return Loader.load_provider_instance(
            path=f"{package}.providers.{type}",
            parameters=parameters,
        )

    def _finalize(self, response: Any) -> Any:
        if not isinstance(response, Response):
            return response
        if not self.__native__:
            response.native = None
        if self.__unpack__:
            return response.result
        return response

    def _init_context(self, context: dict | Context | None) -> Context:
        if isinstance(context, dict):
            context = Context.from_dict(context)
        if context is None:
            return Context(id=str(uuid.uuid4()))
        return Context(id=context.id or str(uuid.uuid4()), data=context.data)
