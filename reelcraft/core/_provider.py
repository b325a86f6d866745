import logging
from typing import Any, Callable

from ._async_helper import run_async, run_sync
from ._context import Context
from ._operation import Operation
from .exceptions import NotSupportedError

logger = logging.getLogger(__name__)


class Provider:
    """Backend bound to a component.

    Operations are plain methods named after the component operation; the
    async flavour carries an `a` prefix. A provider may implement either
    flavour, the other one is bridged.
    """

    __component__: Any
    __type__: str

    def __init__(self, **kwargs):
        self.__type__ = kwargs.pop("__type__", self.__class__.__module__)
        for key, value in kwargs.items():
            setattr(self, key, value)

    def __setup__(self, context: Context | None = None) -> None:
        pass

    async def __asetup__(self, context: Context | None = None) -> None:
        await run_async(func=self.__setup__, context=context)

    def __run__(
        self,
        operation: Operation | None = None,
        context: Context | None = None,
        **kwargs,
    ) -> Any:
        args = self._get_args(operation)
        func = self._get_method(operation, "")
        if func is not None:
            self.__setup__(context=context)
            return func(**args)
        afunc = self._get_method(operation, "a")
        if afunc is not None:
            run_sync(self.__asetup__, context=context)
            return run_sync(afunc, **args)
        raise NotSupportedError(str(operation))

    async def __arun__(
        self,
        operation: Operation | None = None,
        context: Context | None = None,
        **kwargs,
    ) -> Any:
        afunc = self._get_method(operation, "a")
        if afunc is None:
            return await run_async(
                func=self.__run__,
                operation=operation,
                context=context,
                **kwargs,
            )
        await self.__asetup__(context=context)
        return await afunc(**self._get_args(operation))

    def __supports__(self, feature: str) -> bool:
        return callable(getattr(self, feature, None))

    def _get_method(
        self, operation: Operation | None, prefix: str
    ) -> Callable | None:
        if operation is None or not operation.name:
            return None
        method = getattr(self, f"{prefix}{operation.name}", None)
        if not callable(method):
            return None
        logger.debug(
            "Dispatching %s to %s", operation, self.__class__.__name__
        )
        return method

    def _get_args(self, operation: Operation | None) -> dict[str, Any]:
        if operation is None:
            return {}
        return dict(operation.args or {})
