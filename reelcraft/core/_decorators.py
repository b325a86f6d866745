import inspect
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from ._operation import Operation
from .exceptions import NotSupportedError

T = TypeVar("T", bound=Callable[..., Any])


def _finalize(self: Any, response: Any) -> Any:
    finalize = getattr(self, "_finalize", None)
    if callable(finalize):
        return finalize(response)
    return response


def _bind_operation(func: Callable, name: str, args, kwargs) -> Operation:
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()
    locals = dict(bound_args.arguments)
    locals.pop("self", None)
    return Operation.normalize(name=name, args=locals)


def operation(**config: Any) -> Callable[[T], T]:
    """Mark a component method as an operation.

    The call is routed to the bound provider's method of the same name.
    If the provider does not implement it, the component method body runs
    instead.
    """

    def decorator(func: T) -> T:
        setattr(func, "__operation__", True)
        setattr(func, "__config__", config)
        if not inspect.iscoroutinefunction(func):

            @wraps(func)
            def wrapper(*args, **kwargs) -> Any:
                self = args[0]
                context = kwargs.pop("__context__", None)
                if hasattr(self, "__provider__"):
                    operation = _bind_operation(
                        func, func.__name__, args, kwargs
                    )
                    try:
                        return self.__run__(operation, context)
                    except NotSupportedError:
                        pass
                return _finalize(self, func(*args, **kwargs))

            return cast(T, wrapper)

        @wraps(func)
        async def awrapper(*args, **kwargs) -> Any:
            self = args[0]
            context = kwargs.pop("__context__", None)
            if hasattr(self, "__provider__"):
                operation = _bind_operation(
                    func, func.__name__[1:], args, kwargs
                )
                try:
                    return await self.__arun__(operation, context)
                except NotSupportedError:
                    pass
            return _finalize(self, await func(*args, **kwargs))

        return cast(T, awrapper)

    return decorator
