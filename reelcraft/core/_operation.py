from __future__ import annotations

from typing import Any

from .data_model import DataModel


class Operation(DataModel):
    """A named call routed from a component to its provider."""

    name: str | None = None
    args: dict[str, Any] | None = None

    @staticmethod
    def normalize(
        name: str | None,
        args: dict[str, Any] | None,
    ) -> Operation:
        """Build an operation from bound call arguments.

        `self` is dropped, `**kwargs` are flattened in and arguments left
        at None are omitted so provider defaults apply.
        """
        if args is None:
            return Operation(name=name)
        extra = args.get("kwargs") or {}
        rargs = {
            key: value
            for key, value in args.items()
            if key not in ("self", "kwargs") and value is not None
        }
        rargs.update(extra)
        return Operation(name=name, args=rargs)

    def __str__(self) -> str:
        names = ", ".join(sorted((self.args or {}).keys()))
        return f"{self.name}({names})"
