from typing import Any

from reelcraft.core import Component, Response, operation


class PromptEnhancement(Component):
    @operation()
    def enhance(self, prompt: str, **kwargs: Any) -> Response[str]:
        """
        Rewrite a prompt with more visual and cinematic detail.

        Best effort: when the rewrite fails or comes back empty the
        original prompt is returned unchanged.

        Args:
            prompt:
                User prompt.
        """
        return Response(result=prompt)

    @operation()
    async def aenhance(self, prompt: str, **kwargs: Any) -> Response[str]:
        """
        Rewrite a prompt with more visual and cinematic detail.

        Args:
            prompt:
                User prompt.
        """
        return Response(result=prompt)
