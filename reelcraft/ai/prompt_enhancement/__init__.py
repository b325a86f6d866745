from ._template import ENHANCE_TEMPLATE, build_enhance_request
from .component import PromptEnhancement

__all__ = ["ENHANCE_TEMPLATE", "PromptEnhancement", "build_enhance_request"]
