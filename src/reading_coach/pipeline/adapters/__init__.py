"""Provider adapters that perform the single model call of each capability."""

from .base import AdapterFactory, GenerationAdapter

__all__ = ["AdapterFactory", "GenerationAdapter"]
