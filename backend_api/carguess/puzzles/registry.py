from __future__ import annotations

from typing import Dict, Type

from .engines import ModelEngine, VariantEngine


# PUBLIC_INTERFACE
class EngineRegistry:
    """Registry mapping puzzle modes to engine classes."""

    _registry: Dict[str, Type] = {
        "easy": ModelEngine,
        "hard": VariantEngine,
    }

    @classmethod
    def get(cls, mode: str):
        """Return an engine class for a given mode, or raise KeyError."""
        key = (mode or "").strip().lower()
        if key not in cls._registry:
            raise KeyError(f"Unknown puzzle mode: {mode!r}")
        return cls._registry[key]

    @classmethod
    def modes(cls):
        """Registered mode identifiers, in registration order."""
        return list(cls._registry)


# PUBLIC_INTERFACE
def get_engine(mode: str):
    """Convenience function returning the engine class for a mode.

    Example:
        engine = get_engine("hard")()
        result = engine.evaluate(target=target_variant, guess=guess_variant)
    """
    return EngineRegistry.get(mode)
