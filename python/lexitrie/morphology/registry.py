"""Registry of morphology providers.

Usage:
    from lexitrie.morphology import get_provider, register_provider

    morphology = get_provider("english")
    morphology.lemma("running")    # "run"

    register_provider("custom", MyProviderClass)
"""

from .base import MorphologyProvider
from .english import EnglishMorphology

_PROVIDERS: dict[str, type[MorphologyProvider]] = {}
_DEFAULT_PROVIDER: str = "english"

# Cached instances
_INSTANCES: dict[str, MorphologyProvider] = {}


def _init_registry():
    """Initialize the registry with built-in providers."""
    global _PROVIDERS
    _PROVIDERS = {
        "english": EnglishMorphology,
    }


_init_registry()


def get_provider(name: str | None = None) -> MorphologyProvider:
    """Get a provider instance by name.

    Args:
        name: Provider name (uses default if None).

    Returns:
        MorphologyProvider instance (cached).
    """
    name = name or _DEFAULT_PROVIDER
    if name not in _PROVIDERS:
        raise ValueError(
            f"Unknown morphology provider: {name}. "
            f"Available: {list(_PROVIDERS.keys())}"
        )

    if name not in _INSTANCES:
        _INSTANCES[name] = _PROVIDERS[name]()

    return _INSTANCES[name]


def register_provider(name: str, cls: type[MorphologyProvider]) -> None:
    """Register a custom provider.

    Args:
        name: Name to register under.
        cls: MorphologyProvider class.
    """
    _PROVIDERS[name] = cls
    if name in _INSTANCES:
        del _INSTANCES[name]


def list_providers() -> list[str]:
    """List available provider names."""
    return list(_PROVIDERS.keys())
