"""Translation provider registry and factory.

Each backend variant registers itself with ``@register_provider(kind)``.
``create_provider`` validates the configuration once at startup and builds
the single provider instance the process uses; nothing downstream branches
on the provider kind.

Example:
    @register_provider(ProviderKind.VLLM)
    class VLLMProvider(HttpLLMProvider):
        ...

    provider = create_provider(ProviderConfig.from_settings(settings.autotranslate))
    provider.translate("안녕하세요", "ko", "en")
"""

import importlib
import pkgutil
from typing import Dict, Type

import structlog

from modules.autotranslate.errors import ConfigurationError
from modules.autotranslate.models import ProviderConfig, ProviderKind
from modules.autotranslate.providers.base import TranslationProvider

logger = structlog.get_logger()

_discovered: Dict[ProviderKind, Type[TranslationProvider]] = {}


def register_provider(kind: ProviderKind):
    """Register a provider class for a provider kind.

    Args:
        kind: The ProviderKind this class implements

    Returns:
        Decorator function
    """

    def decorator(obj):
        if not isinstance(obj, type) or not issubclass(obj, TranslationProvider):
            raise TypeError(
                f"Provider must subclass TranslationProvider: {kind.value}, got {obj}"
            )

        if kind in _discovered:
            raise RuntimeError(f"Provider already registered for kind: {kind.value}")

        obj.kind = kind
        _discovered[kind] = obj
        logger.debug(
            "translation_provider_discovered",
            provider=kind.value,
            class_name=obj.__name__,
        )
        return obj

    return decorator


def load_providers() -> None:
    """Import every provider module in this package so they register."""
    for module_info in pkgutil.iter_modules(__path__):
        if module_info.name == "base":
            continue
        importlib.import_module(f"{__name__}.{module_info.name}")


def get_provider_class(kind: ProviderKind) -> Type[TranslationProvider]:
    """Look up the registered class for a kind.

    Raises:
        ConfigurationError: no provider is registered for the kind
    """
    if kind not in _discovered:
        load_providers()
    try:
        return _discovered[kind]
    except KeyError as e:
        raise ConfigurationError(
            f"no translation provider registered for kind: {kind.value}",
            provider=kind.value,
        ) from e


def create_provider(config: ProviderConfig) -> TranslationProvider:
    """Validate the configuration and instantiate its provider.

    Raises:
        ConfigurationError: required settings are missing
    """
    config.validate()
    provider = get_provider_class(config.kind)(config)
    logger.info("translation_provider_created", provider=config.kind.value)
    return provider


__all__ = [
    "TranslationProvider",
    "register_provider",
    "load_providers",
    "get_provider_class",
    "create_provider",
]
