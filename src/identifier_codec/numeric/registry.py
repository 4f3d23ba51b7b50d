"""Keyed store of shared transformers.

Transformers are immutable once constructed, so a single instance per
(domain, tweak) pair can be shared by every caller. A registry is owned by
the application and may be injected wherever transformers are needed; a
process-wide default registry backs ``Transformer.get``.
"""

import threading
from collections import OrderedDict
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..shared.config import IdentifierConfig
from ..shared.logging import get_logger
from .transformer import Transformer

TransformerKey = Tuple[int, Optional[int]]


@dataclass
class RegistryStatistics:
    """Cache statistics for a transformer registry."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total_accesses = self.hits + self.misses
        if total_accesses == 0:
            return 0.0
        return self.hits / total_accesses


class TransformerRegistry:
    """Thread-safe cache of transformers keyed by domain and tweak.

    Construction happens outside the lock; if two threads construct the same
    transformer concurrently, the first one published wins and the other is
    discarded, so every caller sees the same instance.
    """

    def __init__(self, config: Optional[IdentifierConfig] = None) -> None:
        """Initialize registry.

        Args:
            config: Configuration; caching behaviour is copied from
                ``config.cache`` and later changes to it are not seen
        """
        self.config = config or IdentifierConfig()
        self._cache_config = replace(self.config.cache)
        self.logger = get_logger(
            __name__, self.config.effective_correlation_id, "transformer_registry"
        )
        self._transformers: "OrderedDict[TransformerKey, Transformer]" = OrderedDict()
        self._lock = threading.Lock()
        self._statistics = RegistryStatistics()

    def get(self, domain: int, tweak: Optional[int] = None) -> Transformer:
        """Get the transformer for a domain and tweak, constructing it if necessary.

        Args:
            domain: Domain
            tweak: Tweak; ``None`` selects the identity transformer

        Returns:
            Shared transformer instance
        """
        cache_config = self._cache_config

        if not cache_config.enable_caching:
            return Transformer.construct(domain, tweak)

        key = (domain, tweak)

        with self._lock:
            transformer = self._transformers.get(key)
            if transformer is not None:
                self._transformers.move_to_end(key)
                self._statistics.hits += 1
                return transformer
            self._statistics.misses += 1

        # Validation errors propagate before anything is published
        constructed = Transformer.construct(domain, tweak)

        with self._lock:
            transformer = self._transformers.setdefault(key, constructed)
            self._transformers.move_to_end(key)

            if transformer is constructed:
                if self.logger.is_debug_enabled():
                    self.logger.debug(
                        f"Constructed {transformer!r}",
                        extra={"domain": domain, "tweak": tweak}
                    )
                self._evict(cache_config.max_entries)

        return transformer

    def _evict(self, max_entries: Optional[int]) -> None:
        if max_entries is None:
            return
        while len(self._transformers) > max_entries:
            key, _ = self._transformers.popitem(last=False)
            self._statistics.evictions += 1
            self.logger.debug(
                "Evicted transformer from cache",
                extra={"domain": key[0], "tweak": key[1]}
            )

    def clear(self) -> None:
        """Remove all cached transformers."""
        with self._lock:
            self._transformers.clear()

    @property
    def statistics(self) -> RegistryStatistics:
        """Snapshot of cache statistics."""
        with self._lock:
            return RegistryStatistics(
                hits=self._statistics.hits,
                misses=self._statistics.misses,
                evictions=self._statistics.evictions,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._transformers)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._transformers


_default_registry: Optional[TransformerRegistry] = None
_default_registry_lock = threading.Lock()


def default_registry() -> TransformerRegistry:
    """Get the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = TransformerRegistry()
        return _default_registry


def set_default_registry(
    registry: Optional[TransformerRegistry]
) -> Optional[TransformerRegistry]:
    """Replace the process-wide registry.

    Args:
        registry: Registry to use for subsequent ``Transformer.get`` calls;
            ``None`` resets to a fresh registry on next use

    Returns:
        The previous default registry, if one had been created
    """
    global _default_registry
    with _default_registry_lock:
        previous = _default_registry
        _default_registry = registry
    return previous
