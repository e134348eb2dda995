"""
Lazy, deduplicated loading of per-language hyphenation dictionaries.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import threading
from typing import Callable, Dict, Mapping, Optional

import pyphen
import structlog

from readabilitycore import observability
from readabilitycore.protocols import Hyphenator

logger = structlog.get_logger(__name__)

_MISSING = object()

# English has its own rule-based counter and never loads a dictionary.
HYPHENATION_LOCALES: Mapping[str, str] = {
    "german": "de",
    "french": "fr",
    "spanish": "es",
    "italian": "it",
    "dutch": "nl",
}


def load_pyphen(locale: str) -> Hyphenator:
    """Load the pyphen dictionary for ``locale`` and return its splitter."""
    dictionary = pyphen.Pyphen(lang=locale)
    return dictionary.positions


class HyphenationLoader:
    """
    Resolves a language to its hyphenator, loading each dictionary once.

    Completed loads live in ``_loaded``: a callable on success, ``None``
    when the language is unmapped or its load failed. Failures are never
    retried. While a load is running, its ``concurrent.futures.Future``
    sits in ``_pending`` so that every concurrent caller, from any thread
    or event loop, waits on the same load.
    """

    def __init__(
        self,
        factory: Callable[[str], Hyphenator] = load_pyphen,
        locales: Mapping[str, str] = HYPHENATION_LOCALES,
    ):
        self._factory = factory
        self._locales = dict(locales)
        self._loaded: Dict[str, Optional[Hyphenator]] = {}
        self._pending: Dict[str, concurrent.futures.Future] = {}
        self._lock = threading.Lock()

    def locale_for(self, language: str) -> Optional[str]:
        return self._locales.get(language.lower())

    def is_loaded(self, language: str) -> bool:
        return language.lower() in self._loaded

    async def get_hyphenator(self, language: str) -> Optional[Hyphenator]:
        """Return the language's hyphenator, or ``None`` to use the generic counter."""
        language = language.lower()
        locale = self._locales.get(language)
        if locale is None:
            return None

        hyphenator = self._loaded.get(language, _MISSING)
        if hyphenator is not _MISSING:
            return hyphenator

        with self._lock:
            hyphenator = self._loaded.get(language, _MISSING)
            if hyphenator is not _MISSING:
                return hyphenator
            future = self._pending.get(language)
            owner = future is None
            if owner:
                future = concurrent.futures.Future()
                self._pending[language] = future

        if owner:
            try:
                asyncio.get_running_loop().run_in_executor(None, self._load, language, locale, future)
            except Exception as e:
                logger.warning("Hyphenation load could not be scheduled", language=language, error=str(e))
                observability.increment("hyphenation_loads", labels={"language": language, "status": "failed"})
                self._resolve(language, None, future)

        # Shielded so that a cancelled caller cannot cancel the shared load.
        return await asyncio.shield(asyncio.wrap_future(future))

    def _load(self, language: str, locale: str, future: concurrent.futures.Future) -> None:
        hyphenator: Optional[Hyphenator]
        try:
            hyphenator = self._factory(locale)
        except Exception as e:
            logger.warning("Hyphenation unavailable, using generic syllable counting", language=language, error=str(e))
            observability.increment("hyphenation_loads", labels={"language": language, "status": "failed"})
            hyphenator = None
        else:
            logger.debug("Hyphenation dictionary loaded", language=language, locale=locale)
            observability.increment("hyphenation_loads", labels={"language": language, "status": "loaded"})
        self._resolve(language, hyphenator, future)

    def _resolve(
        self, language: str, hyphenator: Optional[Hyphenator], future: concurrent.futures.Future
    ) -> None:
        with self._lock:
            self._loaded[language] = hyphenator
            # A reset may already have handed the language to a newer load.
            if self._pending.get(language) is future:
                del self._pending[language]
        if not future.done():
            future.set_result(hyphenator)

    def reset(self) -> None:
        """Forget every completed and pending load. Intended for tests."""
        with self._lock:
            self._loaded.clear()
            self._pending.clear()
