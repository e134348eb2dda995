"""
Sentence and word segmentation.

Two interchangeable backends implement the ``Segmenter`` protocol:

- ``NltkSegmenter``: locale-aware Punkt sentence boundaries and Treebank word
  tokens, for hosts where the NLTK tokenizer data is installed.
- ``RegexSegmenter``: terminal-punctuation heuristics with per-language
  abbreviation lists and a Unicode-category word scan.

The backend is chosen once by ``select_segmenter`` rather than probed on
every call.
"""

from __future__ import annotations

import re
import unicodedata
from typing import List, Literal, Optional

import nltk
import structlog

from readabilitycore.languages import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from readabilitycore.protocols import Segmenter
from readabilitycore.text.abbreviations import abbreviations_for

logger = structlog.get_logger(__name__)

# A run of terminators, optionally followed by closing quotes or brackets,
# that ends at whitespace or at the end of the text.
_TERMINATOR = re.compile(r"[.!?]+[\"'’”»)\]]*(?=\s|$)")
_CLOSERS = "\"'’”»)]"
_OPENERS = "\"'“‘«([¿¡"
_INITIALS = re.compile(r"^(?:[^\W\d_]\.)+$")
_NEXT_WORD = re.compile(r"\s*[\"'“‘«(\[¿¡]*(\S)")

_WORD_JOINERS = "'’-"

# Contractions the Treebank tokenizer splits off the preceding word.
_CLITICS = frozenset({"n't", "'s", "'re", "'ve", "'ll", "'d", "'m", "’s", "’re", "’ve", "’ll", "’d", "’m"})


def prepare(text: str) -> str:
    """Compose accents so that each letter is a single code point."""
    return unicodedata.normalize("NFC", text)


def has_letter(text: str) -> bool:
    return any(ch.isalpha() for ch in text)


def _is_word_char(ch: str) -> bool:
    return unicodedata.category(ch)[0] in "LM" or ch in _WORD_JOINERS


def split_words(text: str) -> List[str]:
    """
    Split ``text`` into maximal runs of letters, marks, apostrophes and
    hyphens. A run starts at a letter, so vowel signs and other combining
    marks stay attached to the word they belong to.
    """
    words: List[str] = []
    start: Optional[int] = None
    for i, ch in enumerate(text):
        if start is None:
            if ch.isalpha():
                start = i
        elif not _is_word_char(ch):
            words.append(text[start:i])
            start = None
    if start is not None:
        words.append(text[start:])
    return words


class RegexSegmenter:
    """Punctuation and Unicode-category segmentation."""

    name = "regex"

    def sentences(self, text: str, language: str) -> List[str]:
        text = prepare(text)
        abbreviations = abbreviations_for(language)
        sentences: List[str] = []
        start = 0

        for match in _TERMINATOR.finditer(text):
            if match.group().rstrip(_CLOSERS) == "." and self._is_abbreviation(
                text[start : match.start()], text, match.end(), abbreviations
            ):
                continue
            sentence = text[start : match.end()].strip()
            if has_letter(sentence):
                sentences.append(sentence)
            start = match.end()

        remainder = text[start:].strip()
        if has_letter(remainder):
            sentences.append(remainder)
        return sentences

    def words(self, text: str, language: str) -> List[str]:
        return [token.rstrip(_WORD_JOINERS) for token in split_words(prepare(text))]

    @staticmethod
    def _is_abbreviation(preceding: str, text: str, end: int, abbreviations: frozenset) -> bool:
        if not preceding or preceding[-1].isspace():
            return False
        tokens = [token.lstrip(_OPENERS) for token in preceding.rsplit(None, 2)[-2:]]
        if not tokens or not tokens[-1]:
            return False

        token = tokens[-1]
        candidate = token.lower() + "."
        if candidate in abbreviations:
            return True
        if not _INITIALS.match(candidate):
            return False
        if len(token) > 1:
            # Dotted chains: U.S., i.e.
            return True
        previous = tokens[0] if len(tokens) == 2 else ""
        return _is_name_initial(token, previous, text, end)


def _is_name_initial(letter: str, previous: str, text: str, end: int) -> bool:
    """
    A lone letter is an initial only between capitalized words, as in
    "John F. Kennedy" or "J. R. R. Tolkien"; "plan B. It works." splits.
    """
    if not letter.isupper():
        return False
    following = _NEXT_WORD.match(text, end)
    if following is None or not following.group(1).isupper():
        return False
    return not previous or previous[0].isupper()


class NltkSegmenter:
    """
    Locale-aware segmentation backed by NLTK's Punkt models.

    Punkt ships models for all six supported languages; anything else is
    tokenized with the english model. If a model is missing at call time
    the call is served by the regex fallback instead of failing.
    """

    name = "nltk"

    def __init__(self, fallback: Segmenter | None = None):
        self._fallback = fallback or RegexSegmenter()

    @staticmethod
    def _punkt_language(language: str) -> str:
        return language if language in SUPPORTED_LANGUAGES.values() else DEFAULT_LANGUAGE

    def sentences(self, text: str, language: str) -> List[str]:
        text = prepare(text)
        try:
            found = nltk.tokenize.sent_tokenize(text, language=self._punkt_language(language))
        except LookupError as e:
            logger.warning("Punkt model unavailable, using regex sentences", language=language, error=str(e))
            return self._fallback.sentences(text, language)

        sentences = [s.strip() for s in found if has_letter(s)]
        if not sentences and has_letter(text):
            return [text.strip()]
        return sentences

    def words(self, text: str, language: str) -> List[str]:
        try:
            tokens = nltk.tokenize.word_tokenize(prepare(text), language=self._punkt_language(language))
        except LookupError as e:
            logger.warning("Punkt model unavailable, using regex words", language=language, error=str(e))
            return self._fallback.words(text, language)

        words: List[str] = []
        for token in tokens:
            if words and token.lower() in _CLITICS:
                words[-1] += token
            elif has_letter(token):
                words.append(token)
        return words


def punkt_available() -> bool:
    """Check whether the NLTK Punkt data needed for tokenizing is installed."""
    try:
        nltk.tokenize.sent_tokenize("Probe.", language=DEFAULT_LANGUAGE)
    except LookupError:
        return False
    return True


def select_segmenter(backend: Literal["auto", "nltk", "regex"] = "auto") -> Segmenter:
    """Pick the segmentation backend once, at analyzer construction."""
    if backend == "regex":
        segmenter: Segmenter = RegexSegmenter()
    elif backend == "nltk":
        if not punkt_available():
            logger.warning("NLTK segmenter requested but Punkt data is missing; calls will use regex fallback")
        segmenter = NltkSegmenter()
    else:
        segmenter = NltkSegmenter() if punkt_available() else RegexSegmenter()

    logger.info("Segmenter selected", backend=segmenter.name, requested=backend)
    return segmenter
