# corenlp_bridge/core/domain/languages.py
"""
Language registry.

Maps the tokens a caller may use for a language (English name, ISO 639-1
code, ISO 639-2/B and 639-3 codes) to the canonical LanguageCode that keys
the model catalog.
"""
from typing import Dict, List, Optional, Tuple, Union

from corenlp_bridge.core.domain.models import LanguageCode
from corenlp_bridge.core.domain.exceptions import UnresolvedLanguageError

LANGUAGE_CODES: Dict[LanguageCode, Tuple[str, ...]] = {
    LanguageCode.ENGLISH: ("en", "eng", "english"),
    LanguageCode.GERMAN: ("de", "ger", "deu", "german"),
    LanguageCode.FRENCH: ("fr", "fre", "fra", "french"),
    LanguageCode.ARABIC: ("ar", "ara", "arabic"),
    LanguageCode.CHINESE: ("zh", "ch", "chi", "zho", "chinese"),
    LanguageCode.XINHUA: ("xi", "xin", "xinhua"),
}


class LanguageRegistry:
    """Read-only lookup of canonical languages by surface token."""

    def __init__(self, codes: Optional[Dict[LanguageCode, Tuple[str, ...]]] = None):
        codes = LANGUAGE_CODES if codes is None else codes
        self._codes = {
            lang: tuple(t.lower() for t in tokens) for lang, tokens in codes.items()
        }
        self._check_disjoint()

    def _check_disjoint(self):
        seen: Dict[str, LanguageCode] = {}
        for lang, tokens in self._codes.items():
            for token in tokens:
                if token in seen and seen[token] != lang:
                    raise ValueError(
                        f"Token '{token}' is claimed by both '{seen[token].value}' and '{lang.value}'"
                    )
                seen[token] = lang

    def resolve(self, token: Union[str, LanguageCode]) -> LanguageCode:
        """
        Resolves a language token to its canonical key.

        Raises:
            UnresolvedLanguageError: If no entry lists the token.
        """
        if isinstance(token, LanguageCode):
            return token

        needle = str(token).strip().lower()
        for lang, tokens in self._codes.items():
            if needle in tokens:
                return lang

        raise UnresolvedLanguageError(str(token))

    def supported(self) -> List[LanguageCode]:
        return list(self._codes)

    def aliases(self, language: LanguageCode) -> Tuple[str, ...]:
        return self._codes.get(language, ())
