"""
Validation message catalog.

Messages use ``:placeholder`` tokens that are replaced at translation time,
e.g. ``translate("exceedsMax", {":property": "Tags", ":max": 3})``.
Applications provide real localization by injecting any callable with the
same signature as MessageCatalog.translate.
"""

from typing import Any, Callable, Dict, Mapping, Optional
import logging

from pyqt_listfield.protocols import get_list_config

logger = logging.getLogger(__name__)

Translator = Callable[[str, Mapping[str, Any]], str]

EXCEEDS_MAX = "exceedsMax"
EXCEEDS_MIN = "exceedsMin"

DEFAULT_MESSAGES: Dict[str, str] = {
    EXCEEDS_MAX: "The ':property' value exceeds the maximum of :max.",
    EXCEEDS_MIN: "The ':property' value is below the minimum of :min.",
}


class MessageCatalog:
    """English message templates, optionally overridden per key."""

    def __init__(self, overrides: Optional[Mapping[str, str]] = None):
        self._messages = dict(DEFAULT_MESSAGES)
        if overrides:
            self._messages.update(overrides)

    def translate(self, key: str, replacements: Mapping[str, Any]) -> str:
        """
        Look up key and substitute each replacement token.

        Unknown keys render as the key itself so a missing template is
        visible in the UI instead of raising during validation.
        """
        template = self._messages.get(key)
        if template is None:
            logger.warning(f"Missing message template '{key}'")
            template = key
        # Longest tokens first so ':max' never clobbers ':maximum'
        for token in sorted(replacements, key=len, reverse=True):
            template = template.replace(token, str(replacements[token]))
        return template

    __call__ = translate


def default_translator() -> Translator:
    """Catalog built from the configured message overrides."""
    return MessageCatalog(get_list_config().messages)
