# corenlp_bridge/core/use_cases/select_language.py
import structlog
from typing import Union

from corenlp_bridge.core.domain.models import LanguageCode, LanguageProfile
from corenlp_bridge.core.domain.resolver import ConfigurationResolver
from corenlp_bridge.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class SelectLanguage:
    """
    Use Case: Picks the language whose models the next pipelines will use.

    Returns an immutable LanguageProfile; nothing is stored process-wide.
    """

    def __init__(self, resolver: ConfigurationResolver):
        self.resolver = resolver

    def execute(self, language: Union[str, LanguageCode]) -> LanguageProfile:
        with tracer.start_as_current_span("use_case.select_language") as span:
            span.set_attribute("corenlp.language_token", str(language))

            profile = self.resolver.select_language(language)

            span.set_attribute("corenlp.language", profile.language.value)
            logger.info(
                "language_selected",
                token=str(language),
                lang=profile.language.value,
                model_files=len(profile.model_files),
            )
            return profile
