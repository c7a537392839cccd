"""
High-level entry point.

    nlp = CoreNLP("french")
    pipeline = nlp.load("tokenize", "ssplit", "pos", "parse")
    doc = nlp.annotation("Le chat dort.")
    pipeline.annotate(doc)
"""
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from corenlp_bridge.core.domain.models import LanguageCode, LanguageProfile, ModelFile
from corenlp_bridge.shared.container import Container, container as default_container


class CoreNLP:
    """
    A language selection plus the operations that use it.

    Each instance carries its own selection; two instances configured for
    different languages do not interfere.
    """

    def __init__(
        self,
        language: Union[str, LanguageCode, None] = None,
        custom_properties: Optional[Mapping[str, Any]] = None,
        container: Optional[Container] = None,
    ):
        self.container = container or default_container
        # Merged into every pipeline after the computed properties.
        self.custom_properties: Dict[str, Any] = dict(custom_properties or {})
        self.profile: LanguageProfile = None
        self.use(language or self.container.config().DEFAULT_LANGUAGE)

    @property
    def language(self) -> LanguageCode:
        return self.profile.language

    @property
    def model_files(self) -> Dict[str, ModelFile]:
        return dict(self.profile.model_files)

    def use(self, language: Union[str, LanguageCode]) -> LanguageProfile:
        """
        Uses models for a given language. The language can be given as a full
        name or as a 2/3-letter ISO-639 code ('english', 'eng' and 'en' all work).
        Model overrides made with `set_model` are discarded.
        """
        self.profile = self.container.select_language_use_case().execute(language)
        return self.profile

    def set_model(self, name: str, file: str) -> LanguageProfile:
        """Points one model key (e.g. 'pos.model') at another file of its family folder."""
        resolver = self.container.configuration_resolver()
        self.profile = resolver.set_model(self.profile, name, file)
        return self.profile

    def load(self, *annotators: Any, **properties: Any) -> Any:
        """
        Loads a StanfordCoreNLP pipeline with the given annotators.

        Keyword arguments are extra CoreNLP properties; they win over both the
        computed properties and `custom_properties`.
        """
        custom = dict(self.custom_properties)
        custom.update(properties)
        return self.container.load_pipeline_use_case().execute(self.profile, annotators, custom)

    def annotation(self, text: str) -> Any:
        """An engine document for `text`, ready for `pipeline.annotate`."""
        gateway = self.container.pipeline_gateway()
        if not gateway.is_initialized:
            gateway.initialize()
        return gateway.create_annotation(text)

    def token_list(self, tokens: Iterable[Any]) -> Any:
        """A Java list of words, for the classes that take pre-tokenized input."""
        gateway = self.container.pipeline_gateway()
        if not gateway.is_initialized:
            gateway.initialize()
        return gateway.create_token_list(tokens)
