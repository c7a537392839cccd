# corenlp_bridge/core/domain/resolver.py
"""
Configuration resolution.

Turns a language token into a LanguageProfile, and a profile plus a list of
annotators into the flat property mapping the CoreNLP pipeline is built from.
"""
import os
from typing import Any, Dict, Iterable, Mapping, Optional, Union

import structlog

from corenlp_bridge.core.domain.catalog import ModelCatalog
from corenlp_bridge.core.domain.languages import LanguageRegistry
from corenlp_bridge.core.domain.models import (
    LanguageCode,
    LanguageProfile,
    ModelFile,
    ResolvedConfiguration,
)
from corenlp_bridge.core.domain.exceptions import (
    InvalidPipelineRequestError,
    ModelNotFoundError,
    ModelUnavailableError,
)

logger = structlog.get_logger()

SUTIME_FOLDER = "sutime"
SUTIME_RULE_FILES = ("defs.sutime.txt", "english.sutime.txt")


class ConfigurationResolver:
    """
    Resolves languages and pipeline configurations against the catalog.

    Holds no selection state: every call takes the profile it works on and
    returns new values.
    """

    def __init__(
        self,
        registry: LanguageRegistry,
        catalog: ModelCatalog,
        model_path: str,
        strict: bool = True,
    ):
        self.registry = registry
        self.catalog = catalog
        self.model_path = model_path
        self.strict = strict

    # --- Language selection ---

    def select_language(self, token: Union[str, LanguageCode]) -> LanguageProfile:
        """Builds a fresh profile holding every model file of the language."""
        language = self.registry.resolve(token)
        return LanguageProfile(
            language=language,
            model_files=self.catalog.build_index(language),
        )

    def set_model(self, profile: LanguageProfile, key: str, file: str) -> LanguageProfile:
        """
        Replaces (or adds) the file bound to one model key.

        The family is the first dot-segment of the key; `file` is relative to
        that family's folder.
        """
        family = key.split(".")[0]
        folder = self.catalog.folder_for(family)
        return profile.with_model(ModelFile(family=family, key=key, path=folder + file))

    # --- Pipeline configuration ---

    def model_file_path(self, model_file: ModelFile) -> str:
        return os.path.join(self.model_path, model_file.path)

    def resolve(
        self,
        profile: LanguageProfile,
        annotators: Iterable[Any],
        custom: Optional[Mapping[Any, Any]] = None,
    ) -> ResolvedConfiguration:
        """
        Builds the property mapping for `annotators` under `profile`.

        Raises:
            InvalidPipelineRequestError: If no annotator is requested.
            ModelUnavailableError: If a requested family has no model for the
                language (strict mode only).
            ModelNotFoundError: On the first model file that is not readable.
        """
        names = tuple(str(a) for a in annotators)
        if not names:
            raise InvalidPipelineRequestError("at least one annotator is required")

        if self.strict:
            for name in names:
                if self.catalog.is_family(name) and not profile.has_family(name):
                    raise ModelUnavailableError(name, profile.language.value)

        properties: Dict[str, str] = {}
        for model_file in profile.files_for(names):
            path = self.model_file_path(model_file)
            if not is_readable(path):
                logger.error("model_file_missing", key=model_file.key, path=path)
                raise ModelNotFoundError(path)
            properties[model_file.key] = path

        properties["annotators"] = ", ".join(names)

        if profile.language != LanguageCode.ENGLISH:
            # The non-English grammars reject -retainTmpSubcategories
            # and fail while building dependency graphs.
            properties["parse.flags"] = ""
            properties["parse.buildgraphs"] = "false"

        properties["sutime.binders"] = "0"

        if "ner" in names:
            properties["sutime.rules"] = ", ".join(
                os.path.join(self.model_path, SUTIME_FOLDER, f) for f in SUTIME_RULE_FILES
            )

        for key, value in (custom or {}).items():
            properties[str(key)] = str(value)

        return ResolvedConfiguration(
            language=profile.language,
            annotators=names,
            properties=properties,
        )


def is_readable(path: str) -> bool:
    """True for an existing regular file this process may read."""
    return os.path.isfile(path) and os.access(path, os.R_OK)
