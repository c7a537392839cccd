# corenlp_bridge/core/domain/catalog.py
"""
Model catalog.

Static tables of the model files each annotator family needs, per language.
A family maps a language either to a single file (the family has one model)
or to a dict of named sub-models (e.g. the 3/4/7-class NER classifiers).
Languages missing from a family's table, or mapped to an empty dict, have no
model for that family.
"""
from typing import Dict, List, Optional, Union

from corenlp_bridge.core.domain.models import LanguageCode, ModelFile
from corenlp_bridge.core.domain.exceptions import UnknownAnnotatorFamilyError

ModelSpec = Union[str, Dict[str, str]]

MODEL_FOLDERS: Dict[str, str] = {
    "pos": "taggers/",
    "parse": "grammar/",
    "ner": "classifiers/",
    "dcoref": "dcoref/",
}

TAGGER_FILES: Dict[LanguageCode, ModelSpec] = {
    LanguageCode.ENGLISH: "english-left3words-distsim.tagger",
    LanguageCode.GERMAN: "german-fast.tagger",
    LanguageCode.FRENCH: "french.tagger",
    LanguageCode.ARABIC: "arabic-train.tagger",
    LanguageCode.CHINESE: "chinese.tagger",
}

PARSER_FILES: Dict[LanguageCode, ModelSpec] = {
    LanguageCode.ENGLISH: "englishPCFG.ser.gz",
    LanguageCode.GERMAN: "germanFactored.ser.gz",
    LanguageCode.FRENCH: "frenchFactored.ser.gz",
    LanguageCode.ARABIC: "arabicFactored.ser.gz",
    LanguageCode.CHINESE: "chinesePCFG.ser.gz",
    LanguageCode.XINHUA: "xinhuaPCFG.ser.gz",
}

NER_MODEL_FILES: Dict[LanguageCode, ModelSpec] = {
    LanguageCode.ENGLISH: {
        "model.3class": "all.3class.distsim.crf.ser.gz",
        "model.7class": "muc.7class.distsim.crf.ser.gz",
        "model.MISCclass": "conll.4class.distsim.crf.ser.gz",
    },
    LanguageCode.GERMAN: {},
    LanguageCode.CHINESE: {},
}

DCOREF_MODEL_FILES: Dict[LanguageCode, ModelSpec] = {
    LanguageCode.ENGLISH: {
        "demonym": "demonyms.txt",
        "animate": "animate.unigrams.txt",
        "female": "female.unigrams.txt",
        "inanimate": "inanimate.unigrams.txt",
        "male": "male.unigrams.txt",
        "neutral": "neutral.unigrams.txt",
        "plural": "plural.unigrams.txt",
        "singular": "singular.unigrams.txt",
        "states": "state-abbreviations.txt",
        "countries": "unknown.txt",
        "states.provinces": "unknown.txt",
        "extra.gender": "namegender.combine.txt",
    },
    LanguageCode.GERMAN: {},
    LanguageCode.FRENCH: {},
}

MODELS: Dict[str, Dict[LanguageCode, ModelSpec]] = {
    "pos": TAGGER_FILES,
    "parse": PARSER_FILES,
    "ner": NER_MODEL_FILES,
    "dcoref": DCOREF_MODEL_FILES,
}


class ModelCatalog:
    """Read-only view over the model tables."""

    def __init__(
        self,
        models: Optional[Dict[str, Dict[LanguageCode, ModelSpec]]] = None,
        folders: Optional[Dict[str, str]] = None,
    ):
        self._models = MODELS if models is None else models
        self._folders = MODEL_FOLDERS if folders is None else folders

    def families(self) -> List[str]:
        return list(self._models)

    def is_family(self, name: str) -> bool:
        return name in self._models

    def folder_for(self, family: str) -> str:
        try:
            return self._folders[family]
        except KeyError:
            raise UnknownAnnotatorFamilyError(family) from None

    def models_for(self, family: str, language: LanguageCode) -> Optional[ModelSpec]:
        """The raw table entry: a file name, a dict of sub-models, or None."""
        return self._models.get(family, {}).get(language)

    def entries_for(self, family: str, language: LanguageCode) -> List[ModelFile]:
        """
        Flattens a family's entry for `language` into property-keyed files.

        A single file becomes '<family>.model'; named sub-models become
        '<family>.<name>'.
        """
        spec = self.models_for(family, language)
        if spec is None:
            return []

        folder = self.folder_for(family)
        if isinstance(spec, dict):
            return [
                ModelFile(family=family, key=f"{family}.{name}", path=folder + file)
                for name, file in spec.items()
            ]
        return [ModelFile(family=family, key=f"{family}.model", path=folder + spec)]

    def build_index(self, language: LanguageCode) -> Dict[str, ModelFile]:
        """Every model file available for `language`, keyed by property name."""
        index: Dict[str, ModelFile] = {}
        for family in self._models:
            for entry in self.entries_for(family, language):
                index[entry.key] = entry
        return index
