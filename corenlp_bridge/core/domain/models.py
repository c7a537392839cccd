# corenlp_bridge/core/domain/models.py
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple, Iterable
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# --- Enums ---

class LanguageCode(str, Enum):
    """Canonical language keys understood by the model catalog."""
    ENGLISH = "english"
    GERMAN = "german"
    FRENCH = "french"
    ARABIC = "arabic"
    CHINESE = "chinese"
    XINHUA = "xinhua"   # Chinese Treebank (Xinhua newswire) grammar

# --- Value Objects ---

class ModelFile(BaseModel):
    """
    One model file of an annotator family.

    `key` is the CoreNLP property the file is bound to (e.g. 'pos.model',
    'ner.model.3class') and `path` is relative to the model path, family
    folder included (e.g. 'taggers/french.tagger').
    """
    model_config = ConfigDict(frozen=True)

    family: str
    key: str
    path: str

class LanguageProfile(BaseModel):
    """
    The outcome of selecting a language: the canonical language plus the
    complete index of model files available for it.

    `model_files` is a read-only view; use `with_model` to derive a changed
    profile.
    """
    model_config = ConfigDict(frozen=True)

    language: LanguageCode
    model_files: Mapping[str, ModelFile] = Field(default_factory=dict, validate_default=True)

    @field_validator("model_files", mode="after")
    @classmethod
    def _freeze_model_files(cls, value: Mapping[str, ModelFile]) -> Mapping[str, ModelFile]:
        return MappingProxyType(dict(value))

    @field_serializer("model_files")
    def _serialize_model_files(self, value: Mapping[str, ModelFile]) -> Dict[str, ModelFile]:
        return dict(value)

    def files_for(self, families: Iterable[str]) -> List[ModelFile]:
        """Model files whose family is exactly one of `families`, in index order."""
        wanted = set(families)
        return [f for f in self.model_files.values() if f.family in wanted]

    def has_family(self, family: str) -> bool:
        return any(f.family == family for f in self.model_files.values())

    def with_model(self, model_file: ModelFile) -> "LanguageProfile":
        """Returns a copy with one model file added or replaced."""
        files = dict(self.model_files)
        files[model_file.key] = model_file
        return self.model_copy(update={"model_files": MappingProxyType(files)})

class ResolvedConfiguration(BaseModel):
    """
    The flat property mapping handed to the pipeline gateway.
    """
    model_config = ConfigDict(frozen=True)

    language: LanguageCode
    annotators: Tuple[str, ...]
    properties: Dict[str, str]

    def to_properties(self) -> Dict[str, str]:
        return dict(self.properties)
