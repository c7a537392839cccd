from .models import LanguageCode, LanguageProfile, ModelFile, ResolvedConfiguration
from .languages import LanguageRegistry, LANGUAGE_CODES
from .catalog import ModelCatalog, MODELS, MODEL_FOLDERS
from .resolver import ConfigurationResolver
from .exceptions import (
    DomainError,
    UnresolvedLanguageError,
    UnknownAnnotatorFamilyError,
    ModelUnavailableError,
    ModelNotFoundError,
    BridgeInitializationError,
    InvalidPipelineRequestError,
)

__all__ = [
    "LanguageCode",
    "LanguageProfile",
    "ModelFile",
    "ResolvedConfiguration",
    "LanguageRegistry",
    "LANGUAGE_CODES",
    "ModelCatalog",
    "MODELS",
    "MODEL_FOLDERS",
    "ConfigurationResolver",
    "DomainError",
    "UnresolvedLanguageError",
    "UnknownAnnotatorFamilyError",
    "ModelUnavailableError",
    "ModelNotFoundError",
    "BridgeInitializationError",
    "InvalidPipelineRequestError",
]
