# corenlp_bridge/__init__.py
"""
corenlp-bridge - Stanford CoreNLP in an in-process JVM.

Selects language-specific model files, builds the pipeline properties and
hands them to CoreNLP through pyjnius. Laid out as Ports & Adapters:
`core` resolves configurations, `adapters` talks to the JVM.

Library users who want the use-case spans exported call
`setup_observability()` once at startup; the command line does it itself.
"""

from corenlp_bridge.client import CoreNLP
from corenlp_bridge.shared.observability import setup_observability
from corenlp_bridge.core.domain import (
    LanguageCode,
    LanguageProfile,
    ResolvedConfiguration,
    DomainError,
    UnresolvedLanguageError,
    ModelNotFoundError,
    ModelUnavailableError,
)

__version__ = "0.1.0"

__all__ = [
    "CoreNLP",
    "LanguageCode",
    "LanguageProfile",
    "ResolvedConfiguration",
    "DomainError",
    "UnresolvedLanguageError",
    "ModelNotFoundError",
    "ModelUnavailableError",
    "setup_observability",
]
