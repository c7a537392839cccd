# corenlp_bridge/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Lookup Errors ---

class UnresolvedLanguageError(DomainError):
    """Raised when a language token matches no entry of the language registry."""
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Language '{token}' is not supported or not found in the registry.")

class UnknownAnnotatorFamilyError(DomainError):
    """Raised when a model key refers to an annotator family without a model folder."""
    def __init__(self, family: str):
        self.family = family
        super().__init__(f"Annotator family '{family}' has no model folder in the catalog.")

class ModelUnavailableError(DomainError):
    """Raised when a requested annotator has no model file for the selected language."""
    def __init__(self, family: str, language: str):
        self.family = family
        self.language = language
        super().__init__(f"Annotator '{family}' has no model for language '{language}'.")

# --- Resource Errors ---

class ModelNotFoundError(DomainError):
    """Raised when a resolved model file is not readable on disk."""
    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Model file {path} could not be found. "
            "You may need to download this file manually and/or set paths properly."
        )

class BridgeInitializationError(DomainError):
    """Raised when the JVM bridge cannot be bootstrapped (e.g. a JAR is missing)."""
    def __init__(self, path: str, details: str = "file not found"):
        self.path = path
        super().__init__(f"Cannot initialize the JVM bridge with '{path}': {details}")

# --- Validation Errors ---

class InvalidPipelineRequestError(DomainError):
    """Raised when a pipeline is requested with an unusable annotator list."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid pipeline request: {reason}")
