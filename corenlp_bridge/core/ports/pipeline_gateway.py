# corenlp_bridge/core/ports/pipeline_gateway.py
from typing import Any, Dict, Iterable, Protocol

class IPipelineGateway(Protocol):
    """
    Port to the external CoreNLP engine.
    Implementations:
    - JniusPipelineGateway (in-process JVM through pyjnius)
    """

    @property
    def is_initialized(self) -> bool:
        """True once the bridge has been bootstrapped."""
        ...

    def initialize(self) -> None:
        """
        Bootstraps the bridge. Calling it again is a no-op.

        Raises:
            BridgeInitializationError: If a required resource is missing.
        """
        ...

    def create_pipeline(self, properties: Dict[str, str]) -> Any:
        """
        Builds an analysis pipeline from a flat property mapping.

        Returns:
            The engine's pipeline handle, unwrapped.

        Errors raised by the engine are propagated unmodified.
        """
        ...

    def create_annotation(self, text: str) -> Any:
        """Wraps raw text in an engine document ready for annotation."""
        ...

    def create_token_list(self, tokens: Iterable[Any]) -> Any:
        """Builds an engine-side list of word tokens."""
        ...
