# corenlp_bridge/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols the infrastructure adapters must implement, so the core can drive
the CoreNLP engine without knowing how the JVM is reached.
"""

from .pipeline_gateway import IPipelineGateway

__all__ = [
    "IPipelineGateway",
]
