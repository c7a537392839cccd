"""
Engine Adapters.

Concrete implementations of the `IPipelineGateway` port:

1. JniusPipelineGateway: runs Stanford CoreNLP in an in-process JVM via pyjnius.
"""

from .jnius_gateway import JniusPipelineGateway, BRIDGED_CLASSES

__all__ = [
    "JniusPipelineGateway",
    "BRIDGED_CLASSES",
]
