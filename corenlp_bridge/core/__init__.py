# corenlp_bridge/core/__init__.py
"""
Core Domain Layer.

Language selection, model resolution and pipeline configuration.
- No dependency on the JVM or pyjnius.
- The only filesystem access is the readability check of model files.
- Defines the Port (IPipelineGateway) the engine adapter must implement.
"""
