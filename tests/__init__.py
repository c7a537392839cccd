# tests/__init__.py
"""
Test Suite for corenlp-bridge.

Organization:
- `core`: Language registry, model catalog, resolver and use cases, with the JVM mocked out.
- `adapters`: The pyjnius gateway, with the Java classes mocked out.
- top level: Settings, the CoreNLP facade and the command line.
"""
