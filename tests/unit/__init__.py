"""
Unit tests for the Japanese translation layer.

Test individual components in isolation, on fake time and scripted providers:
- Sanitization, prompt rendering and error classification
- Provider clients over httpx.MockTransport (wire format, timer race)
- Deadline, retry scheduler and fallback chain
- Orchestrator, service and text sources
- API models, dependencies and error mapping
"""
