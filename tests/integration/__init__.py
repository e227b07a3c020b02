"""
Integration tests for the Japanese translation layer.

- API endpoints (FastAPI TestClient with scripted providers)
- Live Gemini / Groq calls, skipped unless API keys are set
"""
