"""
Test doubles for the Japanese translation layer.

- fakes.py: FakeClock, FakeSleep, scripted Gemini/Groq clients, sample keys
"""
