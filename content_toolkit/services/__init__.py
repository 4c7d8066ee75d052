"""Gemini transport, credentials and the content stage functions."""
from content_toolkit.services.credentials import CredentialProvider
from content_toolkit.services.gemini_service import GeminiService

__all__ = ["CredentialProvider", "GeminiService"]
