"""Infrastructure layer exports."""

from .assemblyai_client import AssemblyAIClient

__all__ = ["AssemblyAIClient"]
