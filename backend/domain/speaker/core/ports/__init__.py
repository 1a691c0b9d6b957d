"""Speaker domain ports (interfaces)."""

from domain.speaker.core.ports.clock import IClock
from domain.speaker.core.ports.speaker_repository import ISpeakerRepository

__all__ = ["IClock", "ISpeakerRepository"]
