"""Speaker domain entities."""

from domain.speaker.core.entities.speaker import Speaker

__all__ = ["Speaker"]
