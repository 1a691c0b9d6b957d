"""Speaker queries (CQRS read side)."""

from application.speaker.queries.list_speakers import ListSpeakersQuery

__all__ = ["ListSpeakersQuery"]
