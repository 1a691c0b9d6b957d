"""Speaker infrastructure adapters."""

from infrastructure.speaker.stub_speaker_repository import StubSpeakerRepository
from infrastructure.speaker.seed import random_seed_number

__all__ = ["StubSpeakerRepository", "random_seed_number"]
