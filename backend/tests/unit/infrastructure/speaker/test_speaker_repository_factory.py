"""Unit tests for speaker repository factory.

Tests explicit profile selection, seed resolution and the env-backed
singleton.
"""

import pytest

from domain.speaker.core.exceptions.speaker_errors import InvalidSeedNumberError
from infrastructure.clock import SystemClock
from infrastructure.speaker.repository_factory import (
    RepositoryProfile,
    create_speaker_repository,
    get_speaker_repository,
    reset_speaker_repository,
)
from infrastructure.speaker.stub_speaker_repository import StubSpeakerRepository


class TestRepositoryProfile:
    """Test RepositoryProfile.parse()."""

    @pytest.mark.parametrize("value", ["dev", "DEV", " Dev ", "myDevProfile"])
    def test_parse_dev(self, value):
        """Should accept dev in any case and the legacy alias."""
        assert RepositoryProfile.parse(value) is RepositoryProfile.DEV

    @pytest.mark.parametrize("value", ["prod", "", "development"])
    def test_parse_invalid(self, value):
        """Should raise ValueError for unknown profiles."""
        with pytest.raises(ValueError, match="Invalid SPEAKER_PROFILE value"):
            RepositoryProfile.parse(value)


class TestCreateSpeakerRepository:
    """Test create_speaker_repository() factory function."""

    def test_dev_creates_stub_repository(self, fixed_clock):
        """Should return StubSpeakerRepository for dev profile."""
        repo = create_speaker_repository(RepositoryProfile.DEV, clock=fixed_clock)
        assert isinstance(repo, StubSpeakerRepository)

    def test_explicit_seed_wins_over_factory(self, fixed_clock):
        """Explicit seed_number should be used and factory not called."""

        def _factory() -> float:
            raise AssertionError("seed_factory must not be called")

        repo = create_speaker_repository(
            RepositoryProfile.DEV,
            clock=fixed_clock,
            seed_number=42.0,
            seed_factory=_factory,
        )
        assert repo.find_all()[0].seed_number == 42.0

    def test_zero_seed_is_explicit(self, fixed_clock):
        """seed_number=0.0 is a value, not 'missing'."""
        repo = create_speaker_repository(
            RepositoryProfile.DEV,
            clock=fixed_clock,
            seed_number=0.0,
            seed_factory=lambda: 99.0,
        )
        assert repo.find_all()[0].seed_number == 0.0

    def test_seed_factory_called_once(self, fixed_clock):
        """Factory value is fixed at construction."""
        calls = []

        def _factory() -> float:
            calls.append(1)
            return 12.5

        repo = create_speaker_repository(
            RepositoryProfile.DEV, clock=fixed_clock, seed_factory=_factory
        )
        repo.find_all()
        repo.find_all()

        assert len(calls) == 1
        assert repo.find_all()[0].seed_number == 12.5

    def test_default_seed_in_range(self):
        """Default random seed falls in [0, 100)."""
        repo = create_speaker_repository(RepositoryProfile.DEV)
        seed = repo.find_all()[0].seed_number
        assert 0.0 <= seed < 100.0

    def test_default_clock_is_system_clock(self):
        """Default clock should be SystemClock."""
        repo = create_speaker_repository(RepositoryProfile.DEV, seed_number=1.0)
        assert isinstance(repo._clock, SystemClock)

    def test_invalid_seed_raises(self, fixed_clock):
        """Invalid seed surfaces at construction."""
        with pytest.raises(InvalidSeedNumberError):
            create_speaker_repository(
                RepositoryProfile.DEV, clock=fixed_clock, seed_number=float("inf")
            )


class TestSingletonGetter:
    """Test singleton get_speaker_repository() function."""

    def test_default_profile_is_dev(self):
        """Should build stub repository when SPEAKER_PROFILE not set."""
        repo = get_speaker_repository()
        assert isinstance(repo, StubSpeakerRepository)

    def test_singleton(self):
        """Should return same instance on multiple calls."""
        assert get_speaker_repository() is get_speaker_repository()

    def test_reset_clears_singleton(self):
        """reset_speaker_repository() should clear cached instance."""
        repo1 = get_speaker_repository()
        reset_speaker_repository()
        repo2 = get_speaker_repository()

        assert repo1 is not repo2

    def test_seed_from_env(self, monkeypatch):
        """SPEAKER_SEED_NUMBER should be used as explicit seed."""
        monkeypatch.setenv("SPEAKER_SEED_NUMBER", "42.0")

        repo = get_speaker_repository()

        assert repo.find_all()[0].seed_number == 42.0

    def test_invalid_profile_from_env(self, monkeypatch):
        """Unknown SPEAKER_PROFILE should raise ValueError."""
        monkeypatch.setenv("SPEAKER_PROFILE", "prod")

        with pytest.raises(ValueError, match="Invalid SPEAKER_PROFILE value: prod"):
            get_speaker_repository()

    def test_respects_env_changes_after_reset(self, monkeypatch):
        """After reset, new environment configuration is used."""
        monkeypatch.setenv("SPEAKER_SEED_NUMBER", "1.5")
        repo1 = get_speaker_repository()

        reset_speaker_repository()
        monkeypatch.setenv("SPEAKER_SEED_NUMBER", "2.5")
        repo2 = get_speaker_repository()

        assert repo1.find_all()[0].seed_number == 1.5
        assert repo2.find_all()[0].seed_number == 2.5
