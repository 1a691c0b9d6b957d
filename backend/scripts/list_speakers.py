#!/usr/bin/env python
"""Print the speakers returned by the configured speaker repository.

Usage:
    python scripts/list_speakers.py [--profile dev] [--seed 42.0]

Flags override SPEAKER_PROFILE / SPEAKER_SEED_NUMBER (also read from .env).

Exit codes:
    0 success
    2 invalid profile or seed
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
# Ensure backend root (BASE_DIR) is on sys.path for local packages
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from application.speaker.queries.list_speakers import ListSpeakersQuery  # noqa: E402
from domain.speaker.core.exceptions.speaker_errors import SpeakerDomainError  # noqa: E402
from infrastructure.config import (  # noqa: E402
    get_log_level,
    get_seed_number,
    get_speaker_profile,
)
from infrastructure.logging_config import configure_logging  # noqa: E402
from infrastructure.speaker.repository_factory import (  # noqa: E402
    RepositoryProfile,
    create_speaker_repository,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List conference speakers")
    parser.add_argument("--profile", dest="profile", default=None)
    parser.add_argument("--seed", dest="seed", type=float, default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        profile = RepositoryProfile.parse(args.profile or get_speaker_profile())
        seed = args.seed if args.seed is not None else get_seed_number()
        repository = create_speaker_repository(profile=profile, seed_number=seed)
    except (ValueError, SpeakerDomainError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    for speaker in ListSpeakersQuery(repository=repository).execute():
        print(f"{speaker.first_name} {speaker.last_name} (seed={speaker.seed_number:.2f})")
    return 0


if __name__ == "__main__":
    load_dotenv(BASE_DIR / ".env")
    configure_logging(get_log_level())
    sys.exit(main())
