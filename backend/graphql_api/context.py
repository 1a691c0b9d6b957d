"""GraphQL context factory for dependency injection.

Resolvers read their collaborators from `info.context` instead of
looking them up globally.
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from domain.speaker.core.ports.speaker_repository import ISpeakerRepository


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Attributes:
        speaker_repository: Repository active under the configured profile
        request: FastAPI request object (None outside HTTP)
    """

    def __init__(
        self,
        speaker_repository: ISpeakerRepository,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.speaker_repository = speaker_repository
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Args:
            key: Dependency name (e.g., "speaker_repository")

        Returns:
            Dependency instance or None if not found
        """
        return getattr(self, key, None)


def create_context(
    speaker_repository: ISpeakerRepository,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> from graphql_api.context import create_context
        >>> context = create_context(speaker_repository=repo)
        >>> context.get("speaker_repository") is repo
        True
    """
    return GraphQLContext(speaker_repository=speaker_repository, request=request)
