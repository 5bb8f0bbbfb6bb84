"""Domain layer DI providers."""

from dishka import Scope, provide

from threadline.config import CommentSettings
from threadline.domain.repository import CommentRepository, UnitOfWork
from threadline.domain.service import (
    CascadeDeleteService,
    CommentService,
    CounterService,
    PaginationService,
)
from threadline.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_counter_service(
        self, comment_repository: CommentRepository
    ) -> CounterService:
        """Provide child counter service."""
        return CounterService(comment_repository=comment_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        counter_service: CounterService,
        unit_of_work: UnitOfWork,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            counter_service=counter_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_cascade_delete_service(
        self,
        comment_repository: CommentRepository,
        counter_service: CounterService,
        unit_of_work: UnitOfWork,
        comment_settings: CommentSettings,
    ) -> CascadeDeleteService:
        """Provide cascade delete service."""
        return CascadeDeleteService(
            comment_repository=comment_repository,
            counter_service=counter_service,
            unit_of_work=unit_of_work,
            timeout=comment_settings.cascade_timeout_seconds,
        )

    @provide
    def get_pagination_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> PaginationService:
        """Provide pagination service."""
        return PaginationService(
            comment_repository=comment_repository, settings=comment_settings
        )
