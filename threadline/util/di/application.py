"""Application layer DI providers."""

from dishka import Scope, provide

from threadline.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    ListCommentsByCursorUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from threadline.domain.service import (
    CascadeDeleteService,
    CommentService,
    PaginationService,
)
from threadline.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, cascade_delete_service: CascadeDeleteService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(cascade_delete_service=cascade_delete_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, pagination_service: PaginationService
    ) -> ListCommentsUseCase:
        """Provide offset listing use case."""
        return ListCommentsUseCase(pagination_service=pagination_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_by_cursor_use_case(
        self, pagination_service: PaginationService
    ) -> ListCommentsByCursorUseCase:
        """Provide cursor listing use case."""
        return ListCommentsByCursorUseCase(pagination_service=pagination_service)
