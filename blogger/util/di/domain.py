"""Domain layer DI providers."""

from dishka import Scope, provide

from blogger.config import AuthSettings
from blogger.domain.repository import (
    BlogRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from blogger.domain.service import (
    BlogService,
    CommentService,
    JWTService,
    LikeService,
    LikesAggregator,
    LiveAggregate,
    MaterializedProjection,
    PostService,
    TestingService,
    UserService,
)
from blogger.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with the repository and
    session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_blog_service(self, blog_repository: BlogRepository) -> BlogService:
        """Provide blog domain service."""
        return BlogService(blog_repository=blog_repository)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, blog_service: BlogService
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, blog_service=blog_service)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            user_service=user_service,
        )

    @provide
    def get_likes_aggregator(
        self, like_repository: LikeRepository, user_service: UserService
    ) -> LikesAggregator:
        """Provide likes aggregator."""
        return LikesAggregator(
            like_repository=like_repository, user_service=user_service
        )

    @provide
    def get_materialized_projection(
        self,
        post_service: PostService,
        like_repository: LikeRepository,
        aggregator: LikesAggregator,
    ) -> MaterializedProjection:
        """Provide the post likes projection."""
        return MaterializedProjection(
            post_service=post_service,
            like_repository=like_repository,
            aggregator=aggregator,
        )

    @provide
    def get_live_aggregate(
        self,
        comment_service: CommentService,
        like_repository: LikeRepository,
        aggregator: LikesAggregator,
    ) -> LiveAggregate:
        """Provide the comment likes aggregation."""
        return LiveAggregate(
            comment_service=comment_service,
            like_repository=like_repository,
            aggregator=aggregator,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        user_service: UserService,
        post_likes: MaterializedProjection,
        comment_likes: LiveAggregate,
    ) -> LikeService:
        """Provide like domain service with one strategy per parent type."""
        return LikeService(
            like_repository=like_repository,
            user_service=user_service,
            aggregations=[post_likes, comment_likes],
        )

    @provide
    def get_testing_service(
        self,
        user_repository: UserRepository,
        blog_repository: BlogRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
    ) -> TestingService:
        """Provide test data reset service."""
        return TestingService(
            user_repository=user_repository,
            blog_repository=blog_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            like_repository=like_repository,
        )
