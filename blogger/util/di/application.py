"""Application layer DI providers."""

from dishka import Scope, provide

from blogger.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from blogger.application.usecase.blog import (
    CreateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogUseCase,
    ListBlogsUseCase,
    UpdateBlogUseCase,
)
from blogger.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from blogger.application.usecase.like import UpdateLikeStatusUseCase
from blogger.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blogger.application.usecase.testing import DeleteAllDataUseCase
from blogger.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
)
from blogger.domain.service import (
    BlogService,
    CommentService,
    JWTService,
    LikeService,
    LiveAggregate,
    PostService,
    TestingService,
    UserService,
)
from blogger.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # User administration use cases
    @provide
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    # Blog use cases
    @provide
    def get_create_blog_use_case(self, blog_service: BlogService) -> CreateBlogUseCase:
        """Provide create blog use case."""
        return CreateBlogUseCase(blog_service=blog_service)

    @provide
    def get_update_blog_use_case(self, blog_service: BlogService) -> UpdateBlogUseCase:
        """Provide update blog use case."""
        return UpdateBlogUseCase(blog_service=blog_service)

    @provide
    def get_delete_blog_use_case(self, blog_service: BlogService) -> DeleteBlogUseCase:
        """Provide delete blog use case."""
        return DeleteBlogUseCase(blog_service=blog_service)

    @provide
    def get_blog_use_case(self, blog_service: BlogService) -> GetBlogUseCase:
        """Provide get blog use case."""
        return GetBlogUseCase(blog_service=blog_service)

    @provide
    def get_list_blogs_use_case(self, blog_service: BlogService) -> ListBlogsUseCase:
        """Provide list blogs use case."""
        return ListBlogsUseCase(blog_service=blog_service)

    # Post use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_post_use_case(
        self, post_service: PostService, like_service: LikeService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, like_service=like_service)

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, like_service: LikeService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, like_service=like_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_comment_use_case(
        self, comment_service: CommentService, comment_likes: LiveAggregate
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service, comment_likes=comment_likes
        )

    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService, comment_likes: LiveAggregate
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, comment_likes=comment_likes
        )

    # Like use cases
    @provide
    def get_update_like_status_use_case(
        self, like_service: LikeService
    ) -> UpdateLikeStatusUseCase:
        """Provide update like status use case."""
        return UpdateLikeStatusUseCase(like_service=like_service)

    # Testing use cases
    @provide
    def get_delete_all_data_use_case(
        self, testing_service: TestingService
    ) -> DeleteAllDataUseCase:
        """Provide delete all data use case."""
        return DeleteAllDataUseCase(testing_service=testing_service)
