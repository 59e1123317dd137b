"""Read models returned by use cases.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from blogger.domain.model import Blog, Comment, LikesInfo, Post, User
from blogger.domain.value import LikeStatus


class ViewModel(BaseModel):
    """Base for response models serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserView(ViewModel):
    id: str
    login: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            login=str(user.login),
            email=user.email,
            created_at=user.created_at,
        )


class BlogView(ViewModel):
    id: str
    name: str
    description: str
    website_url: str
    created_at: datetime
    is_membership: bool

    @classmethod
    def from_blog(cls, blog: Blog) -> "BlogView":
        return cls(
            id=str(blog.id),
            name=blog.name,
            description=blog.description,
            website_url=blog.website_url,
            created_at=blog.created_at,
            is_membership=blog.is_membership,
        )


class LikeDetailsView(ViewModel):
    added_at: datetime
    user_id: str
    login: str


class ExtendedLikesInfoView(ViewModel):
    likes_count: int
    dislikes_count: int
    my_status: LikeStatus
    newest_likes: list[LikeDetailsView]


class PostView(ViewModel):
    id: str
    title: str
    short_description: str
    content: str
    blog_id: str
    blog_name: str
    created_at: datetime
    extended_likes_info: ExtendedLikesInfoView

    @classmethod
    def from_post(
        cls, post: Post, my_status: LikeStatus = LikeStatus.NONE
    ) -> "PostView":
        """Render a post with its stored like summary and the viewer's status."""
        likes_info = post.extended_likes_info
        return cls(
            id=str(post.id),
            title=post.title,
            short_description=post.short_description,
            content=post.content,
            blog_id=str(post.blog_id),
            blog_name=post.blog_name,
            created_at=post.created_at,
            extended_likes_info=ExtendedLikesInfoView(
                likes_count=likes_info.likes_count,
                dislikes_count=likes_info.dislikes_count,
                my_status=my_status,
                newest_likes=[
                    LikeDetailsView(
                        added_at=detail.added_at,
                        user_id=str(detail.user_id),
                        login=detail.login,
                    )
                    for detail in likes_info.newest_likes
                ],
            ),
        )


class CommentatorInfoView(ViewModel):
    user_id: str
    user_login: str


class LikesInfoView(ViewModel):
    likes_count: int
    dislikes_count: int
    my_status: LikeStatus


class CommentView(ViewModel):
    id: str
    content: str
    commentator_info: CommentatorInfoView
    created_at: datetime
    likes_info: LikesInfoView

    @classmethod
    def from_comment(cls, comment: Comment, likes_info: LikesInfo) -> "CommentView":
        """Render a comment with a like summary aggregated at read time."""
        return cls(
            id=str(comment.id),
            content=comment.content,
            commentator_info=CommentatorInfoView(
                user_id=str(comment.commentator_info.user_id),
                user_login=comment.commentator_info.user_login,
            ),
            created_at=comment.created_at,
            likes_info=LikesInfoView(
                likes_count=likes_info.likes_count,
                dislikes_count=likes_info.dislikes_count,
                my_status=likes_info.my_status,
            ),
        )
