"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_service import CommentNode, CommentService
from .identity_service import IdentityService
from .post_service import PostService
from .vote_service import VoteService

__all__ = [
    "AuthService",
    "CommentNode",
    "CommentService",
    "IdentityService",
    "PostService",
    "Service",
    "VoteService",
]
