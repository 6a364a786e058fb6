"""Test configuration and fixtures."""

import os
from datetime import datetime

import logfire

from citadel.domain.model import Post, User
from citadel.domain.value import BoardName, PostId, UserId, Username

# Cheap bcrypt hashes and test environment for every Settings() built in tests
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("IDENTITY__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)


def make_user(user_id: int, username: str) -> User:
    """Build a registered user for tests."""
    return User(
        id=UserId(user_id),
        username=Username(username),
        password_hash="not-a-real-hash",
        created_at=datetime.now(),
    )


def make_post(
    post_id: int,
    author: User,
    title: str = "Test Scroll",
    board: str = "General",
    score: int = 0,
) -> Post:
    """Build a post by ``author`` for tests."""
    now = datetime.now()
    return Post(
        id=PostId(post_id),
        title=title,
        content="Test content",
        board=BoardName(board),
        link=None,
        author_id=author.id,
        author_username=author.username,
        score=score,
        created_at=now,
        updated_at=now,
    )
