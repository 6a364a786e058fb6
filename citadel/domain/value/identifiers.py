"""Strongly typed identifiers for Citadel domain entities.

Identifiers are integers handed out by database sequences. NewType keeps
a PostId from being passed where a CommentId is expected.
"""

from typing import NewType

# Core domain entity identifiers
UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)
