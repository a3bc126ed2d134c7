"""Comment forest construction.

Builds nested reply trees from a flat list of comments in two passes: every
comment is wrapped in a node keyed by id, then each reply is appended to its
parent's node. No I/O happens here.
"""

from typing import Collection, Iterable, Iterator, Mapping, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.model.comment_node import CommentNode
from discuss.domain.value import VoteValue


def build_forest(
    comments: Iterable[Comment],
    vote_counts: Mapping[int, int],
    caller_votes: Mapping[int, VoteValue],
    root_ids: Optional[Collection[int]] = None,
    reply_counts: Optional[Mapping[int, int]] = None,
) -> list[CommentNode]:
    """Link flat comments into a forest.

    Roots are the top-level comments, or exactly ``root_ids`` when given.
    Replies whose parent is not among ``comments`` are dropped, together
    with their own replies. Roots are ordered newest first; replies keep
    the order in which they appear in ``comments``.

    Args:
        comments: Fetched comments (top-level and replies)
        vote_counts: Vote sum per comment ID (missing means 0)
        caller_votes: Viewer's vote per comment ID (missing means no vote)
        root_ids: Comment IDs to use as roots instead of the top-level ones
        reply_counts: Stored direct-reply count per comment ID (missing means 0)

    Returns:
        Root nodes with replies nested
    """
    nodes: dict[int, CommentNode] = {}
    for comment in comments:
        nodes[comment.id] = CommentNode(
            **comment.model_dump(),
            vote_count=vote_counts.get(comment.id, 0),
            caller_vote=caller_votes.get(comment.id),
            reply_count=reply_counts.get(comment.id, 0) if reply_counts else 0,
            replies=[],
        )

    roots: list[CommentNode] = []
    for node in nodes.values():
        if root_ids is None:
            is_root = node.parent_comment_id is None
        else:
            is_root = node.id in root_ids
        if is_root:
            roots.append(node)
            continue
        parent = nodes.get(node.parent_comment_id)
        if parent is not None:
            parent.replies.append(node)

    roots.sort(key=lambda n: n.created_at, reverse=True)
    return roots


def flatten(forest: Iterable[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node of a forest depth-first, parents before replies."""
    stack = list(reversed(list(forest)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.replies))


def count_nodes(forest: Iterable[CommentNode]) -> int:
    """Number of nodes reachable from the roots."""
    return sum(1 for _ in flatten(forest))
