"""Reply-tree construction for post comments.

Comments are stored flat with a ``parent_id`` pointer. Readers see a forest of
root comments, each carrying its replies, where:

- only approved comments of the requested post take part;
- siblings are ordered oldest first;
- a comment whose parent is not an approved comment of the same post is an
  orphan and is dropped along with everything beneath it.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable

from inkwell.db.time import as_utc
from inkwell.models.comment import Comment
from inkwell.schemas.comment import CommentResponse, CommentWithReplies

logger = logging.getLogger(__name__)

__all__ = ["build_comment_tree"]


def _chronological_key(comment: Comment) -> tuple:
    return (as_utc(comment.created_at), comment.id)


def build_comment_tree(
    post_id: str,
    comments: Iterable[Comment],
) -> tuple[CommentWithReplies, ...]:
    """Return the ordered reply forest for ``post_id``.

    ``comments`` may contain records from other posts or unapproved ones; they
    are filtered out here. The result is immutable and depends only on the
    input set, not on its iteration order.
    """
    visible = sorted(
        (c for c in comments if c.post_id == post_id and c.is_approved),
        key=_chronological_key,
    )
    known_ids = {c.id for c in visible}

    roots: list[Comment] = []
    children: defaultdict[str, list[Comment]] = defaultdict(list)
    for comment in visible:
        if comment.parent_id is None:
            roots.append(comment)
        elif comment.parent_id in known_ids:
            children[comment.parent_id].append(comment)
        else:
            logger.debug(
                "Dropping orphan comment %s on post %s (parent %s)",
                comment.id,
                post_id,
                comment.parent_id,
            )

    # Walk down from the roots; anything not reached (orphan subtrees, parent
    # cycles) never appears. Nodes are then built leaves-first so each one is
    # created once with its final, immutable replies.
    reachable: list[Comment] = []
    stack = list(reversed(roots))
    while stack:
        comment = stack.pop()
        reachable.append(comment)
        stack.extend(reversed(children.get(comment.id, ())))

    built: dict[str, CommentWithReplies] = {}
    for comment in reversed(reachable):
        base = CommentResponse.model_validate(comment).model_dump()
        built[comment.id] = CommentWithReplies(
            **base,
            replies=tuple(built[child.id] for child in children.get(comment.id, ())),
        )

    return tuple(built[root.id] for root in roots)
