"""Unit tests for comment forest construction."""

from discuss.domain.service.comment_tree import build_forest, count_nodes, flatten
from discuss.domain.value import VoteValue
from tests.conftest import make_comment


class TestBuildForest:
    """Tests for build_forest."""

    def test_every_comment_appears_once(self):
        """A complete comment set yields one node per comment."""
        # Arrange
        comments = [
            make_comment(1, minutes=0),
            make_comment(2, parent_comment_id=1, minutes=1),
            make_comment(3, parent_comment_id=2, minutes=2),
            make_comment(4, minutes=3),
            make_comment(5, parent_comment_id=4, minutes=4),
        ]

        # Act
        forest = build_forest(comments, {}, {})

        # Assert
        assert count_nodes(forest) == len(comments)
        assert sorted(node.id for node in flatten(forest)) == [1, 2, 3, 4, 5]

    def test_two_roots_with_one_reply_and_votes(self):
        """Votes and the viewer's vote land on the right nodes."""
        # Arrange
        comments = [
            make_comment(1, minutes=0),
            make_comment(2, parent_comment_id=1, minutes=1),
            make_comment(3, minutes=2),
        ]

        # Act
        forest = build_forest(comments, {1: 5, 2: -2}, {1: VoteValue.UP})

        # Assert
        assert [node.id for node in forest] == [3, 1]
        newest, oldest = forest
        assert (newest.vote_count, newest.caller_vote, newest.replies) == (0, None, [])
        assert (oldest.vote_count, oldest.caller_vote) == (5, VoteValue.UP)
        assert len(oldest.replies) == 1
        reply = oldest.replies[0]
        assert (reply.id, reply.vote_count, reply.caller_vote, reply.replies) == (
            2,
            -2,
            None,
            [],
        )

    def test_reply_counts_default_to_zero(self):
        # Arrange
        comments = [make_comment(1), make_comment(2, minutes=1)]

        # Act
        forest = build_forest(comments, {}, {}, reply_counts={1: 4})

        # Assert
        assert {node.id: node.reply_count for node in forest} == {1: 4, 2: 0}

    def test_roots_are_newest_first(self):
        """Top-level nodes are ordered by creation time, newest first."""
        # Arrange
        comments = [
            make_comment(1, minutes=0),
            make_comment(2, minutes=10),
            make_comment(3, minutes=5),
        ]

        # Act
        forest = build_forest(comments, {}, {})

        # Assert
        assert [node.id for node in forest] == [2, 3, 1]

    def test_replies_nest_under_their_parent(self):
        """Each reply sits in its parent's replies list."""
        # Arrange
        comments = [
            make_comment(1, minutes=0),
            make_comment(2, parent_comment_id=1, minutes=2),
            make_comment(3, parent_comment_id=1, minutes=1),
            make_comment(4, parent_comment_id=2, minutes=3),
        ]

        # Act
        forest = build_forest(comments, {}, {})

        # Assert
        assert len(forest) == 1
        root = forest[0]
        assert [reply.id for reply in root.replies] == [2, 3]
        assert [reply.id for reply in root.replies[0].replies] == [4]
        assert root.replies[1].replies == []

    def test_orphaned_replies_are_dropped(self):
        """Replies whose parent was not fetched are left out with their subtree."""
        # Arrange
        comments = [
            make_comment(1, minutes=0),
            make_comment(5, parent_comment_id=99, minutes=1),
            make_comment(6, parent_comment_id=5, minutes=2),
        ]

        # Act
        forest = build_forest(comments, {}, {})

        # Assert
        assert [node.id for node in flatten(forest)] == [1]

    def test_votes_are_attached(self):
        """Vote sums and caller votes come from the maps, defaulting to 0 and None."""
        # Arrange
        comments = [
            make_comment(1, minutes=0),
            make_comment(2, parent_comment_id=1, minutes=1),
        ]

        # Act
        forest = build_forest(comments, {1: 4}, {2: VoteValue.DOWN})

        # Assert
        root = forest[0]
        assert root.vote_count == 4
        assert root.caller_vote is None
        assert root.replies[0].vote_count == 0
        assert root.replies[0].caller_vote == VoteValue.DOWN

    def test_building_twice_gives_equal_forests(self):
        """The builder is pure: same input, same forest."""
        # Arrange
        comments = [
            make_comment(1, minutes=0),
            make_comment(2, parent_comment_id=1, minutes=1),
            make_comment(3, minutes=2),
        ]

        # Act
        first = build_forest(comments, {1: 2}, {})
        second = build_forest(comments, {1: 2}, {})

        # Assert
        assert [n.model_dump() for n in first] == [n.model_dump() for n in second]

    def test_explicit_root_ids(self):
        """A reply can be the root of its own forest."""
        # Arrange
        comments = [
            make_comment(2, parent_comment_id=1, minutes=1),
            make_comment(3, parent_comment_id=2, minutes=2),
        ]

        # Act
        forest = build_forest(comments, {}, {}, root_ids={2})

        # Assert
        assert [node.id for node in forest] == [2]
        assert forest[0].parent_comment_id == 1
        assert [reply.id for reply in forest[0].replies] == [3]

    def test_empty_input(self):
        """No comments, no roots."""
        assert build_forest([], {}, {}) == []


class TestFlatten:
    """Tests for depth-first traversal."""

    def test_parents_come_before_replies(self):
        """Traversal visits each root's subtree before the next root."""
        # Arrange
        comments = [
            make_comment(1, minutes=10),
            make_comment(2, parent_comment_id=1, minutes=11),
            make_comment(3, minutes=0),
            make_comment(4, parent_comment_id=3, minutes=1),
        ]
        forest = build_forest(comments, {}, {})

        # Act
        order = [node.id for node in flatten(forest)]

        # Assert
        assert order == [1, 2, 3, 4]
