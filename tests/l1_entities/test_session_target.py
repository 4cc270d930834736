"""Tests for SessionTarget path binding."""

import pytest

from draft_zero.l1_entities.errors import TargetPathLockedError
from draft_zero.l1_entities.session_target import SessionTarget


class TestSessionTarget:
    def test_starts_unbound(self):
        target = SessionTarget()
        assert target.path is None
        assert target.last_saved_at is None

    def test_bind_sets_path(self):
        target = SessionTarget()
        target.bind('/tmp/draft.txt')
        assert target.path == '/tmp/draft.txt'

    def test_rebinding_same_path_is_allowed(self):
        target = SessionTarget()
        target.bind('/tmp/draft.txt')
        target.bind('/tmp/draft.txt')
        assert target.path == '/tmp/draft.txt'

    def test_rebinding_other_path_raises(self):
        target = SessionTarget()
        target.bind('/tmp/draft.txt')
        with pytest.raises(TargetPathLockedError):
            target.bind('/tmp/other.txt')
        assert target.path == '/tmp/draft.txt'

    def test_mark_saved(self):
        target = SessionTarget()
        target.mark_saved(42.0)
        assert target.last_saved_at == 42.0
