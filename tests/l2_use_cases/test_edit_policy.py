"""Tests for the edit policy -- forward-only and corrections semantics."""

from __future__ import annotations

import pytest

from draft_zero.l1_entities.edit_intent import EditIntent, IntentKind
from draft_zero.l1_entities.edit_mode import EditMode
from draft_zero.l1_entities.selection import Selection
from draft_zero.l2_use_cases.edit_policy_use_case import EditVerdict, Splice, apply_edit

FWD = EditMode.FORWARD_ONLY
FIX = EditMode.CORRECTIONS_ALLOWED


class TestInsertion:
    @pytest.mark.parametrize('mode', [FWD, FIX])
    def test_insert_at_cursor(self, mode):
        out = apply_edit('abc', Selection.caret(3), mode, EditIntent.insert('d'))
        assert out.text == 'abcd'
        assert out.cursor == 4
        assert out.notify

    def test_insert_mid_buffer(self):
        out = apply_edit('ac', Selection.caret(1), FWD, EditIntent.insert('b'))
        assert out.text == 'abc'
        assert out.cursor == 2
        assert out.splice == Splice(start=1, end=1, insert='b')

    def test_paste_multiline(self):
        out = apply_edit('', Selection.caret(0), FWD, EditIntent.paste('one\ntwo'))
        assert out.text == 'one\ntwo'
        assert out.cursor == 7

    def test_empty_payload_is_noop(self):
        out = apply_edit('abc', Selection.caret(3), FWD, EditIntent.insert(''))
        assert out.verdict is EditVerdict.NOOP
        assert out.text == 'abc'
        assert not out.notify
        assert out.splice is None


class TestSelectionInsertCarveOut:
    def test_forward_only_inserts_after_selection(self):
        out = apply_edit('hello world', Selection(start=0, end=5), FWD, EditIntent.insert('HI'))
        assert out.text == 'helloHI world'
        assert out.cursor == 7
        assert out.notify

    def test_selection_to_end_appends(self):
        out = apply_edit('hello world', Selection(start=0, end=11), FWD, EditIntent.insert('HI'))
        assert out.text == 'hello worldHI'
        assert out.cursor == 13

    def test_paste_over_selection_keeps_selected_text(self):
        out = apply_edit('hello world', Selection(start=6, end=11), FWD, EditIntent.paste('!!'))
        assert out.text == 'hello world!!'
        assert 'world' in out.text

    def test_corrections_replaces_selection(self):
        out = apply_edit('hello world', Selection(start=0, end=5), FIX, EditIntent.insert('HI'))
        assert out.text == 'HI world'
        assert out.cursor == 2
        assert out.splice is not None
        assert out.splice.removed == 'hello'


class TestSuppression:
    @pytest.mark.parametrize('intent', [EditIntent.backspace(), EditIntent.delete(), EditIntent.cut()])
    def test_forward_only_blocks_deletion(self, intent):
        out = apply_edit('abc', Selection.caret(3), FWD, intent)
        assert out.verdict is EditVerdict.SUPPRESSED
        assert out.text == 'abc'
        assert out.cursor == 3
        assert not out.notify

    @pytest.mark.parametrize('intent', [EditIntent.backspace(), EditIntent.delete(), EditIntent.cut()])
    def test_forward_only_blocks_deleting_selection(self, intent):
        out = apply_edit('hello world', Selection(start=0, end=5), FWD, intent)
        assert out.verdict is EditVerdict.SUPPRESSED
        assert out.text == 'hello world'
        assert out.splice is None


class TestCorrections:
    def test_backspace_at_end(self):
        out = apply_edit('abc', Selection.caret(3), FIX, EditIntent.backspace())
        assert out.text == 'ab'
        assert out.cursor == 2
        assert out.notify

    def test_delete_forward(self):
        out = apply_edit('abc', Selection.caret(0), FIX, EditIntent.delete())
        assert out.text == 'bc'
        assert out.cursor == 0

    def test_backspace_at_start_is_noop(self):
        out = apply_edit('abc', Selection.caret(0), FIX, EditIntent.backspace())
        assert out.verdict is EditVerdict.NOOP
        assert not out.notify

    def test_delete_at_end_is_noop(self):
        out = apply_edit('abc', Selection.caret(3), FIX, EditIntent.delete())
        assert out.verdict is EditVerdict.NOOP

    def test_delete_selection(self):
        out = apply_edit('hello world', Selection(start=5, end=11), FIX, EditIntent.backspace())
        assert out.text == 'hello'
        assert out.cursor == 5

    def test_cut_reports_removed_text(self):
        out = apply_edit('hello world', Selection(start=0, end=6), FIX, EditIntent.cut())
        assert out.text == 'world'
        assert out.splice is not None
        assert out.splice.removed == 'hello '

    def test_cut_without_selection_is_noop(self):
        out = apply_edit('abc', Selection.caret(1), FIX, EditIntent.cut())
        assert out.verdict is EditVerdict.NOOP
        assert out.text == 'abc'


class TestPassthroughAndClamping:
    def test_other_intent_passes_through(self):
        out = apply_edit('abc', Selection.caret(1), FWD, EditIntent(kind=IntentKind.OTHER))
        assert out.verdict is EditVerdict.PASSTHROUGH
        assert out.text == 'abc'
        assert not out.notify

    def test_stale_selection_treated_as_caret_at_end(self):
        out = apply_edit('abc', Selection(start=1, end=99), FIX, EditIntent.insert('d'))
        assert out.text == 'abcd'
        assert out.cursor == 4

    def test_stale_selection_backspace_deletes_last_char(self):
        out = apply_edit('abc', Selection(start=-4, end=2), FIX, EditIntent.backspace())
        assert out.text == 'ab'


class TestMonotonicity:
    def test_forward_only_never_shrinks(self):
        text = 'hello world'
        script = [
            (Selection.caret(11), EditIntent.insert('!')),
            (Selection(start=0, end=5), EditIntent.insert('X')),
            (Selection.caret(3), EditIntent.backspace()),
            (Selection(start=2, end=8), EditIntent.cut()),
            (Selection(start=0, end=4), EditIntent.delete()),
            (Selection(start=1, end=3), EditIntent.paste('pasted')),
            (Selection.caret(0), EditIntent.insert('')),
            (Selection(start=40, end=2), EditIntent.insert('z')),
        ]
        for sel, intent in script:
            before = len(text)
            text = apply_edit(text, sel, FWD, intent).text
            assert len(text) >= before
