# test_range_resolver.py
import unittest
from datetime import datetime, timezone
from unittest import mock

import range_resolver
from errors import CommitNotFound, SelectionAborted
from models import Commit


def make_commit(commit_hash, subject, day):
    return Commit(
        hash=commit_hash,
        author="Ada",
        date=datetime(2024, 1, day, 12, 0, tzinfo=timezone.utc),
        subject=subject,
    )


# 最新在前
COMMITS = [
    make_commit("abc123" + "0" * 34, "Third", 3),
    make_commit("abc999" + "0" * 34, "Second", 2),
    make_commit("def456" + "0" * 34, "First", 1),
]


class RecordingSelector:
    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []

    def __call__(self, labels, prompt):
        self.calls.append((list(labels), prompt))
        return self.answers.pop(0)


def never_called(labels, prompt):
    raise AssertionError("selector should not be used")


class TestFindCommit(unittest.TestCase):

    def test_prefix_match(self):
        self.assertIs(range_resolver.find_commit(COMMITS, "def"), COMMITS[2])

    def test_multiple_matches_return_newest(self):
        self.assertIs(range_resolver.find_commit(COMMITS, "abc"), COMMITS[0])

    def test_full_hash(self):
        self.assertIs(range_resolver.find_commit(COMMITS, COMMITS[1].hash), COMMITS[1])

    def test_match_is_case_sensitive(self):
        with self.assertRaises(CommitNotFound):
            range_resolver.find_commit(COMMITS, "DEF")

    def test_no_match(self):
        with self.assertRaises(CommitNotFound) as ctx:
            range_resolver.find_commit(COMMITS, "123")
        self.assertIn("123", str(ctx.exception))


class TestResolveRange(unittest.TestCase):

    def test_explicit_refs(self):
        from_commit, to_commit = range_resolver.resolve_range(
            COMMITS, "def", "abc1", never_called
        )
        self.assertIs(from_commit, COMMITS[2])
        self.assertIs(to_commit, COMMITS[0])

    def test_interactive_from_then_to(self):
        selector = RecordingSelector(2, 0)
        from_commit, to_commit = range_resolver.resolve_range(
            COMMITS, None, None, selector
        )
        self.assertIs(from_commit, COMMITS[2])
        self.assertIs(to_commit, COMMITS[0])
        self.assertEqual(
            [prompt for _, prompt in selector.calls],
            [range_resolver.FROM_PROMPT, range_resolver.TO_PROMPT],
        )

    def test_labels_format(self):
        selector = RecordingSelector(0)
        range_resolver.resolve_range(COMMITS, None, "abc1", selector)
        labels = selector.calls[0][0]
        self.assertEqual(labels[0], "1. abc12300 - Third (2024-01-03)")
        self.assertEqual(labels[2], "3. def45600 - First (2024-01-01)")

    def test_mixed_explicit_and_interactive(self):
        selector = RecordingSelector(1)
        from_commit, to_commit = range_resolver.resolve_range(
            COMMITS, None, "def", selector
        )
        self.assertIs(from_commit, COMMITS[1])
        self.assertIs(to_commit, COMMITS[2])
        self.assertEqual(len(selector.calls), 1)

    def test_same_commit_and_reversed_order_are_accepted(self):
        same = range_resolver.resolve_range(COMMITS, "def", "def", never_called)
        self.assertIs(same[0], same[1])

        reversed_range = range_resolver.resolve_range(COMMITS, "abc1", "def", never_called)
        self.assertIs(reversed_range[0], COMMITS[0])
        self.assertIs(reversed_range[1], COMMITS[2])

    def test_missing_from_fails_before_to_is_resolved(self):
        with self.assertRaises(CommitNotFound):
            range_resolver.resolve_range(COMMITS, "zzz", None, never_called)

    def test_selector_abort_propagates(self):
        def aborting(labels, prompt):
            raise SelectionAborted("cancelled")

        with self.assertRaises(SelectionAborted):
            range_resolver.resolve_range(COMMITS, None, None, aborting)

    def test_out_of_range_index_is_aborted(self):
        with self.assertRaises(SelectionAborted):
            range_resolver.resolve_range(COMMITS, None, None, RecordingSelector(7))

    def test_empty_history_with_interactive_pick(self):
        with self.assertRaises(CommitNotFound):
            range_resolver.resolve_range([], None, None, RecordingSelector(0))


class TestConsoleSelector(unittest.TestCase):

    LABELS = ["1. aaaaaaaa - One (2024-01-01)", "2. bbbbbbbb - Two (2024-01-02)"]

    @mock.patch("builtins.print")
    @mock.patch("builtins.input", return_value="2")
    def test_number_is_one_based(self, _input, _print):
        self.assertEqual(range_resolver.console_selector(self.LABELS, "Pick"), 1)

    @mock.patch("builtins.print")
    @mock.patch("builtins.input", return_value="")
    def test_empty_input_selects_first(self, _input, _print):
        self.assertEqual(range_resolver.console_selector(self.LABELS, "Pick"), 0)

    @mock.patch("builtins.print")
    @mock.patch("builtins.input", side_effect=["9", "abc", "1"])
    def test_invalid_input_reprompts(self, _input, _print):
        self.assertEqual(range_resolver.console_selector(self.LABELS, "Pick"), 0)
        self.assertEqual(_input.call_count, 3)

    @mock.patch("builtins.print")
    @mock.patch("builtins.input", return_value="q")
    def test_q_aborts(self, _input, _print):
        with self.assertRaises(SelectionAborted):
            range_resolver.console_selector(self.LABELS, "Pick")

    @mock.patch("builtins.print")
    @mock.patch("builtins.input", side_effect=EOFError)
    def test_eof_aborts(self, _input, _print):
        with self.assertRaises(SelectionAborted):
            range_resolver.console_selector(self.LABELS, "Pick")

    @mock.patch("builtins.print")
    @mock.patch("builtins.input", side_effect=KeyboardInterrupt)
    def test_ctrl_c_aborts(self, _input, _print):
        with self.assertRaises(SelectionAborted):
            range_resolver.console_selector(self.LABELS, "Pick")


if __name__ == "__main__":
    unittest.main()
