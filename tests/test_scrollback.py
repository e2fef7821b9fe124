"""Tests for the scrollback store and history log."""

from ncshell.scrollback import Scrollback


def _submit(sb, text):
    sb.set_current(text)
    return sb.submit()


class TestInitialState:
    def test_starts_with_empty_draft(self):
        sb = Scrollback()
        assert sb.entries == [""]
        assert sb.index == 0
        assert sb.history == []
        assert sb.current() == ""


class TestSubmit:
    def test_history_is_most_recent_first(self):
        sb = Scrollback()
        for text in ("a", "b", "c"):
            _submit(sb, text)
        assert sb.history == ["c", "b", "a"]
        assert sb.entries == ["", "c", "b", "a"]
        assert sb.index == 0

    def test_submit_trims(self):
        sb = Scrollback()
        line = _submit(sb, "  look around  ")
        assert line.text == "look around"
        assert sb.history == ["look around"]

    def test_submit_splits_name_and_args(self):
        sb = Scrollback()
        line = _submit(sb, "say hello  world")
        assert line.name == "say"
        assert line.args == ["hello", "", "world"]

    def test_submit_without_args(self):
        sb = Scrollback()
        line = _submit(sb, "look")
        assert line.name == "look"
        assert line.args == []

    def test_empty_submit_ignored(self):
        sb = Scrollback()
        _submit(sb, "a")
        assert sb.submit() is None
        assert sb.history == ["a"]
        assert sb.entries == ["", "a"]

    def test_whitespace_submit_ignored(self):
        sb = Scrollback()
        _submit(sb, "a")
        assert _submit(sb, "   ") is None
        assert sb.history == ["a"]
        assert sb.entries == ["   ", "a"]

    def test_duplicates_are_kept(self):
        sb = Scrollback()
        _submit(sb, "look")
        _submit(sb, "look")
        assert sb.history == ["look", "look"]


class TestNavigation:
    def test_older_and_newer(self):
        sb = Scrollback()
        _submit(sb, "one")
        _submit(sb, "two")
        assert sb.navigate_older()
        assert sb.current() == "two"
        assert sb.navigate_older()
        assert sb.current() == "one"
        assert sb.navigate_newer()
        assert sb.current() == "two"
        assert sb.navigate_newer()
        assert sb.current() == ""

    def test_older_clamps_at_oldest(self):
        sb = Scrollback()
        _submit(sb, "one")
        sb.navigate_older()
        assert not sb.navigate_older()
        assert sb.index == 1

    def test_newer_clamps_at_draft(self):
        sb = Scrollback()
        assert not sb.navigate_newer()
        assert sb.index == 0

    def test_draft_survives_navigation(self):
        sb = Scrollback()
        _submit(sb, "one")
        sb.set_current("half typed")
        sb.navigate_older()
        sb.navigate_newer()
        assert sb.current() == "half typed"

    def test_edits_to_history_slots_are_discarded_on_submit(self):
        sb = Scrollback()
        _submit(sb, "one")
        _submit(sb, "two")
        sb.navigate_older()
        sb.navigate_older()
        sb.set_current("one edited")
        sb.navigate_newer()
        line = _submit(sb, "three")
        assert line.text == "three"
        assert sb.entries == ["", "three", "two", "one"]

    def test_submitting_from_history_slot(self):
        sb = Scrollback()
        _submit(sb, "one")
        sb.navigate_older()
        line = sb.submit()
        assert line.text == "one"
        assert sb.history == ["one", "one"]
        assert sb.index == 0


class TestResetDraft:
    def test_reset_draft(self):
        sb = Scrollback()
        _submit(sb, "one")
        sb.set_current("abc")
        sb.navigate_older()
        sb.reset_draft()
        assert sb.index == 0
        assert sb.current() == ""
        assert sb.entries == ["", "one"]
