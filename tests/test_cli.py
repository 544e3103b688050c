"""Tests for the hub command-line interface."""

import pytest
from click.testing import CliRunner

from project_hub.cli import cli


@pytest.fixture
def runner(hub_home):
    return CliRunner()


def invoke(runner, *args, **kwargs):
    return runner.invoke(cli, list(args), obj={}, **kwargs)


class TestCli:
    """Test end-to-end command flows."""

    def test_parse_shows_suggestion(self, runner):
        result = invoke(runner, "parse", "finish report tomorrow")

        assert result.exit_code == 0, result.output
        assert "Title: finish report" in result.output
        assert "Tomorrow" in result.output

    def test_parse_without_date(self, runner):
        result = invoke(runner, "parse", "buy groceries")

        assert result.exit_code == 0
        assert "No date detected" in result.output

    def test_add_and_list(self, runner):
        result = invoke(runner, "add", "finish report tomorrow", "-p", "high")
        assert result.exit_code == 0, result.output
        assert "Added #1: finish report" in result.output

        result = invoke(runner, "list")
        assert result.exit_code == 0
        assert "finish report" in result.output
        assert "Tomorrow" in result.output
        assert "high" in result.output

    def test_add_no_parse_keeps_text(self, runner):
        invoke(runner, "add", "read tomorrow and tomorrow", "--no-parse")

        result = invoke(runner, "list")
        assert "read tomorrow and tomorrow" in result.output

    def test_add_with_explicit_due(self, runner):
        result = invoke(runner, "add", "buy groceries", "--due", "tomorrow")

        assert result.exit_code == 0, result.output
        assert "due Tomorrow" in result.output

    def test_add_bad_due_phrase(self, runner):
        result = invoke(runner, "add", "buy groceries", "--due", "whenever")

        assert result.exit_code == 2
        assert "Could not understand" in result.output

    def test_add_date_only_is_rejected(self, runner):
        result = invoke(runner, "add", "tomorrow")

        assert result.exit_code == 1
        assert "Todo title cannot be empty" in result.output

    def test_add_keeps_issue_number(self, runner):
        result = invoke(runner, "add", "fix bug 404")

        assert result.exit_code == 0
        assert "fix bug 404" in result.output
        assert "due" not in result.output

    def test_done_and_stats(self, runner):
        invoke(runner, "add", "finish report tomorrow")
        invoke(runner, "add", "buy groceries")

        result = invoke(runner, "done", "1")
        assert result.exit_code == 0
        assert "Completed #1" in result.output

        result = invoke(runner, "stats")
        assert "Pending: 1" in result.output
        assert "Completed today: 1" in result.output

    def test_reopen(self, runner):
        invoke(runner, "add", "buy groceries")
        invoke(runner, "done", "1")

        result = invoke(runner, "reopen", "1")
        assert result.exit_code == 0

        result = invoke(runner, "list", "--filter", "completed")
        assert "No todos found" in result.output

    def test_delete(self, runner):
        invoke(runner, "add", "buy groceries")

        result = invoke(runner, "delete", "1", "--yes")
        assert result.exit_code == 0

        result = invoke(runner, "list", "--filter", "all")
        assert "No todos found" in result.output

    def test_missing_todo(self, runner):
        result = invoke(runner, "done", "99")

        assert result.exit_code == 1
        assert "Todo 99 not found" in result.output

    def test_search(self, runner):
        invoke(runner, "add", "buy groceries")
        invoke(runner, "add", "call plumber")

        result = invoke(runner, "search", "grocery")

        assert result.exit_code == 0
        assert "buy groceries" in result.output
        assert "call plumber" not in result.output

    def test_ui_preferences(self, runner):
        result = invoke(runner, "ui", "set", "theme", "dark")
        assert result.exit_code == 0

        invoke(runner, "ui", "set", "sidebar_collapsed", "true")

        result = invoke(runner, "ui", "show")
        assert "theme: dark" in result.output
        assert "sidebar_collapsed: True" in result.output
        assert "project_view: grid" in result.output

    def test_ui_rejects_unknown_theme(self, runner):
        result = invoke(runner, "ui", "set", "theme", "neon")
        assert result.exit_code == 2

    def test_ui_sidebar_accepts_boolean_words(self, runner):
        result = invoke(runner, "ui", "set", "sidebar_collapsed", "yes")
        assert result.exit_code == 0
        assert "sidebar_collapsed: True" in result.output

        result = invoke(runner, "ui", "set", "sidebar_collapsed", "off")
        assert result.exit_code == 0
        assert "sidebar_collapsed: False" in result.output

    def test_ui_rejects_non_boolean_sidebar_value(self, runner):
        invoke(runner, "ui", "set", "sidebar_collapsed", "true")

        result = invoke(runner, "ui", "set", "sidebar_collapsed", "banana")
        assert result.exit_code == 2
        assert "banana" in result.output

        result = invoke(runner, "ui", "show")
        assert "sidebar_collapsed: True" in result.output
