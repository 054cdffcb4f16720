"""
Tests for the click command line.
"""

import json
import os
import sys

from click.testing import CliRunner

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from emojisense.autocomplete.protocol import JSONRPCMessage
from emojisense.cli.commands import main


class TestListCommand:
    def test_lists_all_categories(self):
        result = CliRunner().invoke(main, ["list"])
        assert result.exit_code == 0
        assert ":smile:" in result.output
        assert ":dog:" in result.output

    def test_category_filter(self):
        result = CliRunner().invoke(main, ["list", "--category", "nature"])
        assert result.exit_code == 0
        assert ":dog:" in result.output
        assert ":smile:" not in result.output

    def test_search(self):
        result = CliRunner().invoke(main, ["list", "--search", ":thumbs"])
        assert result.exit_code == 0
        assert ":thumbs_up:" in result.output
        assert ":thumbs_down:" in result.output
        assert ":dog:" not in result.output

    def test_search_without_matches(self):
        result = CliRunner().invoke(main, ["list", "--search", "zzzz"])
        assert result.exit_code == 0
        assert "No matching shortcodes" in result.output

    def test_unknown_category(self):
        result = CliRunner().invoke(main, ["list", "--category", "Food"])
        assert result.exit_code != 0


class TestCheckCommand:
    def test_participates(self):
        result = CliRunner().invoke(main, ["check", "say :dog"])
        assert result.exit_code == 0
        assert "Participates" in result.output
        assert "[4, 8)" in result.output

    def test_rejected_before_word(self):
        result = CliRunner().invoke(main, ["check", "hello :world", "--cursor", "7"])
        assert result.exit_code == 0
        assert "Does not participate" in result.output

    def test_rejected_in_code(self):
        result = CliRunner().invoke(main, ["check", "x :", "--tag", "identifier"])
        assert "Does not participate" in result.output

    def test_allowed_in_comment(self):
        result = CliRunner().invoke(main, ["check", "# x :", "--tag", "comment"])
        assert "Participates" in result.output

    def test_cursor_out_of_range(self):
        result = CliRunner().invoke(main, ["check", "abc", "--cursor", "10"])
        assert result.exit_code == 2


class TestServeCommand:
    def test_serves_stdin(self):
        request = JSONRPCMessage.request(
            'initializeCompletion', {'trigger': ':', 'cursor': 7, 'line': {'text': 'hello :'}}, 1
        )
        result = CliRunner().invoke(main, ["serve"], input=request + "\n")
        assert result.exit_code == 0
        response = json.loads(result.output.strip())
        assert response['result'] == {'participates': True, 'span': {'start': 6, 'end': 7}}

    def test_require_classification_flag(self):
        request = JSONRPCMessage.request(
            'initializeCompletion', {'trigger': ':', 'cursor': 7, 'line': {'text': 'hello :'}}, 1
        )
        result = CliRunner().invoke(main, ["serve", "--require-classification"], input=request + "\n")
        assert json.loads(result.output.strip())['result'] == {'participates': False}
