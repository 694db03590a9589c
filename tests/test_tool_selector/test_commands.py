"""
Tests for command completion.
"""

from wiseowl.tool_selector import suggest_commands


class TestSuggestCommands:
    """suggest_commands ordering and limits."""

    def test_empty_input(self):
        assert suggest_commands("") == []
        assert suggest_commands("   ") == []

    def test_prefix_matches(self):
        assert suggest_commands("создать") == [
            'создать пользователя', 'создать книгу', 'создать резервирование', 'создать отчет',
        ]

    def test_prefix_before_substring(self):
        commands = ['найти книгу', 'книга дня', 'вернуть книгу']

        assert suggest_commands("книг", commands=commands) == [
            'книга дня', 'найти книгу', 'вернуть книгу',
        ]

    def test_all_words_match_last(self):
        commands = ['статистика книг', 'покажи все книги', 'книги статистика за год']

        assert suggest_commands("статистика книг", commands=commands) == [
            'статистика книг', 'книги статистика за год',
        ]

    def test_case_and_whitespace(self):
        assert suggest_commands("  ВЕРНУТЬ ") == ['вернуть книгу']

    def test_limit(self):
        assert len(suggest_commands("с")) == 5
        assert suggest_commands("создать", max_suggestions=1) == ['создать пользователя']

    def test_no_match(self):
        assert suggest_commands("книг отчет") == []
