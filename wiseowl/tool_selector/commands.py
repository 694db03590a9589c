"""
Command completion for the assistant input box.

Offers canned commands while the user types: prefix matches first, then
substring matches, then commands that contain every typed word.
"""

from typing import List, Sequence

from .constants import MAX_COMMAND_SUGGESTIONS
from ..utils import normalize_query

DEFAULT_COMMANDS = (
    'покажи всех пользователей', 'покажи все книги', 'покажи все резервирования',
    'создать пользователя', 'создать книгу', 'создать резервирование',
    'найти пользователя', 'найти книгу', 'статистика пользователей',
    'статистика книг', 'статистика резервирований', 'построить график',
    'создать отчет', 'топ популярных книг', 'просроченные резервирования',
    'активные резервирования', 'одобрить резервирование', 'отменить резервирование',
    'вернуть книгу', 'выдать книгу', 'назначить роль', 'изменить пароль',
    'отправить уведомление', 'перейти на страницу', 'открыть каталог',
)


def suggest_commands(
    text: str,
    max_suggestions: int = MAX_COMMAND_SUGGESTIONS,
    commands: Sequence[str] = DEFAULT_COMMANDS,
) -> List[str]:
    """
    Suggest commands for partially typed input.

    Examples:
        >>> suggest_commands("создать", 2)
        ['создать пользователя', 'создать книгу']
        >>> suggest_commands("книг отчет")
        []
    """
    typed = normalize_query(text)
    if not typed:
        return []

    words = typed.split(' ')
    starts_with = []
    contains = []
    all_words = []

    for command in commands:
        lowered = command.lower()
        if lowered.startswith(typed):
            starts_with.append(command)
        elif typed in lowered:
            contains.append(command)
        elif all(word in lowered for word in words):
            all_words.append(command)

    return (starts_with + contains + all_words)[:max(max_suggestions, 0)]
