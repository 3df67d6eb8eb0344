"""
Ошибки разбора и валидации Verhoeff.

Иерархия:
    VerhoeffError (ValueError)
    ├── InvalidCharacterError — символ вне ASCII '0'..'9'
    ├── EmptyInputError       — пустая строка
    └── InvalidLengthError    — длина не совпадает с длиной формата ID

Ошибки пробрасываются без обёртки через все слои (digits → checksum →
identifiers). Библиотека их не логирует.
"""


class VerhoeffError(ValueError):
    """Базовая ошибка входных данных Verhoeff."""
    pass


class InvalidCharacterError(VerhoeffError):
    """
    Входная строка содержит символ, не являющийся ASCII-цифрой.

    Attributes:
        character: Первый недопустимый символ
        position: Индекс символа во входной строке (0-based)
    """

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid character {character!r} at position {position} - only digits allowed"
        )


class EmptyInputError(VerhoeffError):
    """Входная строка пустая."""

    def __init__(self):
        super().__init__("Input cannot be empty")


class InvalidLengthError(VerhoeffError):
    """
    Длина входной строки не совпадает с требуемой длиной формата.

    Attributes:
        actual: Фактическая длина (в символах)
        expected: Требуемая длина
    """

    def __init__(self, actual: int, expected: int):
        self.actual = actual
        self.expected = expected
        super().__init__(f"Expected {expected} digits, got {actual} digits")
