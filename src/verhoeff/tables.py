"""
Verhoeff Tables — таблицы группы D5

Три неизменяемые таблицы, на которых построен весь алгоритм Verhoeff:
- D_TABLE: таблица умножения диэдральной группы D5 (10×10)
- P_TABLE: 8 позиционных перестановок цифр 0..9
- INV_TABLE: обратный элемент для каждой цифры относительно D

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значения таблиц воспроизводятся бит-в-бит (любое отклонение ломает
   гарантии обнаружения ошибок)
2. Таблицы никогда не мутируют (tuple of tuples, создаются при импорте)
3. D замкнута на [0, 9]: D[a][b] ∈ [0, 9] для любых a, b ∈ [0, 9]
4. D[x][INV[x]] == 0 для любого x
"""

from typing import Final, Tuple

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Основание системы счисления (цифры 0..9)
DIGIT_BASE: Final[int] = 10

# Период позиционных перестановок: строка P берётся по модулю 8
PERMUTATION_PERIOD: Final[int] = 8


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

# Таблица умножения D5
D_TABLE: Final[Tuple[Tuple[int, ...], ...]] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)

# Позиционные перестановки (строка 0 — тождественная)
P_TABLE: Final[Tuple[Tuple[int, ...], ...]] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 1, 4, 2),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)

# Обратные элементы: D[x][INV[x]] == 0
INV_TABLE: Final[Tuple[int, ...]] = (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)


# =============================================================================
# ОПЕРАЦИИ НАД ТАБЛИЦАМИ
# =============================================================================


def multiply(a: int, b: int) -> int:
    """
    Групповая операция D5: D[a][b].

    Args:
        a: Текущее состояние свёртки (0..9)
        b: Переставленная цифра (0..9)

    Returns:
        Новое состояние свёртки (0..9)
    """
    return D_TABLE[a][b]


def permute(position: int, digit: int) -> int:
    """
    Позиционная перестановка цифры.

    Строка перестановки выбирается как position mod PERMUTATION_PERIOD,
    поэтому position может быть любым неотрицательным целым.

    Examples:
        >>> permute(0, 7)
        7
        >>> permute(1, 7)
        0
        >>> permute(9, 7)
        0
    """
    return P_TABLE[position % PERMUTATION_PERIOD][digit]


def inverse(x: int) -> int:
    """Обратный элемент x относительно D."""
    return INV_TABLE[x]
