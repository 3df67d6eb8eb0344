"""
Тесты для Checksum Engine

Проверяет:
1. Эталонные векторы compute / validate
2. Strict API: проброс ошибок разбора без обёртки
3. Permissive API: 0 / False / вход без изменений при ошибке
4. append_checksum
5. Детерминированность и потокобезопасность
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from verhoeff.checksum import (
    append_checksum,
    compute_checksum,
    compute_checksum_strict,
    validate,
    validate_strict,
)
from verhoeff.errors import EmptyInputError, InvalidCharacterError


# =============================================================================
# ЭТАЛОННЫЕ ВЕКТОРЫ
# =============================================================================


class TestKnownVectors:
    """Известные контрольные цифры"""

    @pytest.mark.parametrize(
        "payload, expected",
        [
            ("236", 3),
            ("12345", 1),
            ("142857", 0),
            ("12345678901", 0),
            ("0", 4),
            ("1", 5),
            ("9", 1),
        ],
    )
    def test_compute(self, payload: str, expected: int) -> None:
        """compute_checksum совпадает с эталоном и строка с цифрой валидна"""
        assert compute_checksum(payload) == expected
        assert compute_checksum_strict(payload) == expected
        assert validate(f"{payload}{expected}")

    @pytest.mark.parametrize("number", ["2363", "123451", "1428570", "123456789010"])
    def test_validate_valid(self, number: str) -> None:
        """Верные контрольные цифры"""
        assert validate(number) is True
        assert validate_strict(number) is True

    @pytest.mark.parametrize("number", ["2364", "123450", "1428571", "123456789019"])
    def test_validate_invalid(self, number: str) -> None:
        """Неверные контрольные цифры"""
        assert validate(number) is False
        assert validate_strict(number) is False

    def test_single_zero_validates(self) -> None:
        """'0' — валидная строка: свёртка одной цифры 0 даёт 0"""
        assert validate("0") is True


# =============================================================================
# STRICT API
# =============================================================================


class TestStrictErrors:
    """Ошибки strict API"""

    def test_compute_empty(self) -> None:
        """compute_checksum_strict('') — EmptyInputError"""
        with pytest.raises(EmptyInputError):
            compute_checksum_strict("")

    def test_compute_invalid_character(self) -> None:
        """compute_checksum_strict('12a45') — InvalidCharacterError('a')"""
        with pytest.raises(InvalidCharacterError) as exc_info:
            compute_checksum_strict("12a45")
        assert exc_info.value.character == "a"

    def test_validate_empty(self) -> None:
        """validate_strict('') — EmptyInputError, а не False"""
        with pytest.raises(EmptyInputError):
            validate_strict("")

    def test_validate_invalid_character(self) -> None:
        """validate_strict('12345a') — InvalidCharacterError"""
        with pytest.raises(InvalidCharacterError) as exc_info:
            validate_strict("12345a")
        assert exc_info.value.position == 5

    def test_unicode_digits(self) -> None:
        """Цифры деванагари отклоняются"""
        with pytest.raises(InvalidCharacterError):
            validate_strict("१२३४५")


# =============================================================================
# PERMISSIVE API
# =============================================================================


class TestPermissive:
    """Значения по умолчанию permissive API"""

    @pytest.mark.parametrize("text", ["", "12a45", "12 34", "١٢٣"])
    def test_compute_defaults_to_zero(self, text: str) -> None:
        """Ошибка разбора → 0"""
        assert compute_checksum(text) == 0

    def test_zero_fallback_is_ambiguous(self) -> None:
        """0 при ошибке неотличим от настоящей контрольной цифры 0"""
        assert compute_checksum("142857") == compute_checksum("bad") == 0

    @pytest.mark.parametrize("text", ["", "12a45", "2363 ", "٢٣٦٣"])
    def test_validate_defaults_to_false(self, text: str) -> None:
        """Ошибка разбора или пустая строка → False"""
        assert validate(text) is False

    def test_non_string_not_swallowed(self) -> None:
        """Ошибки, не относящиеся к разбору, пробрасываются"""
        with pytest.raises(TypeError):
            compute_checksum(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            validate(12345)  # type: ignore[arg-type]


# =============================================================================
# APPEND
# =============================================================================


class TestAppendChecksum:
    """Тесты для append_checksum"""

    @pytest.mark.parametrize(
        "payload, expected",
        [
            ("236", "2363"),
            ("12345", "123451"),
            ("142857", "1428570"),
            ("12345678901", "123456789010"),
        ],
    )
    def test_known(self, payload: str, expected: str) -> None:
        """Эталонные значения"""
        assert append_checksum(payload) == expected

    @pytest.mark.parametrize("payload", ["123", "456789", "000", "999999999", "00000001"])
    def test_shape_and_validity(self, payload: str) -> None:
        """Длина +1, префикс сохранён, результат валиден"""
        result = append_checksum(payload)
        assert len(result) == len(payload) + 1
        assert result[: len(payload)] == payload
        assert validate(result)

    @pytest.mark.parametrize("text", ["", "12a", " 12", "१२"])
    def test_invalid_input_returned_unchanged(self, text: str) -> None:
        """При ошибке разбора вход возвращается без изменений"""
        assert append_checksum(text) == text


# =============================================================================
# ДЕТЕРМИНИРОВАННОСТЬ
# =============================================================================


class TestDeterminism:
    """Чистота функций"""

    @pytest.mark.parametrize(
        "number", ["123456789", "987654321", "555555555", "000000000", "123123123"]
    )
    def test_repeated_calls(self, number: str) -> None:
        """Повторный вызов даёт тот же результат"""
        assert compute_checksum(number) == compute_checksum(number)
        assert validate(append_checksum(number))

    def test_concurrent_calls(self) -> None:
        """Параллельные вызовы не влияют друг на друга"""
        inputs = [str(n) * (n % 7 + 1) for n in range(500)]
        expected = [compute_checksum_strict(s) for s in inputs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(compute_checksum_strict, inputs))

        assert results == expected
