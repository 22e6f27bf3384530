"""
Numerical Safeguards — безопасные примитивы для вероятностных расчётов

Модуль обеспечивает численную устойчивость расчётов рейтинга редкости:
- Безопасное деление долей (coverage, diversity) без деления на ноль
- NaN/Inf санитизация входных счётчиков
- Epsilon-сравнения float для проверки нормировки распределений
- Округление "half away from zero" для отображаемых значений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. NaN/Inf никогда не пропагируют (заменяются на fallback или верхнюю границу)
3. Целые вне диапазона float не бросают OverflowError (становятся ±inf)
4. Сумма распределения проверяется с толерантностью EPS_PROBABILITY_SUM
5. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений
EPS_CALC: Final[float] = 1e-12

# Толерантность нормировки: сумма вероятностей должна быть 1 ± EPS
EPS_PROBABILITY_SUM: Final[float] = 1e-9

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def to_float(value: float) -> float:
    """
    Приведение к float без OverflowError.

    int вне диапазона float становится ±inf с сохранением знака.

    Examples:
        >>> to_float(10 ** 400)
        inf
        >>> to_float(-(10 ** 400))
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def non_negative_float(value: float) -> float:
    """
    Неотрицательное значение для счётчиков и размеров.

    NaN и отрицательные значения дают 0.0, +inf сохраняется, чтобы
    последующее ограничение сверху дало максимум.

    Examples:
        >>> non_negative_float(-3)
        0.0
        >>> non_negative_float(float('inf'))
        inf
    """
    value = to_float(value)
    if math.isnan(value) or value < 0.0:
        return 0.0
    return value


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        float(value) если конечное, иначе fallback

    Examples:
        >>> sanitize_float(10)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    value = to_float(value)
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_ratio(
    numerator: float,
    denominator: float,
    fallback: float = 0.0,
    upper: float | None = None,
    eps: float = EPS_CALC,
) -> float:
    """
    Безопасная доля numerator / denominator.

    Используется для долей покрытия (pixels / max_pixels) и разнообразия
    (colors / max_colors). Знаменатель по смыслу положительный, поэтому
    denominator <= eps трактуется как вырожденный случай → fallback.

    При заданном upper доля ограничивается сверху, и бесконечный числитель
    даёт upper. Без upper бесконечная доля заменяется на fallback.

    Args:
        numerator: Числитель
        denominator: Знаменатель (ожидается > 0)
        fallback: Значение для вырожденного знаменателя или NaN результата
        upper: Верхняя граница доли (None = без ограничения)
        eps: Минимальный допустимый знаменатель

    Returns:
        Доля или fallback

    Examples:
        >>> safe_ratio(512, 1024)
        0.5
        >>> safe_ratio(10, 0)
        0.0
        >>> safe_ratio(float('inf'), 16, upper=1.0)
        1.0
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    num = to_float(numerator)
    denom = to_float(denominator)

    if math.isnan(num) or math.isnan(denom) or denom <= eps:
        return fallback

    # inf / inf
    ratio = num / denom if math.isfinite(num) or math.isfinite(denom) else math.nan

    if upper is not None and ratio > upper:
        return upper

    return sanitize_float(ratio, fallback=fallback)


def nonzero_total(values: Iterable[float], substitute: float = 1.0) -> float:
    """
    Сумма значений для нормировки с подстановкой при нулевой сумме.

    Нулевая сумма заменяется на substitute (по умолчанию 1), чтобы
    нормировка вырожденного распределения не делила на ноль.

    Args:
        values: Неотрицательные значения
        substitute: Значение вместо нулевой суммы

    Returns:
        sum(values) или substitute, если сумма равна 0
    """
    total = math.fsum(values)
    if total == 0.0:
        return substitute
    return total


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_probability_distribution(
    values: Iterable[float],
    tol: float = EPS_PROBABILITY_SUM,
) -> bool:
    """
    Проверка, что значения образуют распределение вероятностей.

    Каждое значение в [0, 1], сумма равна 1 в пределах tol.

    Args:
        values: Значения распределения
        tol: Абсолютная толерантность суммы

    Returns:
        True если распределение корректное
    """
    items = list(values)
    if not items:
        return False

    for value in items:
        if not is_valid_float(value) or value < 0.0 or value > 1.0 + tol:
            return False

    return abs(math.fsum(items) - 1.0) <= tol


# =============================================================================
# ОКРУГЛЕНИЕ И ОГРАНИЧЕНИЕ
# =============================================================================


def round_half_away(value: float, decimals: int = 2) -> float:
    """
    Округление до decimals знаков, половина — от нуля.

    В отличие от встроенного round() (banker's rounding), 0.125 → 0.13.

    Examples:
        >>> round_half_away(0.0443, 2)
        0.04
        >>> round_half_away(0.125, 2)
        0.13
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    scale = 10 ** decimals
    ratio = value * scale

    if ratio >= 0:
        steps = math.floor(ratio + 0.5)
    else:
        steps = math.ceil(ratio - 0.5)

    return steps / scale


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(1.4, 0.0, 1.0)
        1.0
        >>> clamp(-3.0, 0.0)
        0.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
