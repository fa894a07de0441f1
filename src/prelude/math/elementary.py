"""
Elementary Functions — каталог элементарных функций prelude

Pass-through к модулю math с IEEE-754 семантикой результата:
- Domain error (sqrt(-1), asin(2), ...) → NaN
- Полюс (log(0), atanh(1), gamma(0), ...) → ±Inf
- Переполнение (exp(1000), cosh(1000), ...) → ±Inf
Исключения math (ValueError/OverflowError) никогда не выходят наружу
для float-операндов.

Тип результата совпадает с типом операндов:
- float-операнды → float
- только int-операнды → int (усечение к нулю, как статическое приведение);
  нефинитный результат не представим как int и поднимает ошибку
  приведения Python (ValueError / OverflowError)

Имена, совпадающие с builtins, имеют суффикс "_" (abs_, min_, max_,
pow_, round_). CATALOGUE отображает канонические имена каталога на функции.
"""

import math
from typing import Callable, Final, TypeVar

Number = TypeVar("Number", int, float)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

PI: Final[float] = math.pi
E: Final[float] = math.e
TAU: Final[float] = math.tau

_INF: Final[float] = math.inf
_NAN: Final[float] = math.nan

# Значения C ilogb для особых аргументов (glibc)
FP_ILOGB0: Final[int] = -2147483648
FP_ILOGBNAN: Final[int] = -2147483648
FP_ILOGBINF: Final[int] = 2147483647


# =============================================================================
# ВНУТРЕННИЕ ХЕЛПЕРЫ
# =============================================================================


def _is_integral(*operands) -> bool:
    return all(isinstance(x, int) for x in operands)


def _like(result: float, *operands):
    """Привести результат к типу операндов."""
    if _is_integral(*operands):
        return int(result)
    return result


def _evaluate(fn: Callable[..., float], *operands, domain: float = _NAN, overflow: float = _INF):
    """
    Вызов функции math с IEEE-754 результатом вместо исключений.

    Args:
        fn: Функция модуля math
        *operands: Аргументы
        domain: Результат при domain error (ValueError)
        overflow: Результат при переполнении (OverflowError)
    """
    try:
        result = fn(*(float(x) for x in operands))
    except ValueError:
        result = domain
    except OverflowError:
        result = overflow
    return _like(result, *operands)


def _log_pole(x: float) -> float:
    # log(0) = -inf, log(x < 0) = nan
    return -_INF if x == 0 else _NAN


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and float(x).is_integer() and int(x) % 2 == 1


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ
# =============================================================================


def abs_(n: Number) -> Number:
    return abs(n)


def min_(a: Number, b: Number) -> Number:
    return a if a < b else b


def max_(a: Number, b: Number) -> Number:
    return a if a > b else b


def clamp(n: Number, lo: Number, hi: Number) -> Number:
    """
    Ограничение значения диапазоном [lo, hi].

    Examples:
        >>> clamp(15, 0, 10)
        10
        >>> clamp(-0.5, 0.0, 1.0)
        0.0
    """
    if n < lo:
        return lo
    if n > hi:
        return hi
    return n


def sign(n: Number) -> Number:
    """-1 / 0 / 1 в типе операнда (NaN → 0)."""
    if n < 0:
        result = -1
    elif n > 0:
        result = 1
    else:
        result = 0
    return result if isinstance(n, int) else float(result)


def mod(a: Number, b: Number) -> Number:
    """
    Остаток с усечением к нулю (знак делимого), как C % / fmod.

    Examples:
        >>> mod(-7, 3)
        -1
        >>> mod(7.5, 2.0)
        1.5
    """
    if _is_integral(a, b):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    return _evaluate(math.fmod, a, b)


def rem(a: Number, b: Number) -> Number:
    """IEEE remainder: a - n*b, n = ближайшее целое к a/b."""
    return _evaluate(math.remainder, a, b)


def hypot(a: Number, b: Number) -> Number:
    return _evaluate(math.hypot, a, b)


# =============================================================================
# СТЕПЕНИ И КОРНИ
# =============================================================================


def pow_(a: Number, b: Number) -> Number:
    """
    a ** b с IEEE-754 особыми случаями.

    - pow(0, b < 0) → +Inf (±Inf для нечётного целого b)
    - pow(a < 0, нецелое b) → NaN
    """
    if a == 0 and b < 0:
        domain = math.copysign(_INF, a) if _is_odd_integer(b) else _INF
    else:
        domain = _NAN

    overflow = -_INF if a < 0 and _is_odd_integer(b) else _INF
    return _evaluate(math.pow, a, b, domain=domain, overflow=overflow)


def sqrt(n: Number) -> Number:
    return _evaluate(math.sqrt, n)


def cbrt(n: Number) -> Number:
    return _evaluate(math.cbrt, n)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(n: Number) -> Number:
    return _evaluate(math.sin, n)


def cos(n: Number) -> Number:
    return _evaluate(math.cos, n)


def tan(n: Number) -> Number:
    return _evaluate(math.tan, n)


def asin(n: Number) -> Number:
    return _evaluate(math.asin, n)


def acos(n: Number) -> Number:
    return _evaluate(math.acos, n)


def atan(n: Number) -> Number:
    return _evaluate(math.atan, n)


def atan2(y: Number, x: Number) -> Number:
    return _evaluate(math.atan2, y, x)


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh(n: Number) -> Number:
    return _evaluate(math.sinh, n, overflow=math.copysign(_INF, n))


def cosh(n: Number) -> Number:
    return _evaluate(math.cosh, n)


def tanh(n: Number) -> Number:
    return _evaluate(math.tanh, n)


def asinh(n: Number) -> Number:
    return _evaluate(math.asinh, n)


def acosh(n: Number) -> Number:
    return _evaluate(math.acosh, n)


def atanh(n: Number) -> Number:
    """atanh(±1) → ±Inf, |n| > 1 → NaN."""
    domain = math.copysign(_INF, n) if abs(n) == 1 else _NAN
    return _evaluate(math.atanh, n, domain=domain)


# =============================================================================
# ЭКСПОНЕНТЫ И ЛОГАРИФМЫ
# =============================================================================


def exp(n: Number) -> Number:
    return _evaluate(math.exp, n)


def exp2(n: Number) -> Number:
    return _evaluate(math.exp2, n)


def expm1(n: Number) -> Number:
    return _evaluate(math.expm1, n)


def log(n: Number) -> Number:
    """
    Натуральный логарифм.

    Examples:
        >>> log(E)
        1.0
        >>> log(0.0)
        -inf
        >>> math.isnan(log(-1.0))
        True
    """
    return _evaluate(math.log, n, domain=_log_pole(n))


def log10(n: Number) -> Number:
    return _evaluate(math.log10, n, domain=_log_pole(n))


def log2(n: Number) -> Number:
    return _evaluate(math.log2, n, domain=_log_pole(n))


def log1p(n: Number) -> Number:
    return _evaluate(math.log1p, n, domain=-_INF if n == -1 else _NAN)


def logb(n: Number) -> Number:
    """
    Двоичная экспонента n как число (C logb).

    logb(0) → -Inf, logb(±Inf) → +Inf, logb(NaN) → NaN.
    """
    if isinstance(n, float):
        if math.isnan(n):
            return n
        if math.isinf(n):
            return _INF
    if n == 0:
        return _like(-_INF, n)
    return _like(float(math.frexp(n)[1] - 1), n)


def ilogb(n: Number) -> Number:
    """Двоичная экспонента n как целое (C ilogb), в типе операнда."""
    if isinstance(n, float) and math.isnan(n):
        result = FP_ILOGBNAN
    elif isinstance(n, float) and math.isinf(n):
        result = FP_ILOGBINF
    elif n == 0:
        result = FP_ILOGB0
    else:
        result = math.frexp(n)[1] - 1
    return result if isinstance(n, int) else float(result)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def _round_with(fn: Callable[[float], int], n: Number) -> Number:
    if isinstance(n, int):
        return n
    if not math.isfinite(n):
        return n
    # Знак сохраняется и для нулевого результата: ceil(-0.5) == -0.0
    return math.copysign(float(fn(n)), n)


def floor(n: Number) -> Number:
    return _round_with(math.floor, n)


def ceil(n: Number) -> Number:
    return _round_with(math.ceil, n)


def trunc(n: Number) -> Number:
    return _round_with(math.trunc, n)


def _round_half_away(n: float) -> int:
    t = math.trunc(n)
    if abs(n - t) >= 0.5:
        t += 1 if n > 0 else -1
    return t


def round_(n: Number) -> Number:
    """
    Округление half away from zero (C round, не banker's rounding).

    Examples:
        >>> round_(2.5)
        3.0
        >>> round_(-2.5)
        -3.0
    """
    return _round_with(_round_half_away, n)


def frac(n: Number) -> Number:
    """Дробная часть: n - trunc(n)."""
    return n - trunc(n)


# =============================================================================
# ГАММА-ФУНКЦИЯ
# =============================================================================


def gamma(n: Number) -> Number:
    """gamma(±0) → ±Inf, отрицательные целые → NaN."""
    domain = math.copysign(_INF, n) if n == 0 else _NAN
    return _evaluate(math.gamma, n, domain=domain)


def lgamma(n: Number) -> Number:
    """Логарифм |gamma(n)|; полюса (0, отрицательные целые) → +Inf."""
    return _evaluate(math.lgamma, n, domain=_INF)


# =============================================================================
# КАТАЛОГ
# =============================================================================

CATALOGUE: Final[dict[str, Callable]] = {
    "abs": abs_,
    "min": min_,
    "max": max_,
    "clamp": clamp,
    "pow": pow_,
    "sqrt": sqrt,
    "cbrt": cbrt,
    "sin": sin,
    "cos": cos,
    "tan": tan,
    "asin": asin,
    "acos": acos,
    "atan": atan,
    "atan2": atan2,
    "sinh": sinh,
    "cosh": cosh,
    "tanh": tanh,
    "asinh": asinh,
    "acosh": acosh,
    "atanh": atanh,
    "log": log,
    "log10": log10,
    "log2": log2,
    "log1p": log1p,
    "logb": logb,
    "ilogb": ilogb,
    "exp": exp,
    "exp2": exp2,
    "expm1": expm1,
    "floor": floor,
    "ceil": ceil,
    "round": round_,
    "trunc": trunc,
    "frac": frac,
    "sign": sign,
    "mod": mod,
    "rem": rem,
    "hypot": hypot,
    "gamma": gamma,
    "lgamma": lgamma,
}
