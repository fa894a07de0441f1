"""
Core math modules для prelude

Каталог элементарных функций с IEEE-754 семантикой (pass-through к math).
"""

from src.prelude.math.elementary import (
    # Constants
    E,
    FP_ILOGB0,
    FP_ILOGBINF,
    FP_ILOGBNAN,
    PI,
    TAU,
    # Catalogue
    CATALOGUE,
    # Functions
    abs_,
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atan2,
    atanh,
    cbrt,
    ceil,
    clamp,
    cos,
    cosh,
    exp,
    exp2,
    expm1,
    floor,
    frac,
    gamma,
    hypot,
    ilogb,
    lgamma,
    log,
    log10,
    log1p,
    log2,
    logb,
    max_,
    min_,
    mod,
    pow_,
    rem,
    round_,
    sign,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
    trunc,
)

__all__ = [
    # Constants
    "E",
    "FP_ILOGB0",
    "FP_ILOGBINF",
    "FP_ILOGBNAN",
    "PI",
    "TAU",
    # Catalogue
    "CATALOGUE",
    # Functions
    "abs_",
    "acos",
    "acosh",
    "asin",
    "asinh",
    "atan",
    "atan2",
    "atanh",
    "cbrt",
    "ceil",
    "clamp",
    "cos",
    "cosh",
    "exp",
    "exp2",
    "expm1",
    "floor",
    "frac",
    "gamma",
    "hypot",
    "ilogb",
    "lgamma",
    "log",
    "log10",
    "log1p",
    "log2",
    "logb",
    "max_",
    "min_",
    "mod",
    "pow_",
    "rem",
    "round_",
    "sign",
    "sin",
    "sinh",
    "sqrt",
    "tan",
    "tanh",
    "trunc",
]
