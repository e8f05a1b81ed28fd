# core/safe_math.py
from typing import Any, Dict, Mapping, Optional

import sympy as sp

_ALLOWED_NAMES: Dict[str, Any] = {
    "Rational": sp.Rational,
    "Integer": sp.Integer,
}


def parse_expr(src: str, symbols: Optional[Mapping[str, sp.Symbol]] = None) -> sp.Expr:
    """Parse *pure* polynomial arithmetic over the given symbols, nothing else."""
    local_dict = dict(_ALLOWED_NAMES)
    if symbols:
        local_dict.update(symbols)
    try:
        expr = sp.sympify(src, locals=local_dict, convert_xor=True, rational=True)
    except (sp.SympifyError, SyntaxError, TypeError) as exc:
        raise ValueError(f"Bad expression '{src}': {exc}") from exc
    unknown = {str(s) for s in expr.free_symbols} - set(symbols or {})
    if unknown:
        raise ValueError(f"Bad expression '{src}': unknown names {sorted(unknown)}")
    return expr
