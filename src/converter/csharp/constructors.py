"""Constructor chaining: this(...)/super(...) delegation and field initialization.

The delegating call becomes a C# constructor initializer (` : base(...)`),
so it runs before the body. The deferred field initializer is then the
first body statement, ahead of the user's own code.
"""

from __future__ import annotations

from typing import Optional

from ..ast_nodes import CallKind, ConstructorCall, FunctionMember
from .fields import FIELD_INITIALIZER


_DELEGATION_KEYWORDS = {
    CallKind.THIS: "this",
    CallKind.SUPER: "base",
}


def constructor_initializer(call: Optional[ConstructorCall]) -> str:
    if call is None:
        return ""
    keyword = _DELEGATION_KEYWORDS[call.kind]
    return f" : {keyword}({', '.join(call.args)})"


def constructor_body(func: FunctionMember, needs_initializer: bool) -> list[str]:
    lines = list(func.body)
    # A this(...) target already ran the initializer for this instance.
    delegates_to_this = func.delegates_to is not None and func.delegates_to.kind == CallKind.THIS
    if needs_initializer and not delegates_to_this:
        lines.insert(0, f"{FIELD_INITIALIZER}();")
    return lines
