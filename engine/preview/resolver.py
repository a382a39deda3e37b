"""
Code Preview: Component Resolver

Emits the browser-side JavaScript that picks the component to render. Nothing
here evaluates source; the snippets run later inside the preview document.

The lookup is by convention only: the first of App, Component, Main that
exists as a top-level binding wins. Existence means referencing the name does
not throw, so a binding whose value is falsy still counts.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from engine.preview.types import CANDIDATE_NAMES


def binding_capture_js(names: Sequence[str] = CANDIDATE_NAMES) -> str:
    """
    JavaScript appended to the transformed source inside the evaluation scope.

    Collects each candidate that is declared into a plain object and returns
    it, so the caller of the enclosing function gets {name: value, ...}.
    """
    lines = ["const __bindings = {};"]
    for name in names:
        key = json.dumps(name)
        lines.append(f"try {{ __bindings[{key}] = {name}; }} catch (__missing) {{}}")
    lines.append("return __bindings;")
    return "\n".join(lines)


def selection_js(bindings_var: str, target_var: str, names: Sequence[str] = CANDIDATE_NAMES) -> str:
    """Ordered if / else-if chain assigning the first present candidate to target_var."""
    lines = [f"let {target_var} = null;"]
    for i, name in enumerate(names):
        key = json.dumps(name)
        keyword = "if" if i == 0 else "} else if"
        lines.append(f"{keyword} ({key} in {bindings_var}) {{")
        lines.append(f"  {target_var} = {bindings_var}[{key}];")
    if names:
        lines.append("}")
    return "\n".join(lines)


def no_candidate_message(names: Sequence[str] = CANDIDATE_NAMES) -> str:
    """Informational text shown when none of the candidates is defined."""
    if len(names) > 1:
        listed = ", ".join(names[:-1]) + ", or " + names[-1]
    else:
        listed = "".join(names)
    return f"No component to preview. Define a component named {listed} at the top level of the file."
