"""
Code Preview: Source Transformer

Strips module syntax from component source so it can be evaluated as a plain
script. This is textual substitution, not parsing:

  1. import ... from '...'   (line-oriented, non-greedy, optional semicolon)
  2. export default
  3. export

Each pattern is applied globally, in that order. Matches inside strings and
comments are stripped too, and imports spread over several lines or with no
`from` clause are left alone; both show up later as a parse error panel in
the preview rather than here.
"""

from __future__ import annotations

import re

# The clause between `import` and `from` may not cross a newline, a semicolon,
# a quote or another `import`, so each attempt stops at the next statement and
# the scan stays linear in the input length.
_IMPORT_RE = re.compile(
    r"""\bimport\b(?:(?!\bimport\b)[^\n;'"])*?\bfrom\b\s*(?:'[^'\n]*'|"[^"\n]*");?"""
)
_EXPORT_DEFAULT_RE = re.compile(r"\bexport\s+default\b\s*")
_EXPORT_RE = re.compile(r"\bexport\b\s*")


def transform(source_text: str) -> str:
    text = _IMPORT_RE.sub("", source_text)
    text = _EXPORT_DEFAULT_RE.sub("", text)
    return _EXPORT_RE.sub("", text)
