"""
Code Preview: Document Renderer

Turns a SourceDocument into a self-contained HTML page that previews the
component it defines. React, ReactDOM and Babel standalone are loaded from a
CDN at pinned versions; the component source is compiled and evaluated
client-side. This module only emits that code, it never runs the source.

Browser-side flow:
  1. Babel transpiles the transformed source (react preset, plus typescript
     for .ts/.tsx). The result is evaluated in a function nested inside
     `new Function`, so its top-level declarations stay local. The outer
     scope re-binds the named React exports (useState, ...) that the
     stripped `import { ... } from 'react'` lines used to provide.
  2. The candidate bindings (App, Component, Main) are captured and the first
     one present is selected.
  3. The selection is mounted under an error boundary.

Outcomes, each its own panel:
  - preview-parse-error   transpile or evaluation threw
  - preview-no-component  none of the candidates exist (informational)
  - preview-render-error  mounting the selected component threw
"""

from __future__ import annotations

import json
import logging

from engine.preview.classifier import is_previewable
from engine.preview.resolver import binding_capture_js, no_candidate_message, selection_js
from engine.preview.transformer import transform
from engine.preview.types import CANDIDATE_NAMES, PREVIEWABLE_EXTENSIONS, PreviewConfig, SourceDocument

logger = logging.getLogger(__name__)

_TYPESCRIPT_EXTENSIONS = {".ts", ".tsx"}

# Named React exports that stripped `import { ... } from 'react'` lines relied on
REACT_NAMED_EXPORTS = (
    "useState",
    "useEffect",
    "useLayoutEffect",
    "useContext",
    "useReducer",
    "useRef",
    "useMemo",
    "useCallback",
    "useId",
    "useTransition",
    "useDeferredValue",
    "Fragment",
    "createContext",
    "forwardRef",
    "memo",
)

REACT_PRELUDE = "const { " + ", ".join(REACT_NAMED_EXPORTS) + " } = React;"

# Babel picks JSX and TSX parsing from the file name
_BABEL_FILENAMES = {".jsx": "preview.jsx", ".js": "preview.jsx", ".tsx": "preview.tsx", ".ts": "preview.ts"}


def render_preview(
    doc: SourceDocument,
    config: PreviewConfig | None = None,
    title: str | None = None,
) -> str:
    """
    Render the preview page for a source document.

    Args:
        doc: Extension plus raw component source
        config: CDN versions; defaults to PreviewConfig()
        title: Optional page title (usually the file name)

    Returns:
        Complete HTML string. Ineligible files get the fixed unsupported page.
    """
    if not is_previewable(doc.file_extension):
        logger.debug("react_preview: unsupported extension %r", doc.file_extension)
        return render_unsupported()

    config = config or PreviewConfig()
    transformed = transform(doc.text)
    logger.debug(
        "react_preview: rendering %s (%d chars in, %d chars transformed)",
        doc.file_extension,
        len(doc.text),
        len(transformed),
    )

    react_url, react_dom_url, babel_url = config.script_urls()
    presets = ["react", "typescript"] if doc.file_extension in _TYPESCRIPT_EXTENSIONS else ["react"]
    filename = _BABEL_FILENAMES[doc.file_extension]

    page_title = _escape_html(title) if title else "Component Preview"

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{page_title}</title>
<script crossorigin src="{_escape_html(react_url)}"></script>
<script crossorigin src="{_escape_html(react_dom_url)}"></script>
<script src="{_escape_html(babel_url)}"></script>
<style>
{PREVIEW_CSS}
</style>
</head>
<body>
<div id="root"></div>
<section id="preview-parse-error" class="panel panel-error" hidden>
  <h2>Could not evaluate the source</h2>
  <pre class="panel-message"></pre>
</section>
<section id="preview-render-error" class="panel panel-error" hidden>
  <h2>Component failed to render</h2>
  <pre class="panel-message"></pre>
</section>
<section id="preview-no-component" class="panel panel-info" hidden>
  <p class="panel-message">{_escape_html(no_candidate_message(CANDIDATE_NAMES))}</p>
</section>
<script>
(function () {{
  const SOURCE = {_js_literal(transformed)};
  const FILENAME = {_js_literal(filename)};
  const PRESETS = {_js_literal(presets)};
  const PRELUDE = {_js_literal(REACT_PRELUDE)};
  const CAPTURE = {_js_literal(binding_capture_js(CANDIDATE_NAMES))};

  function errorMessage(err) {{
    return err && err.message ? err.message : String(err);
  }}

  function showPanel(id, message) {{
    const panel = document.getElementById(id);
    if (message !== undefined) {{
      panel.querySelector('.panel-message').textContent = message;
    }}
    panel.hidden = false;
  }}

  let __collected;
  try {{
    const compiled = Babel.transform(SOURCE, {{ presets: PRESETS, filename: FILENAME }}).code;
    // The user code gets its own nested scope so it may re-declare the prelude names
    const evaluate = new Function(
      'React',
      'ReactDOM',
      PRELUDE + '\\nreturn (function () {{\\n' + compiled + '\\n' + CAPTURE + '\\n}})();'
    );
    __collected = evaluate(React, ReactDOM);
  }} catch (err) {{
    showPanel('preview-parse-error', errorMessage(err));
    return;
  }}

{_indent(selection_js("__collected", "__selected", CANDIDATE_NAMES), 2)}

  if (__selected === null) {{
    showPanel('preview-no-component');
    return;
  }}

  class PreviewErrorBoundary extends React.Component {{
    constructor(props) {{
      super(props);
      this.state = {{ error: null }};
    }}
    static getDerivedStateFromError(error) {{
      return {{ error: error }};
    }}
    componentDidCatch(error) {{
      showPanel('preview-render-error', errorMessage(error));
    }}
    render() {{
      return this.state.error ? null : this.props.children;
    }}
  }}

  try {{
    const root = ReactDOM.createRoot(document.getElementById('root'));
    ReactDOM.flushSync(function () {{
      root.render(React.createElement(PreviewErrorBoundary, null, React.createElement(__selected)));
    }});
  }} catch (err) {{
    showPanel('preview-render-error', errorMessage(err));
  }}
}})();
</script>
</body>
</html>"""


def render_unsupported() -> str:
    """The fixed page shown for files that cannot be previewed."""
    return UNSUPPORTED_HTML


def _escape_html(text: str) -> str:
    """HTML-escape text for safe embedding."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def _js_literal(value: object) -> str:
    """JSON-encode for an inline <script>; `<` is escaped so nothing can close the tag."""
    return json.dumps(value).replace("<", "\\u003c")


def _indent(block: str, spaces: int) -> str:
    pad = " " * spaces
    return "\n".join(pad + line for line in block.splitlines())


# ─────────────────────────────────────────────────────────────────────────────
# Static content
# ─────────────────────────────────────────────────────────────────────────────

PREVIEW_CSS = """
:root {
  --text-primary: #2D2D2A;
  --text-secondary: #6B6963;
  --bg-primary: #FFFFFF;
  --error-bg: #FDECEC;
  --error-border: #C0392B;
  --info-bg: #EEF3FB;
  --info-border: #3B6FB6;
}

@media (prefers-color-scheme: dark) {
  :root {
    --text-primary: #E6E3DF;
    --text-secondary: #A8A5A0;
    --bg-primary: #1E1E1E;
    --error-bg: #3A1F1F;
    --info-bg: #1F2A3A;
  }
}

body {
  margin: 0;
  padding: 16px;
  background: var(--bg-primary);
  color: var(--text-primary);
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
}

.panel {
  margin: 16px 0;
  padding: 12px 16px;
  border-left: 4px solid;
  border-radius: 4px;
}

.panel[hidden] { display: none; }

.panel h2 {
  margin: 0 0 8px;
  font-size: 14px;
}

.panel-error {
  background: var(--error-bg);
  border-color: var(--error-border);
}

.panel-info {
  background: var(--info-bg);
  border-color: var(--info-border);
}

.panel pre {
  margin: 0;
  white-space: pre-wrap;
  font-family: ui-monospace, SFMono-Regular, Menlo, monospace;
  font-size: 12px;
}
"""

UNSUPPORTED_HTML = f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Preview unavailable</title>
<style>
{PREVIEW_CSS}
</style>
</head>
<body>
<section id="preview-unsupported" class="panel panel-info">
  <h2>Preview unavailable</h2>
  <p>Live preview supports {", ".join(PREVIEWABLE_EXTENSIONS)} files.</p>
</section>
</body>
</html>"""
