"""
Preview engine test configuration.

Shared sources for the classifier, transformer and renderer tests.
"""

import pytest

from engine.preview.types import SourceDocument


@pytest.fixture
def counter_source():
    return (
        "import React, { useState } from 'react';\n"
        'import "./counter.css";\n'
        "\n"
        "export default function App() {\n"
        "  const [count, setCount] = useState(0);\n"
        "  return <button onClick={() => setCount(count + 1)}>{count}</button>;\n"
        "}\n"
    )


@pytest.fixture
def tsx_doc(counter_source):
    return SourceDocument(file_extension=".tsx", text=counter_source)
