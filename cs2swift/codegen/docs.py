"""
Documentation comment extraction.

Collapses the XML doc comment in front of a declaration into one line of
text suitable for a Swift /// comment.
"""

from typing import List

from ..frontend.nodes import Trivia


# Markup replaced inside doc comment lines, applied in order
DOC_REPLACEMENTS = (
    ('<summary>', ''),
    ('</summary>', ''),
    ('<b>', '**'),
    ('</b>', '**'),
    ('///', ''),
    ('\t', ' '),
)


def _clean_doc_line(line: str) -> str:
    for old, new in DOC_REPLACEMENTS:
        line = line.replace(old, new)
    return line.strip()


def get_docs(trivia: List[Trivia]) -> str:
    """Get the doc comment text from leading trivia.

    Only documentation-comment trivia is used. Non-empty lines are joined
    with single spaces; the result is empty when there is no doc comment.
    """
    lines = []
    for t in trivia:
        if not t.is_documentation:
            continue
        for line in t.text.split('\n'):
            cleaned = _clean_doc_line(line)
            if cleaned:
                lines.append(cleaned)
    return ' '.join(lines)
