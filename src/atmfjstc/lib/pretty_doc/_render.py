"""
The renderer: turns a document into text, deciding for each group whether it is laid out flat or broken.

The document is traversed depth-first using an explicit work list instead of recursion, so documents of any depth can
be rendered. Each pending item carries its own layout state; the only state shared across the whole traversal is the
output and the column at which the current line must end.
"""

import logging

from typing import NamedTuple, Union

from atmfjstc.lib.pretty_doc.RenderContext import RenderContext
from atmfjstc.lib.pretty_doc.document import Document, DocKind


_log = logging.getLogger(__name__)


class _RenderInfo(NamedTuple):
    flat_mode: bool
    nesting: int
    dist_next_newline: int
    line_width: int


def render(document: Document, line_width: Union[int, RenderContext]) -> str:
    """
    Renders a document to text.

    Args:
        document: The document to render
        line_width: The number of columns available on each line, or a `RenderContext` specifying it.

    Returns:
        The rendered text. It does not end in a newline (unless the document itself ends in a broken line).
    """
    context = RenderContext.of(line_width)

    todo = [(document, _RenderInfo(False, 0, 0, context.width))]

    end_of_line = context.width
    chunks = []
    out_len = 0
    n_visits = 0

    while len(todo) > 0:
        doc, info = todo.pop()
        n_visits += 1

        kind = doc.kind

        if kind == DocKind.EMPTY:
            continue
        elif kind == DocKind.LINE or kind == DocKind.LINE_ZERO:
            if info.flat_mode:
                if kind == DocKind.LINE:
                    chunks.append(' ')
                    out_len += 1
                continue

            chunks.append('\n')
            out_len += 1
            end_of_line = out_len + info.line_width

            if info.nesting > 0:
                chunks.append(' ' * info.nesting)
                out_len += info.nesting
        elif kind == DocKind.LITERAL:
            chunks.append(doc.text)
            out_len += doc.length
        elif kind == DocKind.CONCAT:
            right = doc.right

            # The left side must leave room for whatever the right side renders before its first break (and, if it has
            # none, for whatever comes after us up to the next break)
            left_dist = right.dist_to_break if right.has_break else right.dist_to_break + info.dist_next_newline

            todo.append((right, info))
            todo.append((doc.left, info._replace(dist_next_newline=left_dist)))
        elif kind == DocKind.INDENT:
            todo.append((doc.inner, info._replace(nesting=info.nesting + doc.amount)))
        elif kind == DocKind.GROUP:
            inner = doc.inner

            flat_mode = info.flat_mode or (out_len + inner.flat_len + info.dist_next_newline <= end_of_line)

            todo.append((inner, info._replace(flat_mode=flat_mode)))
        else:
            raise AssertionError(f"Unhandled document kind: {kind}")

    result = ''.join(chunks)

    _log.debug("Rendered document at width %d: %d nodes visited, %d characters", context.width, n_visits, out_len)

    return result
