"""
Ready-made layouts for the constructs that show up all the time in generated code: bracketed blocks, comma-separated
item lists, and vertical stacks of sections.

Everything here is built purely out of the core combinators, so the results can be freely mixed with hand-built
documents.

Example::

    doc = block(items_list(literal(str(i * i)) for i in range(1, 11)), 'var squares = [', '];')

    doc.render(60)  # var squares = [1, 4, 9, 16, 25, 36, 49, 64, 81, 100];
    doc.render(30)
    # var squares = [
    #   1,
    #   4,
    #   ...
    # ];
"""

from typing import Any, Iterable, Union

from atmfjstc.lib.pretty_doc.document import Document, DocKind, empty, line, line_zero, text_or_doc


DocLike = Union[Document, Any]


def _non_empty_docs(documents: Iterable[DocLike]) -> Iterable[Document]:
    for doc in documents:
        doc = text_or_doc(doc)
        if doc.kind != DocKind.EMPTY:
            yield doc


def join(documents: Iterable[DocLike], separator: DocLike) -> Document:
    """Places a separator between each two consecutive documents in a sequence"""
    separator = text_or_doc(separator)

    result = None

    for doc in documents:
        doc = text_or_doc(doc)
        result = doc if result is None else result.concat(separator).concat(doc)

    return empty() if result is None else result


def items_list(items: Iterable[DocLike], joiner: DocLike = ',', fill: bool = False, trailing: bool = False) -> Document:
    """
    Lays out items (array elements, parameters, properties...) separated by a joiner and a line break.

    Args:
        items: The items to lay out. Empty documents are skipped entirely (they do not get a joiner either).
        joiner: The text placed right after every item but the last, e.g. ``','``
        fill: By default, the item list does not form a group by itself, but is laid out according to the enclosing
            group (typically a `block`): either all items on one line, or one item per line. If `fill` is set, each
            break is decided separately instead, so that each line is filled with as many items as will fit::

                item, item, item,
                item, item
        trailing: Also place the joiner after the last item

    Returns:
        The items list document. Note that used by itself, outside of any group, a non-fill list is rendered broken
        (one item per line).
    """
    joiner = text_or_doc(joiner)

    result = None

    for item in _non_empty_docs(items):
        if result is None:
            result = item
        elif fill:
            result = result.concat(joiner).concat(line().concat(item).group())
        else:
            result = result.concat(joiner).concat(line()).concat(item)

    if result is None:
        return empty()

    return result.concat(joiner) if trailing else result


def block(
    content: DocLike, head: DocLike = '', tail: DocLike = '', indent: int = 2, allow_oneliner: bool = True
) -> Document:
    """
    A block: some content delimited by a head and tail (e.g. brackets or braces).

    If everything fits, the block is rendered on a single line with the content placed directly between the head and
    the tail. Otherwise, the content is placed on its own lines, indented::

        head
          content
        tail

    An empty content collapses the block to just the head and tail.

    With `allow_oneliner=False` the block does not form a group, so it is not laid out flat by itself: it follows the
    layout of the enclosing group, and is always broken when there is none (e.g. at the top level).
    """
    content = text_or_doc(content)
    head = text_or_doc(head)
    tail = text_or_doc(tail)

    if content.kind == DocKind.EMPTY:
        return head.concat(tail)

    result = head.concat(line_zero().concat(content).indent(indent)).concat(line_zero()).concat(tail)

    return result.group() if allow_oneliner else result


def stack(sections: Iterable[DocLike], margin: int = 0) -> Document:
    """
    Places sections one below the other, with `margin` blank lines between them. Empty sections are skipped.

    Notes:

    - The sections are separated by ordinary line breaks, so a stack should not be placed inside a group that could
      be laid out flat (e.g. inside a `block`'s content), otherwise it will collapse into a single line.
    - Blank lines inside an indented document will contain the indent spaces.
    """
    separator = line()
    for _ in range(margin):
        separator = separator.concat(line())

    return join(_non_empty_docs(sections), separator)
