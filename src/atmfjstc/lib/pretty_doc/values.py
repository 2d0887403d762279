"""
Documents for plain Python values, useful for dumping data structures in a readable way.

Native lists, tuples, dicts and sets (but not their subclasses!) are laid out as blocks that are broken over multiple
lines only where they do not fit the available width. Any other value is rendered using its ``repr()``. A container
holding a value with a multiline ``repr()`` (at any depth) is always broken, so that the lines of that value are kept.

Example::

    >>> print(render_value({'name': 'squares', 'values': [1, 4, 9, 16, 25, 36, 49]}, line_width=30))
    {
      'name': 'squares',
      'values': [
        1,
        4,
    ...
"""

from typing import Any, List, Tuple

from atmfjstc.lib.pretty_doc.document import Document, literal, line, fold_concat
from atmfjstc.lib.pretty_doc.layouts import block, items_list, join


_VISIT = 'visit'
_ASSEMBLE = 'assemble'


def value_to_doc(value: Any, indent: int = 2) -> Document:
    """
    Builds a document for a Python value.

    Nested containers are handled without recursion, so arbitrarily deep structures are supported. A container that
    (directly or indirectly) contains itself will show the repeated occurrence as ``...``.

    Args:
        value: The value to convert
        indent: The number of columns by which the content of a broken container is indented

    Returns:
        The document representing the value.
    """
    # Each result is a (document, is_multiline) pair
    results = []
    in_progress = set()
    todo = [(_VISIT, value)]

    while len(todo) > 0:
        action, item = todo.pop()

        if action == _ASSEMBLE:
            container, n_children = item
            in_progress.discard(id(container))

            children = results[len(results) - n_children:]
            del results[len(results) - n_children:]

            multiline = any(child_multiline for _, child_multiline in children)
            results.append((
                _assemble_container(container, [doc for doc, _ in children], indent, multiline),
                multiline
            ))
            continue

        if not _is_container(item):
            results.append(_scalar_doc(item))
            continue

        if id(item) in in_progress:
            results.append((literal('...'), False))
            continue

        in_progress.add(id(item))

        children = _iter_children(item)
        todo.append((_ASSEMBLE, (item, len(children))))
        todo.extend((_VISIT, child) for child in reversed(children))

    assert len(results) == 1

    return results[0][0]


def render_value(value: Any, line_width: int = 120, indent: int = 2) -> str:
    """Convenience function for rendering the document produced by `value_to_doc`"""
    return value_to_doc(value, indent=indent).render(line_width)


def _is_container(value: Any) -> bool:
    return type(value) in (list, tuple, dict, set, frozenset)


def _iter_children(value: Any) -> List[Any]:
    if type(value) is dict:
        children = []
        for key, item in value.items():
            children.append(key)
            children.append(item)

        return children

    return list(value)


def _scalar_doc(value: Any) -> Tuple[Document, bool]:
    lines = repr(value).splitlines()
    if len(lines) == 0:
        return literal(''), False

    return join((literal(part) for part in lines), line()), len(lines) > 1


def _assemble_container(container: Any, children: List[Document], indent: int, multiline: bool) -> Document:
    """
    Note: a container holding a multiline value must not be grouped, so that it never gets flattened into a single line
    (this applies all the way up to the root, as all the ancestors are multiline too).
    """
    kind = type(container)

    def _block(content, head, tail):
        return block(content, head, tail, indent=indent, allow_oneliner=not multiline)

    if kind is dict:
        entries = [
            fold_concat([key, ': ', item])
            for key, item in zip(children[0::2], children[1::2])
        ]
        return _block(items_list(entries), '{', '}')

    if kind is list:
        return _block(items_list(children), '[', ']')

    if kind is tuple:
        if len(children) == 1:
            return _block(children[0].concat(','), '(', ')')

        return _block(items_list(children), '(', ')')

    if len(children) == 0:
        return literal(f'{kind.__name__}()')

    content = _block(items_list(children), '{', '}')

    return content if kind is set else content.surround(f'{kind.__name__}(', ')')
