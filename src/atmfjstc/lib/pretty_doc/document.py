"""
The document model: an immutable tree of layout nodes, and the combinators for building it.

Documents are built bottom-up. Each constructor computes three layout metrics for the new node from the metrics of its
children, so that the renderer never has to measure a subtree again:

- `has_break`: whether rendering the subtree in broken mode would emit at least one newline
- `dist_to_break`: the number of columns from the start of the subtree up to its first line break (or the flat length
  of the subtree, if it has none)
- `flat_len`: the length of the subtree when all of its line breaks are flattened

Documents built with `concat` form a left-leaning tree, e.g. ``a + b + c + d`` looks like::

             C
           /   \\
          C     d
        /   \\
       C     c
     /   \\
    a     b

Since nodes are never modified, any document can be reused any number of times within a larger document (or several
documents) without copying.
"""

from enum import Enum
from typing import Any, Iterable, Optional, Union, TYPE_CHECKING

from atmfjstc.lib.pretty_doc._checks import check_single_line, check_non_negative_int

if TYPE_CHECKING:
    from atmfjstc.lib.pretty_doc.RenderContext import RenderContext
    from atmfjstc.lib.pretty_doc.parenable import Parenable


class DocKind(Enum):
    EMPTY = 'empty'
    LINE = 'line'
    LINE_ZERO = 'line_zero'
    LITERAL = 'literal'
    CONCAT = 'concat'
    INDENT = 'indent'
    GROUP = 'group'


_REPR_MAX_LENGTH = 1000


class Document:
    """
    An immutable layout document. Do not instantiate directly, use the constructor functions in this module (`literal`,
    `line`, etc.) and the combinator methods (`concat`, `group`, etc.) instead.

    The node kind is given by `kind`. Depending on it, some of the payload properties are set:

    - `LITERAL`: `text` and `length`
    - `CONCAT`: `left` and `right`
    - `INDENT`: `amount` and `inner`
    - `GROUP`: `inner`

    Documents compare by structure and can be used as dict keys. Both comparison and hashing work without recursion, so
    documents of any depth are safe to handle.
    """
    __slots__ = ('_kind', '_text', '_amount', '_left', '_right', '_has_break', '_dist_to_break', '_flat_len', '_hash')

    def __init__(self, *_args, **_kwargs):
        raise TypeError("Documents cannot be instantiated directly, use the constructor functions instead")

    @classmethod
    def _make(
        cls, kind: DocKind, has_break: bool, dist_to_break: int, flat_len: int,
        text: Optional[str] = None, amount: int = 0,
        left: Optional['Document'] = None, right: Optional['Document'] = None,
    ) -> 'Document':
        node = object.__new__(cls)

        init = object.__setattr__
        init(node, '_kind', kind)
        init(node, '_text', text)
        init(node, '_amount', amount)
        init(node, '_left', left)
        init(node, '_right', right)
        init(node, '_has_break', has_break)
        init(node, '_dist_to_break', dist_to_break)
        init(node, '_flat_len', flat_len)
        init(node, '_hash', hash((
            kind, text, amount,
            None if left is None else left._hash,
            None if right is None else right._hash,
        )))

        return node

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    @property
    def kind(self) -> DocKind:
        return self._kind

    @property
    def text(self) -> Optional[str]:
        return self._text

    @property
    def length(self) -> Optional[int]:
        return self._flat_len if self._kind == DocKind.LITERAL else None

    @property
    def amount(self) -> Optional[int]:
        return self._amount if self._kind == DocKind.INDENT else None

    @property
    def left(self) -> Optional['Document']:
        return self._left if self._kind == DocKind.CONCAT else None

    @property
    def right(self) -> Optional['Document']:
        return self._right

    @property
    def inner(self) -> Optional['Document']:
        return self._left if self._kind in (DocKind.INDENT, DocKind.GROUP) else None

    @property
    def has_break(self) -> bool:
        return self._has_break

    @property
    def dist_to_break(self) -> int:
        return self._dist_to_break

    @property
    def flat_len(self) -> int:
        return self._flat_len

    def concat(self, other: Union['Document', Any]) -> 'Document':
        """
        Places another document right after this one. Plain strings (or other values) are accepted and converted into
        literals.
        """
        other = text_or_doc(other)

        return Document._make(
            DocKind.CONCAT,
            has_break=self._has_break or other._has_break,
            dist_to_break=self._dist_to_break if self._has_break else self._dist_to_break + other._dist_to_break,
            flat_len=self._flat_len + other._flat_len,
            left=self,
            right=other,
        )

    def __add__(self, other):
        if not isinstance(other, (Document, str)):
            return NotImplemented

        return self.concat(other)

    def __radd__(self, other):
        if not isinstance(other, str):
            return NotImplemented

        return literal(other).concat(self)

    def concat_line(self, other: Union['Document', Any]) -> 'Document':
        """Places another document after this one, separated by a line break"""
        return self.concat(line()).concat(other)

    concat_newline = concat_line

    def concat_space(self, other: Union['Document', Any]) -> 'Document':
        """Places another document after this one, separated by an unbreakable space"""
        return self.concat(_SPACE).concat(other)

    def indent(self, amount: int) -> 'Document':
        """
        Indents this document by the given number of columns.

        The indent only shows up for the lines that are broken inside this document, and it adds to whatever indent is
        already in effect where the document is placed. Note that the text preceding the first break is not indented,
        as it continues the current line.
        """
        check_non_negative_int(amount, 'indent amount')

        return Document._make(
            DocKind.INDENT,
            has_break=self._has_break,
            dist_to_break=self._dist_to_break,
            flat_len=self._flat_len,
            amount=amount,
            left=self,
        )

    nest = indent

    def group(self) -> 'Document':
        """
        Marks this document as a unit for layout decisions. When the renderer reaches it, it will lay out the whole
        document flat (all line breaks turned into spaces or nothing) if it fits in the remaining width, or broken
        otherwise. Groups nested inside get to make their own decision, unless the outer group is already flat.
        """
        return Document._make(
            DocKind.GROUP,
            has_break=self._has_break,
            dist_to_break=self._dist_to_break,
            flat_len=self._flat_len,
            left=self,
        )

    def surround(self, open_text: Union['Document', Any], close_text: Union['Document', Any]) -> 'Document':
        return text_or_doc(open_text).concat(self).concat(close_text)

    def surround_paren(self) -> 'Document':
        return self.surround('(', ')')

    def surround_curly(self) -> 'Document':
        return self.surround('{', '}')

    def surround_square(self) -> 'Document':
        return self.surround('[', ']')

    def as_parenable(self, priority: int) -> 'Parenable':
        from atmfjstc.lib.pretty_doc.parenable import Parenable

        return Parenable(self, priority)

    def as_parenable_max(self) -> 'Parenable':
        from atmfjstc.lib.pretty_doc.parenable import Parenable

        return Parenable.max(self)

    def render(self, line_width: Union[int, 'RenderContext']) -> str:
        """
        Renders this document to text.

        Args:
            line_width: The number of columns available on each line, or a `RenderContext` specifying it.

        Returns:
            The rendered text. Note that it does not end in a newline.
        """
        from atmfjstc.lib.pretty_doc._render import render

        return render(self, line_width)

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented

        pending = [(self, other)]
        while len(pending) > 0:
            a, b = pending.pop()
            if a is b:
                continue

            if (a._hash != b._hash) or (a._kind != b._kind) or (a._text != b._text) or (a._amount != b._amount):
                return False

            if a._left is not None:
                pending.append((a._left, b._left))
            if a._right is not None:
                pending.append((a._right, b._right))

        return True

    def __hash__(self):
        return self._hash

    def __repr__(self):
        parts = []
        total = 0
        pending = [self]

        while len(pending) > 0:
            item = pending.pop()

            if isinstance(item, str):
                parts.append(item)
                total += len(item)
                if total > _REPR_MAX_LENGTH:
                    parts.append('...')
                    break
                continue

            kind = item._kind
            if kind == DocKind.EMPTY:
                pending.append('Empty()')
            elif kind == DocKind.LINE:
                pending.append('Line()')
            elif kind == DocKind.LINE_ZERO:
                pending.append('LineZero()')
            elif kind == DocKind.LITERAL:
                pending.append(f'Literal({item._text!r})')
            elif kind == DocKind.CONCAT:
                pending.extend((')', item._right, ', ', item._left, 'Concat('))
            elif kind == DocKind.INDENT:
                pending.extend((')', item._left, f'Indent({item._amount}, '))
            elif kind == DocKind.GROUP:
                pending.extend((')', item._left, 'Group('))

        return ''.join(parts)


_EMPTY = Document._make(DocKind.EMPTY, has_break=False, dist_to_break=0, flat_len=0)
_LINE = Document._make(DocKind.LINE, has_break=True, dist_to_break=0, flat_len=1)
_LINE_ZERO = Document._make(DocKind.LINE_ZERO, has_break=True, dist_to_break=0, flat_len=0)


def empty() -> Document:
    """A document that renders to nothing"""
    return _EMPTY


def line() -> Document:
    """A line break that turns into a single space when its group is laid out flat"""
    return _LINE


newline = line


def line_zero() -> Document:
    """A line break that disappears entirely when its group is laid out flat (e.g. right before a closing bracket)"""
    return _LINE_ZERO


def literal(text: Any) -> Document:
    """
    A piece of text that is always rendered as-is.

    Values other than strings are converted using ``str()``. The text must not contain line breaks (use `line` or
    `line_zero` documents for those), otherwise a `ValueError` is raised.
    """
    if not isinstance(text, str):
        text = str(text)

    check_single_line(text, 'literal text')

    return Document._make(DocKind.LITERAL, has_break=False, dist_to_break=len(text), flat_len=len(text), text=text)


_SPACE = literal(' ')


def text_or_doc(value: Union[Document, Any]) -> Document:
    """Returns documents as-is and converts anything else to a `literal`"""
    return value if isinstance(value, Document) else literal(value)


def fold_concat(documents: Iterable[Union[Document, Any]]) -> Document:
    """
    Concatenates a sequence of documents, left to right (i.e. ``[d1, d2, d3]`` becomes ``(d1 + d2) + d3``).

    Returns an empty document if the sequence is empty.
    """
    result = None

    for doc in documents:
        doc = text_or_doc(doc)
        result = doc if result is None else result.concat(doc)

    return _EMPTY if result is None else result


sep = fold_concat


def word_wrap(documents: Iterable[Union[Document, Any]]) -> Document:
    """
    Joins a sequence of documents with breakable spaces, filling each line with as many of them as will fit (like the
    words in a paragraph).

    Each join is a separate group, i.e. ``[d1, d2, d3]`` becomes ``d1 + (line + d2).group() + (line + d3).group()``,
    so every break is decided independently, based only on what follows it up to the next forced break.
    """
    result = None

    for doc in documents:
        doc = text_or_doc(doc)
        result = doc if result is None else result.concat(_LINE.concat(doc).group())

    return _EMPTY if result is None else result
