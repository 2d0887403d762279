"""
A pretty printer in the Wadler/Hughes tradition, for laying out code and data within a given line width.

Rationale
---------

When generating code (or printing an AST, or dumping data), the right layout for a construct depends on how much
horizontal space is left for it. A short call is best printed on one line::

    print_all(first, second, third)

whereas a long one needs to be broken up::

    print_all(
      first_value_with_a_long_name,
      second_value_with_an_even_longer_name
    )

and the decision has to be made separately for each construct, nested constructs included. Writing this logic into
every printing function quickly becomes unmanageable.

Instead, with this package, printing functions return *documents*: abstract descriptions of the output that say where
a line may be broken, how the broken lines should be indented, and which breaks should be decided together. The
renderer then lays out the whole document in a single pass, keeping each group on one line whenever it fits.

Building documents
------------------

- `literal` creates unbreakable text (it must not contain newlines)
- `line` creates a line break that becomes a space when laid out flat, `line_zero` one that becomes nothing
- ``a.concat(b)`` (or ``a + b``) places two documents one after the other
- ``doc.indent(n)`` indents the lines broken inside `doc` by `n` more columns
- ``doc.group()`` makes `doc` a unit for layout: it is laid out flat if it fits in the remaining width (taking into
  account any unbreakable text that follows it), broken otherwise
- `fold_concat` and `word_wrap` combine whole sequences of documents

Higher-level layouts for blocks, item lists etc. are available in the `layouts` module, and `values` can build
documents for plain Python data. For adding parentheses to expressions only where operator precedence requires it,
see `Parenable`.

Example
-------

::

    def print_call(name, args):
        return block(items_list(args), literal(name).concat('('), ')')

    doc = print_call('print_all', ['first', 'second', 'third'])

    doc.render(40)  # print_all(first, second, third)
    doc.render(20)
    # print_all(
    #   first,
    #   second,
    #   third
    # )
"""

from atmfjstc.lib.pretty_doc.RenderContext import RenderContext
from atmfjstc.lib.pretty_doc.document import Document, DocKind, empty, line, newline, line_zero, literal, \
    text_or_doc, fold_concat, sep, word_wrap
from atmfjstc.lib.pretty_doc._render import render
from atmfjstc.lib.pretty_doc.parenable import Parenable, MAX_PRIORITY
from atmfjstc.lib.pretty_doc.layouts import join, items_list, block, stack
from atmfjstc.lib.pretty_doc.values import value_to_doc, render_value


__version__ = '1.0.0'
