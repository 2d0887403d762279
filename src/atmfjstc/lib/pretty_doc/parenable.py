"""
Documents tagged with an operator priority, for adding parentheses only where the syntax requires them.

Example (for an expression printer)::

    def print_binary(op, priority, left, right):
        # left and right are Parenable's for the operands
        return Parenable(
            left.conditionally_parenthesize(priority).concat_space(op).concat_space(
                right.conditionally_parenthesize(priority + 1)
            ),
            priority
        )
"""

from typing import NamedTuple

from atmfjstc.lib.pretty_doc.document import Document


MAX_PRIORITY = 1024


class Parenable(NamedTuple):
    """
    A document together with the priority of the construct it represents (higher binds tighter). Atoms such as names
    and literals should use `MAX_PRIORITY` so that they are never parenthesized.
    """
    doc: Document
    priority: int

    @staticmethod
    def max(doc: Document) -> 'Parenable':
        return Parenable(doc, MAX_PRIORITY)

    def conditionally_parenthesize(self, context_priority: int) -> Document:
        """
        Returns the document surrounded by parentheses if its priority is strictly lower than that required by the
        context it will be placed in, otherwise returns it unchanged.
        """
        if self.priority < context_priority:
            return self.doc.surround('(', ')')

        return self.doc

    maybe_surround = conditionally_parenthesize
