from dataclasses import dataclass
from typing import Union

from atmfjstc.lib.pretty_doc._checks import check_non_negative_int


@dataclass(frozen=True)
class RenderContext:
    """
    Holds options that control how a document is rendered.

    For safety, objects of this type are immutable.

    Attributes:
        width: The number of columns available for each line of output. The renderer will lay out groups flat whenever
            they (and whatever unbreakable content follows them) fit in this width, but note that lines may still
            exceed it if the document offers no break opportunity. A width of 0 causes every group containing text to
            break.
    """

    width: int

    def __post_init__(self):
        check_non_negative_int(self.width, 'line width')

    @staticmethod
    def of(width_or_context: Union[int, 'RenderContext']) -> 'RenderContext':
        """Accepts either a plain line width or a ready-made context, and returns a context"""
        if isinstance(width_or_context, RenderContext):
            return width_or_context

        return RenderContext(width=width_or_context)
