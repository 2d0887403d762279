import unittest

from atmfjstc.lib.pretty_doc import Document, DocKind, empty, line, newline, line_zero, literal, text_or_doc, \
    fold_concat, sep, word_wrap


def _sample_docs():
    return [
        empty(),
        line(),
        line_zero(),
        literal('abc'),
        literal('ab').concat(line()).concat(literal('cde')),
        literal('x').concat(literal('yz')).group(),
        line_zero().concat(literal('[]')).indent(3),
        literal('q').concat(line()).group().indent(2).concat(literal('tail')),
    ]


class PrimitivesTest(unittest.TestCase):
    def test_empty(self):
        doc = empty()

        self.assertEqual(doc.kind, DocKind.EMPTY)
        self.assertFalse(doc.has_break)
        self.assertEqual(doc.dist_to_break, 0)
        self.assertEqual(doc.flat_len, 0)

    def test_line(self):
        doc = line()

        self.assertEqual(doc.kind, DocKind.LINE)
        self.assertTrue(doc.has_break)
        self.assertEqual(doc.dist_to_break, 0)
        self.assertEqual(doc.flat_len, 1)

    def test_newline_is_line(self):
        self.assertEqual(newline(), line())

    def test_line_zero(self):
        doc = line_zero()

        self.assertEqual(doc.kind, DocKind.LINE_ZERO)
        self.assertTrue(doc.has_break)
        self.assertEqual(doc.dist_to_break, 0)
        self.assertEqual(doc.flat_len, 0)

    def test_literal(self):
        doc = literal('hello')

        self.assertEqual(doc.kind, DocKind.LITERAL)
        self.assertEqual(doc.text, 'hello')
        self.assertEqual(doc.length, 5)
        self.assertFalse(doc.has_break)
        self.assertEqual(doc.dist_to_break, 5)
        self.assertEqual(doc.flat_len, 5)

    def test_literal_counts_characters(self):
        self.assertEqual(literal('ăîșț').length, 4)

    def test_literal_converts_values(self):
        self.assertEqual(literal(42).text, '42')
        self.assertEqual(literal(None).text, 'None')

    def test_literal_rejects_newlines(self):
        with self.assertRaises(ValueError):
            literal('two\nlines')

        with self.assertRaises(ValueError):
            literal('carriage\rreturn')

    def test_text_or_doc(self):
        doc = literal('x').group()

        self.assertIs(text_or_doc(doc), doc)
        self.assertEqual(text_or_doc('x'), literal('x'))

    def test_cannot_instantiate_directly(self):
        with self.assertRaises(TypeError):
            Document()

    def test_immutable(self):
        doc = literal('x')

        with self.assertRaises(AttributeError):
            doc._text = 'y'

        with self.assertRaises(AttributeError):
            doc.foo = 1


class MetricsTest(unittest.TestCase):
    def test_flat_len_additive(self):
        for a in _sample_docs():
            for b in _sample_docs():
                self.assertEqual(a.concat(b).flat_len, a.flat_len + b.flat_len)

    def test_break_propagation(self):
        for a in _sample_docs():
            for b in _sample_docs():
                self.assertEqual(a.concat(b).has_break, a.has_break or b.has_break)

    def test_dist_to_break_law(self):
        for a in _sample_docs():
            for b in _sample_docs():
                expected = a.dist_to_break if a.has_break else a.dist_to_break + b.dist_to_break
                self.assertEqual(a.concat(b).dist_to_break, expected)

    def test_dist_to_break_stops_at_first_break(self):
        doc = literal('ab').concat(line()).concat(literal('cde'))

        self.assertEqual(doc.dist_to_break, 2)
        self.assertEqual(doc.flat_len, 6)
        self.assertTrue(doc.has_break)

    def test_dist_to_break_without_break(self):
        self.assertEqual(literal('ab').concat(literal('c')).dist_to_break, 3)

    def test_dist_to_break_of_line_zero_prefix(self):
        self.assertEqual(line_zero().concat(literal('abc')).dist_to_break, 0)

    def test_indent_and_group_are_transparent(self):
        for doc in _sample_docs():
            for wrapped in (doc.indent(4), doc.group()):
                self.assertEqual(wrapped.has_break, doc.has_break)
                self.assertEqual(wrapped.dist_to_break, doc.dist_to_break)
                self.assertEqual(wrapped.flat_len, doc.flat_len)


class CombinatorsTest(unittest.TestCase):
    def test_concat_structure(self):
        a = literal('a')
        b = literal('b')
        doc = a.concat(b)

        self.assertEqual(doc.kind, DocKind.CONCAT)
        self.assertIs(doc.left, a)
        self.assertIs(doc.right, b)
        self.assertIsNone(doc.inner)

    def test_concat_accepts_strings(self):
        self.assertEqual(literal('a').concat('b'), literal('a').concat(literal('b')))

    def test_plus_operator(self):
        self.assertEqual(literal('a') + 'b', literal('a').concat(literal('b')))
        self.assertEqual('a' + literal('b'), literal('a').concat(literal('b')))
        self.assertEqual(literal('a') + line(), literal('a').concat(line()))

    def test_plus_rejects_other_values(self):
        with self.assertRaises(TypeError):
            literal('a') + 5

    def test_concat_line(self):
        self.assertEqual(literal('a').concat_line('b'), literal('a').concat(line()).concat(literal('b')))
        self.assertEqual(literal('a').concat_newline('b'), literal('a').concat_line('b'))

    def test_concat_space(self):
        self.assertEqual(literal('a').concat_space('b'), literal('a').concat(literal(' ')).concat(literal('b')))

    def test_indent(self):
        inner = literal('a')
        doc = inner.indent(3)

        self.assertEqual(doc.kind, DocKind.INDENT)
        self.assertEqual(doc.amount, 3)
        self.assertIs(doc.inner, inner)
        self.assertEqual(inner.nest(3), doc)

    def test_indent_rejects_bad_amounts(self):
        with self.assertRaises(ValueError):
            literal('a').indent(-1)

        with self.assertRaises(TypeError):
            literal('a').indent('2')

    def test_group(self):
        inner = literal('a')
        doc = inner.group()

        self.assertEqual(doc.kind, DocKind.GROUP)
        self.assertIs(doc.inner, inner)
        self.assertIsNone(doc.amount)

    def test_surround(self):
        doc = literal('x')

        self.assertEqual(doc.surround('<', '>'), literal('<').concat(doc).concat(literal('>')))
        self.assertEqual(doc.surround_paren().render(80), '(x)')
        self.assertEqual(doc.surround_curly().render(80), '{x}')
        self.assertEqual(doc.surround_square().render(80), '[x]')

    def test_fold_concat(self):
        doc = fold_concat(['a', literal('b'), 'c'])

        self.assertEqual(doc, literal('a').concat(literal('b')).concat(literal('c')))
        self.assertEqual(doc.right, literal('c'))
        self.assertEqual(doc.left.right, literal('b'))

    def test_fold_concat_empty_and_single(self):
        self.assertEqual(fold_concat([]), empty())
        self.assertEqual(fold_concat(['a']), literal('a'))

    def test_fold_concat_accepts_generators(self):
        self.assertEqual(fold_concat(str(i) for i in range(3)).render(0), '012')

    def test_sep_alias(self):
        self.assertEqual(sep(['a', 'b']), fold_concat(['a', 'b']))

    def test_word_wrap_structure(self):
        x, y, z = literal('x'), literal('y'), literal('z')

        self.assertEqual(
            word_wrap([x, y, z]),
            x.concat(line().concat(y).group()).concat(line().concat(z).group())
        )

    def test_word_wrap_empty(self):
        self.assertEqual(word_wrap([]), empty())


class EqualityTest(unittest.TestCase):
    def test_structural_equality(self):
        self.assertEqual(
            literal('a').concat(line()).group().indent(2),
            literal('a').concat(line()).group().indent(2),
        )

    def test_inequality(self):
        self.assertNotEqual(literal('a'), literal('b'))
        self.assertNotEqual(line(), line_zero())
        self.assertNotEqual(literal('a').indent(2), literal('a').indent(3))
        self.assertNotEqual(literal('a').group(), literal('a').indent(0))
        self.assertNotEqual(literal('a').concat('b'), literal('b').concat('a'))
        self.assertNotEqual(literal('a'), 'a')

    def test_not_equal_operator(self):
        self.assertTrue(literal('a') != literal('b'))
        self.assertFalse(literal('a').concat(line()) != literal('a').concat(line()))
        self.assertTrue(literal('a') != 'a')

    def test_hashable(self):
        table = {literal('a').concat(line()): 1}

        self.assertEqual(table[literal('a').concat(line())], 1)

    def test_shared_subtrees(self):
        shared = literal('x').concat(line()).group()
        doc = shared.concat(shared)

        self.assertIs(doc.left, doc.right)
        self.assertEqual(doc.render(80), 'x x ')

    def test_deep_documents(self):
        doc1 = fold_concat(['a'] * 50000)
        doc2 = fold_concat(['a'] * 50000)

        self.assertEqual(doc1, doc2)
        self.assertEqual(hash(doc1), hash(doc2))
        self.assertNotEqual(doc1, doc2.concat('a'))


class ReprTest(unittest.TestCase):
    def test_repr(self):
        doc = literal('a').concat(line()).group().indent(2).concat(line_zero()).concat(empty())

        self.assertEqual(repr(doc), "Concat(Concat(Indent(2, Group(Concat(Literal('a'), Line()))), LineZero()), Empty())")

    def test_repr_of_huge_document_is_truncated(self):
        text = repr(fold_concat(['abc'] * 10000))

        self.assertTrue(text.endswith('...'))
        self.assertLess(len(text), 2000)
