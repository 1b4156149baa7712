"""
Tests for the canonical AST printer and the full scan -> parse -> print pipeline.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from interpreter import scan, parse_expression, print_ast
from interpreter.lexer import Token, TokenType
from interpreter.parser import ASTPrinter, ASTVisitor, Literal, Grouping, Unary


class TestASTPrinter(unittest.TestCase):
    """Rendering hand-built trees."""

    def test_literals(self):
        self.assertEqual(print_ast(Literal.boolean(True)), "true")
        self.assertEqual(print_ast(Literal.boolean(False)), "false")
        self.assertEqual(print_ast(Literal.nil()), "nil")

    def test_numbers(self):
        self.assertEqual(print_ast(Literal.number(3)), "3.0")
        self.assertEqual(print_ast(Literal.number(123.45)), "123.45")
        self.assertEqual(print_ast(Literal.number(0.5)), "0.5")

    def test_string_is_not_quoted(self):
        self.assertEqual(print_ast(Literal.string("hello world")), "hello world")
        self.assertEqual(print_ast(Literal.string("")), "")

    def test_grouping(self):
        self.assertEqual(print_ast(Grouping(Literal.nil())), "(group nil)")

    def test_unary(self):
        bang = Token(TokenType.BANG, "!", None, 1)
        self.assertEqual(print_ast(Unary(bang, Literal.boolean(True))), "(! true)")

    def test_deeply_nested(self):
        minus = Token(TokenType.MINUS, "-", None, 1)
        expr = Literal.number(1)
        for _ in range(3):
            expr = Grouping(Unary(minus, expr))
        self.assertEqual(print_ast(expr), "(group (- (group (- (group (- 1.0))))))")

    def test_very_deep_tree(self):
        minus = Token(TokenType.MINUS, "-", None, 1)
        expr = Literal.number(1)
        for _ in range(5000):
            expr = Grouping(Unary(minus, expr))
        self.assertEqual(print_ast(expr), "(group (- " * 5000 + "1.0" + ")" * 10000)

    def test_printer_is_a_visitor(self):
        printer = ASTPrinter()
        self.assertIsInstance(printer, ASTVisitor)
        self.assertEqual(Literal.nil().accept(printer), "nil")

    def test_idempotent(self):
        minus = Token(TokenType.MINUS, "-", None, 1)
        expr = Grouping(Unary(minus, Literal.string("x")))
        printer = ASTPrinter()
        self.assertEqual(printer.print(expr), printer.print(expr))
        self.assertEqual(print_ast(expr), "(group (- x))")


class TestPipeline(unittest.TestCase):
    """Source text all the way to canonical output."""

    def _render(self, source: str) -> str:
        result = scan(source)
        self.assertFalse(result.had_error)
        return print_ast(parse_expression(result.tokens))

    def test_grouped_negation(self):
        self.assertEqual(self._render("(-3)"), "(group (- 3.0))")

    def test_keywords(self):
        self.assertEqual(self._render("true"), "true")
        self.assertEqual(self._render("nil"), "nil")

    def test_double_bang(self):
        self.assertEqual(self._render("!!false"), "(! (! false))")

    def test_string_group(self):
        self.assertEqual(self._render('("foo")'), "(group foo)")

    def test_number_formats(self):
        self.assertEqual(self._render("10.40"), "10.4")
        self.assertEqual(self._render("-0"), "(- 0.0)")

    def test_whitespace_and_comments_ignored(self):
        self.assertEqual(self._render("( // open\n  ! true\n)"), "(group (! true))")

    def test_deep_nesting(self):
        self.assertEqual(self._render("-" * 5000 + "1"), "(- " * 5000 + "1.0" + ")" * 5000)
        self.assertEqual(
            self._render("(" * 3000 + "1" + ")" * 3000),
            "(group " * 3000 + "1.0" + ")" * 3000
        )

    def test_number_too_large_for_float(self):
        self.assertEqual(self._render("1" * 400), "Infinity")

    def test_same_source_same_output(self):
        source = "((-(!nil)))"
        self.assertEqual(self._render(source), self._render(source))
        self.assertEqual(self._render(source), "(group (group (- (group (! nil)))))")


if __name__ == "__main__":
    unittest.main()
