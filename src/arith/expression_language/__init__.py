"""Public API for the expression lexer/parser/evaluator."""

from arith.expression_language.ast import (
    BinaryOp,
    FunctionCall,
    IntegerLiteral,
    Node,
    UnaryOp,
    binary,
    call,
    integer,
    node_to_dict,
    unary,
)
from arith.expression_language.compiler import (
    CompiledExpression,
    compile_expr,
    compile_expression_text,
    evaluate,
)
from arith.expression_language.errors import (
    DivisionByZeroError,
    EvaluationError,
    ExpressionError,
    FunctionInvocationError,
    LexError,
    ParseError,
    UnknownFunctionError,
)
from arith.expression_language.evaluator import (
    Evaluator,
    FunctionRegistry,
    NumericFunction,
    evaluate_node,
)
from arith.expression_language.lexer import Lexer, tokenize
from arith.expression_language.numbers import Number
from arith.expression_language.parser import Parser, parse_expression
from arith.expression_language.tokens import Token, TokenKind


__all__ = [
    "BinaryOp",
    "CompiledExpression",
    "DivisionByZeroError",
    "EvaluationError",
    "Evaluator",
    "ExpressionError",
    "FunctionCall",
    "FunctionInvocationError",
    "FunctionRegistry",
    "IntegerLiteral",
    "LexError",
    "Lexer",
    "Node",
    "Number",
    "NumericFunction",
    "ParseError",
    "Parser",
    "Token",
    "TokenKind",
    "UnaryOp",
    "UnknownFunctionError",
    "binary",
    "call",
    "compile_expr",
    "compile_expression_text",
    "evaluate",
    "evaluate_node",
    "integer",
    "node_to_dict",
    "parse_expression",
    "tokenize",
    "unary",
]
