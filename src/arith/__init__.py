"""arith - Evaluate arithmetic expressions with caller-supplied functions."""

from arith.expression_language import (
    BinaryOp,
    DivisionByZeroError,
    EvaluationError,
    Evaluator,
    ExpressionError,
    FunctionCall,
    FunctionInvocationError,
    FunctionRegistry,
    IntegerLiteral,
    LexError,
    Lexer,
    Node,
    Number,
    NumericFunction,
    ParseError,
    Parser,
    Token,
    TokenKind,
    UnaryOp,
    UnknownFunctionError,
    binary,
    call,
    compile_expr,
    compile_expression_text,
    evaluate,
    evaluate_node,
    integer,
    node_to_dict,
    parse_expression,
    tokenize,
    unary,
)


__version__ = "0.1.0"

__all__ = [
    "BinaryOp",
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
    "__version__",
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
