"""Token kinds produced by the lexer, with keyword and symbol lookup."""

from enum import Enum


class TokenType(Enum):
    """Every kind of token the language knows, valued by its display text."""

    ILLEGAL = "illegal"
    EOF = "eof"

    IDENT = "ident"
    INT = "int"
    STRING = "String"

    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"

    EQ = "=="
    NOTEQ = "!="

    COMMA = ","
    SEMICOLON = ";"
    COLON = ":"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"

    FUNCTION = "fn"
    LET = "let"
    TRUE = "true"
    FALSE = "false"
    IF = "if"
    ELSE = "else"
    RETURN = "return"

    def __str__(self) -> str:
        return self.value


_KEYWORDS = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

_SINGLE_CHARS = {
    "/": TokenType.SLASH,
    "*": TokenType.ASTERISK,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ":": TokenType.COLON,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "=": TokenType.ASSIGN,
}


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword token for ``ident``, or IDENT if it is not a keyword."""
    return _KEYWORDS.get(ident, TokenType.IDENT)


def lookup_char(ch: str) -> TokenType:
    """Return the token for a single character, or ILLEGAL if it has none."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return _SINGLE_CHARS.get(ch, TokenType.ILLEGAL)