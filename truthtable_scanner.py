"""
truthtable_scanner.py

Tokenizer for propositional-logic expressions.

The scanner turns source text into a materialized list of tokens, each
classified by kind and carrying its position (1-based line and column,
0-based character offset). Every logical operator has several accepted
spellings which all map to the same token kind:

- biconditional:          eqv  ≡  <->  <=>  ↔  ⇔
- implication:            imp  ⟶  ->  =>  ⟹  ⊃  →  ⇒
- disjunction:            or   ∨  +  |  ||
- exclusive disjunction:  xor  ⊕  ⊻
- conjunction:            and  •  ∧  &  &&  ⋀  ^
- negation:               not  !  ˜  ∼  ~  ∽  ¬  ⌝  ┐

Backtracking is done by saving and restoring the cursor over the token list.
"""

import re
from enum import Enum


# ============================================================================
# SECTION 0: TOKEN KINDS
# ============================================================================

class TokenKind(Enum):
    """Classification of a scanned token."""

    IDENT = 'identifier'
    NUMBER = 'number'
    BICOND = 'biconditional'
    IMPLIES = 'implication'
    OR = 'disjunction'
    XOR = 'exclusive disjunction'
    AND = 'conjunction'
    NOT = 'negation'
    TOP = '⊤'
    BOTTOM = '⊥'
    ASSIGN = '='
    COMMA = ','
    LPAREN = '('
    RPAREN = ')'
    LBRACKET = '['
    RBRACKET = ']'
    LBRACE = '{'
    RBRACE = '}'
    UNKNOWN = 'unknown'
    EOF = 'end of input'


KEYWORDS = {
    'eqv': TokenKind.BICOND,
    'imp': TokenKind.IMPLIES,
    'or': TokenKind.OR,
    'xor': TokenKind.XOR,
    'and': TokenKind.AND,
    'not': TokenKind.NOT,
}

OPERATORS = {
    '≡': TokenKind.BICOND, '<->': TokenKind.BICOND, '<=>': TokenKind.BICOND,
    '↔': TokenKind.BICOND, '⇔': TokenKind.BICOND,
    '⟶': TokenKind.IMPLIES, '->': TokenKind.IMPLIES, '=>': TokenKind.IMPLIES,
    '⟹': TokenKind.IMPLIES, '⊃': TokenKind.IMPLIES, '→': TokenKind.IMPLIES,
    '⇒': TokenKind.IMPLIES,
    '∨': TokenKind.OR, '+': TokenKind.OR, '|': TokenKind.OR, '||': TokenKind.OR,
    '⊕': TokenKind.XOR, '⊻': TokenKind.XOR,
    '•': TokenKind.AND, '∧': TokenKind.AND, '&': TokenKind.AND,
    '&&': TokenKind.AND, '⋀': TokenKind.AND, '^': TokenKind.AND,
    '!': TokenKind.NOT, '˜': TokenKind.NOT, '∼': TokenKind.NOT,
    '~': TokenKind.NOT, '∽': TokenKind.NOT, '¬': TokenKind.NOT,
    '⌝': TokenKind.NOT, '┐': TokenKind.NOT,
    '⊤': TokenKind.TOP,
    '⊥': TokenKind.BOTTOM,
    '=': TokenKind.ASSIGN,
    ',': TokenKind.COMMA,
    '(': TokenKind.LPAREN, ')': TokenKind.RPAREN,
    '[': TokenKind.LBRACKET, ']': TokenKind.RBRACKET,
    '{': TokenKind.LBRACE, '}': TokenKind.RBRACE,
}

# Longest spelling first so that '<->' wins over '->' and '||' over '|'
_OPERATOR_PATTERN = '|'.join(
    re.escape(op) for op in sorted(OPERATORS, key=len, reverse=True))

_TOKEN_RE = re.compile(
    r'(?P<space>\s+)'
    r'|(?P<ident>[^\W\d]\w*)'
    r'|(?P<number>\d+(?:\.\d+)?)'
    rf'|(?P<op>{_OPERATOR_PATTERN})'
    r'|(?P<unknown>.)',
    re.DOTALL
)


# ============================================================================
# SECTION 1: TOKENS
# ============================================================================

class Token:
    """
    A classified piece of source text.

    Attributes:
        kind: TokenKind
        lexeme: the literal text of the token ('' for end of input)
        line: 1-based line number
        column: 1-based column number
        offset: 0-based character offset into the source
    """

    __slots__ = ('kind', 'lexeme', 'line', 'column', 'offset')

    def __init__(self, kind, lexeme, line, column, offset):
        self.kind = kind
        self.lexeme = lexeme
        self.line = line
        self.column = column
        self.offset = offset

    @property
    def length(self):
        return len(self.lexeme)

    def __repr__(self):
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.line}:{self.column})")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return False
        return ((self.kind, self.lexeme, self.line, self.column, self.offset) ==
                (other.kind, other.lexeme, other.line, other.column, other.offset))

    def __hash__(self):
        return hash((self.kind, self.lexeme, self.offset))


def tokenize(text):
    """
    Split source text into tokens.

    Whitespace is skipped. Characters that start no known token become
    single-character UNKNOWN tokens so the parser can report them with a
    position. The list always ends with an EOF token.

    Args:
        text: source string

    Returns:
        list of Token
    """
    tokens = []
    line = 1
    line_start = 0

    for match in _TOKEN_RE.finditer(text):
        group = match.lastgroup
        lexeme = match.group()
        offset = match.start()

        if group == 'space':
            newlines = lexeme.count('\n')
            if newlines:
                line += newlines
                line_start = offset + lexeme.rindex('\n') + 1
            continue

        if group == 'ident':
            kind = KEYWORDS.get(lexeme.lower(), TokenKind.IDENT)
        elif group == 'number':
            kind = TokenKind.NUMBER
        elif group == 'op':
            kind = OPERATORS[lexeme]
        else:
            kind = TokenKind.UNKNOWN

        tokens.append(Token(kind, lexeme, line, offset - line_start + 1, offset))

    tokens.append(Token(TokenKind.EOF, '', line, len(text) - line_start + 1, len(text)))
    return tokens


# ============================================================================
# SECTION 2: SCANNER (cursor over the token list)
# ============================================================================

class Scanner:
    """
    Cursor over the tokens of a source text.

    The current token is available as `token`; `next_token()` advances and
    returns the kind of the new current token. `save()` returns an opaque
    checkpoint and `restore()` rewinds to it, which is all the grammar needs
    for its one-token lookahead on `name =`.
    """

    def __init__(self, text=''):
        self.set_text(text)

    def set_text(self, text):
        """Tokenize a new source and move to its first token."""
        self.text = text
        self._tokens = tokenize(text)
        self._index = 0

    @property
    def token(self):
        return self._tokens[self._index]

    @property
    def kind(self):
        return self.token.kind

    @property
    def lexeme(self):
        return self.token.lexeme

    def next_token(self):
        """Advance to the next token (stays on EOF) and return its kind."""
        if self._index < len(self._tokens) - 1:
            self._index += 1
        return self.token.kind

    def save(self):
        return self._index

    def restore(self, state):
        self._index = state
        return self.token.kind

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)
