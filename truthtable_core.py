"""
truthtable_core.py

Core data structures and operations for propositional truth tables.

A request is a comma separated list of propositions, each optionally named:

    A = p v q, B = p ^ q, A v ¬B

Processing runs in three passes over the syntax trees of the propositions:

1. discover-simple: collect the atomic (simple) propositions and the names
   of the compound ones, rejecting duplicate or colliding names;
2. discover-compound: allocate a column for every named proposition and for
   every anonymous one that is not a bare reference to a known name, keeping
   a canonical reconstruction of its text;
3. evaluate: run each compound proposition on an operand stack for every row
   of the enumeration of the simple propositions.

The result is a Table of columns (simple propositions first, sorted, then
compound ones in declaration order).
"""

import locale
import sys
import threading
from enum import Enum
from itertools import product

import networkx as nx
from tqdm import tqdm

from truthtable_scanner import Scanner, TokenKind


# Prefix of generated names for unnamed compound propositions
ANONYMOUS_PREFIX = '$p'

# Canonical glyphs used when rebuilding the text of an expression
CANONICAL_SYMBOLS = {
    TokenKind.BICOND: ' <-> ',
    TokenKind.IMPLIES: ' -> ',
    TokenKind.OR: ' ∨ ',
    TokenKind.XOR: ' ⊻ ',
    TokenKind.AND: ' ∧ ',
    TokenKind.NOT: '¬',
}

CLOSING_SYMBOLS = {
    TokenKind.LPAREN: ')',
    TokenKind.LBRACKET: ']',
    TokenKind.LBRACE: '}',
}


# ============================================================================
# SECTION 0: ERRORS
# ============================================================================

class ErrorKind(Enum):
    UNEXPECTED_TOKEN = 'unexpected token'
    UNMATCHED_BRACKET = 'unmatched bracket'
    TRAILING_INPUT = 'trailing input'
    DUPLICATE_NAME = 'duplicate compound name'
    NAME_COLLISION = 'name collision'


class ParseError(ValueError):
    """
    A syntax or naming error, positioned at the offending token.

    Attributes:
        kind: ErrorKind
        message: human readable description
        line: 1-based line of the offending token
        column: 1-based column of the offending token
        offset: 0-based character offset of the offending token
        length: length of the offending token (0 at end of input)
    """

    kind = None

    def __init__(self, message, token):
        super().__init__(message)
        self.message = message
        self.line = token.line
        self.column = token.column
        self.offset = token.offset
        self.length = token.length

    def __str__(self):
        return f"{self.message} (line {self.line}, column {self.column})"

    def to_dict(self):
        return {
            'kind': self.kind.value,
            'message': self.message,
            'line': self.line,
            'column': self.column,
            'offset': self.offset,
            'length': self.length,
        }


class UnexpectedTokenError(ParseError):
    kind = ErrorKind.UNEXPECTED_TOKEN


class UnmatchedBracketError(ParseError):
    kind = ErrorKind.UNMATCHED_BRACKET


class TrailingInputError(ParseError):
    kind = ErrorKind.TRAILING_INPUT


class DuplicateNameError(ParseError):
    kind = ErrorKind.DUPLICATE_NAME


class NameCollisionError(ParseError):
    kind = ErrorKind.NAME_COLLISION


# ============================================================================
# SECTION 1: SYNTAX TREE
# ============================================================================

class Atom:
    """A simple proposition, a constant, or a reference to a named one."""

    __slots__ = ('token',)

    def __init__(self, token):
        self.token = token

    @property
    def name(self):
        return self.token.lexeme

    def atoms(self):
        yield self

    def postfix(self, program):
        program.append(('push', self.name))

    def to_string(self):
        return self.name

    def __repr__(self):
        return f"Atom({self.name})"


class Negation:
    __slots__ = ('operand',)

    def __init__(self, operand):
        self.operand = operand

    def atoms(self):
        yield from self.operand.atoms()

    def postfix(self, program):
        self.operand.postfix(program)
        program.append(('not', None))

    def to_string(self):
        return CANONICAL_SYMBOLS[TokenKind.NOT] + self.operand.to_string()

    def __repr__(self):
        return f"Negation({self.operand!r})"


class BinaryOp:
    """A binary connective; `operator` is the TokenKind of its tier."""

    __slots__ = ('operator', 'left', 'right')

    def __init__(self, operator, left, right):
        self.operator = operator
        self.left = left
        self.right = right

    def atoms(self):
        yield from self.left.atoms()
        yield from self.right.atoms()

    def postfix(self, program):
        self.left.postfix(program)
        self.right.postfix(program)
        program.append(('binary', self.operator))

    def to_string(self):
        return (self.left.to_string() + CANONICAL_SYMBOLS[self.operator] +
                self.right.to_string())

    def __repr__(self):
        return f"BinaryOp({self.operator.name}, {self.left!r}, {self.right!r})"


class Group:
    """A bracketed sub-expression, keeping the glyphs the user wrote."""

    __slots__ = ('opener', 'inner', 'closer')

    def __init__(self, opener, inner, closer):
        self.opener = opener
        self.inner = inner
        self.closer = closer

    def atoms(self):
        yield from self.inner.atoms()

    def postfix(self, program):
        self.inner.postfix(program)

    def to_string(self):
        return self.opener + self.inner.to_string() + self.closer

    def __repr__(self):
        return f"Group({self.opener}{self.inner!r}{self.closer})"


class Proposition:
    """One element of the top-level list: `[name =] expression`."""

    __slots__ = ('name_token', 'expression')

    def __init__(self, name_token, expression):
        self.name_token = name_token
        self.expression = expression

    @property
    def name(self):
        return self.name_token.lexeme if self.name_token is not None else None

    def to_string(self):
        if self.name is None:
            return self.expression.to_string()
        return f"{self.name} = {self.expression.to_string()}"

    def __repr__(self):
        return f"Proposition({self.name}, {self.expression!r})"


# ============================================================================
# SECTION 2: GRAMMAR
# ============================================================================

class Parser:
    """
    Recursive descent parser for lists of propositions.

    Precedence, loosest first: biconditional, conditional, disjunction,
    exclusive disjunction, conjunction, negation. All binary connectives
    are left-associative.

    In numeric mode the numbers 0 and 1 are accepted as atoms; in lettered
    mode no number is (F and V are ordinary identifiers there).

    When a SymbolTable is given, a proposition name is checked against it as
    soon as its "=" is read, before the expression that follows.
    """

    def __init__(self, text, numeric=True, symbols=None):
        self.scanner = Scanner(text)
        self.numeric = numeric
        self.symbols = symbols

    def propositions(self):
        """
        Parse the whole input, yielding each proposition as soon as it is read.

        Yields:
            Proposition

        Raises:
            ParseError: on the first syntax or naming error
        """
        # propositionList = proposition {"," proposition}
        yield self.proposition()
        while self.scanner.kind is TokenKind.COMMA:
            self.scanner.next_token()
            yield self.proposition()

        if self.scanner.kind is not TokenKind.EOF:
            raise TrailingInputError("Expected end of input", self.scanner.token)

    def proposition(self):
        # proposition = [id "="] expression
        name_token = None
        state = self.scanner.save()
        if self.scanner.kind is TokenKind.IDENT:
            candidate = self.scanner.token
            if self.scanner.next_token() is TokenKind.ASSIGN:
                name_token = candidate
                if self.symbols is not None:
                    self.symbols.check_compound_name(name_token)
                self.scanner.next_token()
            else:
                self.scanner.restore(state)

        return Proposition(name_token, self.expression())

    def expression(self):
        return self.biconditional()

    def _binary(self, operand, accepts, operator):
        left = operand()
        while accepts():
            self.scanner.next_token()
            left = BinaryOp(operator, left, operand())
        return left

    def biconditional(self):
        return self._binary(self.conditional,
                            lambda: self.scanner.kind is TokenKind.BICOND,
                            TokenKind.BICOND)

    def conditional(self):
        return self._binary(self.disjunction,
                            lambda: self.scanner.kind is TokenKind.IMPLIES,
                            TokenKind.IMPLIES)

    def disjunction(self):
        # A bare lowercase 'v' is the or-operator wherever a disjunction may continue
        return self._binary(self.exclusive_disjunction,
                            lambda: (self.scanner.kind is TokenKind.OR or
                                     (self.scanner.kind is TokenKind.IDENT and
                                      self.scanner.lexeme == 'v')),
                            TokenKind.OR)

    def exclusive_disjunction(self):
        return self._binary(self.conjunction,
                            lambda: self.scanner.kind is TokenKind.XOR,
                            TokenKind.XOR)

    def conjunction(self):
        return self._binary(self.negation,
                            lambda: self.scanner.kind is TokenKind.AND,
                            TokenKind.AND)

    def negation(self):
        if self.scanner.kind is TokenKind.NOT:
            self.scanner.next_token()
            return Negation(self.negation())
        return self.atom()

    def atom(self):
        # atom = id | "0" | "1" | "⊤" | "⊥" | "(" expr ")" | "[" expr "]" | "{" expr "}"
        token = self.scanner.token

        if (token.kind in (TokenKind.IDENT, TokenKind.TOP, TokenKind.BOTTOM) or
                (self.numeric and token.kind is TokenKind.NUMBER
                 and token.lexeme in ('0', '1'))):
            self.scanner.next_token()
            return Atom(token)

        if token.kind in CLOSING_SYMBOLS:
            closer = CLOSING_SYMBOLS[token.kind]
            self.scanner.next_token()
            inner = self.expression()
            if self.scanner.lexeme != closer:
                raise UnmatchedBracketError(f"Expected symbol '{closer}'",
                                            self.scanner.token)
            self.scanner.next_token()
            return Group(token.lexeme, inner, closer)

        raise UnexpectedTokenError("Expected identifier, '(', '[' or '{'", token)


def parse(text, numeric=True):
    """Parse a full request into a list of Propositions."""
    return list(Parser(text, numeric=numeric).propositions())


# ============================================================================
# SECTION 3: SYMBOL TABLES
# ============================================================================

class ExpressionRecord:
    """A compound proposition waiting to be evaluated."""

    __slots__ = ('name', 'literal_text', 'expression', 'anonymous')

    def __init__(self, name, literal_text, expression, anonymous=False):
        self.name = name
        self.literal_text = literal_text
        self.expression = expression
        self.anonymous = anonymous

    @property
    def display_name(self):
        if self.anonymous:
            return self.literal_text
        return f"{self.name} = {self.literal_text}"

    def __repr__(self):
        return f"ExpressionRecord({self.name!r}, {self.literal_text!r})"


class SymbolTable:
    """
    Simple and compound propositions of one request.

    Both tables map a name to its truth vector (list of 0/1 bits, one per
    row). Vectors are None until the enumeration (simple) or the
    discover-compound pass (compound) allocates them.
    """

    def __init__(self):
        self.simple = {}
        self.compound = {}
        self.expressions = []

    def is_known(self, name):
        return name in self.simple or name in self.compound

    def add_simple(self, name):
        """Register an atom unless it already names a proposition."""
        if self.is_known(name):
            return False
        self.simple[name] = None
        return True

    def check_compound_name(self, name_token):
        """
        Check that a name is free to become a compound proposition.

        Raises:
            DuplicateNameError: the name is already a compound proposition
            NameCollisionError: the name is already a simple proposition
        """
        name = name_token.lexeme
        if name in self.compound:
            raise DuplicateNameError(f"'{name}' is already defined", name_token)
        if name in self.simple:
            raise NameCollisionError(
                f"'{name}' already exists as a simple proposition", name_token)

    def declare_compound(self, name_token):
        """Reserve a compound name, see `check_compound_name`."""
        self.check_compound_name(name_token)
        self.compound[name_token.lexeme] = None

    def sorted_keys(self):
        return sorted(self.simple)

    def truth_values(self, name):
        if name in self.simple:
            return self.simple[name]
        return self.compound[name]


# ============================================================================
# SECTION 4: PASSES
# ============================================================================

def discover_simple(parser, symbols):
    """
    First pass: collect simple propositions and reserve compound names.

    The parser checks a proposition name as soon as its "=" is read. The name
    is reserved once the expression has been parsed and its atoms collected,
    so a name used inside its own definition is a collision.

    Returns:
        list of Proposition (the parsed request)
    """
    propositions = []
    for proposition in parser.propositions():
        for atom in proposition.expression.atoms():
            symbols.add_simple(atom.name)
        if proposition.name_token is not None:
            symbols.declare_compound(proposition.name_token)
        propositions.append(proposition)
    return propositions


def constant_value(name, numeric):
    """
    Fixed truth value of a constant used as an atom, or None.

    Numeric mode knows 0, 1, ⊥ and ⊤; lettered mode knows F/f/⊥ and V/v/⊤.
    """
    if numeric:
        falses, trues = ('0', '⊥'), ('1', '⊤')
    else:
        falses, trues = ('F', 'f', '⊥'), ('V', 'v', '⊤')
    if name in falses:
        return 0
    if name in trues:
        return 1
    return None


def enumerate_rows(symbols, numeric=True):
    """
    Fill in the truth vectors of all simple propositions.

    Rows count from 0…0 to 1…1 over the sorted keys, the first key being the
    most significant bit. Constants keep their own value in every row.

    Returns:
        int: number of rows (2 ** number of simple propositions)
    """
    keys = symbols.sorted_keys()
    vectors = {key: [] for key in keys}
    fixed = {key: constant_value(key, numeric) for key in keys}

    for assignment in product((0, 1), repeat=len(keys)):
        for key, bit in zip(keys, assignment):
            vectors[key].append(bit if fixed[key] is None else fixed[key])

    symbols.simple.update(vectors)
    return 2 ** len(keys)


def discover_compound(propositions, symbols, rows):
    """
    Second pass: allocate a column for every compound proposition.

    Named propositions always get a column. An anonymous proposition whose
    reconstructed text is the name of a known proposition is only a
    reference and is skipped; any other gets the next `$p<k>` name.

    Returns:
        list of ExpressionRecord in declaration order
    """
    anonymous_count = 0
    for proposition in propositions:
        literal = proposition.expression.to_string()
        name = proposition.name
        anonymous = name is None

        if anonymous:
            if symbols.is_known(literal):
                continue
            name = f"{ANONYMOUS_PREFIX}{anonymous_count}"
            anonymous_count += 1

        symbols.compound[name] = [0] * rows
        symbols.expressions.append(
            ExpressionRecord(name, literal, proposition.expression, anonymous))

    return symbols.expressions


# ============================================================================
# SECTION 5: OPERATIONS ON TRUTH VALUES
# ============================================================================

def negate(p):
    return not p


def conjoin(p, q):
    return p and q


def disjoin(p, q):
    return p or q


def exclusive_disjoin(p, q):
    return p != q


def implies(p, q):
    return disjoin(negate(p), q)


def biconditional(p, q):
    return conjoin(implies(p, q), implies(q, p))


BINARY_OPERATIONS = {
    TokenKind.AND: conjoin,
    TokenKind.OR: disjoin,
    TokenKind.XOR: exclusive_disjoin,
    TokenKind.IMPLIES: implies,
    TokenKind.BICOND: biconditional,
}


def compile_postfix(expression):
    """
    Flatten a syntax tree into postfix instructions.

    Instructions are ('push', name), ('not', None) and ('binary', TokenKind).
    """
    program = []
    expression.postfix(program)
    return program


def run_postfix(program, symbols, row):
    """Evaluate a compiled expression at one row on an operand stack."""
    stack = []
    for op, arg in program:
        if op == 'push':
            stack.append(symbols.truth_values(arg)[row] == 1)
        elif op == 'not':
            stack.append(negate(stack.pop()))
        else:
            # Right operand was pushed last
            q = stack.pop()
            p = stack.pop()
            stack.append(BINARY_OPERATIONS[arg](p, q))
    return stack.pop()


def evaluate_expressions(symbols, rows, verbose=False):
    """
    Third pass: fill the truth vector of every compound proposition.

    Records are evaluated in declaration order, so a proposition may refer
    to any compound proposition declared before it.
    """
    for record in symbols.expressions:
        program = compile_postfix(record.expression)
        vector = symbols.compound[record.name]
        for row in tqdm(range(rows), desc=record.display_name,
                        disable=not verbose, file=sys.stderr):
            vector[row] = 1 if run_postfix(program, symbols, row) else 0


# ============================================================================
# SECTION 6: TABLE ASSEMBLY
# ============================================================================

class Column:
    """
    One column of a truth table.

    Attributes:
        name: proposition name ('$p0'… for anonymous compound propositions)
        display_name: header text
        truth_values: list of 0/1 bits in display order
        kind: 'simple', 'named' or 'anonymous'
    """

    def __init__(self, name, display_name, truth_values, kind='simple'):
        self.name = name
        self.display_name = display_name
        self.truth_values = truth_values
        self.kind = kind

    def is_tautology(self):
        return all(self.truth_values)

    def is_contradiction(self):
        return not any(self.truth_values)

    def __len__(self):
        return len(self.truth_values)

    def __repr__(self):
        return f"Column({self.display_name!r}, {self.truth_values})"

    def __eq__(self, other):
        if not isinstance(other, Column):
            return False
        return (self.name == other.name and self.display_name == other.display_name
                and self.truth_values == other.truth_values)

    def __hash__(self):
        return hash((self.name, self.display_name, tuple(self.truth_values)))


class Table:
    """
    Assembled truth table.

    Columns hold the simple propositions (sorted) followed by the compound
    ones in declaration order. When `ordered` is False every column is
    stored in reverse enumeration order.
    """

    def __init__(self, columns, rows, numeric=True, ordered=True):
        self.columns = columns
        self.rows = rows
        self.numeric = numeric
        self.ordered = ordered

    def __len__(self):
        return len(self.columns)

    def __iter__(self):
        return iter(self.columns)

    def __getitem__(self, index):
        return self.columns[index]

    def __eq__(self, other):
        if not isinstance(other, Table):
            return False
        return self.rows == other.rows and self.columns == other.columns

    def column(self, name):
        """Find a column by proposition name or by header text."""
        for column in self.columns:
            if name in (column.name, column.display_name):
                return column
        raise KeyError(name)

    @property
    def headers(self):
        return [column.display_name for column in self.columns]

    def row(self, index):
        return tuple(column.truth_values[index] for column in self.columns)

    def iter_rows(self):
        for index in range(self.rows):
            yield self.row(index)

    def to_dict(self):
        return {column.display_name: list(column.truth_values) for column in self.columns}


def assemble_table(symbols, rows, numeric=True, ordered=True):
    """Merge simple and compound vectors into a Table."""
    def arrange(vector):
        return list(vector) if ordered else list(reversed(vector))

    columns = [Column(key, key, arrange(symbols.simple[key]), 'simple')
               for key in symbols.sorted_keys()]

    for record in symbols.expressions:
        columns.append(Column(record.name, record.display_name,
                              arrange(symbols.compound[record.name]),
                              'anonymous' if record.anonymous else 'named'))

    return Table(columns, rows, numeric=numeric, ordered=ordered)


def generate_table(text, numeric=True, ordered=True, verbose=False):
    """
    Parse and evaluate a request.

    Args:
        text: comma separated propositions, e.g. "A = p v q, ¬A"
        numeric: accept 0/1 as constants (otherwise F/V are the constants)
        ordered: rows in enumeration order, or reversed
        verbose: if True, print progress to stderr

    Returns:
        Table

    Raises:
        ParseError: on the first syntax or naming error
    """
    symbols = SymbolTable()

    parser = Parser(text, numeric=numeric, symbols=symbols)
    propositions = discover_simple(parser, symbols)
    rows = enumerate_rows(symbols, numeric)
    if verbose:
        print(f"{len(symbols.simple)} simple propositions, {rows} rows",
              file=sys.stderr)

    discover_compound(propositions, symbols, rows)
    if verbose:
        print(f"{len(symbols.expressions)} compound propositions", file=sys.stderr)

    evaluate_expressions(symbols, rows, verbose=verbose)
    return assemble_table(symbols, rows, numeric=numeric, ordered=ordered)


# ============================================================================
# SECTION 7: CALCULATOR
# ============================================================================

def truth_symbols(numeric, locale_name=None):
    """
    Glyphs used to display (true, false).

    Numeric mode shows 1/0. Lettered mode shows F for false and, for true,
    V under a Spanish-family locale and T otherwise.
    """
    if numeric:
        return '1', '0'
    if locale_name is None:
        locale_name = locale.getlocale()[0] or ''
    if locale_name[:2].lower() == 'es':
        return 'V', 'F'
    return 'T', 'F'


class TableResult:
    """
    Outcome of one request: either a table or a ParseError.

    A table carries the glyphs that were in effect when it was computed.
    """

    def __init__(self, table=None, error=None, true_symbol='1', false_symbol='0'):
        self.table = table
        self.error = error
        self.true_symbol = true_symbol
        self.false_symbol = false_symbol

    @property
    def ok(self):
        return self.error is None

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.ok:
            return f"TableResult({len(self.table)} columns, {self.table.rows} rows)"
        return f"TableResult(error={self.error})"


class TruthTableCalculator:
    """
    Computes truth tables with persistent display options.

    Errors never propagate out of the calculator: they are returned in the
    TableResult and kept in `last_error` until the next request.

    One instance serves one request at a time; concurrent callers are
    serialized by an internal lock.
    """

    def __init__(self, numeric_truth_values=True, ordered_rows=True,
                 verbose=False, locale_name=None):
        self._lock = threading.Lock()
        self._locale_name = locale_name
        self.numeric_truth_values = numeric_truth_values
        self.ordered_rows = ordered_rows
        self.verbose = verbose
        self.last_error = None
        self.row_count = 0

    @property
    def numeric_truth_values(self):
        return self._display[0]

    @numeric_truth_values.setter
    def numeric_truth_values(self, value):
        if not isinstance(value, bool):
            raise TypeError(f"Expected bool, got {type(value)}")
        # Mode and glyphs change together in a single assignment
        self._display = (value,) + truth_symbols(value, self._locale_name)

    @property
    def true_symbol(self):
        return self._display[1]

    @property
    def false_symbol(self):
        return self._display[2]

    def compute(self, text):
        """
        Parse and evaluate a request.

        Returns:
            TableResult
        """
        with self._lock:
            numeric, true_symbol, false_symbol = self._display
            self.last_error = None
            try:
                table = generate_table(text, numeric=numeric,
                                       ordered=self.ordered_rows,
                                       verbose=self.verbose)
            except ParseError as e:
                self.last_error = e
                if self.verbose:
                    print(f"Syntax error: {e}", file=sys.stderr)
                return TableResult(error=e)

            self.row_count = table.rows
            return TableResult(table=table, true_symbol=true_symbol,
                               false_symbol=false_symbol)

    def compute_table(self, text):
        """Return the Table, or None on error (see `last_error`)."""
        return self.compute(text).table

    def get_table(self, text):
        """Return the rendered table, or '' on error (see `last_error`)."""
        result = self.compute(text)
        if not result.ok:
            return ''
        from truthtable_visualization import table_to_string
        return table_to_string(result.table, result.true_symbol, result.false_symbol)


# ============================================================================
# SECTION 8: ENTAILMENT POSET
# ============================================================================

def entails(first, second):
    """True if every row where `first` holds also makes `second` hold."""
    return all(b or not a for a, b in zip(first, second))


def group_by_truth_values(table):
    """
    Group columns with identical truth vectors.

    Args:
        table: Table

    Returns:
        dict mapping tuple of bits -> list of Columns
    """
    result = {}
    for column in table:
        key = tuple(column.truth_values)
        if key not in result:
            result[key] = []
        result[key].append(column)
    return result


class EntailmentPoset:
    """
    The columns of a table ordered by entailment.

    Columns with the same truth vector are equivalent and share a node, so
    the graph is a partial order. An edge i -> j means node i strictly
    entails node j.
    """

    def __init__(self, table, verbose=False):
        self.table = table
        groups = group_by_truth_values(table)
        self.class_list = list(groups.keys())
        self.members = [groups[key] for key in self.class_list]

        self.graph = nx.DiGraph()
        for i in range(len(self.class_list)):
            self.graph.add_node(i)

        if verbose:
            print("Building entailment poset...", file=sys.stderr)
        for i in tqdm(range(len(self.class_list)), disable=not verbose, file=sys.stderr):
            for j in range(len(self.class_list)):
                if i != j and entails(self.class_list[i], self.class_list[j]):
                    self.graph.add_edge(i, j)

        if verbose:
            print(f"Poset built: {len(self.class_list)} nodes, "
                  f"{self.graph.number_of_edges()} edges", file=sys.stderr)

    def transitive_reduction(self):
        """
        Return the Hasse diagram of this poset.

        Returns:
            EntailmentPoset with reduced graph
        """
        reduced = EntailmentPoset.__new__(EntailmentPoset)
        reduced.table = self.table
        reduced.class_list = self.class_list
        reduced.members = self.members
        reduced.graph = nx.transitive_reduction(self.graph)
        return reduced

    def get_columns(self, node_id):
        return self.members[node_id]

    def label(self, node_id):
        return ' ≡ '.join(column.display_name for column in self.members[node_id])

    def predecessors(self, node_id):
        return list(self.graph.predecessors(node_id))

    def successors(self, node_id):
        return list(self.graph.successors(node_id))

    def tautologies(self):
        return [column for column in self.table if column.is_tautology()]

    def contradictions(self):
        return [column for column in self.table if column.is_contradiction()]
