"""
Recursive descent parser for INI syntax.

Parses tokens from the lexer into a formatting-preserving Document.
Every token ends up in some field of some node: blanks, comment marks
and line terminators are kept as strings next to the data they surround.
"""

from ..const import CR, CRLF, DEFAULT_LINE_ENDING, LF
from ..models.document import (
    Comment,
    Document,
    EmptyLine,
    Entry,
    Header,
    IgnorableLine,
    Section,
)
from .lexer import TOKEN_LABELS, Token, TokenType, tokenize


# Character classes per position: a key may start with ']' but never
# contains '=', a section name may contain '=' but no brackets, a value
# may contain anything but a newline.
COMMENT_MARKS = frozenset({TokenType.SEMICOLON, TokenType.HASH})
SECTION_NAME_CHARS = frozenset({
    TokenType.SEMICOLON,
    TokenType.HASH,
    TokenType.SPACE,
    TokenType.EQUAL,
    TokenType.OTHER,
})
KEY_HEAD_CHARS = frozenset({TokenType.RBRACKET, TokenType.OTHER})
KEY_CHARS = KEY_HEAD_CHARS | COMMENT_MARKS | {TokenType.LBRACKET, TokenType.SPACE}
VALUE_CHARS = KEY_CHARS | {TokenType.EQUAL}
IGNORABLE_LINE_START = COMMENT_MARKS | {TokenType.NEWLINE}

# Stable ordering for error messages
_TYPE_ORDER = list(TokenType)


class ParseError(Exception):
    """Exception raised for parser errors."""

    def __init__(
        self,
        message: str,
        token: Token | None = None,
        expected: tuple[TokenType, ...] = (),
    ):
        self.token = token
        self.expected = expected
        if token:
            super().__init__(f"Line {token.line}, column {token.column}: {message}")
        else:
            super().__init__(message)

    @property
    def line(self) -> int | None:
        return self.token.line if self.token else None

    @property
    def column(self) -> int | None:
        return self.token.column if self.token else None


def _ordered(types) -> tuple[TokenType, ...]:
    return tuple(sorted(types, key=_TYPE_ORDER.index))


class IniParser:
    """
    Recursive descent parser for INI text.

    Grammar:
        ini            := ignorable_line* section* EOF
        section        := header ignorable_line* (entry ignorable_line*)*
        header         := spaces '[' section_char+ ']' spaces NEWLINE
        entry          := spaces key '=' value_line
        key            := key_head key_char*
        value_line     := spaces value_char* NEWLINE
        ignorable_line := spaces (comment_mark value_line | NEWLINE)

    Which production a line belongs to is decided by its first non-blank
    token, however many blanks precede it.

    The source must be normalized (see ``normalize``): only '\\n' line
    endings, and a final '\\n'.
    """

    def __init__(self, source: str):
        self.tokens = tokenize(source)
        self.pos = 0

    @property
    def current_token(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        """Advance to next token and return the consumed one."""
        token = self.tokens[self.pos]
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def _check(self, *token_types: TokenType) -> bool:
        """Check if current token is of one of the given types."""
        return self.current_token.type in token_types

    def _expect(self, token_types, what: str, expected=None) -> Token:
        """
        Expect current token to be one of given types, advance and return it.

        ``expected`` widens the set reported in the error, for tokens that
        a preceding run would have consumed.
        """
        if self.current_token.type not in token_types:
            raise self._error(self.current_token, expected or token_types, what)
        return self._advance()

    def _error(self, token: Token, expected, what: str) -> ParseError:
        expected = _ordered(expected)
        labels = ", ".join(TOKEN_LABELS[t] for t in expected)
        return ParseError(
            f"Unexpected {token.label}, expected {what} ({labels})",
            token,
            expected,
        )

    def _line_start(self) -> Token:
        """First non-blank token from the current position on."""
        pos = self.pos
        while self.tokens[pos].type == TokenType.SPACE:
            pos += 1
        return self.tokens[pos]

    def parse(self) -> Document:
        """Parse the entire document."""
        leading_lines = self._parse_ignorable_lines()

        sections: list[Section] = []
        while self._line_start().type == TokenType.LBRACKET:
            sections.append(self._parse_section())

        if not self._check(TokenType.EOF):
            expected = IGNORABLE_LINE_START | {TokenType.LBRACKET, TokenType.EOF}
            what = "comment, empty line or section header"
            if sections:
                expected |= KEY_HEAD_CHARS
                what = "key, comment, empty line or section header"
            raise self._error(self._line_start(), expected, what)

        return Document(leading_lines=tuple(leading_lines), sections=tuple(sections))

    def _parse_section(self) -> Section:
        """Parse a header and everything up to the next header or EOF."""
        header = self._parse_header()
        comments = self._parse_ignorable_lines()

        entries: list[Entry] = []
        while self._line_start().type in KEY_HEAD_CHARS:
            entries.append(self._parse_entry())

        return Section(header=header, comments=tuple(comments), entries=tuple(entries))

    def _parse_header(self) -> Header:
        space_before = self._parse_spaces()
        self._expect({TokenType.LBRACKET}, "'['")

        name = self._expect(SECTION_NAME_CHARS, "section name").value
        name += self._parse_run(SECTION_NAME_CHARS)

        self._expect(
            {TokenType.RBRACKET},
            "']' to close section header",
            SECTION_NAME_CHARS | {TokenType.RBRACKET},
        )
        space_after = self._parse_spaces()
        space_after += self._expect({TokenType.NEWLINE}, "end of line after section header").value

        return Header(name=name, space_before=space_before, space_after=space_after)

    def _parse_entry(self) -> Entry:
        space_before_key = self._parse_spaces()

        key = self._expect(KEY_HEAD_CHARS, "key").value
        key += self._parse_run(KEY_CHARS)
        self._expect({TokenType.EQUAL}, "'=' after key", KEY_CHARS | {TokenType.EQUAL})

        space_after_equal, value, terminator = self._parse_value_line()
        trailing_comments = self._parse_ignorable_lines()

        return Entry(
            key=key,
            value=value,
            space_before_key=space_before_key,
            space_after_equal=space_after_equal,
            line_terminator=terminator,
            trailing_comments=tuple(trailing_comments),
        )

    def _parse_ignorable_lines(self) -> list[IgnorableLine]:
        lines: list[IgnorableLine] = []
        while self._line_start().type in IGNORABLE_LINE_START:
            lines.append(self._parse_ignorable_line())
        return lines

    def _parse_ignorable_line(self) -> IgnorableLine:
        """Parse a comment line or an empty line (comment is tried first)."""
        space_before = self._parse_spaces()

        if self._check(*COMMENT_MARKS):
            mark = self._advance().value
            space_after, text, terminator = self._parse_value_line()
            return Comment(
                mark=mark,
                text=text,
                space_before_mark=space_before,
                space_after_mark=space_after,
                terminator=terminator,
            )

        newline = self._expect({TokenType.NEWLINE}, "comment or end of line", IGNORABLE_LINE_START)
        return EmptyLine(text=space_before + newline.value)

    def _parse_value_line(self) -> tuple[str, str, str]:
        """Parse ``spaces value NEWLINE``; returns the three parts."""
        spaces = self._parse_spaces()
        value = self._parse_run(VALUE_CHARS)
        terminator = self._expect({TokenType.NEWLINE}, "end of line").value
        return spaces, value, terminator

    def _parse_spaces(self) -> str:
        return self._parse_run({TokenType.SPACE})

    def _parse_run(self, token_types) -> str:
        """Consume a maximal run of tokens of given types."""
        chars = []
        while self.current_token.type in token_types:
            chars.append(self._advance().value)
        return "".join(chars)


def normalize(source: str) -> tuple[str, str, bool]:
    """
    Collapse line endings to '\\n' and make sure the text ends with one.

    The first matching style decides for the whole text: any '\\r\\n'
    makes it CRLF, otherwise any '\\r' makes it CR, otherwise LF.

    Returns:
        (normalized text, original line ending, whether a '\\n' was appended)
    """
    line_ending = DEFAULT_LINE_ENDING
    if CRLF in source:
        source = source.replace(CRLF, LF)
        line_ending = CRLF
    elif CR in source:
        source = source.replace(CR, LF)
        line_ending = CR

    added_trailing_newline = not source.endswith(LF)
    if added_trailing_newline:
        source += LF

    return source, line_ending, added_trailing_newline


def parse_document(source: str) -> Document:
    """
    Parse INI text into a Document.

    Args:
        source: INI text with any line ending style

    Returns:
        Parsed Document carrying the line ending metadata

    Raises:
        ParseError: If the text does not match the grammar
    """
    normalized, line_ending, added_trailing_newline = normalize(source)
    document = IniParser(normalized).parse()
    return Document(
        leading_lines=document.leading_lines,
        sections=document.sections,
        line_ending=line_ending,
        added_trailing_newline=added_trailing_newline,
    )
