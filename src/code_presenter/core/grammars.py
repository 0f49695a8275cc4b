"""Language grammars — keyword sets and comment/string syntax per language.

Grammars are static configuration.  The lexer never reaches for a global
table: callers hand it a :class:`LanguageGrammar`, usually looked up in a
:class:`GrammarTable`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

DEFAULT_QUOTES = ('"', "'", "`")
C_BLOCK_COMMENT = ("/*", "*/")


@dataclass(frozen=True)
class LanguageGrammar:
    """Immutable lexical description of one language."""

    language_id: str
    display_name: str
    keywords: tuple[str, ...]
    line_comments: tuple[str, ...] = ()
    block_comment: Optional[tuple[str, str]] = None
    quotes: tuple[str, ...] = DEFAULT_QUOTES
    _keyword_set: frozenset[str] = field(
        init=False, repr=False, compare=False, default=frozenset()
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_keyword_set", frozenset(self.keywords))

    def is_keyword(self, word: str) -> bool:
        return word in self._keyword_set

    def line_comment_at(self, line: str, pos: int) -> Optional[str]:
        """Return the line-comment marker starting at *pos*, if any."""
        for marker in self.line_comments:
            if line.startswith(marker, pos):
                return marker
        return None


# ── keyword tables ──────────────────────────────────────────────────

_CSHARP_KEYWORDS = (
    "public", "private", "protected", "internal", "static", "void", "class",
    "interface", "namespace", "using", "if", "else", "for", "foreach", "while",
    "do", "switch", "case", "break", "continue", "return", "new", "this",
    "base", "var", "const", "readonly", "async", "await", "try", "catch",
    "finally", "throw", "string", "int", "bool", "float", "double", "decimal",
    "long", "short", "byte", "char", "object", "dynamic", "override",
    "virtual", "abstract", "sealed", "partial", "get", "set", "value", "enum",
    "struct", "delegate", "event", "true", "false", "null",
)

_JAVASCRIPT_KEYWORDS = (
    "function", "const", "let", "var", "if", "else", "for", "while", "do",
    "switch", "case", "break", "continue", "return", "new", "this", "class",
    "extends", "constructor", "async", "await", "try", "catch", "finally",
    "throw", "import", "export", "default", "from", "typeof", "instanceof",
    "in", "of", "true", "false", "null", "undefined",
)

_JAVA_KEYWORDS = (
    "public", "private", "protected", "static", "void", "class", "interface",
    "extends", "implements", "package", "import", "if", "else", "for", "while",
    "do", "switch", "case", "break", "continue", "return", "new", "this",
    "super", "final", "abstract", "synchronized", "volatile", "try", "catch",
    "finally", "throw", "throws", "String", "int", "boolean", "float",
    "double", "long", "short", "byte", "char", "Object", "true", "false",
    "null",
)

_PYTHON_KEYWORDS = (
    "def", "class", "if", "elif", "else", "for", "while", "break", "continue",
    "return", "import", "from", "as", "try", "except", "finally", "raise",
    "with", "lambda", "yield", "async", "await", "True", "False", "None",
    "and", "or", "not", "in", "is", "pass", "global", "nonlocal",
)

_CPP_KEYWORDS = (
    "public", "private", "protected", "static", "void", "class", "struct",
    "namespace", "using", "if", "else", "for", "while", "do", "switch", "case",
    "break", "continue", "return", "new", "delete", "this", "const",
    "virtual", "override", "template", "typename", "try", "catch", "throw",
    "int", "bool", "float", "double", "char", "long", "short", "unsigned",
    "signed", "true", "false", "nullptr", "auto",
)

_CSS_KEYWORDS = (
    "color", "background", "margin", "padding", "border", "width", "height",
    "display", "flex", "grid", "position", "top", "left", "right", "bottom",
    "font", "text", "hover", "active", "before", "after", "important",
    "inherit", "initial", "unset",
)

_HTML_KEYWORDS = (
    "div", "span", "p", "a", "img", "input", "button", "form", "table", "tr",
    "td", "th", "ul", "ol", "li", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "footer", "nav", "section", "article", "main", "aside",
    "script", "style", "link", "meta", "title", "body", "html",
)

BUILTIN_GRAMMARS: tuple[LanguageGrammar, ...] = (
    LanguageGrammar("csharp", "C#", _CSHARP_KEYWORDS, ("//",), C_BLOCK_COMMENT),
    LanguageGrammar(
        "javascript", "JavaScript", _JAVASCRIPT_KEYWORDS, ("//",), C_BLOCK_COMMENT
    ),
    LanguageGrammar("json", "JSON", _JAVASCRIPT_KEYWORDS, (), C_BLOCK_COMMENT),
    LanguageGrammar("java", "Java", _JAVA_KEYWORDS, ("//",), C_BLOCK_COMMENT),
    LanguageGrammar("cpp", "C++", _CPP_KEYWORDS, ("//",), C_BLOCK_COMMENT),
    LanguageGrammar("python", "Python", _PYTHON_KEYWORDS, ("#",), None),
    LanguageGrammar("css", "CSS", _CSS_KEYWORDS, (), C_BLOCK_COMMENT),
    LanguageGrammar("html", "HTML", _HTML_KEYWORDS, (), ("<!--", "-->")),
)

DEFAULT_LANGUAGE_ID = "csharp"


class GrammarTable(Mapping[str, LanguageGrammar]):
    """Immutable ``language_id -> grammar`` lookup with a fallback grammar."""

    def __init__(
        self,
        grammars: tuple[LanguageGrammar, ...] | list[LanguageGrammar] = BUILTIN_GRAMMARS,
        *,
        default_id: str = DEFAULT_LANGUAGE_ID,
    ) -> None:
        table = {g.language_id: g for g in grammars}
        if default_id not in table:
            raise ValueError(f"default grammar {default_id!r} is not in the table")
        self._table = MappingProxyType(table)
        self._default_id = default_id

    def __getitem__(self, language_id: str) -> LanguageGrammar:
        return self._table[language_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    @property
    def default(self) -> LanguageGrammar:
        return self._table[self._default_id]

    def lookup(self, language_id: Optional[str]) -> LanguageGrammar:
        """Return the grammar for *language_id*, or the default grammar."""
        if language_id:
            grammar = self._table.get(language_id.strip().lower())
            if grammar is not None:
                return grammar
        return self.default

    def with_grammar(self, grammar: LanguageGrammar) -> "GrammarTable":
        """Return a new table with *grammar* added (or replaced)."""
        merged = dict(self._table)
        merged[grammar.language_id] = grammar
        return GrammarTable(tuple(merged.values()), default_id=self._default_id)


DEFAULT_GRAMMARS = GrammarTable()
