"""Render LaTeX field values as plain text.

Field values coming out of the parser are LaTeX strings. They are decoded with
the `ulatex` codec from latexcodec and split into rich-text chunks with
pybtex's `LaTeXParser`, where brace groups become `Protected` chunks that case
transforms leave alone.

Before decoding, text-formatting macros such as `\\emph{...}` or `{\\bf ...}`
are reduced to their argument group and the `\\TeX` family of logos is turned
into protected literal text. Control words the codec does not know survive
decoding; they are wrapped in a group so sentence case keeps them intact.

Three renderings are offered:

: `format_verbatim` keeps the text as written, only dropping grouping braces
  and decoding accent macros.
: `format_sentence` applies bibliographic sentence case: the first character
  is capitalised, unprotected text is lower-cased, and a period closes the
  sentence.
: `format_raw` is used for `VERBATIM_FIELDS` (URLs, DOIs, file paths), which
  BibLaTeX never reads as LaTeX: the value is kept character for character.
"""

from __future__ import annotations

import codecs
import re

import latexcodec  # noqa: F401  registers the "ulatex" codec
from pybtex.exceptions import PybtexError
from pybtex.markup import LaTeXParser
from pybtex.richtext import Text

from ..exceptions import ChunkFormatError


VERBATIM_FIELDS: frozenset[str] = frozenset(
    {
        "doi",
        "eprint",
        "file",
        "pdf",
        "url",
        "urlraw",
        "verba",
        "verbb",
        "verbc",
    }
)

# Fields where writers commonly escape URL characters for plain BibTeX styles.
_UNESCAPED_FIELDS = frozenset({"doi", "url", "urlraw"})
_URL_ESCAPE_RE = re.compile(r"\\([_%#&])")

_FONT_COMMAND_RE = re.compile(
    r"\\(?:emph|textbf|textit|textsc|texttt|textsl|textsf|textrm|textup|textmd"
    r"|textnormal|underline|mbox)\s*(?=\{)"
)
_FONT_DECLARATION_RE = re.compile(
    r"\\(?:em|bf|it|sc|tt|sl|sf|rm|bfseries|itshape|scshape|ttfamily|slshape"
    r"|upshape|mdseries|normalfont)(?![A-Za-z])\s*"
)
_LOGO_RE = re.compile(r"\\(BibTeX|LaTeX|TeX)(?![A-Za-z])(?:\{\})?")
_CONTROL_WORD_RE = re.compile(r"\\[A-Za-z]+")


def _resolve_macros(value: str) -> str:
    value = _LOGO_RE.sub(r"{\1}", value)
    value = _FONT_COMMAND_RE.sub("", value)
    return _FONT_DECLARATION_RE.sub("", value)


def to_chunks(value: str, *, field_name: str = "value") -> Text:
    """Split a LaTeX value into rich-text chunks."""
    try:
        decoded = codecs.decode(_resolve_macros(value), "ulatex")
        return LaTeXParser(_CONTROL_WORD_RE.sub(r"{\g<0>}", decoded)).parse()
    except (PybtexError, ValueError) as exc:
        raise ChunkFormatError(field_name, str(exc)) from exc


def _strip_outer_group(value: str) -> str:
    while value.startswith("{") and value.endswith("}"):
        depth = 0
        for index, char in enumerate(value):
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0 and index < len(value) - 1:
                    return value
        value = value[1:-1].strip()
    return value


def format_raw(value: str, *, field_name: str = "url") -> str:
    """Render a verbatim field: outer grouping braces removed, nothing decoded."""
    value = _strip_outer_group(value.strip())
    if field_name in _UNESCAPED_FIELDS:
        value = _URL_ESCAPE_RE.sub(r"\1", value)
    return value


def format_verbatim(value: str, *, field_name: str = "value") -> str:
    """Render a field value without case changes."""
    return to_chunks(value, field_name=field_name).render_as("text")


def format_field(value: str, *, field_name: str) -> str:
    """Render a field with the rule its name calls for."""
    if field_name in VERBATIM_FIELDS:
        return format_raw(value, field_name=field_name)
    return format_verbatim(value, field_name=field_name)


def format_sentence(value: str, *, field_name: str = "title") -> str:
    """Render a field value in sentence case, terminated by a period."""
    chunks = to_chunks(value, field_name=field_name)
    if not chunks:
        return ""
    return chunks.capitalize().add_period().render_as("text")


__all__ = [
    "VERBATIM_FIELDS",
    "format_field",
    "format_raw",
    "format_sentence",
    "format_verbatim",
    "to_chunks",
]
