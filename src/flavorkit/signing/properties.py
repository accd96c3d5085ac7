"""Parsing of ``key.properties`` signing files.

The file uses the ``java.util.Properties`` text format: ``#``/``!`` comments,
``=``, ``:`` or whitespace separators, backslash line continuations and
backslash escapes. Files are decoded as ISO-8859-1, like
``Properties.load(InputStream)``.
"""

import re
import typing as t

from pydantic import BaseModel, ConfigDict, Field

from ..domain.signing import SigningConfig, SigningSource

PROPERTIES_ENCODING: t.Final = "latin-1"

_WHITESPACE: t.Final = " \t\f"
_SEPARATORS: t.Final = "=:"
_ESCAPE_PATTERN: t.Final = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_ESCAPES: t.Final = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_LINE_BREAK: t.Final = re.compile(r"\r\n|\r|\n")


def _unescape(value: str) -> str:
    def replace(match: re.Match[str]) -> str:
        escaped = match.group(1)
        if len(escaped) == 5:
            return chr(int(escaped[1:], 16))
        return _ESCAPES.get(escaped, escaped)

    return _ESCAPE_PATTERN.sub(replace, value)


def _logical_lines(text: str) -> t.Iterator[str]:
    """Join continued natural lines and drop blanks and comments."""
    pending: str | None = None
    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue

        trailing_backslashes = len(line) - len(line.rstrip("\\"))
        if trailing_backslashes % 2 == 1:
            pending = (pending or "") + line[:-1]
            continue

        yield (pending or "") + line
        pending = None

    if pending is not None:
        yield pending


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1

    key, rest = line[:index], line[index:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dict. Later keys override earlier ones."""
    return dict(_split_entry(line) for line in _logical_lines(text))


class KeyProperties(BaseModel):
    """Typed view of the recognized ``key.properties`` keys.

    Absent keys stay None; unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key_alias: str | None = Field(default=None, alias="keyAlias")
    key_password: str | None = Field(default=None, alias="keyPassword")
    store_file: str | None = Field(default=None, alias="storeFile")
    store_password: str | None = Field(default=None, alias="storePassword")

    @classmethod
    def from_properties(cls, values: t.Mapping[str, str]) -> "KeyProperties":
        """Build from a parsed properties mapping."""
        return cls.model_validate(dict(values))

    @classmethod
    def from_text(cls, text: str) -> "KeyProperties":
        """Parse properties text and build from it."""
        return cls.from_properties(parse_properties(text))

    def to_signing_config(self) -> SigningConfig:
        return SigningConfig(
            source=SigningSource.PROPERTIES_FILE,
            store_file=self.store_file,
            store_password=self.store_password,
            key_alias=self.key_alias,
            key_password=self.key_password,
        )
