from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import TYPE_CHECKING

from .validation import NoAlphanumericContentError, validate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .validation import ValidatedString

logger = logging.getLogger(__name__)

_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_UNDERSCORES_AND_SPACES = re.compile(r"[_\s]+")
_PUNCTUATION_KEEPING_HYPHENS = re.compile(r"[^A-Za-z0-9 \-]+")
_PUNCTUATION = re.compile(r"[^A-Za-z0-9 ]+")
_DELIMITERS = re.compile(r"[ \-]+")


@dataclass(frozen=True)
class NameStyleConfig:
    separator: str  # "-", ".", or ""
    capitalize_rest: bool  # capitalize words after first?
    keep_hyphens: bool  # drop other punctuation instead of splitting on it?


@unique
class NameStyle(Enum):
    _config: NameStyleConfig
    _function_name: str

    KEBAB_CASE = (
        auto(),
        NameStyleConfig("-", False, True),
        "to_kebab_case",
    )  # kebab-case
    CAMEL_CASE = (
        auto(),
        NameStyleConfig("", True, False),
        "to_camel_case",
    )  # camelCase
    DOT_CASE = (
        auto(),
        NameStyleConfig(".", False, False),
        "to_dot_case",
    )  # dot.case

    def __new__(
        cls, value: int, config: NameStyleConfig, function_name: str
    ) -> NameStyle:
        obj = object.__new__(cls)
        obj._value_ = value
        obj._config = config
        obj._function_name = function_name
        return obj

    @property
    def config(self) -> NameStyleConfig:
        return self._config

    @property
    def function_name(self) -> str:
        """Name of the public converter, used to prefix error messages."""
        return self._function_name


def split_into_words(
    name: ValidatedString,
    *,
    keep_hyphens: bool = False,
    caller: str | None = None,
) -> list[str]:
    """Split a validated string into lowercase ASCII words.

    With keep_hyphens, punctuation other than hyphens is deleted without
    splitting the surrounding word; otherwise any run of non-alphanumeric
    characters separates words.
    """
    text = _CASE_BOUNDARY.sub(r"\1 \2", name)
    text = _UNDERSCORES_AND_SPACES.sub(" ", text)
    if keep_hyphens:
        text = _PUNCTUATION_KEEPING_HYPHENS.sub("", text)
    else:
        text = _PUNCTUATION.sub(" ", text)
    text = _DELIMITERS.sub(" ", text).strip()
    words = [word.lower() for word in text.split(" ") if word]
    if not words:
        raise NoAlphanumericContentError(name, caller=caller)
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def join_words(words: Sequence[str], style: NameStyle) -> str:
    normalized_words = [word.lower() for word in words if word]
    if not normalized_words:
        return ""
    cfg = style.config
    transformed = [
        _capitalize(w) if i > 0 and cfg.capitalize_rest else w
        for i, w in enumerate(normalized_words)
    ]
    return cfg.separator.join(transformed)


def convert_name(name: object, style: NameStyle) -> str:
    """Convert any string to the given target style.

    Raises a CaseConversionError subclass when the value is not a string,
    is blank, or has no ASCII letters or digits.
    """
    caller = style.function_name
    validated = validate(name, caller=caller)
    words = split_into_words(
        validated, keep_hyphens=style.config.keep_hyphens, caller=caller
    )
    converted = join_words(words, style)
    logger.debug("Converted to %s: %s", style.name, converted)
    return converted


def to_kebab_case(name: object) -> str:
    return convert_name(name, NameStyle.KEBAB_CASE)


def to_camel_case(name: object) -> str:
    return convert_name(name, NameStyle.CAMEL_CASE)


def to_dot_case(name: object) -> str:
    return convert_name(name, NameStyle.DOT_CASE)
