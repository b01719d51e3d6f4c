"""String helpers: casing, slugs, truncation and light validation."""

import re

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_ALPHANUMERIC_RE = re.compile(r"[a-z0-9]+", re.IGNORECASE | re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")
_CASE_TRANSITION_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_WORD_START_RE = re.compile(r"\b\w", re.ASCII)
# word characters are ASCII only; whitespace stays Unicode-aware
_NON_SLUG_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_SLUG_SEPARATOR_RE = re.compile(r"[\s_-]+")
_NON_KEBAB_RE = re.compile(r"[^\w-]+", re.ASCII)


def capitalize(text: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Returns an empty string for empty (or otherwise falsy) input.
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def truncate_string(text: str, max_length: int, suffix: str = "...") -> str:
    """Cut `text` to `max_length` characters and append `suffix`.

    The suffix is not counted against `max_length`; text that already fits is
    returned unchanged.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


def is_alpha_numeric(text: str) -> bool:
    """Return True if `text` is non-empty and only ASCII letters and digits."""
    return _ALPHANUMERIC_RE.fullmatch(text) is not None


def is_valid_email(text: str) -> bool:
    """Check for the ``local@domain.tld`` shape.

    Deliberately permissive: any run of characters other than whitespace and
    ``@`` is accepted in each part. This is not RFC 5322 validation.
    """
    return _EMAIL_RE.fullmatch(text) is not None


def count_words(text: str) -> int:
    """Count whitespace-separated words.

    An empty or whitespace-only string counts as one word, because splitting
    the stripped empty string still yields a single (empty) fragment.
    """
    return len(_WHITESPACE_RE.split(text.strip()))


def to_slug(text: str) -> str:
    """Convert `text` into a URL slug.

    Lower-cases and strips the input, drops anything that is not an ASCII
    word character, whitespace or hyphen (accented letters included), then collapses runs of whitespace,
    underscores and hyphens into single hyphens.

    Example:
        ```py
        to_slug("Hello World!")  # "hello-world"
        ```
    """
    cleaned = _NON_SLUG_RE.sub("", text.lower().strip())
    return _SLUG_SEPARATOR_RE.sub("-", cleaned)


def to_kebab_case(text: str) -> str:
    """Convert `text` to kebab-case.

    Words are split at whitespace and at lower-to-upper case transitions
    (``"fooBar baz"`` -> ``"foo-bar-baz"``); punctuation and non-ASCII
    letters are dropped.
    """
    spaced = _CASE_TRANSITION_RE.sub(" ", text.strip())
    dashed = _WHITESPACE_RE.sub("-", spaced.lower())
    return _NON_KEBAB_RE.sub("", dashed)


def to_camel_case(text: str) -> str:
    """Convert `text` to camelCase.

    Words are split at whitespace and at lower-to-upper case transitions;
    every ASCII word-initial character except the very first is upper-cased
    and whitespace is removed (``"Hello big World"`` -> ``"helloBigWorld"``).
    """
    spaced = _CASE_TRANSITION_RE.sub(" ", text.strip()).lower()
    camel = _WORD_START_RE.sub(
        lambda m: m.group(0) if m.start() == 0 else m.group(0).upper(), spaced
    )
    return _WHITESPACE_RE.sub("", camel)
