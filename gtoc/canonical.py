"""Link label and anchor generation for Markdown headings."""

from __future__ import annotations

from .constants import GROUP_PATTERN, SPECIAL_CHARS_PATTERN

# Single-pass replacement, so "&lt;" in the input becomes "&amp;lt;" and
# escaped output is never escaped again.
_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&#34;",
    }
)
_BACKTICKS = str.maketrans("", "", "`")


def remove_backticks(text: str) -> str:
    """Remove every backtick from `text`."""
    return text.translate(_BACKTICKS)


def canonical_heading(text: str) -> str:
    """Build the link label shown for a heading.

    HTML-escapes ``&``, ``<``, ``>`` and ``"`` (the latter as ``&#34;``), then
    drops backticks so inline code renders as plain text inside the link.

    Args:
        text: Raw heading text.

    Returns:
        str: Label safe to embed between the square brackets of a link.

    Examples:
        canonical_heading('Foo & "Bar"')  # 'Foo &amp; &#34;Bar&#34;'
        canonical_heading("Use `gtoc`")  # "Use gtoc"
    """
    return remove_backticks(text.translate(_HTML_ESCAPES))


def canonical_anchor(text: str) -> str:
    """Generate the fragment a Markdown renderer assigns to a heading.

    Unwraps one level of parenthesized groups, lowercases, trims surrounding
    whitespace, removes ``[]()':.?><&"`` and backticks, and replaces each
    remaining space with a hyphen. Other punctuation and Unicode characters
    are kept as they are.

    Args:
        text: Raw heading text.

    Returns:
        str: Anchor slug, without the leading ``#``.

    Examples:
        canonical_anchor("Foo (Bar) Baz")  # "foo-bar-baz"
        canonical_anchor("What's `new`?")  # "whats-new"
    """
    # (Bar) -> Bar
    slug = GROUP_PATTERN.sub(r"\1", text)
    slug = slug.lower()
    slug = slug.strip()
    slug = SPECIAL_CHARS_PATTERN.sub("", slug)
    slug = remove_backticks(slug)
    return slug.replace(" ", "-")
