"""Escape-aware delimiter scanning over non-owning string views.

Every function here works on offsets into the caller's string and returns
``StrView`` slices, so tokens are never copied. An escape marker suppresses
delimiter matching for the single character that follows it and stays in the
emitted token verbatim.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator

from strutils.types import Cursor, StrView, TextLike

DEFAULT_TRIM_CHARS = "\t\n\r "
DEFAULT_ESCAPE = "\\"

type TokenHandler = Callable[[StrView, int], object]


def _check_escape(escape: str) -> None:
    if len(escape) != 1:
        raise ValueError(f"escape must be a single character, got {escape!r}")


def trimm(text: TextLike, by: str = DEFAULT_TRIM_CHARS) -> StrView:
    """Strip leading and trailing characters that appear in ``by``.

    Args:
        text: String or view to trim. A view result keeps offsets into the
            view's original source.
        by: Set of characters to remove from both ends.

    Returns:
        A view over the untouched interior of ``text``.
    """
    view = StrView.of(text)
    source = view.source
    lo, hi = view.start, view.end
    while lo < hi and source[lo] in by:
        lo += 1
    while hi > lo and source[hi - 1] in by:
        hi -= 1
    return StrView(source, lo, hi)


def iter_split(
    sequence: TextLike,
    delimiters: str,
    *,
    include_empty: bool = False,
    escape: str = DEFAULT_ESCAPE,
) -> Iterator[tuple[int, StrView]]:
    """Yield ``(index, token)`` pairs for each delimiter-separated token.

    ``index`` counts emitted tokens only, so suppressed empty tokens do not
    leave gaps. The trailing token is yielded when non-empty, or always when
    ``include_empty`` is set. Nothing is yielded for an empty ``delimiters``.
    """
    _check_escape(escape)
    if not delimiters:
        return
    view = StrView.of(sequence)
    source = view.source
    begin = view.start
    idx = 0
    prev_escape = False
    for i in range(view.start, view.end):
        ch = source[i]
        if prev_escape:
            prev_escape = False
            continue
        if ch == escape:
            prev_escape = True
            continue
        if ch not in delimiters:
            continue
        if include_empty or i > begin:
            yield idx, StrView(source, begin, i)
            idx += 1
        begin = i + 1
    if include_empty or view.end > begin:
        yield idx, StrView(source, begin, view.end)


def split(
    sequence: TextLike,
    delimiters: str,
    on_token: TokenHandler | None,
    include_empty: bool = False,
    escape: str = DEFAULT_ESCAPE,
) -> None:
    """Invoke ``on_token(token, index)`` for every token in ``sequence``.

    Example: ``split("|12||34|5\\\\|6|", "|", handler)`` calls the handler
    with ``("12", 0)``, ``("34", 1)`` and ``("5\\\\|6", 2)``.

    Does nothing when ``delimiters`` is empty or ``on_token`` is None.
    """
    if on_token is None:
        return
    for idx, part in iter_split(
        sequence, delimiters, include_empty=include_empty, escape=escape,
    ):
        on_token(part, idx)


def substr(
    sequence: TextLike,
    cursor: Cursor,
    delimiters: str,
    include_empty: bool = False,
    escape: str = DEFAULT_ESCAPE,
) -> StrView:
    """Return the next token starting at ``cursor`` and advance the cursor.

    Each call may use a different delimiter set, which allows progressive
    extraction, e.g. ``"user@email.com"`` split by ``"@"``, then ``"."``,
    then ``"."`` gives ``user``, ``email`` and ``com``.

    Args:
        sequence: String or view being scanned. Cursor offsets are relative
            to the start of the view.
        cursor: Scan position; moved past the consumed delimiter, or to
            ``len(sequence)`` once the input is exhausted.
        delimiters: Characters that end a token.
        include_empty: Return empty tokens between adjacent delimiters
            instead of skipping over them.
        escape: Marker that suppresses delimiter matching for the next
            character.

    Returns:
        The token view, or an empty view when ``delimiters`` is empty or the
        cursor is already at the end.
    """
    _check_escape(escape)
    view = StrView.of(sequence)
    size = len(view)
    if not delimiters or cursor.offset >= size:
        return StrView(view.source, view.end, view.end)
    source = view.source
    base = view.start
    begin = cursor.offset
    prev_escape = False
    offset = cursor.offset
    while offset < size:
        ch = source[base + offset]
        offset += 1
        if prev_escape:
            prev_escape = False
            continue
        if ch == escape:
            prev_escape = True
            continue
        if ch not in delimiters:
            continue
        token_end = offset - 1
        if include_empty or token_end > begin:
            cursor.offset = offset
            return StrView(source, base + begin, base + token_end)
        begin = offset
    cursor.offset = size
    return StrView(source, base + begin, base + size)
