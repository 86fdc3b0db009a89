"""Splicing a chosen suggestion back into the input text."""

from __future__ import annotations

from streamchat_cli.triggers import MENTION_SIGIL, TriggerKind


class SpliceError(ValueError):
    """Raised when a splice is requested outside the bounds of the text."""


def splice(
    text: str,
    token_start: int,
    cursor: int,
    replacement: str,
    kind: TriggerKind,
) -> tuple[str, int]:
    """Replace the partial token ``text[token_start:cursor]`` with a completion.

    - Mentions become ``@replacement`` followed by a space, unless the text
      after the cursor already starts with whitespace.
    - Emoji replace the ``:partial`` run with the glyph, no trailing space.
    - Commands replace the whole buffer with ``replacement`` plus a space.

    Text outside the replaced span is left untouched.

    Args:
        text: Current input buffer
        token_start: Offset of the trigger character
        cursor: Cursor offset (end of the partial token)
        replacement: Completion to insert
        kind: Trigger kind the completion belongs to

    Returns:
        Tuple of (new text, new cursor offset)

    Raises:
        SpliceError: If the offsets are out of bounds or the kind is NONE
    """
    if not 0 <= token_start <= cursor <= len(text):
        msg = f"Invalid splice span [{token_start}, {cursor}) for text of length {len(text)}"
        raise SpliceError(msg)

    if kind is TriggerKind.COMMAND:
        new_text = f"{replacement} "
        return new_text, len(new_text)

    prefix = text[:token_start]
    suffix = text[cursor:]

    if kind is TriggerKind.MENTION:
        insertion = f"{MENTION_SIGIL}{replacement}"
        if not suffix[:1].isspace():
            insertion += " "
    elif kind is TriggerKind.EMOJI:
        insertion = replacement
    else:
        msg = f"Nothing to splice for trigger kind {kind!r}"
        raise SpliceError(msg)

    return f"{prefix}{insertion}{suffix}", token_start + len(insertion)
