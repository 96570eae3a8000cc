"""
Tokenizer for note and syllable streams.

Both functions read from ``data`` starting at ``offset`` and never inspect a
byte at or beyond ``len(data)``.
"""

from typing import Dict, Tuple

from .errors import InvalidNoteError, InvalidSyllableError
from .symbols import Note, Syllable


_NOTE_BYTES: Dict[int, Note] = {ord(note.letter): note for note in Note}

# Sol is the only 3-byte syllable; it is resolved separately from its 'So' prefix.
_TWO_BYTE_SYLLABLES: Dict[bytes, Syllable] = {
    syllable.text.encode('ascii'): syllable
    for syllable in Syllable
    if syllable is not Syllable.SOL
}
_SOL_PREFIX = b'So'
_SOL_TAIL = ord('l')


def next_note_token(data: bytes, offset: int = 0) -> Note:
    """
    Recognize the note at ``offset``.

    Args:
        data: Input bytes
        offset: Position of the token

    Returns:
        Note at that position (always 1 byte)

    Raises:
        InvalidNoteError: If the byte is not a note letter or offset is past the end
    """
    if not 0 <= offset < len(data):
        raise InvalidNoteError(f"No note byte at offset {offset}", offset=offset)

    note = _NOTE_BYTES.get(data[offset])
    if note is None:
        raise InvalidNoteError(
            f"Invalid note {bytes(data[offset:offset + 1])!r} at offset {offset}",
            offset=offset
        )
    return note


def next_syllable_token(data: bytes, offset: int = 0) -> Tuple[Syllable, int]:
    """
    Recognize the syllable starting at ``offset``.

    'Sol' needs its third byte to be present and equal to 'l'; every other
    syllable is decided on two bytes, so 'Si' never looks at a third byte.

    Args:
        data: Input bytes
        offset: Position of the token

    Returns:
        Tuple of (syllable, bytes consumed)

    Raises:
        InvalidSyllableError: If no complete syllable starts at offset
    """
    remaining = len(data) - offset
    if offset < 0 or remaining < 2:
        raise InvalidSyllableError(
            f"Truncated syllable at offset {offset}", offset=offset
        )

    head = bytes(data[offset:offset + 2])
    if head == _SOL_PREFIX:
        if remaining >= 3 and data[offset + 2] == _SOL_TAIL:
            return Syllable.SOL, 3
        raise InvalidSyllableError(
            f"Invalid syllable {bytes(data[offset:offset + 3])!r} at offset {offset}",
            offset=offset
        )

    syllable = _TWO_BYTE_SYLLABLES.get(head)
    if syllable is None:
        raise InvalidSyllableError(
            f"Invalid syllable {head!r} at offset {offset}", offset=offset
        )
    return syllable, 2
