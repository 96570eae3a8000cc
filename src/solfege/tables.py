"""
Lookup tables between note names and solfège syllables.
"""

from typing import Dict, Tuple, Union

from .errors import InvalidNoteError, InvalidSyllableError
from .symbols import Note, Syllable


NOTE_TO_SYLLABLE: Dict[Note, Syllable] = {
    Note.C: Syllable.UT,
    Note.D: Syllable.RE,
    Note.E: Syllable.MI,
    Note.F: Syllable.FA,
    Note.G: Syllable.SOL,
    Note.A: Syllable.LA,
    Note.B: Syllable.SI,
}

SYLLABLE_TO_NOTE: Dict[Syllable, Note] = {
    syllable: note for note, syllable in NOTE_TO_SYLLABLE.items()
}

_SPELLINGS: Dict[Note, bytes] = {
    note: syllable.text.encode('ascii') for note, syllable in NOTE_TO_SYLLABLE.items()
}

_LETTERS: Dict[Syllable, bytes] = {
    syllable: note.letter.encode('ascii') for syllable, note in SYLLABLE_TO_NOTE.items()
}


def syllable_for_note(note: Union[Note, int]) -> Tuple[bytes, int]:
    """
    Spell the syllable matching a note.

    Args:
        note: Note member or its numeric id (1-7)

    Returns:
        Tuple of (spelling, length); length is 2, or 3 for Sol

    Raises:
        InvalidNoteError: If note is not one of the seven notes
    """
    try:
        spelling = _SPELLINGS[Note(note)]
    except (ValueError, TypeError):
        raise InvalidNoteError(f"Invalid note id: {note!r}") from None
    return spelling, len(spelling)


def note_for_syllable(syllable: Union[Syllable, int]) -> bytes:
    """
    Letter of the note matching a syllable.

    Args:
        syllable: Syllable member or its numeric id (1-7)

    Returns:
        Single-byte note letter

    Raises:
        InvalidSyllableError: If syllable is not one of the seven syllables
    """
    try:
        return _LETTERS[Syllable(syllable)]
    except (ValueError, TypeError):
        raise InvalidSyllableError(f"Invalid syllable id: {syllable!r}") from None
