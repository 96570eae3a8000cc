"""
Tests for note/syllable lookup tables.
"""

import pytest
from src.solfege.errors import InvalidNoteError, InvalidSyllableError
from src.solfege.symbols import Note, Syllable
from src.solfege.tables import (
    NOTE_TO_SYLLABLE,
    SYLLABLE_TO_NOTE,
    note_for_syllable,
    syllable_for_note,
)
from src.solfege.tokenizer import next_note_token, next_syllable_token


class TestSyllableForNote:
    """Test note -> syllable spelling."""

    @pytest.mark.parametrize("note,spelling", [
        (Note.C, b"Ut"),
        (Note.D, b"Re"),
        (Note.E, b"Mi"),
        (Note.F, b"Fa"),
        (Note.G, b"Sol"),
        (Note.A, b"La"),
        (Note.B, b"Si"),
    ])
    def test_spelling(self, note, spelling):
        """Test every note spells its syllable with the right length."""
        assert syllable_for_note(note) == (spelling, len(spelling))

    def test_numeric_id(self):
        """Test numeric ids are accepted like enum members."""
        assert syllable_for_note(5) == (b"Sol", 3)

    @pytest.mark.parametrize("bad", [0, 8, -902, "C", None])
    def test_invalid_note(self, bad):
        """Test unknown note ids raise InvalidNoteError."""
        with pytest.raises(InvalidNoteError, match="Invalid note"):
            syllable_for_note(bad)


class TestNoteForSyllable:
    """Test syllable -> note letter."""

    def test_all_letters(self):
        """Test each syllable maps to its note letter."""
        letters = b"".join(note_for_syllable(s) for s in Syllable)
        assert letters == b"CDEFGAB"

    @pytest.mark.parametrize("bad", [0, 8, "Sol", None])
    def test_invalid_syllable(self, bad):
        """Test unknown syllable ids raise InvalidSyllableError."""
        with pytest.raises(InvalidSyllableError, match="Invalid syllable"):
            note_for_syllable(bad)


class TestBijection:
    """Test the mapping is lossless in both directions."""

    def test_tables_are_inverse(self):
        """Test both tables cover all seven symbols and invert each other."""
        assert len(NOTE_TO_SYLLABLE) == 7
        assert len(SYLLABLE_TO_NOTE) == 7
        for note, syllable in NOTE_TO_SYLLABLE.items():
            assert SYLLABLE_TO_NOTE[syllable] is note

    @pytest.mark.parametrize("note", list(Note))
    def test_note_round_trip(self, note):
        """Test note -> syllable -> note is the identity."""
        spelling, length = syllable_for_note(note)
        syllable, consumed = next_syllable_token(spelling)
        assert consumed == length
        assert note_for_syllable(syllable) == note.letter.encode('ascii')

    @pytest.mark.parametrize("syllable", list(Syllable))
    def test_syllable_round_trip(self, syllable):
        """Test syllable -> note -> syllable is the identity."""
        letter = note_for_syllable(syllable)
        note = next_note_token(letter)
        spelling, _ = syllable_for_note(note)
        assert spelling == syllable.text.encode('ascii')
