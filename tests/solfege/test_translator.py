"""
Tests for the translation loops.
"""

import pytest
from src.solfege.config import LimitsConfig
from src.solfege.errors import (
    InvalidNoteError,
    InvalidSyllableError,
    NoNotesError,
    NoSyllablesError,
    TooManyNotesError,
    TooManySyllablesError,
    TranslationOverflowError,
)
from src.solfege.symbols import Direction, MAX_NOTES_BYTES, MAX_SYLLABLES_BYTES
from src.solfege.translator import (
    Translation,
    Translator,
    translate_notes_to_syllables,
    translate_syllables_to_notes,
)


class TestNotesToSyllables:
    """Test notes -> syllables."""

    def test_single_note(self):
        """Test one note."""
        assert translate_notes_to_syllables(b"C") == b"Ut"

    def test_scale(self):
        """Test the full scale."""
        output = translate_notes_to_syllables(b"CDEFGAB")
        assert output == b"UtReMiFaSolLaSi"
        assert len(output) == 15

    def test_result_fields(self):
        """Test the Translation record."""
        result = Translator().notes_to_syllables(b"GG")
        assert result == Translation(Direction.TO_SYLLABLES, b"SolSol", 2, False)
        assert result.bytes_written == 6

    def test_invalid_note_discards_output(self):
        """Test an invalid note aborts the pass."""
        with pytest.raises(InvalidNoteError) as exc_info:
            translate_notes_to_syllables(b"CX")
        assert exc_info.value.offset == 1

    def test_lowercase_is_invalid(self):
        """Test note letters are case sensitive."""
        with pytest.raises(InvalidNoteError):
            translate_notes_to_syllables(b"c")

    def test_empty_input(self):
        """Test empty input is reported as no notes."""
        with pytest.raises(NoNotesError):
            translate_notes_to_syllables(b"")

    def test_too_many_notes(self):
        """Test oversized input fails before translation."""
        # The first byte is invalid; the size check must win.
        data = b"X" + b"C" * MAX_NOTES_BYTES
        with pytest.raises(TooManyNotesError):
            translate_notes_to_syllables(data)

    def test_max_input_of_two_byte_syllables(self):
        """Test 2048 notes with 2-byte syllables fill the output exactly."""
        output = translate_notes_to_syllables(b"C" * MAX_NOTES_BYTES)
        assert len(output) == MAX_SYLLABLES_BYTES

    def test_under_capacity_sol(self):
        """Test 1365 G notes (4095 bytes) fit."""
        output = translate_notes_to_syllables(b"G" * 1365)
        assert len(output) == 4095
        assert output == b"Sol" * 1365

    def test_all_g_overflows(self):
        """Test 2048 G notes (6144 bytes) raise an explicit overflow."""
        with pytest.raises(TranslationOverflowError):
            translate_notes_to_syllables(b"G" * MAX_NOTES_BYTES)

    def test_all_g_truncates(self):
        """Test the truncate policy stops at the last whole Sol."""
        translator = Translator(overflow_policy="truncate")
        result = translator.notes_to_syllables(b"G" * MAX_NOTES_BYTES)
        assert result.truncated is True
        assert result.bytes_written == 4095
        assert result.bytes_consumed == 1365
        assert result.output == b"Sol" * 1365

    def test_truncate_skips_rest_of_input(self):
        """Test input after the truncation point is not inspected."""
        limits = LimitsConfig(max_output_bytes=4)
        translator = Translator(limits, overflow_policy="truncate")
        result = translator.notes_to_syllables(b"CGX")
        assert result.output == b"Ut"
        assert result.truncated is True

    def test_truncate_with_nothing_written(self):
        """Test a pass that fits no token is reported as no notes."""
        limits = LimitsConfig(max_output_bytes=2)
        translator = Translator(limits, overflow_policy="truncate")
        with pytest.raises(NoNotesError):
            translator.notes_to_syllables(b"G")

    def test_invalid_before_overflow(self):
        """Test an invalid note is reported even if overflow would follow."""
        with pytest.raises(InvalidNoteError):
            translate_notes_to_syllables(b"GX" + b"G" * 1500)


class TestSyllablesToNotes:
    """Test syllables -> notes."""

    def test_scale(self):
        """Test the full scale."""
        assert translate_syllables_to_notes(b"UtReMiFaSolLaSi") == b"CDEFGAB"

    def test_result_fields(self):
        """Test consumed bytes count the 3-byte Sol."""
        result = Translator().syllables_to_notes(b"SolSi")
        assert result == Translation(Direction.TO_NOTES, b"GB", 5, False)

    def test_invalid_syllable(self):
        """Test an unknown syllable aborts the pass."""
        with pytest.raises(InvalidSyllableError):
            translate_syllables_to_notes(b"Xx")

    def test_invalid_after_valid(self):
        """Test partial output is discarded on error."""
        with pytest.raises(InvalidSyllableError) as exc_info:
            translate_syllables_to_notes(b"UtReXx")
        assert exc_info.value.offset == 4

    def test_trailing_odd_byte(self):
        """Test a dangling byte at the end is a truncated syllable."""
        with pytest.raises(InvalidSyllableError, match="Truncated"):
            translate_syllables_to_notes(b"UtR")

    def test_truncated_sol_at_end(self):
        """Test 'So' at the end is not read as Sol."""
        with pytest.raises(InvalidSyllableError):
            translate_syllables_to_notes(b"LaSo")

    def test_empty_input(self):
        """Test empty input is reported as no syllables."""
        with pytest.raises(NoSyllablesError):
            translate_syllables_to_notes(b"")

    def test_too_many_syllables(self):
        """Test oversized input fails before translation."""
        with pytest.raises(TooManySyllablesError):
            translate_syllables_to_notes(b"Ut" * 1025)

    def test_max_input(self):
        """Test 2048 bytes of syllables translate to 1024 notes."""
        assert translate_syllables_to_notes(b"Ut" * 1024) == b"C" * 1024

    def test_note_output_overflow(self):
        """Test the note output capacity is enforced."""
        translator = Translator(LimitsConfig(max_notes_bytes=2))
        with pytest.raises(TranslationOverflowError):
            translator.syllables_to_notes(b"UtReMi")

    def test_note_output_truncate(self):
        """Test truncation in the note direction."""
        translator = Translator(LimitsConfig(max_notes_bytes=2), overflow_policy="truncate")
        result = translator.syllables_to_notes(b"UtSolMi")
        assert result.output == b"CG"
        assert result.bytes_consumed == 5
        assert result.truncated is True


class TestTranslator:
    """Test the Translator facade."""

    def test_translate_dispatch(self):
        """Test translate picks the loop from the direction."""
        translator = Translator()
        assert translator.translate(Direction.TO_SYLLABLES, b"AB").output == b"LaSi"
        assert translator.translate(Direction.TO_NOTES, b"LaSi").output == b"AB"

    def test_invalid_policy(self):
        """Test unknown overflow policies are rejected."""
        with pytest.raises(ValueError, match="Invalid overflow_policy"):
            Translator(overflow_policy="wrap")

    def test_custom_input_limit(self):
        """Test the input limit comes from the limits config."""
        translator = Translator(LimitsConfig(max_input_bytes=3))
        assert translator.notes_to_syllables(b"CDE").output == b"UtReMi"
        with pytest.raises(TooManyNotesError):
            translator.notes_to_syllables(b"CDEF")

    def test_round_trip(self):
        """Test notes -> syllables -> notes over a longer stream."""
        notes = b"GABCDEFGGFEDCBA" * 10
        assert translate_syllables_to_notes(translate_notes_to_syllables(notes)) == notes

    def test_accepts_bytearray_and_memoryview(self):
        """Test any bytes-like input works."""
        assert translate_notes_to_syllables(bytearray(b"CD")) == b"UtRe"
        assert translate_syllables_to_notes(memoryview(b"FaSol")) == b"FG"
