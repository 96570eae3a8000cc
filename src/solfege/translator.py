"""
One-pass translation between note and syllable streams.

Each call checks the input bounds, walks the input left to right and
accumulates the translated bytes in a bounded OutputBuffer. Any invalid
symbol aborts the whole pass; nothing is returned for partial input.
"""

from dataclasses import dataclass
from typing import Optional

from .buffer import OutputBuffer
from .config import LimitsConfig, OVERFLOW_POLICIES
from .errors import (
    NoNotesError,
    NoSyllablesError,
    TooManyNotesError,
    TooManySyllablesError,
)
from .symbols import Direction
from .tables import note_for_syllable, syllable_for_note
from .tokenizer import next_note_token, next_syllable_token


@dataclass(frozen=True)
class Translation:
    """
    Result of a translation pass.

    Attributes:
        direction: Direction that was translated
        output: Translated bytes
        bytes_consumed: Input bytes translated
        truncated: True if the pass stopped at the output capacity
    """
    direction: Direction
    output: bytes
    bytes_consumed: int
    truncated: bool = False

    @property
    def bytes_written(self) -> int:
        return len(self.output)


class Translator:
    """
    Translates note streams to syllable streams and back.

    Holds only the limits and overflow policy; every call builds its own
    output buffer, so one instance can be reused freely.
    """

    def __init__(
        self,
        limits: Optional[LimitsConfig] = None,
        overflow_policy: str = "error"
    ):
        """
        Initialize translator.

        Args:
            limits: Input/output size limits (defaults: 2048 in, 4096 out)
            overflow_policy: 'error' to fail when output would overflow,
                'truncate' to stop at the last whole token that fits
        """
        if overflow_policy not in OVERFLOW_POLICIES:
            raise ValueError(f"Invalid overflow_policy: {overflow_policy}")
        self.limits = limits or LimitsConfig()
        self.overflow_policy = overflow_policy

    def translate(self, direction: Direction, data: bytes) -> Translation:
        """Translate ``data`` in the given direction."""
        if direction is Direction.TO_SYLLABLES:
            return self.notes_to_syllables(data)
        if direction is Direction.TO_NOTES:
            return self.syllables_to_notes(data)
        raise ValueError(f"Unsupported direction: {direction}")

    def notes_to_syllables(self, data: bytes) -> Translation:
        """
        Translate a note stream into a syllable stream.

        Args:
            data: Note letters, 1 byte each

        Returns:
            Translation with the concatenated syllables

        Raises:
            NoNotesError: If input is empty or nothing was written
            TooManyNotesError: If input exceeds max_input_bytes
            InvalidNoteError: On the first byte that is not a note
            TranslationOverflowError: If output would exceed max_output_bytes
                and the policy is 'error'
        """
        if not data:
            raise NoNotesError("No notes to translate")
        if len(data) > self.limits.max_input_bytes:
            raise TooManyNotesError(
                f"Too many notes: {len(data)} bytes "
                f"(max {self.limits.max_input_bytes})"
            )

        truncated = False
        consumed = 0
        with OutputBuffer(self.limits.max_output_bytes) as out:
            while consumed < len(data):
                note = next_note_token(data, consumed)
                spelling, length = syllable_for_note(note)
                if self._stop_at_capacity(out, length):
                    truncated = True
                    break
                out.append(spelling)
                consumed += 1

            if len(out) == 0:
                raise NoNotesError("Translation produced no syllables")
            output = out.getvalue()

        return Translation(Direction.TO_SYLLABLES, output, consumed, truncated)

    def syllables_to_notes(self, data: bytes) -> Translation:
        """
        Translate a syllable stream into a note stream.

        The count of remaining input bytes shrinks by the bytes each token consumed
        (2, or 3 for Sol), not by one per token.

        Args:
            data: Concatenated syllables with no separators

        Returns:
            Translation with one note letter per syllable

        Raises:
            NoSyllablesError: If input is empty or nothing was written
            TooManySyllablesError: If input exceeds max_input_bytes
            InvalidSyllableError: On the first unknown or truncated syllable
            TranslationOverflowError: If output would exceed max_notes_bytes
                and the policy is 'error'
        """
        if not data:
            raise NoSyllablesError("No syllables to translate")
        if len(data) > self.limits.max_input_bytes:
            raise TooManySyllablesError(
                f"Too many syllables: {len(data)} bytes "
                f"(max {self.limits.max_input_bytes})"
            )

        truncated = False
        consumed = 0
        remaining = len(data)
        with OutputBuffer(self.limits.max_notes_bytes) as out:
            while remaining > 0:
                syllable, length = next_syllable_token(data, consumed)
                letter = note_for_syllable(syllable)
                if self._stop_at_capacity(out, len(letter)):
                    truncated = True
                    break
                out.append(letter)
                consumed += length
                remaining -= length

            if len(out) == 0:
                raise NoSyllablesError("Translation produced no notes")
            output = out.getvalue()

        return Translation(Direction.TO_NOTES, output, consumed, truncated)

    def _stop_at_capacity(self, out: OutputBuffer, size: int) -> bool:
        """True if the pass should stop because ``size`` bytes do not fit.

        Under the 'error' policy this returns False and the append raises.
        """
        return self.overflow_policy == "truncate" and not out.fits(size)


def translate_notes_to_syllables(data: bytes) -> bytes:
    """Translate notes to syllables with the default limits."""
    return Translator().notes_to_syllables(data).output


def translate_syllables_to_notes(data: bytes) -> bytes:
    """Translate syllables to notes with the default limits."""
    return Translator().syllables_to_notes(data).output
