"""
Symbol alphabets for the solfège transcoder.

Defines the two seven-symbol notations, the translation directions and the
size limits shared by the tokenizer, translator and driver.
"""

from enum import Enum, IntEnum


# Largest accepted input (either direction) and capacity of a note output.
MAX_NOTES_BYTES = 2048
# Capacity of a syllable output. A full input of G notes (3 bytes per Sol)
# needs 6144 bytes, so the overflow policy applies at this bound.
MAX_SYLLABLES_BYTES = 4096

# Numeric mode codes accepted on the command line
CMD_TO_SYLLABLES = 804619
CMD_TO_NOTES = 1128809


class Note(IntEnum):
    """Natural note names, serialized as one ASCII letter."""
    C = 1
    D = 2
    E = 3
    F = 4
    G = 5
    A = 6
    B = 7

    @property
    def letter(self) -> str:
        """Serialized form of the note (e.g. Note.G -> 'G')."""
        return self.name


class Syllable(IntEnum):
    """Solfège syllables, serialized as 2 bytes except Sol (3 bytes)."""
    UT = 1
    RE = 2
    MI = 3
    FA = 4
    SOL = 5
    LA = 6
    SI = 7

    @property
    def text(self) -> str:
        """Serialized form of the syllable (e.g. Syllable.SOL -> 'Sol')."""
        return self.name.capitalize()


class Direction(Enum):
    """Translation direction."""
    TO_SYLLABLES = "to-syllables"  # notes in, syllables out
    TO_NOTES = "to-notes"          # syllables in, notes out
