"""
Solfège transcoder.

Translates note names (C D E F G A B) to solfège syllables
(Ut Re Mi Fa Sol La Si) and back.
"""

__version__ = "0.1.0"

from .symbols import (
    Note,
    Syllable,
    Direction,
    MAX_NOTES_BYTES,
    MAX_SYLLABLES_BYTES,
    CMD_TO_SYLLABLES,
    CMD_TO_NOTES,
)
from .errors import (
    ResultCode,
    TranscoderError,
    InvalidCommandError,
    InvalidNoteError,
    InvalidSyllableError,
    TooManyNotesError,
    TooManySyllablesError,
    NoNotesError,
    NoSyllablesError,
    FileOpenError,
    TranslationOverflowError,
)
from .tables import syllable_for_note, note_for_syllable
from .tokenizer import next_note_token, next_syllable_token
from .buffer import OutputBuffer
from .config import TranscoderConfig, load_config
from .translator import (
    Translation,
    Translator,
    translate_notes_to_syllables,
    translate_syllables_to_notes,
)

__all__ = [
    'Note',
    'Syllable',
    'Direction',
    'MAX_NOTES_BYTES',
    'MAX_SYLLABLES_BYTES',
    'CMD_TO_SYLLABLES',
    'CMD_TO_NOTES',
    'ResultCode',
    'TranscoderError',
    'InvalidCommandError',
    'InvalidNoteError',
    'InvalidSyllableError',
    'TooManyNotesError',
    'TooManySyllablesError',
    'NoNotesError',
    'NoSyllablesError',
    'FileOpenError',
    'TranslationOverflowError',
    'syllable_for_note',
    'note_for_syllable',
    'next_note_token',
    'next_syllable_token',
    'OutputBuffer',
    'TranscoderConfig',
    'load_config',
    'Translation',
    'Translator',
    'translate_notes_to_syllables',
    'translate_syllables_to_notes',
]
