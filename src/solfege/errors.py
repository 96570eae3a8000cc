"""
Result codes and exceptions for the solfège transcoder.

Every failure condition has a numeric ResultCode (the values reported by the
legacy command-line tool) and a matching exception class. Exceptions carry
their code so the driver can turn them into a process exit status.
"""

from enum import IntEnum
from typing import Optional


class ResultCode(IntEnum):
    """Result of a translation run."""
    SUCCESS = 0
    INVALID_COMMAND = -901
    INVALID_NOTE = -902
    INVALID_SYLLABLE = -903
    TOO_MANY_NOTES = -904
    TOO_MANY_SYLLABLES = -905
    NO_NOTES = -906
    NO_SYLLABLES = -907
    ERROR_OPENING_FILE = -908
    TRANSLATION_OVERFLOW = -909

    @property
    def exit_status(self) -> int:
        """
        Process exit status for this code.

        Negative statuses are not portable, so -901..-909 map to 1..9.
        """
        if self is ResultCode.SUCCESS:
            return 0
        return -int(self) - 900


class TranscoderError(Exception):
    """Base class for all transcoder failures."""
    code: ResultCode = ResultCode.INVALID_COMMAND

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class InvalidCommandError(TranscoderError, ValueError):
    """Mode argument is not a recognized translation mode."""
    code = ResultCode.INVALID_COMMAND


class InvalidNoteError(TranscoderError, ValueError):
    """Byte is not one of C, D, E, F, G, A, B."""
    code = ResultCode.INVALID_NOTE


class InvalidSyllableError(TranscoderError, ValueError):
    """Byte sequence does not start with a known (complete) syllable."""
    code = ResultCode.INVALID_SYLLABLE


class TooManyNotesError(TranscoderError, ValueError):
    code = ResultCode.TOO_MANY_NOTES


class TooManySyllablesError(TranscoderError, ValueError):
    code = ResultCode.TOO_MANY_SYLLABLES


class NoNotesError(TranscoderError, ValueError):
    code = ResultCode.NO_NOTES


class NoSyllablesError(TranscoderError, ValueError):
    code = ResultCode.NO_SYLLABLES


class FileOpenError(TranscoderError):
    """Input path could not be opened for reading."""
    code = ResultCode.ERROR_OPENING_FILE


class TranslationOverflowError(TranscoderError):
    """Translated output would exceed the output capacity."""
    code = ResultCode.TRANSLATION_OVERFLOW
