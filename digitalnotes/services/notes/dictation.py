"""Voice dictation via SpeechRecognition (Google Web Speech API)."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import speech_recognition as sr

from .client import NotesError

LOGGER = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en-US"


class DictationError(NotesError):
    """Speech could not be captured or transcribed."""


class Dictation:
    """
    Captures a single utterance and returns its transcript.

    Recognition is one-shot (not continuous). ``source_factory`` builds the
    audio source; the default microphone needs PyAudio installed.
    """

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        recognizer: Optional[sr.Recognizer] = None,
        source_factory: Optional[Callable[[], sr.AudioSource]] = None,
        phrase_time_limit: Optional[float] = 15.0,
    ):
        self.language = language
        self.recognizer = recognizer or sr.Recognizer()
        self._source_factory = source_factory or sr.Microphone
        self.phrase_time_limit = phrase_time_limit

    def listen_once(self) -> str:
        try:
            source = self._source_factory()
        except (AttributeError, OSError) as exc:
            # sr.Microphone raises AttributeError when PyAudio is missing
            raise DictationError(f"No microphone available: {exc}") from exc

        try:
            with source as mic:
                # sr.Microphone leaves stream unset when the device fails to open
                if getattr(mic, "stream", None) is None:
                    raise DictationError("No microphone available: input not opened")
                LOGGER.debug("Listening for dictation (%s)", self.language)
                audio = self.recognizer.listen(
                    mic, phrase_time_limit=self.phrase_time_limit
                )
        except sr.WaitTimeoutError as exc:
            raise DictationError("No speech detected") from exc
        except (OSError, AssertionError) as exc:
            LOGGER.error("Audio capture failed: %s", exc)
            raise DictationError(f"No microphone available: {exc}") from exc

        try:
            text = self.recognizer.recognize_google(audio, language=self.language)
        except sr.UnknownValueError as exc:
            raise DictationError("Speech was not understood") from exc
        except sr.RequestError as exc:
            LOGGER.error("Speech service request failed: %s", exc)
            raise DictationError(f"Speech service unavailable: {exc}") from exc

        LOGGER.info("Dictation captured %d characters", len(text))
        return text
