"""Draft state of the entry form, including speech dictation events."""

from dataclasses import dataclass

from easylog.application.services.suggestion_service import suggest


@dataclass
class EntryComposer:
    """Text buffer fed by typing and by dictation results.

    Dictation events (result, error, end) arrive independently of typing;
    both write into the same buffer.
    """

    text: str = ""
    is_listening: bool = False
    recognition_error: str | None = None
    suggestion: str | None = None
    suggestion_min_length: int = 10

    def edit(self, text: str) -> None:
        self.text = text
        self.suggestion = suggest(text, self.suggestion_min_length)

    def start_dictation(self) -> bool:
        """Begin listening. Returns False if a dictation is already running."""
        if self.is_listening:
            return False
        self.is_listening = True
        self.recognition_error = None
        return True

    def stop_dictation(self) -> None:
        self.is_listening = False

    def on_transcript(self, transcript: str) -> None:
        self.text = f"{self.text} {transcript}" if self.text else transcript
        self.suggestion = suggest(self.text, self.suggestion_min_length)
        self.recognition_error = None

    def on_dictation_error(self, error: str) -> None:
        self.recognition_error = f"Spracherkennungsfehler: {error}"
        self.is_listening = False

    def on_dictation_end(self) -> None:
        self.is_listening = False

    def submit(self) -> str:
        """Hand over the buffer and reset the draft."""
        text = self.text
        self.text = ""
        self.suggestion = None
        return text
