"""
Single-line text field editor.

Wraps a prompt_toolkit Buffer so the wizard gets cursor handling for free,
while rendering stays in our hands: the field knows how to draw itself as
formatted-text fragments that the renderer splices into the frame.
"""

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document

Fragments = list[tuple[str, str]]


class TextField:
    """A focusable single-line text value with a character limit."""

    def __init__(self, value: str = "", placeholder: str = "", char_limit: int = 0):
        """
        Args:
            value: Initial text; the cursor starts at its end.
            placeholder: Shown dimmed while the field is empty.
            char_limit: Maximum number of characters, 0 for unlimited.
        """
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.focused = False
        self.buffer = Buffer(multiline=False)
        self.buffer.on_text_changed += self._enforce_limit
        self.set(value)

    def value(self) -> str:
        return self.buffer.text

    def set(self, value: str) -> None:
        if self.char_limit:
            value = value[: self.char_limit]
        self.buffer.set_document(Document(value, len(value)), bypass_readonly=True)

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    # --- Keystroke handling ---

    def insert(self, text: str) -> None:
        """Insert typed text at the cursor, dropping control characters."""
        text = "".join(ch for ch in text if ch.isprintable())
        if not text:
            return
        if self.char_limit:
            room = self.char_limit - len(self.buffer.text)
            if room <= 0:
                return
            text = text[:room]
        self.buffer.insert_text(text)

    def backspace(self) -> None:
        self.buffer.delete_before_cursor(1)

    def delete(self) -> None:
        self.buffer.delete(1)

    def cursor_left(self) -> None:
        self.buffer.cursor_left(1)

    def cursor_right(self) -> None:
        self.buffer.cursor_right(1)

    def home(self) -> None:
        self.buffer.cursor_position = 0

    def end(self) -> None:
        self.buffer.cursor_position = len(self.buffer.text)

    def clear(self) -> None:
        self.set("")

    def _enforce_limit(self, buffer: Buffer) -> None:
        if self.char_limit and len(buffer.text) > self.char_limit:
            buffer.text = buffer.text[: self.char_limit]

    # --- Rendering ---

    def fragments(self) -> Fragments:
        """Render the field; the cursor cell is reversed while focused."""
        result: Fragments = [("class:muted", "> ")]
        text = self.buffer.text

        if not text:
            if self.placeholder and self.focused:
                result.append(("class:field.placeholder class:field.cursor", self.placeholder[0]))
                result.append(("class:field.placeholder", self.placeholder[1:]))
            elif self.placeholder:
                result.append(("class:field.placeholder", self.placeholder))
            elif self.focused:
                result.append(("class:field.cursor", " "))
            return result

        if not self.focused:
            result.append(("class:field", text))
            return result

        pos = self.buffer.cursor_position
        if text[:pos]:
            result.append(("class:field", text[:pos]))
        result.append(("class:field class:field.cursor", text[pos : pos + 1] or " "))
        if text[pos + 1 :]:
            result.append(("class:field", text[pos + 1 :]))
        return result
