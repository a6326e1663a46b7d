class Fragment:
    """Filter text typed at the prompt.

    Grows one character at a time at the end and shrinks from the end;
    there is no cursor inside the text.
    """

    def __init__(self, text: str = ""):
        self._text = ""
        for ch in text:
            self.append(ch)

    @property
    def text(self) -> str:
        return self._text

    def append(self, ch: str):
        """Append a single printable character."""
        if len(ch) != 1 or not ch.isprintable():
            raise ValueError(f"cannot append {ch!r} to the fragment")
        self._text += ch

    def backspace(self) -> bool:
        """Drop the last character. Returns False if there was nothing to drop."""
        if not self._text:
            return False
        self._text = self._text[:-1]
        return True

    def clear(self) -> str:
        """Clear the fragment and return the previous content."""
        text = self._text
        self._text = ""
        return text

    def __len__(self) -> int:
        return len(self._text)

    def __bool__(self) -> bool:
        return bool(self._text)

    def __str__(self) -> str:
        return self._text
