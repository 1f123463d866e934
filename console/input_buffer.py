"""
Input Buffer
The line being typed, owned by whatever front end drives the console
"""


class InputBuffer:
    """Holds the pending input line."""

    def __init__(self, text: str = ""):
        self.text = text

    def set(self, text: str) -> None:
        self.text = text

    def clear(self) -> None:
        self.text = ""

    def __bool__(self) -> bool:
        return bool(self.text.strip())
