from typing import Optional, Sequence, List


class IdValidator:
    """Parses the unsigned 32-bit integers typed into form fields (ids, years).

    The raw text is taken as is: surrounding spaces make it invalid.
    """

    MAX_VALUE = 2 ** 32 - 1

    @staticmethod
    def is_valid(raw: Optional[str]) -> bool:
        if raw is None or not (raw.isdigit() and raw.isascii()):
            return False
        return int(raw) <= IdValidator.MAX_VALUE

    @staticmethod
    def parse(raw: Optional[str]) -> int:
        """Return the value or raise ValueError for anything but a plain unsigned integer."""
        if not IdValidator.is_valid(raw):
            raise ValueError(f"Not an unsigned integer: {raw!r}")
        return int(raw)

    @staticmethod
    def parse_or_default(raw: Optional[str], default: int = 0) -> int:
        try:
            return IdValidator.parse(raw)
        except ValueError:
            return default


class TextValidator:
    """Required-field checks for the form screens."""

    @staticmethod
    def is_blank(text: Optional[str]) -> bool:
        return text is None or not text.strip()

    @staticmethod
    def blank_labels(labels: Sequence[str], values: Sequence[str]) -> List[str]:
        return [label for label, value in zip(labels, values) if TextValidator.is_blank(value)]
