from typing import Optional

# Constants
FIELD_SEPARATOR = ": "


def normalize_header_name(name: str) -> str:
    return "-".join(
        _capitalize(part) for part in name.split("-")
    )


def _capitalize(part: str) -> str:
    # only ASCII is case-folded; str.upper() can expand non-ASCII ("ß" -> "SS")
    first = part[:1]
    if first.isascii():
        first = first.upper()
    return first + "".join(c.lower() if c.isascii() else c for c in part[1:])


class Headers(dict):
    def __init__(self, *args: dict[str, str], **kwargs: dict[str, str]) -> None:
        super().__init__()
        if args and isinstance(args[0], dict):
            for key, value in args[0].items():
                self[key] = value
        if kwargs:
            for key, value in kwargs.items():
                self[key] = value

    def __setitem__(self, key: str, value: str) -> None:
        super().__setitem__(normalize_header_name(key), value)

    def __delitem__(self, key: str) -> None:
        super().__delitem__(normalize_header_name(key))

    def __getitem__(self, key: str) -> str:
        return super().__getitem__(normalize_header_name(key))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return super().__contains__(normalize_header_name(key))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return super().get(normalize_header_name(key), default)

    def setdefault(self, key: str, default: str = "") -> str:
        return super().setdefault(normalize_header_name(key), default)

    def pop(self, key: str, *default: Optional[str]) -> Optional[str]:
        return super().pop(normalize_header_name(key), *default)

    def update(self, *args: dict[str, str], **kwargs: str) -> None:
        for other in args:
            for key, value in other.items():
                self[key] = value
        for key, value in kwargs.items():
            self[key] = value

    def __ior__(self, other: dict[str, str]) -> "Headers":
        self.update(other)
        return self

    def __or__(self, other: dict[str, str]) -> "Headers":
        merged = self.copy()
        merged.update(other)
        return merged

    def copy(self) -> "Headers":
        return Headers(self)

    def parse_line(self, line: str) -> None:
        """Store a single ``Name: value`` field-line.

        The line is split on the first ``": "``. A line without that
        separator is kept under its whole text with an empty value, so
        parsing a field-line never fails.
        """
        key, _, value = line.partition(FIELD_SEPARATOR)
        self[key] = value
