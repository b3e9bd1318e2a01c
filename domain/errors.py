from __future__ import annotations


class Graph6DecodeError(ValueError):
    pass


class EmptyStringError(Graph6DecodeError):
    def __init__(self) -> None:
        super().__init__("Graph string is empty")


class InvalidStartCharacterError(Graph6DecodeError):
    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"Invalid start character: {character!r}")


class UnexpectedStringEndError(Graph6DecodeError):
    def __init__(self) -> None:
        super().__init__("Graph string ended inside the header prefix")


class UnsupportedGraphSizeError(Graph6DecodeError):
    def __init__(self, supported_size: int) -> None:
        self.supported_size = supported_size
        super().__init__(f"Unsupported graph size, at most {supported_size} vertices are supported")


class Graph6EncodeError(ValueError):
    pass


class SvgWriterError(Exception):
    pass


class MissingHeaderError(SvgWriterError):
    def __init__(self) -> None:
        super().__init__("Header was not yet created")


class AlreadyHasHeaderError(SvgWriterError):
    def __init__(self) -> None:
        super().__init__("Header already created")


class AlreadyFinalisedError(SvgWriterError):
    def __init__(self) -> None:
        super().__init__("SVG data already finalised")


class NotFinalisedError(SvgWriterError):
    def __init__(self) -> None:
        super().__init__("SVG data not yet finalised")


class UnexpectedIndentationLevelError(SvgWriterError):
    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Unexpected indentation level. Expected: {expected}, found: {found}")


class FileIOError(SvgWriterError):
    def __init__(self, source: OSError) -> None:
        self.source = source
        super().__init__(f"Error in file IO: {source}")
