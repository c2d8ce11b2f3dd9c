from .const import DECODE_FAILURE_MESSAGE


class MachineObjectReadError(Exception):
    """Raised by ``decode()`` for any failure. The real reason is ``__cause__``."""

    def __init__(self, message: str = DECODE_FAILURE_MESSAGE):
        super().__init__(message)


class MachineObjectFormatError(ValueError):
    code = "E_UNKNOWN"


class UnrecognizedSignatureError(MachineObjectFormatError):
    code = "E_SIGNATURE"


class UnsupportedVersionError(MachineObjectFormatError):
    code = "E_VERSION"


class MalformedEntryError(MachineObjectFormatError):
    code = "E_ENTRY_MALFORMED"


class PositionChangedError(MachineObjectFormatError):
    code = "E_POSITION"


def error_code(exc: BaseException) -> str:
    if isinstance(exc, MachineObjectFormatError):
        return exc.code
    if isinstance(exc, UnicodeDecodeError):
        return "E_CHARSET"
    if isinstance(exc, OSError):
        return "E_IO"
    return "E_UNKNOWN"
