from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 2
    FILE_NOT_FOUND = 3
    CONFIG_ERROR = 4
    GENERATION_ERROR = 5


class CommandError(Exception):
    """
    Raised by commands to signal a failure.
    The dispatcher prints the message and turns exit_code into the process status.
    """

    def __init__(self, message: str, exit_code: ExitCode = ExitCode.GENERAL_ERROR):
        super().__init__(message)
        self.message = message
        self.exit_code = ExitCode(exit_code)

    def __str__(self):
        return self.message
