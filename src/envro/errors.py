from __future__ import annotations


class EnvroError(Exception):
    """Base class for every error raised while reading .env files."""


class ParseError(EnvroError):
    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f'PARSE_ERROR line "{line}" is not valid')


class StoreWriteError(EnvroError):
    def __init__(self, key: str, cause: Exception) -> None:
        self.key = key
        self.cause = cause
        super().__init__(f'STORE_ERROR unable to set "{key}": {cause}')


class LoadError(EnvroError):
    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class FileUnreadableError(LoadError):
    def __init__(self, path: str, cause: Exception) -> None:
        self.cause = cause
        super().__init__(path, f'FILE_ERROR unable to read env file "{path}": {cause}')


class InvalidEnvFileError(LoadError):
    def __init__(self, path: str, line: str) -> None:
        self.line = line
        super().__init__(path, f'PARSE_ERROR line "{line}" is not valid')
