from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class CustomException(HTTPException):
    def __init__(self, status_code: int, detail: Any = None, headers: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(status_code, detail, headers)


class InvalidInput(CustomException):
    def __init__(self, detail: Any = "Invalid data", headers: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail, headers)


class NotFound(CustomException):
    def __init__(self, detail: Any = "Not found", headers: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, detail, headers)


class StorageReadError(CustomException):
    def __init__(self, detail: Any = "Error reading data", headers: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail, headers)


class StorageWriteError(CustomException):
    def __init__(self, detail: Any = "Internal server error", headers: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail, headers)
