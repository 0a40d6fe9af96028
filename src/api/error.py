from fastapi import status
from libs.result import Error

# HTTP status for each business error code returned by the use cases
ERROR_STATUS_CODES = {
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_TRANSITION": status.HTTP_409_CONFLICT,
    "PROJECT_UNAVAILABLE": status.HTTP_409_CONFLICT,
    "DUPLICATE_APPLICATION": status.HTTP_409_CONFLICT,
    "PROFILE_INCOMPLETE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = None):
        self.base_error = base_error
        self.status_code = status_code or ERROR_STATUS_CODES.get(
            base_error.code, status.HTTP_400_BAD_REQUEST
        )
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
