class BlawgError(Exception):
    """Base class for every failure the CLI reports before exiting."""

    exit_code = 1


class ConfigError(BlawgError):
    pass


class EditorLaunchError(BlawgError):
    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Could not open text editor '{command}'.\n{reason}")


class DocumentDecodeError(BlawgError):
    pass


class MarkerNotFound(DocumentDecodeError):
    def __init__(self, marker_name: str, after: str = None):
        self.marker_name = marker_name
        self.after = after
        if after:
            message = f"{marker_name} marker not found after the {after} marker in edited document"
        else:
            message = f"{marker_name} marker not found in edited document"
        super().__init__(message)


class AmbiguousDocument(DocumentDecodeError):
    def __init__(self, field: str, marker_name: str):
        self.field = field
        self.marker_name = marker_name
        super().__init__(
            f"The {field} section contains the {marker_name} marker; "
            "remove the duplicate banner and try again"
        )


class TransportError(BlawgError):
    pass


class ApiError(BlawgError):
    def __init__(self, status_code: int, body, message: str = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"Request failed: {status_code} - {body}")


class ClientApiError(ApiError):
    pass


class ServerApiError(ApiError):
    pass


class ApiResponseError(ApiError):
    pass


def api_error_for(status_code: int, body) -> ApiError:
    if 400 <= status_code < 500:
        return ClientApiError(status_code, body)
    if status_code >= 500:
        return ServerApiError(status_code, body)
    return ApiError(status_code, body)
