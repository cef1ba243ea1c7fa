# utils/errors.py
class ApiError(Exception):
    """Error rendered as a JSON envelope: {"ok": false, "error": message, **extra}."""
    status_code = 500

    def __init__(self, message, status_code=None, **extra):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_dict(self):
        payload = {'ok': False, 'error': self.message}
        payload.update(self.extra)
        return payload

class BadRequestError(ApiError):
    status_code = 400

class NotFoundError(ApiError):
    status_code = 404

class DataDirectoryError(ApiError):
    """The chapter directory is missing, empty, or a file could not be read."""
    status_code = 500
