class JSONStoreError(Exception):
    """Базовая ошибка хранилища документов"""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCredential(JSONStoreError):
    status_code = 401
    default_message = "API key is required"


class InvalidCredential(JSONStoreError):
    status_code = 401
    default_message = "Invalid API key"


class InvalidCredentials(JSONStoreError):
    """Неверная пара email/пароль (без раскрытия существования аккаунта)"""

    status_code = 401
    default_message = "Invalid email or password"


class NotFound(JSONStoreError):
    """Документ отсутствует или недоступен вызывающему"""

    status_code = 404
    default_message = "Document not found"


class BadInput(JSONStoreError):
    status_code = 400
    default_message = "Invalid input"


class WeakPassword(BadInput):
    default_message = "Password is too short"


class DuplicateEmail(JSONStoreError):
    status_code = 409
    default_message = "Email already registered"


class MethodNotAllowed(JSONStoreError):
    status_code = 405
    default_message = "Method not allowed"


class StoreUnavailable(JSONStoreError):
    status_code = 500
    default_message = "Storage is unavailable"


class CorruptRecord(JSONStoreError):
    status_code = 500
    default_message = "Stored record is corrupted"
