# backend/services/errors.py
"""Application error kinds.

Services raise these; the handlers registered in ``main.py`` turn them into
``{"error": message}`` JSON responses with the matching HTTP status.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Terjadi kesalahan server"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(AppError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(AppError):
    status_code = 403
    default_message = "Akses ditolak"


class NotFound(AppError):
    status_code = 404
    default_message = "Data tidak ditemukan"


class InvalidArgument(AppError):
    status_code = 400
    default_message = "Data tidak valid"


class InvalidState(AppError):
    status_code = 400
    default_message = "Aksi tidak dapat dilakukan pada status saat ini"


class Internal(AppError):
    status_code = 500
