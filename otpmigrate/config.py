import os

# --- Migration URI ---

MIGRATION_SCHEME = 'otpauth-migration'
MIGRATION_HOST = 'offline'
MIGRATION_QUERY_KEY = 'data'

# --- Backup ---

PBKDF2_ITER = 200_000
SALT_BYTES = 16

# --- Environment ---

LOG_LEVEL_ENV = 'OTPMIGRATE_LOG_LEVEL'
QR_BACKEND_ENV = 'OTPMIGRATE_QR_BACKEND'
BACKUP_PASSWORD_ENV = 'OTPMIGRATE_BACKUP_PASSWORD'

DEFAULT_LOG_LEVEL = 'WARNING'
DEFAULT_QR_BACKEND = 'zbar'
QR_BACKENDS = ('zbar', 'opencv')


def qrBackend():
    backend = os.environ.get(QR_BACKEND_ENV, DEFAULT_QR_BACKEND).strip().lower()
    if backend not in QR_BACKENDS:
        return DEFAULT_QR_BACKEND
    return backend
