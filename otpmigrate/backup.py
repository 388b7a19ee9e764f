import base64
import hashlib
import json
import secrets

from cryptography.fernet import Fernet, InvalidToken

from .config import PBKDF2_ITER, SALT_BYTES
from .errors import BackupError, ExportError
from .export import fromDict, toJson

# --- Encryption helpers ---

def deriveKey(password, salt):
    digest = hashlib.pbkdf2_hmac('sha256', password.encode(), salt, PBKDF2_ITER)
    return base64.urlsafe_b64encode(digest)


def encryptData(data, key):
    f = Fernet(key)
    return f.encrypt(data.encode())


def decryptData(token, key):
    f = Fernet(key)
    return f.decrypt(token).decode()


# --- Backup files ---

def writeBackup(records, path, password):
    """Write records to `path` encrypted with a key derived from `password`."""
    salt = secrets.token_bytes(SALT_BYTES)
    token = encryptData(toJson(records), deriveKey(password, salt))
    with open(path, 'w') as f:
        json.dump({'salt': base64.b64encode(salt).decode(), 'token': token.decode()}, f)


def readBackup(path, password):
    try:
        with open(path, 'r') as f:
            data = json.load(f)
        salt = base64.b64decode(data['salt'])
        token = data['token'].encode()
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        raise BackupError(f'cannot read backup {path}: {e}') from e

    try:
        entries = json.loads(decryptData(token, deriveKey(password, salt)))
    except InvalidToken:
        raise BackupError('wrong password or damaged backup') from None
    try:
        return [fromDict(e) for e in entries]
    except ExportError as e:
        raise BackupError(f'backup holds an invalid record: {e}') from e
