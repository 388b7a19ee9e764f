import json

import pytest

from otpmigrate import backup
from otpmigrate.errors import BackupError
from otpmigrate.records import Algorithm, OtpRecord, OtpType

RECORDS = [
    OtpRecord(name='Example:alice@google.com', issuer='Example', secret='JBSWY3DPEHPK3PXP', otpType=OtpType.TOTP),
    OtpRecord(name='bob', issuer='Bank', secret='ME', algorithm=Algorithm.SHA1, otpType=OtpType.HOTP, counter=5),
]


@pytest.fixture(autouse=True)
def fastKdf(monkeypatch):
    monkeypatch.setattr(backup, 'PBKDF2_ITER', 1000)


def test_round_trip(tmp_path):
    path = tmp_path / 'accounts.enc'
    backup.writeBackup(RECORDS, path, 'hunter2')
    assert backup.readBackup(path, 'hunter2') == RECORDS


def test_file_holds_no_plaintext(tmp_path):
    path = tmp_path / 'accounts.enc'
    backup.writeBackup(RECORDS, path, 'hunter2')
    text = path.read_text()
    assert 'JBSWY3DPEHPK3PXP' not in text
    assert set(json.loads(text)) == {'salt', 'token'}


def test_salt_differs_per_write(tmp_path):
    backup.writeBackup(RECORDS, tmp_path / 'a.enc', 'pw')
    backup.writeBackup(RECORDS, tmp_path / 'b.enc', 'pw')
    a = json.loads((tmp_path / 'a.enc').read_text())
    b = json.loads((tmp_path / 'b.enc').read_text())
    assert a['salt'] != b['salt']


def test_wrong_password(tmp_path):
    path = tmp_path / 'accounts.enc'
    backup.writeBackup(RECORDS, path, 'hunter2')
    with pytest.raises(BackupError, match='wrong password'):
        backup.readBackup(path, 'hunter3')


def test_tampered_token(tmp_path):
    path = tmp_path / 'accounts.enc'
    backup.writeBackup(RECORDS, path, 'hunter2')
    data = json.loads(path.read_text())
    data['token'] = data['token'][:-4] + 'AAAA'
    path.write_text(json.dumps(data))
    with pytest.raises(BackupError):
        backup.readBackup(path, 'hunter2')


@pytest.mark.parametrize('content', ['', 'not json', '{}', '{"salt": "AAAA"}', '[1, 2]'])
def test_unreadable_file(tmp_path, content):
    path = tmp_path / 'broken.enc'
    path.write_text(content)
    with pytest.raises(BackupError):
        backup.readBackup(path, 'pw')


def test_missing_file(tmp_path):
    with pytest.raises(BackupError):
        backup.readBackup(tmp_path / 'nope.enc', 'pw')


def test_encrypt_helpers_round_trip():
    key = backup.deriveKey('pw', b'0123456789abcdef')
    assert backup.decryptData(backup.encryptData('hello', key), key) == 'hello'
