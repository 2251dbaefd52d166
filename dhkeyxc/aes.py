"""AES-256-GCM encryption and scrypt derivation of the AES key and nonce."""

from __future__ import annotations

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from dhkeyxc.ivformat import IV_LENGTH, form_int, form_iv
from dhkeyxc.logger import get_logger
from dhkeyxc.params import AESParams, DHParams, ExchangeError

KEY_LENGTH = 32
TAG_LENGTH = 16
SCRYPT_SALT = b"AES-keygen-salt"
SCRYPT_N = 2**20
SCRYPT_R = 8
SCRYPT_P = 1


def _fail(message: str) -> ExchangeError:
    get_logger().err(message)
    return ExchangeError(message)


def _cipher(aes: AESParams) -> tuple[AESGCM, bytes]:
    if aes.aes_iv is None:
        raise _fail("Couldn't format IV for encryption.")
    try:
        nonce = form_iv(aes.aes_iv, IV_LENGTH)
    except ValueError as exc:
        raise _fail("Couldn't format IV for encryption.") from exc
    try:
        cipher = AESGCM(bytes(aes.aes_key))
    except ValueError as exc:
        raise _fail("Couldn't set key and IV for AES.") from exc
    return cipher, nonce


def aes_encrypt(plaintext: bytes, aes: AESParams) -> tuple[bytes, bytes]:
    """Encrypt with the key and current nonce; return ``(ciphertext, tag)``.

    The nonce is not advanced here.
    """
    cipher, nonce = _cipher(aes)
    sealed = cipher.encrypt(nonce, bytes(plaintext), None)
    return sealed[:-TAG_LENGTH], sealed[-TAG_LENGTH:]


def aes_decrypt(ciphertext: bytes, tag: bytes, aes: AESParams) -> bytes:
    """Decrypt and authenticate with the key and current nonce.

    Raises ExchangeError if the tag does not verify.  The nonce is not
    advanced here.
    """
    cipher, nonce = _cipher(aes)
    if len(tag) != TAG_LENGTH:
        raise _fail("Couldn't set tag.")
    try:
        return cipher.decrypt(nonce, bytes(ciphertext) + bytes(tag), None)
    except InvalidTag as exc:
        raise ExchangeError("Message failed authentication.") from exc


def aes_keygen(dh: DHParams) -> AESParams:
    """Derive the AES key and initial nonce from the shared DH key.

    The lowercase hex of ``dh_key`` is fed to scrypt; the first 32 bytes of
    output are the key and the following 12 the nonce.
    """
    if dh.dh_key is None or dh.dh_key < 0:
        raise _fail("DH key was not derived properly.")
    kdf = Scrypt(
        salt=SCRYPT_SALT,
        length=KEY_LENGTH + IV_LENGTH,
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
    )
    try:
        out = kdf.derive(format(dh.dh_key, "x").encode("ascii"))
    except (ValueError, MemoryError) as exc:
        raise _fail("Cannot perform scrypt.") from exc
    return AESParams(aes_key=out[:KEY_LENGTH], aes_iv=form_int(out[KEY_LENGTH:]))