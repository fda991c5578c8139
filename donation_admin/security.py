# donation_admin/security.py
from dataclasses import dataclass
from typing import Iterable, Tuple

from flask import current_app
from flask_jwt_extended import create_access_token
from werkzeug.security import check_password_hash, generate_password_hash

from .errors import InvalidCredentials, InvalidToken, MissingToken, error_response

EXTENSION_KEY = "credential_allow_list"


@dataclass(frozen=True)
class CredentialAllowList:
    """Fixed username/access-key pairs, built once at process start."""

    entries: Tuple[Tuple[str, str], ...]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "CredentialAllowList":
        # only hashes are kept in memory
        return cls(tuple((username, generate_password_hash(key)) for username, key in pairs))

    def matches(self, username: str, access_key: str) -> bool:
        return any(
            name == username and check_password_hash(key_hash, access_key)
            for name, key_hash in self.entries
        )

    def __len__(self):
        return len(self.entries)


def init_security(app, jwt):
    app.extensions[EXTENSION_KEY] = CredentialAllowList.from_pairs(app.config["ACCESS_CREDENTIALS"])

    @jwt.unauthorized_loader
    def _missing(reason):
        return error_response(MissingToken())

    @jwt.invalid_token_loader
    def _invalid(reason):
        current_app.logger.info("Rejected token: %s", reason)
        return error_response(InvalidToken())

    @jwt.expired_token_loader
    def _expired(jwt_header, jwt_payload):
        return error_response(InvalidToken())


def allow_list() -> CredentialAllowList:
    return current_app.extensions[EXTENSION_KEY]


def login(username: str, access_key: str) -> str:
    """Return a bearer token for an allow-listed pair or raise InvalidCredentials."""
    if not allow_list().matches(username, access_key):
        current_app.logger.warning("Failed login for %r", username)
        raise InvalidCredentials()
    # identity MUST be a string (PyJWT wants 'sub' as str)
    return create_access_token(identity=username)
