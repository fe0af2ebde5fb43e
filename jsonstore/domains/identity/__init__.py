from jsonstore.domains.identity.entities import Account, normalize_email
from jsonstore.domains.identity.schemas import AccountRegister, AccountLogin, AccountResponse

__all__ = [
    "Account", "normalize_email",
    "AccountRegister", "AccountLogin", "AccountResponse",
]
