from typing import Optional

from pydantic import BaseModel


class AccountRegister(BaseModel):
    """Схема для регистрации; формат email проверяет AccountService"""
    email: Optional[str] = None
    password: Optional[str] = None


class AccountLogin(BaseModel):
    """Схема для входа"""
    email: Optional[str] = None
    password: Optional[str] = None


class AccountResponse(BaseModel):
    """Схема для ответа с данными аккаунта"""
    id: str
    email: str
    api_key: str
