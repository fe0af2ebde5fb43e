from fastapi import APIRouter, Depends, status

from jsonstore.api.deps import get_account_service
from jsonstore.api.responses import success
from jsonstore.domains.identity.schemas import AccountLogin, AccountRegister, AccountResponse
from jsonstore.domains.identity.services import AccountService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    account_data: AccountRegister,
    accounts: AccountService = Depends(get_account_service)
):
    """Регистрация нового аккаунта"""
    account = await accounts.register(account_data.email, account_data.password)
    return success(
        AccountResponse(**account.to_public_dict()).model_dump(),
        message="Account created successfully"
    )


@router.post("/login")
async def login(
    login_data: AccountLogin,
    accounts: AccountService = Depends(get_account_service)
):
    """Вход по email и паролю, возвращает ключ аккаунта"""
    account = await accounts.login(login_data.email, login_data.password)
    return success(
        AccountResponse(**account.to_public_dict()).model_dump(),
        message="Login successful"
    )
