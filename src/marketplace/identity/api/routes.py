"""FastAPI endpoints for the Identity domain.

The same register/login/logout surface is mounted once per principal kind:
/users, /clients and /developers.
"""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.identity.account.account import Account, PrincipalKind
from marketplace.identity.account.authentication import authenticate
from marketplace.identity.account.registration import register
from marketplace.identity.api.schemas import (
    AccountResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
)
from marketplace.identity.auth.gate import require_kind
from marketplace.identity.auth.port import Principal

_PREFIXES = {
    PrincipalKind.USER: "/users",
    PrincipalKind.CLIENT: "/clients",
    PrincipalKind.DEVELOPER: "/developers",
}


def build_account_router(kind: PrincipalKind) -> APIRouter:
    router = APIRouter(prefix=_PREFIXES[kind], tags=[f"{kind.value}s"])

    @router.post("/register", response_model=RegisterResponse)
    async def register_account(body: RegisterRequest) -> RegisterResponse:
        account_id = register(kind=kind, name=body.name, email=body.email, password=body.password)
        account = current_domain.repository_for(Account).get(account_id)
        return RegisterResponse(
            msg=f"New {kind.value} has been added",
            account=AccountResponse(**account.to_public_dict()),
        )

    @router.post("/login", response_model=LoginResponse)
    async def login(body: LoginRequest) -> LoginResponse:
        token, principal = authenticate(kind=kind, email=body.email, password=body.password)
        return LoginResponse(
            msg=f"{kind.label} logged in successfully.",
            token=token,
            account_id=principal.id,
        )

    @router.get("/logout", response_model=MessageResponse)
    async def logout(principal: Principal = Depends(require_kind(kind))) -> MessageResponse:
        # Tokens are stateless; the client discards its copy.
        return MessageResponse(msg=f"{kind.label} has been logged out")

    return router


user_router = build_account_router(PrincipalKind.USER)
client_router = build_account_router(PrincipalKind.CLIENT)
developer_router = build_account_router(PrincipalKind.DEVELOPER)
