import logging
from fastapi import APIRouter, Depends, status
from pizzeria.api.v1.deps import get_token_service
from pizzeria.core.credentials import CredentialStore, UsernameTaken
from pizzeria.core.errors import InvalidCredentials, ValidationError
from pizzeria.core.security import TokenService
from pizzeria.schemas.auth import CredentialsIn, LoginOut, RegisterOut, TokenClaims

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["auth"])

MISSING_CREDENTIALS = "Nombre de usuario y contraseña son obligatorios."

def get_credential_store() -> CredentialStore:
    return CredentialStore()

def _require_credentials(body: CredentialsIn) -> tuple[str, str]:
    if not body.username or not body.password:
        raise ValidationError(MISSING_CREDENTIALS)
    return body.username, body.password

@router.post("/registro", status_code=status.HTTP_201_CREATED, response_model=RegisterOut)
async def register(body: CredentialsIn, store: CredentialStore = Depends(get_credential_store)):
    """
    Register a new user account.

    The password is hashed before storage and the hash is never echoed back.

    Args:
        body: Request body containing username and password

    Returns:
        RegisterOut: message, userId and username

    Raises:
        ValidationError (400): Missing username or password
        UsernameTaken (409): Username already exists
    """
    username, password = _require_credentials(body)
    # Fast path; the unique index still decides when two registrations race
    if await store.find_by_username(username):
        raise UsernameTaken()
    user = await store.create(username, password)
    logger.info("[auth] registered user id=%s username=%s", user.id, user.username)
    return RegisterOut(message="Usuario registrado exitosamente", userId=user.id, username=user.username)

@router.post("/login", response_model=LoginOut)
async def login(
    body: CredentialsIn,
    store: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Authenticate user and issue an access token.

    Args:
        body: Request body containing username and password

    Returns:
        LoginOut: message and token (send it as "Authorization: Bearer <token>")

    Raises:
        ValidationError (400): Missing username or password
        InvalidCredentials (401): Unknown username or wrong password (same response for both)
    """
    username, password = _require_credentials(body)
    user = await store.authenticate(username, password)
    if not user:
        logger.info("[auth] failed login for username=%s", username)
        raise InvalidCredentials()
    token = tokens.issue(TokenClaims(id=user.id, username=user.username))
    return LoginOut(message="Autenticación exitosa", token=token)
