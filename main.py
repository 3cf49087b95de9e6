"""
Main API module for Demo Services.

Responsibilities:
    - Basic-auth demo: reveal a per-user secret to callers with valid credentials
    - Hello-world demo: plain-text and JSON greetings
    - Users demo: list, fetch and append users in an in-memory list

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - In-memory Directory and UserStorage by default; both are injected and lock-guarded.
    - The auth service does all header parsing and matching; routes only render outcomes.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory,
    injected dependencies, and a clean separation between API and business logic."
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Header, Path
from fastapi.responses import JSONResponse, PlainTextResponse

from demo_services.auth.config import load_directory_seed
from demo_services.auth.directory import Directory
from demo_services.auth.schemas import AuthStatus, SecretResponse
from demo_services.auth.service import AuthFailure, authenticate
from demo_services.config import settings
from demo_services.users.config import DEFAULT_USERS
from demo_services.users.schemas import User
from demo_services.users.storage import UserStorage

# Status code per failure kind; the body is always a SecretResponse without a secret.
_FAILURE_STATUS = {
    AuthFailure.MALFORMED_HEADER: 403,
    AuthFailure.MALFORMED_ENCODING: 400,
    AuthFailure.NO_MATCH: 401,
}


def create_app(
    directory: Optional[Directory] = None,
    user_storage: Optional[UserStorage] = None,
    trim_credentials: Optional[bool] = None,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        directory (Optional[Directory]): Known Basic-auth users. Defaults to the configured seed.
        user_storage (Optional[UserStorage]): Backing list for the users demo. Defaults to the demo seed.
        trim_credentials (Optional[bool]): Strip whitespace from decoded credentials.
            Defaults to settings.AUTH_TRIM_CREDENTIALS.

    Returns:
        FastAPI: A fully configured application instance with isolated
                 Directory and UserStorage instances.

    LLM Prompt Example:
        "Show how an application factory enables test isolation and easy
        dependency swapping without code changes."
    """
    app = FastAPI(
        title="Demo Services",
        description="Basic-auth, hello-world and in-memory users demos",
        docs_url="/docs",
    )
    log = logging.getLogger("demo")

    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)
    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests)
    # ----------------------------------------------------------------
    if directory is None:
        directory = Directory(load_directory_seed())
    if user_storage is None:
        user_storage = UserStorage(DEFAULT_USERS)
    trim = settings.AUTH_TRIM_CREDENTIALS if trim_credentials is None else trim_credentials

    log.info("Basic-auth directory loaded with %d users (trim=%s)", len(directory), trim)
    log.debug("Directory users: %s", ", ".join(entry.username for entry in directory))

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # ----------------------------------------------------------------
    # Basic-auth demo
    # ----------------------------------------------------------------
    @app.get("/", response_model=SecretResponse)
    def secret(authorization: Optional[str] = Header(None)) -> JSONResponse:
        """
        Return the caller's secret when the Authorization header matches a known user.

        Responses:
            200: status "Ok" with the secret.
            401: status "InvalidCredentials" (well-formed header, unknown user/password).
            403: status "Error", header missing or not `Basic <seg>:<seg>`.
            400: status "Error", a segment is not base64/UTF-8.
        """
        result = authenticate(authorization, directory, trim=trim)
        if result.ok:
            body = SecretResponse(
                status=AuthStatus.OK,
                msg="Amazing",
                secret=f"This is a secret from {result.user.username}",
            )
            return JSONResponse(body.model_dump(mode="json"))

        msg = None if result.failure is AuthFailure.NO_MATCH else result.reason
        body = SecretResponse(status=result.status, msg=msg)
        headers = {"WWW-Authenticate": "Basic"} if result.failure is AuthFailure.NO_MATCH else None
        return JSONResponse(
            body.model_dump(mode="json"),
            status_code=_FAILURE_STATUS[result.failure],
            headers=headers,
        )

    # ----------------------------------------------------------------
    # Hello-world demo
    # ----------------------------------------------------------------
    @app.get("/hello", response_class=PlainTextResponse)
    def hello() -> str:
        return "Hello World"

    @app.get("/hello_json")
    def hello_json() -> Dict[str, str]:
        return {"msg": "hello world"}

    # ----------------------------------------------------------------
    # Users demo
    # ----------------------------------------------------------------
    @app.get("/users", response_model=List[User])
    def get_users() -> List[User]:
        return user_storage.list_users()

    @app.get("/user/{user_id}", response_model=User)
    def get_user(user_id: int = Path(..., ge=0)) -> Any:
        """
        Return the first user with this id, or 404 {"error": "No user found"}.

        Note:
            A non-integer or negative id never reaches the lookup; FastAPI
            rejects it with 422 during path validation.
        """
        user = user_storage.get_user(user_id)
        if user is None:
            return JSONResponse({"error": "No user found"}, status_code=404)
        return user

    @app.get("/add/user/{user_id}/{username}")
    def add_user(username: str, user_id: int = Path(..., ge=0)) -> str:
        user_storage.add_user(user_id, username)
        log.info("User %d (%s) added", user_id, username)
        return "User added"

    @app.post("/add")
    def post_user(user: User) -> Dict[str, str]:
        user_storage.add_user(user.id, user.username)
        log.info("User %d (%s) added", user.id, user.username)
        return {"msg": "user added"}

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
