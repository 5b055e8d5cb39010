from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from bestodo.auth.utils import PasswordHasher, TokenService
from bestodo.errors import AuthenticationError, ConflictError
from bestodo.models.user import User
from bestodo.models.todo import Todo  # noqa: F401  registers the User.todos target
from bestodo.schemas.user import SignInRequest, SignUpRequest
import logging

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Account signup and signin against the users table"""

    def __init__(self, db: Session, password_hasher: PasswordHasher, token_service: TokenService):
        self.db = db
        self.password_hasher = password_hasher
        self.token_service = token_service

    def signup(self, request: SignUpRequest) -> str:
        """Create an account and return a token for it"""
        existing_user = self.db.query(User).filter(User.email == request.email).first()
        if existing_user:
            raise ConflictError("User already exists")

        if self.db.query(User).filter(User.username == request.username).first():
            raise ConflictError("Username already taken")

        new_user = User(
            username=request.username,
            email=request.email,
            hashed_password=self.password_hasher.hash(request.password),
        )
        self.db.add(new_user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email or username
            self.db.rollback()
            raise ConflictError("User already exists")

        logger.info(f"Created user {new_user.id}")
        return self.token_service.issue(new_user.id)

    def signin(self, request: SignInRequest) -> str:
        """Check credentials and return a fresh token"""
        user = self.db.query(User).filter(User.email == request.email).first()

        if not user or not self.password_hasher.verify(request.password, user.hashed_password):
            logger.info("Rejected signin with invalid credentials")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info(f"User {user.id} signed in")
        return self.token_service.issue(user.id)
