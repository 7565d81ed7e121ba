"""Authentication exceptions.

These exceptions are raised by the postboard_auth package and are mapped
to HTTP responses by the API exception handlers.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when the password does not match the stored hash during login."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class MalformedPasswordHashError(AuthError):
    """Raised when a stored password hash cannot be parsed by bcrypt."""

    def __init__(self, message: str = "Stored password hash is malformed"):
        super().__init__(message)
