"""Authentication use cases"""
from .login import Login
from .logout import Logout
from .get_profile import GetProfile
from .authenticate_token import AuthenticateToken
from .dtos import LoginCommandDTO, LoginResponseDTO, AdminProfileDTO, AuthenticatedAdmin

__all__ = [
    "Login",
    "Logout",
    "GetProfile",
    "AuthenticateToken",
    "LoginCommandDTO",
    "LoginResponseDTO",
    "AdminProfileDTO",
    "AuthenticatedAdmin",
]
