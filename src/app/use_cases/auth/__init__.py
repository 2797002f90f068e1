"""Auth use cases"""
from .login import Login
from .provision_admin import ProvisionAdmin
from .dtos import LoginCommandDTO, TokenResponseDTO, ProvisionAdminCommandDTO, AdminDTO

__all__ = [
    "Login",
    "ProvisionAdmin",
    "LoginCommandDTO",
    "TokenResponseDTO",
    "ProvisionAdminCommandDTO",
    "AdminDTO",
]
