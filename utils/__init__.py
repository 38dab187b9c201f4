# This file makes the utils directory a Python package

from utils.validators import is_valid_email
from utils.password_generator import PasswordOptions, generate_password

__all__ = ['is_valid_email', 'PasswordOptions', 'generate_password']
