import logging
from config import Config
from utils.validators import is_valid_email
from utils.password_generator import PasswordOptions, generate_password

logger = logging.getLogger('utility_controller')


class UtilityController:
    """Controller for email validation and password generation"""

    @staticmethod
    def validate_email(email):
        """
        Validate a single email address

        Args:
            email: Candidate value as received from the client

        Returns:
            tuple: (success, data/error message, status_code)
        """
        return True, {"email": email, "valid": is_valid_email(email)}, 200

    @staticmethod
    def validate_emails(emails):
        """
        Validate a batch of email addresses

        Args:
            emails: List of candidate values

        Returns:
            tuple: (success, data/error message, status_code)
        """
        if not isinstance(emails, list):
            return False, {"error": "emails must be a list"}, 400

        results = [{"email": email, "valid": is_valid_email(email)} for email in emails]
        return True, {"results": results}, 200

    @staticmethod
    def generate_passwords(length=None, numbers=True, special=True, alphabets=True, count=1):
        """
        Generate one or more passwords

        Args:
            length: Password length (defaults to Config.PASSWORD_DEFAULT_LENGTH)
            numbers: Include digits
            special: Include special characters
            alphabets: Include letters
            count: Number of passwords to generate

        Returns:
            tuple: (success, data/error message, status_code)
        """
        if length is None:
            length = Config.PASSWORD_DEFAULT_LENGTH
        if isinstance(length, bool) or not isinstance(length, int):
            return False, {"error": "length must be an integer"}, 400
        if length > Config.PASSWORD_MAX_LENGTH:
            return False, {"error": f"length must not exceed {Config.PASSWORD_MAX_LENGTH}"}, 400

        if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= Config.PASSWORD_MAX_COUNT:
            return False, {"error": f"count must be an integer between 1 and {Config.PASSWORD_MAX_COUNT}"}, 400

        flags = {"numbers": numbers, "special": special, "alphabets": alphabets}
        for name, value in flags.items():
            if not isinstance(value, bool):
                return False, {"error": f"{name} must be a boolean"}, 400

        options = PasswordOptions(**flags)
        passwords = [generate_password(length, options) for _ in range(count)]
        logger.info(f"Generated {count} password(s) of length {max(length, 0)}")

        if count == 1:
            return True, {"password": passwords[0], "length": max(length, 0)}, 200
        return True, {"passwords": passwords, "length": max(length, 0)}, 200
