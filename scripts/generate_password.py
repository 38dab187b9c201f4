#!/usr/bin/env python3
"""
Password generator and email checker

Generates random passwords from selectable character classes and checks
email addresses against the service's email format.

Usage:
    python scripts/generate_password.py
    python scripts/generate_password.py --length 16 --no-special
    python scripts/generate_password.py --multiple 5
    python scripts/generate_password.py --validate-email user@example.com --validate-email bad@x
"""

import os
import sys
import argparse

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from utils.password_generator import (
    LOWERCASE,
    NUMBERS,
    SPECIAL,
    UPPERCASE,
    PasswordOptions,
    generate_password,
)
from utils.validators import is_valid_email


def build_parser():
    """Build the CLI argument parser"""
    parser = argparse.ArgumentParser(description='Generate random passwords and check email addresses')

    parser.add_argument('--length',
                       type=int,
                       default=8,
                       help='Password length (default: 8)')

    parser.add_argument('--no-numbers',
                       action='store_true',
                       help='Leave digits out of the password')

    parser.add_argument('--no-special',
                       action='store_true',
                       help='Leave special characters out of the password')

    parser.add_argument('--no-alphabets',
                       action='store_true',
                       help='Leave letters out of the password')

    parser.add_argument('--multiple',
                       type=int,
                       default=1,
                       help='Generate multiple passwords (default: 1)')

    parser.add_argument('--validate-email',
                       action='append',
                       metavar='ADDRESS',
                       help='Check an email address instead of generating (repeatable)')

    parser.add_argument('--show-pools',
                       action='store_true',
                       help='Show the character pools')

    return parser


def main(argv=None):
    """Main CLI interface"""
    args = build_parser().parse_args(argv)

    if args.show_pools:
        print(f"uppercase: {UPPERCASE}")
        print(f"lowercase: {LOWERCASE}")
        print(f"numbers:   {NUMBERS}")
        print(f"special:   {SPECIAL}")
        return 0

    if args.validate_email:
        all_valid = True
        for address in args.validate_email:
            valid = is_valid_email(address)
            all_valid = all_valid and valid
            print(f"{address}: {'valid' if valid else 'invalid'}")
        return 0 if all_valid else 1

    options = PasswordOptions(
        numbers=not args.no_numbers,
        special=not args.no_special,
        alphabets=not args.no_alphabets,
    )
    for _ in range(max(args.multiple, 1)):
        print(generate_password(args.length, options))
    return 0


if __name__ == '__main__':
    sys.exit(main())
