"""Caesar shift cipher over letters and digits."""

from __future__ import annotations

import argparse
import string

_ALPHABETS = (string.ascii_lowercase, string.ascii_uppercase, string.digits)


class InvalidCharacterError(ValueError):
    """Raised when a message holds a character that is not a letter or digit."""

    def __init__(self, character: str) -> None:
        super().__init__(f"invalid character in the message: {character!r}")
        self.character = character


def _is_valid(ch: str) -> bool:
    return any(ch in alphabet for alphabet in _ALPHABETS)


def _shift(text: str, key: int) -> str:
    shifted = []
    for ch in text:
        for alphabet in _ALPHABETS:
            index = alphabet.find(ch)
            if index >= 0:
                shifted.append(alphabet[(index + key) % len(alphabet)])
                break
        else:
            raise InvalidCharacterError(ch)
    return "".join(shifted)


def encrypt(text: str, key: int) -> str:
    """Shift letters by ``key`` modulo 26 and digits by ``key`` modulo 10."""
    return _shift(text, key)


def decrypt(text: str, key: int) -> str:
    """Undo :func:`encrypt` with the same key."""
    return _shift(text, -key)


def _first_token(line: str) -> str:
    tokens = line.split()
    return tokens[0] if tokens else ""


def main(argv: list[str] | None = None) -> int:
    """Interactively encrypt or decrypt a message."""
    parser = argparse.ArgumentParser(
        prog="caesar", description="Encrypt or decrypt with a Caesar shift."
    )
    parser.parse_args(argv)

    try:
        choice = int(input("1. Encrypt \n2. Decrypt \nEnter your choice: "))
        text = _first_token(input("Enter a message: "))
        key = int(input("Enter the key: "))
    except ValueError:
        print("Invalid input.")
        return 1

    if choice not in (1, 2):
        if not text:
            return 0
        if _is_valid(text[0]):
            print("Invalid choice! Please enter 1 or 2.")
        else:
            print("Invalid character in the message.")
        return 1

    try:
        if choice == 1:
            print(f"Encrypted message: {encrypt(text, key)}")
        else:
            print(f"Decrypted message: {decrypt(text, key)}")
    except InvalidCharacterError:
        print("Invalid character in the message.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())