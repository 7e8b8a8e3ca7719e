"""Vigenère cipher over the lower-case Latin alphabet."""

from __future__ import annotations

import argparse
import string
from itertools import cycle

_ALPHABET = string.ascii_lowercase
_LETTERS = frozenset(string.ascii_letters)


def _indices(text: str, what: str) -> list[int]:
    bad = [ch for ch in text if ch not in _LETTERS]
    if bad:
        raise ValueError(f"{what} may only contain letters: {bad[0]!r}")
    return [_ALPHABET.index(ch.lower()) for ch in text]


def _shift(message: str, key: str, sign: int) -> str:
    if not key:
        raise ValueError("key must not be empty")
    message_idx = _indices(message, "message")
    key_idx = _indices(key, "key")
    return "".join(
        _ALPHABET[(m + sign * k) % 26] for m, k in zip(message_idx, cycle(key_idx))
    )


def encrypt(message: str, key: str) -> str:
    """Encrypt ``message``, ignoring case; the result is lower case."""
    return _shift(message, key, 1)


def decrypt(message: str, key: str) -> str:
    """Decrypt ``message``, ignoring case; the result is lower case."""
    return _shift(message, key, -1)


def _first_token(line: str) -> str:
    tokens = line.split()
    return tokens[0] if tokens else ""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive encrypt/decrypt menu until the user quits."""
    parser = argparse.ArgumentParser(
        prog="vigenere", description="Encrypt or decrypt with the Vigenère cipher."
    )
    parser.parse_args(argv)

    while True:
        print("Vigenère Cipher")
        print("1 - Encrypt")
        print("2 - Decrypt")
        print("3 - Quit")
        try:
            line = input("Enter your choice: ")
        except EOFError:
            return 0
        try:
            choice = int(line)
        except ValueError:
            choice = 0

        if choice == 3:
            print("Exiting the program...")
            return 0
        if choice not in (1, 2):
            print("Invalid choice! Please choose again.")
            continue

        prompt = "\nEnter your message: " if choice == 1 else "\nEnter your encrypted message: "
        try:
            message = _first_token(input(prompt))
            key = _first_token(input("Enter your key: "))
        except EOFError:
            return 0
        try:
            if choice == 1:
                print(f"Encrypted message: {encrypt(message, key)}\n")
            else:
                print(f"Decrypted message: {decrypt(message, key)}\n")
        except ValueError as exc:
            print(f"Error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())