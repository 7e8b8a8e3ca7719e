"""Playfair digraph cipher on a 5x5 key table."""

from __future__ import annotations

import argparse
import string

_LETTERS = frozenset(string.ascii_lowercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize(text: str) -> str:
    """Drop spaces and lower-case ASCII capitals."""
    return text.replace(" ", "").translate(_TO_LOWER)


def prepare(text: str) -> str:
    """Pad ``text`` with a trailing 'z' so it splits into pairs."""
    return text + "z" if len(text) % 2 else text


def _check_letters(text: str, what: str) -> None:
    bad = [ch for ch in text if ch not in _LETTERS]
    if bad:
        raise ValueError(f"{what} may only contain letters a-z: {bad[0]!r}")


def key_table(key: str) -> tuple[str, ...]:
    """Build the 5x5 table: key letters first, then the rest of the alphabet, 'j' merged into 'i'."""
    key = normalize(key)
    _check_letters(key, "key")
    order = dict.fromkeys(ch for ch in key if ch != "j")
    for ch in string.ascii_lowercase:
        if ch != "j":
            order.setdefault(ch)
    flat = "".join(order)
    return tuple(flat[start:start + 5] for start in range(0, 25, 5))


def _transform(text: str, key: str, step: int) -> str:
    table = key_table(key)
    positions = {
        ch: (row, col)
        for row, letters in enumerate(table)
        for col, ch in enumerate(letters)
    }
    positions["j"] = positions["i"]

    prepared = prepare(normalize(text))
    _check_letters(prepared, "text")

    result = []
    for first, second in zip(prepared[::2], prepared[1::2]):
        (r1, c1), (r2, c2) = positions[first], positions[second]
        if r1 == r2:
            result += table[r1][(c1 + step) % 5], table[r1][(c2 + step) % 5]
        elif c1 == c2:
            result += table[(r1 + step) % 5][c1], table[(r2 + step) % 5][c1]
        else:
            result += table[r1][c2], table[r2][c1]
    return "".join(result)


def encrypt(text: str, key: str) -> str:
    """Encrypt ``text`` with the Playfair table built from ``key``."""
    return _transform(text, key, 1)


def decrypt(text: str, key: str) -> str:
    """Decrypt ``text`` with the Playfair table built from ``key``."""
    return _transform(text, key, -1)


def main(argv: list[str] | None = None) -> int:
    """Interactively encrypt or decrypt a message."""
    parser = argparse.ArgumentParser(
        prog="playfair", description="Encrypt or decrypt with the Playfair cipher."
    )
    parser.parse_args(argv)

    try:
        key = input("Enter key text: ")
        text = input("Enter text: ")
        choice = int(input("Choose operation:\n1. Encrypt\n2. Decrypt\nEnter choice: "))
    except (ValueError, EOFError):
        print("Invalid input.")
        return 1

    try:
        if choice == 1:
            print("Encrypting...")
            print(f"Ciphertext: {encrypt(text, key)}")
        elif choice == 2:
            print("Decrypting...")
            print(f"Decrypted text: {decrypt(text, key)}")
        else:
            print("Invalid choice.")
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())