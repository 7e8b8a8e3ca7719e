"""Textbook RSA with small primes, encrypting one character at a time."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyPair:
    """Public exponent ``e``, private exponent ``d`` and modulus ``n``."""

    e: int
    d: int
    n: int

    @property
    def public(self) -> tuple[int, int]:
        return self.e, self.n

    @property
    def private(self) -> tuple[int, int]:
        return self.d, self.n


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent % modulus`` by square-and-multiply."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent % 2 == 1:
            result = result * base % modulus
        exponent //= 2
        base = base * base % modulus
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def mod_inverse(e: int, phi: int) -> int:
    """Return the smallest ``d`` with ``e * d % phi == 1``."""
    for d in range(1, phi):
        if e * d % phi == 1:
            return d
    raise ValueError(f"{e} has no inverse modulo {phi}")


def generate_keys(p: int = 17, q: int = 23) -> KeyPair:
    """Derive a key pair from primes ``p`` and ``q``, choosing the smallest e >= 3."""
    n = p * q
    phi = (p - 1) * (q - 1)
    e = 3
    while gcd(e, phi) != 1:
        e += 1
    return KeyPair(e=e, d=mod_inverse(e, phi), n=n)


def encrypt(message: str, keys: KeyPair) -> list[int]:
    """Encrypt each character's code point with the public key."""
    return [mod_exp(ord(ch), keys.e, keys.n) for ch in message]


def decrypt(values: list[int], keys: KeyPair) -> str:
    """Decrypt a list of values back into characters with the private key."""
    return "".join(chr(mod_exp(value, keys.d, keys.n)) for value in values)


def main(argv: list[str] | None = None) -> int:
    """Show the key pair, then encrypt and decrypt a message."""
    parser = argparse.ArgumentParser(
        prog="rsa", description="Encrypt and decrypt a message with textbook RSA."
    )
    parser.add_argument("-p", type=int, default=17, help="first prime")
    parser.add_argument("-q", type=int, default=23, help="second prime")
    args = parser.parse_args(argv)

    try:
        keys = generate_keys(args.p, args.q)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Public Key: (e = {keys.e}, n = {keys.n})")
    print(f"Private Key: (d = {keys.d}, n = {keys.n})")

    try:
        message = input("Enter message: ")
    except EOFError:
        message = ""

    encrypted = encrypt(message, keys)
    print("Encrypted: " + "".join(f"{value} " for value in encrypted))
    print(f"Decrypted: {decrypt(encrypted, keys)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())