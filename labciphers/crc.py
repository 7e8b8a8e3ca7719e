"""CRC checksum generation and error detection over bit strings."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

POLYNOMIAL = "10001000000100001"  # CRC-CCITT (X.25) generator

_BINARY = frozenset("01")


def _check_bits(bits: str, what: str) -> None:
    if not _BINARY.issuperset(bits):
        raise ValueError(f"{what} must contain only '0' and '1': {bits!r}")


def _check_polynomial(polynomial: str) -> None:
    if not polynomial:
        raise ValueError("polynomial must not be empty")
    _check_bits(polynomial, "polynomial")


@dataclass(frozen=True)
class CrcResult:
    """The stages of encoding: padded data, checksum and final codeword."""

    padded: str
    checksum: str
    codeword: str


def remainder(bits: str, polynomial: str = POLYNOMIAL) -> str:
    """Divide ``bits`` by ``polynomial`` modulo 2 and return the remainder bits."""
    _check_polynomial(polynomial)
    _check_bits(bits, "bits")
    width = len(polynomial) - 1
    if len(bits) < width:
        raise ValueError(
            f"bit string of length {len(bits)} is shorter than the checksum width {width}"
        )
    divisor = [c == "1" for c in polynomial]
    span = len(divisor)
    work = [c == "1" for c in bits]
    for start in range(len(work) - span + 1):
        if work[start]:
            work[start:start + span] = [
                a ^ b for a, b in zip(work[start:start + span], divisor)
            ]
    tail = work[len(work) - width:] if width else []
    return "".join("1" if bit else "0" for bit in tail)


def encode(data: str, polynomial: str = POLYNOMIAL) -> CrcResult:
    """Append the CRC checksum of ``data`` to it."""
    _check_polynomial(polynomial)
    _check_bits(data, "data")
    padded = data + "0" * (len(polynomial) - 1)
    checksum = remainder(padded, polynomial)
    return CrcResult(padded=padded, checksum=checksum, codeword=data + checksum)


def has_error(codeword: str, polynomial: str = POLYNOMIAL) -> bool:
    """Return True when the received codeword leaves a non-zero remainder."""
    return "1" in remainder(codeword, polynomial)


def flip_bit(bits: str, position: int) -> str:
    """Return ``bits`` with the bit at ``position`` inverted."""
    if not 0 <= position < len(bits):
        raise IndexError(f"position {position} is outside 0..{len(bits) - 1}")
    flipped = "1" if bits[position] == "0" else "0"
    return bits[:position] + flipped + bits[position + 1:]


def _first_token(line: str) -> str:
    tokens = line.split()
    return tokens[0] if tokens else ""


def main(argv: list[str] | None = None) -> int:
    """Interactively encode data and optionally test error detection."""
    parser = argparse.ArgumentParser(
        prog="crc", description="Compute a CRC codeword and test error detection."
    )
    parser.add_argument("--polynomial", default=POLYNOMIAL, help="generator bits")
    args = parser.parse_args(argv)

    try:
        data = _first_token(input("Enter data : "))
        print(f"Generating polynomial : {args.polynomial}")
        result = encode(data, args.polynomial)
        print(f"\nModified data is : {result.padded}")
        print(f"Checksum is : {result.checksum}")
        print(f"Final code word is : {result.codeword}")

        choice = int(input("\nTest error detection 0 (yes) 1(no)? : "))
        if choice == 0:
            position = int(input("Enter the position where error is to be inserted: "))
            damaged = flip_bit(result.codeword, position)
            print(f"Erroneous data: {damaged}")
            if has_error(damaged, args.polynomial):
                print("Error detected")
            else:
                print("No error detected")
    except (ValueError, IndexError) as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())