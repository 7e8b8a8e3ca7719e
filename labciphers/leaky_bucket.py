"""Leaky bucket traffic shaping simulation."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Output:
    """Bytes leaving the bucket at a given second of a drain."""

    time: int
    amount: int
    last: bool


class LeakyBucket:
    """A bucket of fixed capacity that leaks at a constant rate."""

    def __init__(self, capacity: int, output_rate: int) -> None:
        if capacity < 0:
            raise ValueError("bucket capacity must not be negative")
        if output_rate <= 0:
            raise ValueError("output rate must be positive")
        self.capacity = capacity
        self.output_rate = output_rate
        self.level = 0

    def add(self, packet_size: int) -> bool:
        """Put a packet in the bucket; return False if it overflows and is dropped."""
        if packet_size < 0:
            raise ValueError("packet size must not be negative")
        if self.level + packet_size > self.capacity:
            return False
        self.level += packet_size
        return True

    def drain(self) -> Iterator[Output]:
        """Empty the bucket one second at a time at the output rate."""
        elapsed = 0
        while self.level > 0:
            elapsed += 1
            if self.level >= self.output_rate:
                self.level -= self.output_rate
                yield Output(elapsed, self.output_rate, False)
            else:
                amount = self.level
                self.level = 0
                yield Output(elapsed, amount, True)


def simulate(
    capacity: int,
    output_rate: int,
    packet_count: int,
    rng: random.Random | None = None,
    sleep: Callable[[float], object] = time.sleep,
    out: TextIO | None = None,
) -> list[tuple[int, int, bool]]:
    """Feed random packets through a bucket, reporting each step.

    Returns one ``(arrival_time, packet_size, accepted)`` tuple per packet.
    """
    if rng is None:
        rng = random.Random()
    if out is None:
        out = sys.stdout
    bucket = LeakyBucket(capacity, output_rate)
    clock = 0
    records = []

    for number in range(packet_count):
        delay = rng.randrange(3)
        sleep(delay)
        clock += delay
        size = rng.randrange(1000)
        print("\n---------------------------", file=out)
        print(f"Time {clock} Sec", file=out)
        print(f"Packet Number {number}", file=out)
        print(f"Packet Size {size} bytes", file=out)

        accepted = bucket.add(size)
        if accepted:
            print(f"\nPacket of size {size} bytes added to the bucket.", file=out)
        else:
            print(f"\nBucket Overflow! Packet of size {size} bytes is dropped.", file=out)

        for output in bucket.drain():
            sleep(1)
            if output.last:
                print(
                    f"\nTime {output.time} Sec: {output.amount} bytes Outputted (last packet).",
                    file=out,
                )
            else:
                print(
                    f"\nTime {output.time} Sec: {output.amount} bytes Outputted from bucket.",
                    file=out,
                )
        print("\nBucket Output Successful.", file=out)
        records.append((clock, size, accepted))

    return records


def main(argv: list[str] | None = None) -> int:
    """Ask for bucket parameters and run the simulation."""
    parser = argparse.ArgumentParser(
        prog="leaky-bucket", description="Simulate leaky bucket traffic shaping."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--no-wait", action="store_true", help="do not pause between steps"
    )
    args = parser.parse_args(argv)

    try:
        capacity = int(input("Enter Bucket Size (Maximum Capacity): "))
        rate = int(input("Enter Output Rate (bytes/sec): "))
        count = int(input("Enter Number of Packets: "))
        simulate(
            capacity,
            rate,
            count,
            rng=random.Random(args.seed),
            sleep=(lambda _seconds: None) if args.no_wait else time.sleep,
        )
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())