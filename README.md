# labciphers

Small, readable implementations of the algorithms that come up in a
networking and security lab course:

- `labciphers.caesar`: Caesar shift over letters and digits
- `labciphers.vigenere`: Vigenère cipher
- `labciphers.playfair`: Playfair cipher with a 5×5 key table (`j` folds into `i`)
- `labciphers.rsa`: textbook RSA with small primes, one character at a time
- `labciphers.crc`: CRC checksums with the CRC-CCITT (X.25) polynomial, and error detection
- `labciphers.leaky_bucket`: a leaky-bucket traffic-shaping simulation

Nothing here is meant to protect real data. The code shows how these
algorithms behave.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library use

```python
from labciphers import caesar, vigenere, rsa

caesar.encrypt("Hello123", 3)             # 'Khoor456'
caesar.decrypt("Khoor456", 3)             # 'Hello123'

vigenere.encrypt("attackatdawn", "lemon")  # 'lxfopvefrnhr'
vigenere.decrypt("lxfopvefrnhr", "lemon")  # 'attackatdawn'

keys = rsa.generate_keys(17, 23)
rsa.decrypt(rsa.encrypt("hi", keys), keys)  # 'hi'
```

### Caesar

`caesar.encrypt(text, key)` shifts lower-case and upper-case letters by `key`
modulo 26 and digits by `key` modulo 10. `caesar.decrypt(text, key)` undoes it.
Any other character, a space included, raises `caesar.InvalidCharacterError`,
which is a `ValueError` and carries the offending `character`.

### Vigenère

`vigenere.encrypt(message, key)` and `vigenere.decrypt(message, key)` ignore
case and always return lower-case text. The key repeats over the message.
A message or key with anything other than ASCII letters, or an empty key,
raises `ValueError`.

### Playfair

`playfair.key_table(key)` returns the grid as a tuple of five five-letter
rows: the key's letters in first-seen order, then the rest of the alphabet,
with `j` left out. `playfair.normalize(text)` drops spaces and lower-cases
the text, and `playfair.prepare(text)` adds a trailing `z` to an odd-length
text. `playfair.encrypt(text, key)` and `playfair.decrypt(text, key)` apply
both steps, treat `j` as `i`, and raise `ValueError` for characters outside
`a`–`z`.

### RSA

`rsa.generate_keys(p=17, q=23)` picks the smallest public exponent `e >= 3`
coprime to `(p-1)(q-1)` and returns a `KeyPair` with `e`, `d` and `n`, plus
`public` and `private` tuples. `rsa.encrypt(message, keys)` returns one
integer per character; `rsa.decrypt(values, keys)` turns them back into text.
Characters whose code point is not below `n` do not survive the round trip.
The helpers `rsa.mod_exp`, `rsa.gcd` and `rsa.mod_inverse` are public too;
`mod_inverse` raises `ValueError` when no inverse exists.

### CRC

Bit strings are `str` values of `0` and `1`; the default generator is
`crc.POLYNOMIAL` (`10001000000100001`).

- `crc.encode(data, polynomial)` returns a `CrcResult` with the zero-padded
  data (`padded`), the `checksum` and the `codeword` (data followed by checksum).
- `crc.remainder(bits, polynomial)` gives the modulo-2 division remainder.
- `crc.flip_bit(bits, position)` inverts one bit, raising `IndexError` when
  the position is out of range.
- `crc.has_error(codeword, polynomial)` is `True` when the remainder is non-zero.

Non-binary input or an empty polynomial raises `ValueError`.

### Leaky bucket

`leaky_bucket.LeakyBucket(capacity, output_rate)` holds a `level`.
`add(packet_size)` returns `False`, leaving the level unchanged, when the
packet would overflow the bucket. `drain()` yields one `Output(time, amount, last)`
per second until the bucket is empty, `last` marking a final partial output.

`leaky_bucket.simulate(capacity, output_rate, packet_count, rng=None, sleep=time.sleep, out=None)`
sends `packet_count` packets of random size (0–999 bytes) after random delays
of 0–2 seconds, draining the bucket after each one. It prints a report to
`out` (standard output by default) and returns one
`(arrival_time, packet_size, accepted)` tuple per packet. Pass a seeded
`random.Random` and a no-op `sleep` for a reproducible run without waiting.

## Command-line tools

Each tool asks its questions interactively:

```
labciphers-caesar
labciphers-vigenere
labciphers-playfair
labciphers-rsa
labciphers-crc
labciphers-leaky-bucket
```

- `labciphers-caesar` asks for the operation (1 encrypt, 2 decrypt), a
  message and a key.
- `labciphers-vigenere` shows a menu and keeps running until you choose 3 (Quit).
- `labciphers-playfair` asks for a key, a text and the operation.
- `labciphers-rsa` prints the key pair, then encrypts and decrypts the
  message you enter. Use `-p` and `-q` to choose other primes.
- `labciphers-crc` encodes the bits you enter and can flip a bit to show that
  the error is detected. Use `--polynomial` to choose another generator.
- `labciphers-leaky-bucket` asks for the bucket size, output rate and number
  of packets, then runs the simulation in real time. Use `--seed` for
  repeatable packets and `--no-wait` to skip the pauses.

The Caesar and Vigenère tools read only the first word of a message, so a
message cannot contain spaces there.