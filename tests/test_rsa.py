import pytest

from labciphers.rsa import KeyPair, decrypt, encrypt, gcd, generate_keys, mod_exp, mod_inverse


def test_default_keys():
    keys = generate_keys()
    assert keys.n == 391
    assert keys.e == 3
    assert keys.d == 235


def test_default_keys_are_inverse():
    keys = generate_keys()
    assert keys.e * keys.d % 352 == 1


def test_key_properties():
    keys = KeyPair(e=3, d=235, n=391)
    assert keys.public == (3, 391)
    assert keys.private == (235, 391)


def test_mod_exp_known_value():
    assert mod_exp(4, 13, 497) == 445


@pytest.mark.parametrize(
    "base,exponent,modulus",
    [(2, 10, 1000), (7, 0, 13), (123, 45, 391), (391, 3, 391), (65, 235, 391)],
)
def test_mod_exp_agrees_with_pow(base, exponent, modulus):
    assert mod_exp(base, exponent, modulus) == pow(base, exponent, modulus)


def test_mod_exp_rejects_bad_modulus():
    with pytest.raises(ValueError):
        mod_exp(2, 3, 0)


def test_mod_exp_rejects_negative_exponent():
    with pytest.raises(ValueError):
        mod_exp(2, -1, 7)


def test_gcd():
    assert gcd(48, 18) == 6


@pytest.mark.parametrize("a,b", [(17, 5), (352, 3), (100, 25), (9, 0)])
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert a % g == 0 and b % g == 0
    assert gcd(a // g, b // g) == 1


def test_mod_inverse_property():
    d = mod_inverse(7, 40)
    assert 7 * d % 40 == 1
    assert 0 < d < 40


def test_mod_inverse_missing_raises():
    with pytest.raises(ValueError):
        mod_inverse(2, 4)


@pytest.mark.parametrize("message", ["Hello, World!", "", "RSA ~ 123"])
def test_round_trip(message):
    keys = generate_keys()
    encrypted = encrypt(message, keys)
    assert len(encrypted) == len(message)
    assert all(0 <= value < keys.n for value in encrypted)
    assert decrypt(encrypted, keys) == message


def test_round_trip_other_primes():
    keys = generate_keys(61, 53)
    assert decrypt(encrypt("placeholder", keys), keys) == "placeholder"


def test_encrypt_matches_mod_exp():
    keys = generate_keys()
    assert encrypt("A", keys) == [mod_exp(ord("A"), keys.e, keys.n)]