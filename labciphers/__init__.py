"""Caesar, Vigenère and Playfair ciphers, toy RSA, CRC error detection and a leaky-bucket simulator."""

__version__ = "0.1.0"