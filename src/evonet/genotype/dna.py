"""
DNA Codec Module

This module implements the compact text encoding of gene vectors ("DNA").

Each gene is quantized to a resolution of 0.001 and shifted by +1000, so that
every gene >= -1000 maps onto a non-negative integer:

    v = round((gene + 1000.0) * 1000.0)

The integer is then written in base 52, most significant digit first, using
the alphabet 'a'..'z' (0..25) followed by 'A'..'Z' (26..51). One token is
produced per gene, and tokens are joined by '-':

    [-100.0, 0.0, 0.5]  <=>  "guRK-hfQO-hgau"

Decoding reverses the process exactly; the only loss happens at encode time,
when the gene is quantized.

Functions:
    encode_value(value): Render a non-negative integer as a base-52 token
    decode_token(token): Parse a base-52 token back into an integer
    encode_gene(gene):   Quantize a gene and render it as a token
    decode_gene(token):  Parse a token back into a gene
    to_dna(genes):       Encode a gene vector as a DNA string
    from_dna(dna):       Decode a DNA string into a float32 gene vector
"""

import math
from typing import Iterable

import numpy as np

from evonet.errors import InvalidDnaError

ALPHABET  = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE      = len(ALPHABET)  # 52
SEPARATOR = "-"

GENE_OFFSET = 1000.0  # genes below -GENE_OFFSET cannot be encoded
GENE_SCALE  = 1000.0  # quantization resolution is 1 / GENE_SCALE

_DIGITS = {char: digit for digit, char in enumerate(ALPHABET)}

# smallest value that rounds to infinity in float32
_FLOAT32_OVERFLOW = 2.0 ** 128 - 2.0 ** 103

def encode_value(value: int) -> str:
    """
    Render a non-negative integer in base 52, most significant digit first.

    Parameters:
        value: the integer to encode

    Returns:
        The base-52 token; zero is rendered as 'a'
    """
    if value < 0:
        raise InvalidDnaError(f"Cannot encode negative value {value}")

    digits = []
    while True:
        value, remainder = divmod(value, BASE)
        digits.append(ALPHABET[remainder])
        if value == 0:
            break
    return "".join(reversed(digits))

def decode_token(token: str) -> int:
    """
    Parse a base-52 token, most significant digit first.

    Parameters:
        token: one or more characters from [a-zA-Z]

    Returns:
        The decoded integer
    """
    if not token:
        raise InvalidDnaError("Empty DNA token")

    value = 0
    for char in token:
        digit = _DIGITS.get(char)
        if digit is None:
            raise InvalidDnaError(f"Unexpected character {char!r} in DNA token {token!r}")
        value = value * BASE + digit
    return value

def encode_gene(gene: float) -> str:
    """
    Quantize a gene to 0.001 and encode it as a single DNA token.
    """
    gene = float(gene)
    if not math.isfinite(gene):
        raise InvalidDnaError(f"Cannot encode non-finite gene {gene}")

    # round half up; the shifted value is non-negative for every encodable gene
    shifted = (gene + GENE_OFFSET) * GENE_SCALE
    if shifted < 0.0:
        raise InvalidDnaError(f"Cannot encode gene {gene}: genes must be >= {-GENE_OFFSET}")
    return encode_value(int(math.floor(shifted + 0.5)))

def decode_gene(token: str) -> float:
    """
    Decode a single DNA token back into a gene.

    Raises:
        InvalidDnaError: if the token is malformed, or decodes to a gene beyond float32 range
    """
    value = decode_token(token)
    try:
        gene = value / GENE_SCALE - GENE_OFFSET
    except OverflowError:
        raise InvalidDnaError(f"DNA token {token!r} is out of range") from None

    if gene >= _FLOAT32_OVERFLOW:
        raise InvalidDnaError(f"DNA token {token!r} decodes to {gene:g}, beyond float32 range")
    return gene

def to_dna(genes: Iterable[float]) -> str:
    """
    Encode a gene vector as a DNA string.

    Parameters:
        genes: the genes to encode, in order

    Returns:
        One token per gene joined by '-'; an empty vector gives an empty string
    """
    return SEPARATOR.join(encode_gene(gene) for gene in genes)

def from_dna(dna: str) -> np.ndarray:
    """
    Decode a DNA string into a gene vector.

    Parameters:
        dna: tokens of base-52 digits joined by '-'

    Returns:
        The decoded genes as a float32 array; an empty string gives an empty array
    """
    if dna == "":
        return np.zeros(0, dtype=np.float32)
    return np.array([decode_gene(token) for token in dna.split(SEPARATOR)], dtype=np.float32)
