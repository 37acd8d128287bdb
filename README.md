# cipherlab

Small, readable cipher implementations for learning and experimenting with
cryptography: classical ciphers and their cryptanalysis, simplified
block-cipher constructions, block-cipher modes, and a few number-theoretic
schemes. Real DES, triple DES, AES and DSA come from `pycryptodome`.

These are teaching tools. Several of the "block ciphers" here are deliberately
simplified and offer no security; do not use them to protect real data.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cipherlab.caesar` | `caesar_encrypt`, `caesar_decrypt`, `monoalphabetic_encrypt` (fixed +3 substitution), `letter_frequencies`, `english_score`, `guess_shift`, `repeated_decryptions`, and `rank_shifts`, which returns a `ShiftCandidate` (shift, plaintext, score) for every shift 0..25 |
| `cipherlab.affine` | `affine_encrypt`, `affine_decrypt`, `mod_inverse`, and `brute_force`, a generator of `(a, b, plaintext)` for all 12 valid multipliers and 26 offsets |
| `cipherlab.vigenere` | `vigenere_encrypt` with a keyword, `encrypt_with_shifts` / `decrypt_with_shifts` with an explicit list of shifts, and `random_key_stream` |
| `cipherlab.substitution` | `substitute` with a fixed 26-letter mapping, `letter_counts`, `rank_letters`, `frequency_substitute`, and `top_plaintexts` |
| `cipherlab.playfair` | `PlayfairMatrix` (default square, `from_key`, `position`, `encrypt`, `decrypt`) and `count_keys` |
| `cipherlab.hill` | `pad_text`, `hill_encrypt`, `hill_decrypt`, `determinant_mod26` and `inverse_matrix_mod26` for square key matrices of any size |
| `cipherlab.toy_des` | `permute` (bit gathering), `toy_des_decrypt`, `generate_subkeys` (sixteen 48-bit round keys) and `xor_des_encrypt` |
| `cipherlab.modes` | `pad_block`, `flip_bit`, and ECB, CBC and CFB over an identity block function (`ecb_encrypt`, `cbc_encrypt`, `cfb_encrypt`), plus a one-byte-counter `ctr_encrypt` that decrypts when applied twice |
| `cipherlab.cmac` | `derive_subkeys`: CMAC subkeys by doubling in GF(2^64) or GF(2^128) |
| `cipherlab.sponge` | `steps_to_fill_capacity`: how many random single-bit writes it takes until every capacity lane holds a set bit |
| `cipherlab.numtheory` | `extended_gcd`, `mod_inverse`, `factor_semiprime`, `recover_private_exponent`, `common_factor_attack`, `diffie_hellman` |
| `cipherlab.rsa` | `encrypt_letters` and `decrypt_letters`: textbook RSA on letters A..Z as 0..25 |
| `cipherlab.des_modes` | `pad_data` / `unpad_data`, DES in ECB, CBC and 64-bit CFB modes (`ecb_encrypt`, `ecb_decrypt`, `cbc_encrypt`, `cbc_decrypt`, `cfb_encrypt`, `cfb_decrypt`), and three-key triple DES in CBC mode (`triple_des_cbc_encrypt`, `triple_des_cbc_decrypt`) |
| `cipherlab.signatures` | `cbc_mac` over AES-256, and `generate_dsa_key`, `sign_dsa`, `verify_dsa` (DSA over SHA-256) |

Invalid input raises `ValueError` (or `IndexError` for `flip_bit` out of
range): for example an affine multiplier not coprime with 26, a Hill key whose
determinant has no inverse modulo 26, or data that is not a whole number of
blocks.

## Examples

```python
from cipherlab.caesar import caesar_encrypt, rank_shifts
from cipherlab.affine import affine_encrypt, affine_decrypt
from cipherlab.playfair import PlayfairMatrix
from cipherlab.numtheory import diffie_hellman, recover_private_exponent

print(caesar_encrypt("hello", 3))            # khoor

ciphertext = affine_encrypt("HELLO", 5, 8)
print(ciphertext, affine_decrypt(ciphertext, 5, 8))

best = max(rank_shifts("FALSXY XS LSX!"), key=lambda c: c.score)
print(best.shift, best.plaintext)

square = PlayfairMatrix.from_key("KEYWORD")
print(square.position("K"))                  # (0, 0)
print(square.decrypt(square.encrypt("HELLO")))

print(recover_private_exponent(31, 3599))
print(diffie_hellman(23, 5, 6, 15))          # public keys, then both shared secrets
```

Block-mode helpers work on `bytes`:

```python
from cipherlab.des_modes import pad_data, unpad_data, cbc_encrypt, cbc_decrypt

key = bytes(8)
iv = bytes(8)
padded = pad_data(b"Hello, World!")
ciphertext = cbc_encrypt(padded, key, iv)
print(unpad_data(cbc_decrypt(ciphertext, key, iv)))   # b'Hello, World!'
```

## What it does not do

`cipherlab` is a library only: it installs no command-line program, and it
reads no input and prints nothing itself. Keys are passed in by the caller;
nothing is stored.