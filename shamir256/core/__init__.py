"""Secret sharing core.

- gf256: GF(2^8) field arithmetic over 0x11B with generator 0x03
- polynomial: random polynomial generation and Horner evaluation
- interpolation: Lagrange interpolation at x=0 (or any x)
- entropy: injectable randomness sources
- secret_sharing_engine: split/combine across every byte of a secret
"""
