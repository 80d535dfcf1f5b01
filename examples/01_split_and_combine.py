#!/usr/bin/env python3
"""
Split and Combine Example

Demonstrates splitting a secret into shares and recombining it.
"""

from shamir256 import (
    FixedEntropySource,
    SecretSharingEngine,
    combine,
    recover_share,
    split,
)
from shamir256.core.logging import setup_logging


def main():
    setup_logging(level="INFO")

    print("shamir256 Split and Combine Example")
    print("=" * 50)

    # Example 1: 3-of-5 split
    print("\n1. Splitting a secret into 5 shares (3 required)...")
    secret = b"hello world"
    shares = split(5, 3, secret)
    for share_id, value in shares.items():
        print(f"   Share {share_id}: {value.hex()}")

    # Example 2: Combine any three
    print("\n2. Combining shares 1, 2 and 3...")
    subset = {i: shares[i] for i in (1, 2, 3)}
    recovered = combine(subset)
    print(f"   Recovered: {recovered!r}")
    assert recovered == secret, "Combine failed!"
    print("   Verification: PASSED")

    # Example 3: Too few shares
    print("\n3. Combining only shares 4 and 5...")
    wrong = combine({i: shares[i] for i in (4, 5)})
    print(f"   Result: {wrong!r}")
    print(f"   Matches secret: {wrong == secret} (no error is raised)")

    # Example 4: Recover a lost share
    print("\n4. Recovering share 4 from shares 1, 2 and 3...")
    rebuilt = recover_share(subset, 4)
    print(f"   Rebuilt share 4 matches: {rebuilt == shares[4]}")

    # Example 5: Deterministic entropy for tests
    print("\n5. Splitting with a fixed entropy stub (tests only)...")
    engine = SecretSharingEngine(entropy=FixedEntropySource(b"A"))
    fixed = engine.split(5, 3, bytes([1, 2, 3, 4, 5]))
    recovered = engine.combine({i: fixed[i] for i in (1, 3, 5)})
    print(f"   Recovered: {list(recovered)}")

    print("\n" + "=" * 50)
    print("Example complete!")


if __name__ == "__main__":
    main()
