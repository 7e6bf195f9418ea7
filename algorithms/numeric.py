"""
numeric.py — Number-Theory Panels
==================================
The three arithmetic demos: Euclid's GCD, extended Euclid and a toy RSA
round trip.  No canvas, just lines for the output log.

Inputs arrive as panel text; `parse_int` turns them into ints or raises
ParseError so the web layer can alert exactly as it does for graphs.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from graph.errors import ParseError, ValidationError


def parse_int(text, name: str) -> int:
    try:
        return int(str(text).strip())
    except (TypeError, ValueError) as exc:
        raise ParseError(f"{name} must be an integer, got {text!r}") from exc


# ---------------------------------------------------------------------------
# Euclid
# ---------------------------------------------------------------------------
@dataclass
class GcdResult:
    gcd:   int
    lines: List[str] = field(default_factory=list)


def euclid_gcd(a: int, b: int) -> GcdResult:
    lines = [f"--- GCD of {a} and {b} ---"]
    step = 1
    while b != 0:
        q, r = divmod(a, b)
        lines.append(f"Step {step}: {a} = {b} * {q} + {r}")
        a, b = b, r
        step += 1
    lines.append(f"✅ GCD: {a}")
    return GcdResult(gcd=a, lines=lines)


# ---------------------------------------------------------------------------
# Extended Euclid
# ---------------------------------------------------------------------------
@dataclass
class ExtendedGcdResult:
    gcd:   int
    s:     int
    t:     int
    lines: List[str] = field(default_factory=list)


def extended_gcd(a: int, b: int) -> ExtendedGcdResult:
    """gcd(a, b) = a·s + b·t."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    lines = [
        "--- Computing coefficients ---",
        f"GCD: {old_r}",
        f"Coefficients: s={old_s}, t={old_t}",
        f"Check: {a}({old_s}) + {b}({old_t}) = {old_r}",
    ]
    return ExtendedGcdResult(gcd=old_r, s=old_s, t=old_t, lines=lines)


def mod_inverse(a: int, m: int) -> Optional[int]:
    """a⁻¹ mod m, or None when gcd(a, m) ≠ 1."""
    res = extended_gcd(a, m)
    if res.gcd != 1:
        return None
    return res.s % m


# ---------------------------------------------------------------------------
# Toy RSA
# ---------------------------------------------------------------------------
@dataclass
class RsaResult:
    n:         int
    phi:       int
    e:         int
    d:         int
    cipher:    int
    decrypted: int
    lines:     List[str] = field(default_factory=list)


def rsa_demo(p: int, q: int, m: int) -> RsaResult:
    if p < 2 or q < 2:
        raise ValidationError("p and q must both be at least 2")
    n   = p * q
    phi = (p - 1) * (q - 1)
    if not 0 <= m < n:
        raise ValidationError(f"message must lie in [0, {n})")

    e = 3
    while euclid_gcd(e, phi).gcd != 1:
        e += 2
    d = mod_inverse(e, phi)
    if d is None:
        raise ValidationError(f"no private key exists for e={e}, phi={phi}")

    cipher    = pow(m, e, n)
    decrypted = pow(cipher, d, n)

    lines = [
        "Generated keys:",
        f"Public (e,n): ({e}, {n})",
        f"Private (d,n): ({d}, {n})",
        "",
        f"Message: {m} -> Encrypted: {cipher} -> Decrypted: {decrypted}",
    ]
    return RsaResult(n=n, phi=phi, e=e, d=d, cipher=cipher, decrypted=decrypted, lines=lines)
