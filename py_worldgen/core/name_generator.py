"""
Uniqueness-aware name selection.

Names come from fixed template pools. When a uniqueness scope is supplied,
exhausted pools are extended with descriptive epithets ("the Elder") and then
compound epithets ("the Elder of the North"), never with numbers.
"""

from __future__ import annotations

from typing import Optional, Sequence, Set

import structlog

from ..config.name_templates import (
    COMPOUND_SUFFIXES,
    DESCRIPTIVE_SUFFIXES,
    ORGANIZATION_NAME_SUFFIXES,
    ORGANIZATION_NAMES,
)
from .alea_prng import AleaPRNG
from .exceptions import EmptyTemplatePoolError, NamePoolExhaustedError

logger = structlog.get_logger()


def _int32(n: int) -> int:
    """Wrap to a signed 32-bit integer."""
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def simple_hash(text: str) -> int:
    """Deterministic 32-bit string hash (h * 31 + c), returned as a non-negative int."""
    h = 0
    for char in text:
        h = _int32((h << 5) - h + ord(char))
    return abs(h)


def format_race_name(race_type: str) -> str:
    """wood_elf -> Wood elf"""
    text = race_type.replace("_", " ")
    return text[:1].upper() + text[1:]


def select_name(
    templates: Sequence[str],
    rng: AleaPRNG,
    used_names: Optional[Set[str]] = None,
) -> str:
    """
    Pick a name from templates.

    Without used_names this is a plain random pick and repeats are allowed.
    With used_names the result is guaranteed not to be in the set, and it is
    added to the set before returning.

    Args:
        templates: Candidate names
        rng: Run PRNG
        used_names: Uniqueness scope shared by the caller

    Returns:
        Selected name

    Raises:
        EmptyTemplatePoolError: templates is empty
        NamePoolExhaustedError: every suffixed variant is already used
    """
    if not templates:
        raise EmptyTemplatePoolError("Cannot select a name from an empty template pool")

    if used_names is None:
        return templates[rng.randrange(len(templates))]

    available = [t for t in templates if t not in used_names]
    if available:
        name = available[rng.randrange(len(available))]
    else:
        name = _suffixed_variant(templates, rng, used_names)

    used_names.add(name)
    return name


def claim_name(name: str, rng: AleaPRNG, used_names: Set[str]) -> str:
    """Reserve a composed name, falling back to an epithet variant when it is taken."""
    if name in used_names:
        return select_name([name], rng, used_names)
    used_names.add(name)
    return name


def _suffixed_variant(templates: Sequence[str], rng: AleaPRNG, used_names: Set[str]) -> str:
    base_start = rng.randrange(len(templates))
    suffix_start = rng.randrange(len(DESCRIPTIVE_SUFFIXES))

    for base_offset in range(len(templates)):
        base = templates[(base_start + base_offset) % len(templates)]

        for k in range(len(DESCRIPTIVE_SUFFIXES)):
            suffix = DESCRIPTIVE_SUFFIXES[(suffix_start + k) % len(DESCRIPTIVE_SUFFIXES)]
            candidate = f"{base} {suffix}"
            if candidate not in used_names:
                return candidate

        compound_start = rng.randrange(len(COMPOUND_SUFFIXES))
        for k in range(len(DESCRIPTIVE_SUFFIXES)):
            suffix = DESCRIPTIVE_SUFFIXES[(suffix_start + k) % len(DESCRIPTIVE_SUFFIXES)]
            for c in range(len(COMPOUND_SUFFIXES)):
                compound = COMPOUND_SUFFIXES[(compound_start + c) % len(COMPOUND_SUFFIXES)]
                candidate = f"{base} {suffix} {compound}"
                if candidate not in used_names:
                    return candidate

    logger.error("Name pool exhausted", templates=len(templates), used=len(used_names))
    raise NamePoolExhaustedError(
        f"All {len(templates)} templates and their suffixed variants are already used"
    )


def organization_name_candidates(kind: str, race_name: str) -> list:
    """
    Build every name an organization of this kind may take.

    Prefix templates ("The Kingdom of") are completed with the kind's
    suffixes; complete templates ("The War Horde") are used as they are,
    or qualified with suffixes when the kind has them; kinds without
    templates get "The <Kind> of <suffix>".
    """
    templates = ORGANIZATION_NAMES.get(kind, ())
    suffixes = ORGANIZATION_NAME_SUFFIXES.get(kind, ())
    label = kind.replace("_", " ").title()

    if templates and suffixes:
        if templates[0].endswith(" of"):
            return [f"{t} {s}" for t in templates for s in suffixes]
        return list(templates) + [f"{t} of {s}" for t in templates for s in suffixes]
    if templates:
        return list(templates)
    if suffixes:
        return [f"The {label} of {s}" for s in suffixes]
    return [f"The {label} of the {race_name}"]


def generate_organization_name(
    kind: str, race_name: str, rng: AleaPRNG, used_names: Set[str]
) -> str:
    """Unique organization name for the given kind."""
    return select_name(organization_name_candidates(kind, race_name), rng, used_names)
