"""Shared accumulator passed through every stage of one generation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .alea_prng import AleaPRNG
from .models import (
    ConceptualBeing,
    CosmicCreator,
    DemiGod,
    Dungeon,
    FamilyLineage,
    FamilyMember,
    Geography,
    MortalRace,
    Organization,
    PrimordialBeing,
    StandoutMortal,
    WorldEvent,
    utcnow,
)


@dataclass
class GenerationContext:
    """
    Collections produced so far, plus the run's RNG.

    A context belongs to exactly one generation call. Stages append to it and
    read only collections filled by earlier stages.
    """

    seed: str
    rng: AleaPRNG
    discovered_at: datetime = field(default_factory=utcnow)
    primordials: List[PrimordialBeing] = field(default_factory=list)
    cosmic_creators: List[CosmicCreator] = field(default_factory=list)
    geography: List[Geography] = field(default_factory=list)
    conceptual_beings: List[ConceptualBeing] = field(default_factory=list)
    demigods: List[DemiGod] = field(default_factory=list)
    mortal_races: List[MortalRace] = field(default_factory=list)
    organizations: List[Organization] = field(default_factory=list)
    standout_mortals: List[StandoutMortal] = field(default_factory=list)
    dungeons: List[Dungeon] = field(default_factory=list)
    family_members: List[FamilyMember] = field(default_factory=list)
    family_lineages: List[FamilyLineage] = field(default_factory=list)
    world_events: List[WorldEvent] = field(default_factory=list)

    @classmethod
    def from_seed(cls, seed: str) -> GenerationContext:
        return cls(seed=seed, rng=AleaPRNG(seed))

    def find_race(self, race_id: str) -> Optional[MortalRace]:
        return next((r for r in self.mortal_races if r.id == race_id), None)

    def find_geography(self, geography_id: Optional[str]) -> Optional[Geography]:
        if geography_id is None:
            return None
        return next((g for g in self.geography if g.id == geography_id), None)

    def find_organization(self, organization_id: Optional[str]) -> Optional[Organization]:
        if organization_id is None:
            return None
        return next((o for o in self.organizations if o.id == organization_id), None)
