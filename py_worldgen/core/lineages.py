"""Level 7: family lineages founded by standout mortals."""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

import structlog

from ..config.name_templates import FAMILY_NAME_PREFIXES, ROLE_TITLES
from .context import GenerationContext
from .exceptions import GenerationOrderError
from .models import FamilyConnection, FamilyLineage, FamilyMember, Geography, StandoutMortal
from .name_generator import claim_name
from .standouts import personal_names

logger = structlog.get_logger()

MEMBER_ROLES = (
    "blacksmith",
    "merchant",
    "soldier",
    "scholar",
    "priest",
    "noble",
    "artisan",
    "innkeeper",
    "farmer",
    "guard",
)

GENERATION_SPACING = 20


class LineageGenerator:
    """Creates one family per standout mortal; the mortal is its founder."""

    async def generate(
        self, context: GenerationContext
    ) -> Tuple[List[FamilyMember], List[FamilyLineage]]:
        """
        Generate family lineages and their members.

        Args:
            context: Generation context with mortal races and standout mortals

        Returns:
            Tuple of (family members, family lineages)
        """
        if not context.mortal_races:
            raise GenerationOrderError("Mortal races", "family lineages")

        if not context.standout_mortals:
            logger.warning("No standout mortals found, cannot generate family lineages")
            return [], []

        logger.info("Generating family lineages", seed=context.seed)

        members: List[FamilyMember] = []
        lineages: List[FamilyLineage] = []
        used_family_names: Set[str] = set()
        rng = context.rng

        for i, founder in enumerate(context.standout_mortals):
            race = context.find_race(founder.race)
            if race is None:
                continue

            location = self._select_origin(context, founder, race.homeland)
            family_name = self._family_name(race.name, i, context)
            family_name = claim_name(family_name, rng, used_family_names)
            surname = family_name.split(" ", 1)[1] if " " in family_name else family_name

            lineage_id = f"lineage-{founder.id}"
            member_ids: List[str] = []
            kind = founder.standout_type.replace("_", " ")
            origin_text = f" from {location.name}" if location else ""

            member_count = 3 + rng.randrange(3)
            used_member_names: Set[str] = {founder.name}
            first_names = personal_names(race.name)["first"]

            for j in range(member_count):
                role = MEMBER_ROLES[rng.randrange(len(MEMBER_ROLES))]
                first = first_names[(j + rng.randrange(1000)) % len(first_names)]
                name = claim_name(f"{first} {surname}", rng, used_member_names)
                title = ROLE_TITLES[role][0]
                born = founder.created_at + (j + 1) * GENERATION_SPACING
                member_id = f"family-{founder.id}-{j}"

                members.append(
                    FamilyMember(
                        id=member_id,
                        name=name,
                        description=f"{name}, a {title.lower()} of the {family_name}.",
                        parent_id=founder.id,
                        created_at=born,
                        discovered_at=context.discovered_at,
                        role=role,
                        race=race.id,
                        lineage=lineage_id,
                        location=location.id if location else None,
                        connections=[
                            FamilyConnection(
                                target_id=founder.id,
                                relationship="influenced",
                                description=f"Raised in the shadow of {founder.name}",
                            )
                        ],
                        metadata={
                            "seed": context.seed,
                            "member_index": j,
                            "lineage_index": i,
                            "standout_mortal_id": founder.id,
                        },
                    )
                )
                member_ids.append(member_id)

            lineages.append(
                FamilyLineage(
                    id=lineage_id,
                    name=family_name,
                    race=race.id,
                    origin=location.id if location else None,
                    members=member_ids,
                    notable_members=[founder.id],
                    history=(
                        f"The {family_name} is a {race.name} family founded by "
                        f"{founder.name}, a {kind}{origin_text}."
                    ),
                    founded=founder.created_at,
                    parent_id=founder.id,
                )
            )

        logger.info(f"Generated {len(lineages)} family lineages", members=len(members))
        return members, lineages

    def _select_origin(
        self, context: GenerationContext, founder: StandoutMortal, homeland: Optional[str]
    ) -> Optional[Geography]:
        """Founder's birthplace, then the race homeland, then any geography."""
        location = context.find_geography(founder.location)
        if location is None:
            location = context.find_geography(homeland)
        if location is None and context.geography:
            location = context.rng.choice(context.geography)
        return location

    def _family_name(self, race_name: str, index: int, context: GenerationContext) -> str:
        prefix = context.rng.choice(FAMILY_NAME_PREFIXES.get(race_name, ("Family",)))
        surnames = personal_names(race_name)["last"]
        surname = surnames[(index + context.rng.randrange(1000)) % len(surnames)]
        return f"{prefix} {surname}"
