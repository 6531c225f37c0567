"""Errors raised by the world generation pipeline."""


class WorldGenerationError(Exception):
    """Base class for every error the generator raises."""


class GenerationOrderError(WorldGenerationError):
    """A stage ran before the stages it depends on produced anything."""

    def __init__(self, required: str, stage: str):
        self.required = required
        self.stage = stage
        super().__init__(f"{required} must be generated before {stage}")


class EmptyTemplatePoolError(WorldGenerationError, ValueError):
    """Name selection was asked to choose from an empty template pool."""


class NamePoolExhaustedError(WorldGenerationError):
    """Every base template and suffix combination is already taken."""


class NoGeographyError(WorldGenerationError):
    """A dungeon needed a location but no geography exists."""
