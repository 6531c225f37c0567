"""
Core world generation functionality.
"""

from .alea_prng import AleaPRNG
from .context import GenerationContext
from .exceptions import (
    EmptyTemplatePoolError,
    GenerationOrderError,
    NamePoolExhaustedError,
    NoGeographyError,
    WorldGenerationError,
)
from .models import GeneratedWorld, GenerationLevel, WorldGenerationConfig
from .world_generator import WorldGenerator, level_closure

__all__ = ['AleaPRNG', 'GenerationContext', 'WorldGenerationError', 'GenerationOrderError',
           'EmptyTemplatePoolError', 'NamePoolExhaustedError', 'NoGeographyError',
           'GeneratedWorld', 'GenerationLevel', 'WorldGenerationConfig',
           'WorldGenerator', 'level_closure']
