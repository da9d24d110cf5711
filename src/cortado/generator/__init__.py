"""Random string generation for Cortado.

Independent of the tokenizer: a builder-configured generator that picks
code points from a range or an explicit character list and filters them
through character predicates.

Example:
    >>> from cortado.generator import RandomStringGenerator, ascii_alpha_numerals
    >>> generator = RandomStringGenerator.builder().filtered_by(ascii_alpha_numerals).build()
    >>> token = generator.generate(16)
"""

from cortado.generator.core import (
    MAX_CODE_POINT,
    RandomSource,
    RandomStringGenerator,
    RandomStringGeneratorBuilder,
)
from cortado.generator.predicates import (
    BUILTIN_PREDICATES,
    CharacterPredicate,
    arabic_numerals,
    ascii_alpha_numerals,
    ascii_letters,
    ascii_lowercase_letters,
    ascii_uppercase_letters,
    digits,
    letters,
)

__all__ = [
    "BUILTIN_PREDICATES",
    "MAX_CODE_POINT",
    "CharacterPredicate",
    "RandomSource",
    "RandomStringGenerator",
    "RandomStringGeneratorBuilder",
    "arabic_numerals",
    "ascii_alpha_numerals",
    "ascii_letters",
    "ascii_lowercase_letters",
    "ascii_uppercase_letters",
    "digits",
    "letters",
]
