"""Random feature attributes.

Each feature gets `count` properties named prop1..propN. The value type of each
property is drawn independently from {string, number, boolean}.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

import numpy as np
from faker import Faker

from ..errors import InvalidArgumentError

PropertyValue = Union[str, float, bool]

WORDS_RANGE = (3, 10)  # words per string value, upper bound exclusive
NUMBER_RANGE = (0.0, 1000.0)


class PropertyKind(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


PROPERTY_KINDS = tuple(PropertyKind)


def faker_from(rng: np.random.Generator) -> Faker:
    # Seed from the caller's rng so a fixed seed gives the same words.
    fake = Faker()
    fake.seed_instance(int(rng.integers(0, 2**32)))
    return fake


def random_property_value(rng: np.random.Generator, fake: Faker) -> PropertyValue:
    kind = PROPERTY_KINDS[int(rng.integers(0, len(PROPERTY_KINDS)))]
    if kind is PropertyKind.STRING:
        n_words = int(rng.integers(*WORDS_RANGE))
        return " ".join(fake.words(nb=n_words))
    if kind is PropertyKind.NUMBER:
        return float(rng.uniform(*NUMBER_RANGE))
    return bool(rng.random() < 0.5)


def generate_properties(
    count: int,
    rng: np.random.Generator,
    fake: Optional[Faker] = None,
) -> Dict[str, PropertyValue]:
    """Return exactly `count` uniquely named random properties ({} when count == 0).

    `fake` supplies the word list for string values; when omitted one is seeded
    from `rng`. Callers generating many features pass a single shared instance.
    """

    if count < 0:
        raise InvalidArgumentError(f"property count must be zero or more, got {count}")
    if count == 0:
        return {}

    if fake is None:
        fake = faker_from(rng)
    return {f"prop{i}": random_property_value(rng, fake) for i in range(1, count + 1)}
