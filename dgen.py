r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
seeded sample data for the hof test suites.
'''

import numpy as np
from faker import Faker
from hof import from_iterable, Collection
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def integers(self, count: int, low: int, high: int, dtype: Any = np.int64) -> np.ndarray:
        """'count' integers in [low, high] as a typed numpy array"""
        return self._rng.integers(low, high, size=count, endpoint=True).astype(dtype)

    def floats(self, count: int, low: float = 0.0, high: float = 1.0) -> np.ndarray:
        return self._rng.uniform(low, high, size=count)


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def list(self, count: int) -> List[Any]:
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> Collection:
        return from_iterable(self.list(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def random_numbers(count: int, low: int = -100, high: int = 100, seed: Optional[int] = None,
                   dtype: Any = np.int64) -> np.ndarray:
    """seeded integer array for numeric property checks"""
    return Generator(seed).integers(count, low, high, dtype)
