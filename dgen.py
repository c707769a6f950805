'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from chainy import Enumerable
from typing import Any, Dict, Iterator, Optional


class Generator:
    """
    schema interpreter. one instance produces one reproducible stream of records.

    a schema is a dict of field schemas, a one-item list (a list of generated
    items, its length set by '_dgen_count'), a faker provider name, a
    (provider, kwargs) tuple, or a '_dgen_provider' dict: 'choice', 'range',
    'ref', 'call' or 'literal'. anything else is taken literally.
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_dgen_provider"]
        if provider == "choice":
            # numpy scalars become native python values
            picked = self._rng.choice(config["from"])
            return picked.item() if hasattr(picked, 'item') else picked

        if provider == "range":
            low, high = config["between"]
            return int(self._rng.integers(low, high, endpoint=True))

        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "call":
            return config["func"](context)

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_dgen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _dgen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_dgen_provider" in schema:
                return self._resolve_provider(schema, current_context)
            # fields see the parent context and the fields generated before them
            generated = {}
            for k, v in schema.items():
                generated[k] = self.create(v, {**current_context, **generated})
            return generated

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            actual_item_schema = item_schema.get('_dgen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(self._get_count(item_schema))]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def _get_count(self, item_schema: Any) -> int:
        if not isinstance(item_schema, dict) or "_dgen_count" not in item_schema:
            return 3
        count_config = item_schema["_dgen_count"]
        if isinstance(count_config, int):
            return count_config
        low, high = count_config
        return int(self._rng.integers(low, high, endpoint=True))


class RecordStream(Enumerable[Dict[str, Any]]):
    """
    an endless, replayable sequence of records generated from a schema.
    every cursor starts its own generator from the same seed, so with a seed
    each traversal yields the same records. bound it with take(n).
    """

    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed
        super().__init__(self._records)

    def _records(self) -> Iterator[Any]:
        generator = Generator(self._seed)
        while True:
            yield generator.create(self._schema)


def from_schema(schema: Any, seed: Optional[int] = None) -> RecordStream:
    return RecordStream(schema, seed)
