import unittest
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from configgen import default_config
from configgen.serialization import to_config_data


class Level(Enum):
    DEBUG = "debug"
    INFO = "info"


class TestToConfigData(unittest.TestCase):
    def test_dataclass_with_field_options(self) -> None:
        @default_config(
            field_name_mappings={"log_level": "log-level"},
            field_serializers={"timeout": lambda value: f"{value}s"},
        )
        @dataclass
        class ExampleConfig:
            log_level: Level = Level.INFO
            timeout: int = 30
            output_dir: Path = Path("./out")

        self.assertEqual(
            to_config_data(ExampleConfig.default()),
            {"log-level": "info", "timeout": "30s", "output_dir": "out"},
        )

    def test_nested_containers(self) -> None:
        @dataclass
        class Limits:
            hosts: tuple[str, ...] = ("a", "b")
            weights: dict[Level, float] = field(
                default_factory=lambda: {Level.DEBUG: 0.5}
            )

        self.assertEqual(
            to_config_data({"limits": Limits(), "enabled": True, "extra": None}),
            {
                "limits": {"hosts": ["a", "b"], "weights": {"debug": 0.5}},
                "enabled": True,
                "extra": None,
            },
        )

    def test_rejects_non_mapping_root(self) -> None:
        with self.assertRaises(TypeError):
            to_config_data(["not", "a", "table"])

    def test_rejects_unknown_types(self) -> None:
        with self.assertRaises(TypeError):
            to_config_data({"value": complex(1, 2)})

    def test_rejects_non_string_keys(self) -> None:
        with self.assertRaises(TypeError):
            to_config_data({1: "one"})


if __name__ == "__main__":
    unittest.main()
