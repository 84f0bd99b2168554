import unittest
from dataclasses import dataclass
from typing import Self

from configgen import ConfigSpec, DefaultConfig, default_config, is_default_config


def serialize_count(value: int) -> str:
    return str(value)


class TestDefaultConfigDecorator(unittest.TestCase):
    def test_metadata_is_attached(self) -> None:
        @default_config(
            field_name_mappings={"count": "count_value"},
            field_serializers={"count": serialize_count},
        )
        @dataclass
        class ExampleConfig:
            count: int = 1

        spec = ExampleConfig.__config__  # type: ignore[attr-defined]

        self.assertIsInstance(spec, ConfigSpec)
        self.assertEqual(spec.field_mappings, {"count": "count_value"})
        self.assertEqual(spec.field_serializers, {"count": serialize_count})

    def test_bare_decorator_adds_default(self) -> None:
        @default_config
        @dataclass
        class ExampleConfig:
            count: int = 1

        config = ExampleConfig.default()  # type: ignore[attr-defined]

        self.assertEqual(config, ExampleConfig())
        self.assertIsInstance(config, DefaultConfig)
        self.assertTrue(is_default_config(config))

    def test_existing_default_is_kept(self) -> None:
        @default_config
        @dataclass
        class ExampleConfig:
            count: int = 1

            @classmethod
            def default(cls) -> Self:
                return cls(count=42)

        self.assertEqual(ExampleConfig.default().count, 42)

    def test_plain_values_are_not_default_configs(self) -> None:
        @dataclass
        class PlainConfig:
            count: int = 1

        self.assertFalse(is_default_config(PlainConfig()))
        self.assertFalse(is_default_config({"count": 1}))

    def test_field_named_default_is_rejected(self) -> None:
        with self.assertRaises(ValueError):

            @default_config
            @dataclass
            class LocaleConfig:
                default: str = "en"

    def test_default_key_through_mapping(self) -> None:
        @default_config(field_name_mappings={"default_locale": "default"})
        @dataclass
        class LocaleConfig:
            default_locale: str = "en"

        config = LocaleConfig.default()  # type: ignore[attr-defined]

        self.assertTrue(is_default_config(config))
        self.assertEqual(config.default_locale, "en")


if __name__ == "__main__":
    unittest.main()
