from __future__ import annotations

import json
import unittest
from dataclasses import dataclass

from pydantic import ValidationError

from jsonfiles.io.codecs import JsonCodec, ModelCodec
from tests.helpers import User


@dataclass
class Point:
    x: int
    y: int


class Tagged:
    def __init__(self, tag: str) -> None:
        self.tag = tag

    def to_dict(self) -> dict[str, object]:
        return {"tag": self.tag}


class JsonCodecTests(unittest.TestCase):
    def test_encodes_utf8_without_ascii_escaping(self) -> None:
        data = JsonCodec().encode({"name": "Zoë"})

        self.assertIsInstance(data, bytes)
        self.assertIn("Zoë".encode("utf-8"), data)

    def test_formatting_options(self) -> None:
        data = JsonCodec(indent=2, sort_keys=True).encode({"b": 1, "a": 2})

        self.assertEqual(data.decode("utf-8"), '{\n  "a": 2,\n  "b": 1\n}')

    def test_encodes_models_dataclasses_and_to_dict_objects(self) -> None:
        codec = JsonCodec()
        payload = {"user": User.fake(), "point": Point(1, 2), "tagged": Tagged("t")}

        decoded = json.loads(codec.encode(payload))

        self.assertEqual(decoded["user"], {"firstName": "First name", "lastName": "LastName"})
        self.assertEqual(decoded["point"], {"x": 1, "y": 2})
        self.assertEqual(decoded["tagged"], {"tag": "t"})

    def test_unserializable_raises_type_error(self) -> None:
        with self.assertRaises(TypeError):
            JsonCodec().encode({"handle": object()})

    def test_decode_invalid_raises_value_error(self) -> None:
        with self.assertRaises(ValueError):
            JsonCodec().decode(b"\xff\xfe")
        with self.assertRaises(ValueError):
            JsonCodec().decode(b"{")


class ModelCodecTests(unittest.TestCase):
    def test_model_round_trip(self) -> None:
        codec = ModelCodec(User)
        user = User(firstName="A", lastName="B")

        self.assertEqual(codec.decode(codec.encode(user)), user)

    def test_container_targets(self) -> None:
        codec = ModelCodec(list[User])

        users = codec.decode(b'[{"firstName": "A", "lastName": "B"}]')

        self.assertEqual(users, [User(firstName="A", lastName="B")])

    def test_dataclass_target(self) -> None:
        self.assertEqual(ModelCodec(Point).decode(b'{"x": 3, "y": 4}'), Point(3, 4))

    def test_validation_failure(self) -> None:
        with self.assertRaises(ValidationError):
            ModelCodec(User).decode(b'{"firstName": "A"}')


if __name__ == "__main__":
    unittest.main()
