"""
Configuration and Hash Oracle Tests
"""

import unittest
import sys
import os
import hashlib
from unittest import mock

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from merkle_paths import ConfigurationError
from merkle_paths.config import Settings, load_settings
from merkle_paths.hashing import (
    Blake2bOracle,
    Sha256Oracle,
    Sha3Oracle,
    TaggedSha256Oracle,
    available_oracles,
    get_oracle,
)


class TestOracles(unittest.TestCase):

    def test_sha256_concatenates(self):
        oracle = Sha256Oracle()
        self.assertEqual(oracle([b"a", b"b"]), hashlib.sha256(b"ab").digest())
        self.assertEqual(oracle([b"a"]), hashlib.sha256(b"a").digest())

    def test_blake2b_and_sha3(self):
        self.assertEqual(Blake2bOracle()([b"x"]), hashlib.blake2b(b"x", digest_size=32).digest())
        self.assertEqual(Sha3Oracle()([b"x", b"y"]), hashlib.sha3_256(b"xy").digest())

    def test_tagged_separates_leaves_from_nodes(self):
        oracle = TaggedSha256Oracle()
        self.assertEqual(oracle([b"ab"]), hashlib.sha256(b"\x00ab").digest())
        self.assertEqual(oracle([b"a", b"b"]), hashlib.sha256(b"\x01ab").digest())
        self.assertNotEqual(oracle([b"ab"]), oracle([b"a", b"b"]))

    def test_get_oracle(self):
        self.assertIsInstance(get_oracle("sha256"), Sha256Oracle)
        self.assertIsInstance(get_oracle("SHA3_256"), Sha3Oracle)
        self.assertEqual(
            available_oracles(),
            ["blake2b", "sha256", "sha3_256", "tagged_sha256"],
        )
        with self.assertRaises(ConfigurationError):
            get_oracle("md5")

    def test_digest_sizes(self):
        for name in available_oracles():
            oracle = get_oracle(name)
            self.assertEqual(len(oracle([b"x"])), oracle.digest_size)


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
        self.assertEqual(settings, Settings())
        self.assertEqual(settings.hash_algorithm, "sha256")
        self.assertIsNone(settings.max_depth)
        self.assertEqual(settings.log_level_value, 20)
        self.assertIsInstance(settings.oracle, Sha256Oracle)

    def test_environment_values(self):
        env = {"MERKLE_HASH": "Blake2b", "MERKLE_MAX_DEPTH": "20", "MERKLE_LOG_LEVEL": "debug"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = load_settings()
        self.assertEqual(settings.hash_algorithm, "blake2b")
        self.assertEqual(settings.max_depth, 20)
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertIsInstance(settings.oracle, Blake2bOracle)

    def test_blank_max_depth_is_unset(self):
        with mock.patch.dict(os.environ, {"MERKLE_MAX_DEPTH": " "}, clear=True):
            self.assertIsNone(load_settings().max_depth)

    def test_invalid_values(self):
        for env in (
            {"MERKLE_HASH": "md5"},
            {"MERKLE_MAX_DEPTH": "deep"},
            {"MERKLE_MAX_DEPTH": "-2"},
            {"MERKLE_LOG_LEVEL": "LOUD"},
        ):
            with mock.patch.dict(os.environ, env, clear=True):
                with self.assertRaises(ConfigurationError):
                    load_settings()


if __name__ == '__main__':
    unittest.main()
