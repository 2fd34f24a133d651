import unittest

from lzw_compressor.lzw_utils.dictionary import (
    DecoderDictionary,
    EncoderDictionary,
    FIRST_CODE,
    UNUSED,
)
from lzw_compressor.lzw_utils.errors import MalformedStreamError


class TestEncoderDictionary(unittest.TestCase):
    def setUp(self):
        self.dictionary = EncoderDictionary(14, 18041)

    def test_empty_lookup_returns_hashed_slot(self):
        code, slot = self.dictionary.lookup(65, 66)
        self.assertIsNone(code)
        self.assertEqual(slot, (66 << 6) ^ 65)

    def test_insert_then_lookup(self):
        _, slot = self.dictionary.lookup(65, 66)
        self.assertEqual(self.dictionary.insert(slot, 65, 66), FIRST_CODE)
        self.assertEqual(self.dictionary.lookup(65, 66), (FIRST_CODE, slot))
        self.assertEqual(len(self.dictionary), 1)

    def test_collision_probes_backwards(self):
        # (64, 0) and (0, 1) both hash to slot 64
        _, slot = self.dictionary.lookup(64, 0)
        self.assertEqual(slot, 64)
        self.dictionary.insert(slot, 64, 0)

        code, slot = self.dictionary.lookup(0, 1)
        self.assertIsNone(code)
        self.assertEqual(slot, 64 - (18041 - 64) + 18041)

        self.assertEqual(self.dictionary.insert(slot, 0, 1), FIRST_CODE + 1)
        self.assertEqual(self.dictionary.lookup(0, 1)[0], FIRST_CODE + 1)
        self.assertEqual(self.dictionary.lookup(64, 0)[0], FIRST_CODE)

    def test_zero_index_uses_step_of_one(self):
        _, slot = self.dictionary.lookup(0, 0)
        self.assertEqual(slot, 0)
        self.dictionary.insert(slot, 0, 0)
        # (256, 4) also hashes to 0 and must move to the wrapped slot
        code, slot = self.dictionary.lookup(256, 4)
        self.assertIsNone(code)
        self.assertEqual(slot, 18040)

    def test_table_must_exceed_largest_code(self):
        with self.assertRaises(ValueError):
            EncoderDictionary(14, 16383)


class TestEncoderDictionarySaturation(unittest.TestCase):
    def test_codes_increase_until_full(self):
        dictionary = EncoderDictionary(12, 5021)
        assigned = []
        prefix = 0
        char = 0
        while not dictionary.is_full:
            code, slot = dictionary.lookup(prefix, char)
            self.assertIsNone(code)
            assigned.append(dictionary.insert(slot, prefix, char))
            char += 1
            if char == 256:
                char = 0
                prefix += 1

        self.assertEqual(assigned, list(range(FIRST_CODE, dictionary.max_code + 1)))
        self.assertNotIn(dictionary.max_value, dictionary.code_table)
        self.assertEqual(len(dictionary), dictionary.max_code - 255)

        # Full: lookups still work, inserts are ignored
        code, slot = dictionary.lookup(prefix, char)
        self.assertIsNone(code)
        self.assertIsNone(dictionary.insert(slot, prefix, char))
        self.assertEqual(dictionary.code_table[slot], UNUSED)
        self.assertEqual(dictionary.lookup(0, 0)[0], FIRST_CODE)


class TestDecoderDictionary(unittest.TestCase):
    def test_expand_literal(self):
        dictionary = DecoderDictionary(14)
        stack = bytearray()
        dictionary.expand(ord("x"), stack)
        self.assertEqual(stack, b"x")

    def test_expand_chain_is_reversed(self):
        dictionary = DecoderDictionary(14)
        ab = dictionary.add(ord("A"), ord("B"))
        abc = dictionary.add(ab, ord("C"))
        stack = bytearray()
        dictionary.expand(abc, stack)
        self.assertEqual(stack, b"CBA")

    def test_add_stops_when_full(self):
        dictionary = DecoderDictionary(12)
        for _ in range(dictionary.max_code - 255):
            self.assertIsNotNone(dictionary.add(65, 65))
        self.assertTrue(dictionary.is_full)
        self.assertIsNone(dictionary.add(65, 65))
        self.assertEqual(dictionary.next_code, dictionary.max_value)

    def test_overlong_chain_is_rejected(self):
        dictionary = DecoderDictionary(12)
        # Self-referencing entry: the chain never reaches a literal
        dictionary.prefix_table[300] = 300
        with self.assertRaises(MalformedStreamError):
            dictionary.expand(300, bytearray())


if __name__ == "__main__":
    unittest.main()
