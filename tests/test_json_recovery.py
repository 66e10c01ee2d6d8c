import unittest

from skillscope.services.json_recovery import recover_json


class JsonRecoveryTests(unittest.TestCase):
    def test_fenced_block_is_parsed(self):
        self.assertEqual(recover_json('```json\n{"a":1}\n```'), {"a": 1})

    def test_raw_json_is_parsed(self):
        self.assertEqual(recover_json('{"a":1}'), {"a": 1})

    def test_plain_text_returns_none(self):
        self.assertIsNone(recover_json("not json"))

    def test_fenced_block_after_preamble(self):
        raw = 'Sure! Here is the analysis:\n```json\n{"userSkills": ["Python"]}\n```\nGood luck.'
        self.assertEqual(recover_json(raw), {"userSkills": ["Python"]})

    def test_malformed_fenced_block_returns_none(self):
        self.assertIsNone(recover_json('```json\n{"a": 1,,}\n```'))

    def test_untagged_fence_is_not_treated_as_json_block(self):
        self.assertIsNone(recover_json('```\n{"a": 1}\n```'))

    def test_deeply_nested_fenced_block_returns_none(self):
        raw = "```json\n" + "[" * 100000 + "]" * 100000 + "\n```"
        self.assertIsNone(recover_json(raw))

    def test_deeply_nested_raw_json_returns_none(self):
        self.assertIsNone(recover_json("[" * 100000 + "]" * 100000))

    def test_empty_input_returns_none(self):
        self.assertIsNone(recover_json(""))

    def test_custom_strategy_order(self):
        def always_fails(raw):
            raise ValueError("nope")

        def constant(raw):
            return {"from": "constant"}

        self.assertEqual(recover_json("anything", strategies=(always_fails, constant)), {"from": "constant"})


if __name__ == "__main__":
    unittest.main()
