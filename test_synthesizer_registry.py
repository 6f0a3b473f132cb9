# test_synthesizer_registry.py
import unittest

from config import GlobalConfig
from context import RunContext
from synthesizers.base import SYNTHESIZER_REGISTRY, ReportSynthesizer, register_synthesizer
from synthesizers.factory import get_synthesizer
from synthesizers.ollama_synthesizer import OllamaSynthesizer
from synthesizers.plain_synthesizer import PlainTextSynthesizer


def make_context(use_ai):
    return RunContext(
        from_ref=None,
        to_ref=None,
        limit=10,
        use_ai=use_ai,
        model="gemma3",
        output_path=None,
        global_config=GlobalConfig(),
    )


class TestSynthesizerRegistry(unittest.TestCase):

    def test_builtin_synthesizers_are_registered(self):
        self.assertIs(SYNTHESIZER_REGISTRY["plain"], PlainTextSynthesizer)
        self.assertIs(SYNTHESIZER_REGISTRY["ollama"], OllamaSynthesizer)

    def test_flag_selects_variant(self):
        self.assertIsInstance(get_synthesizer(make_context(False)), PlainTextSynthesizer)
        self.assertIsInstance(get_synthesizer(make_context(True)), OllamaSynthesizer)

    def test_duplicate_id_is_rejected(self):
        with self.assertRaises(ValueError):

            @register_synthesizer("plain")
            class AnotherPlain(ReportSynthesizer):
                name = "another"

                def synthesize(self, repo_path, from_commit, to_commit, commits):
                    return ""


if __name__ == "__main__":
    unittest.main()
