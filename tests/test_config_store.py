import tempfile
import unittest
from pathlib import Path

from portfolio_pulse.services.config_store import ConfigStore


class ConfigStoreTest(unittest.TestCase):
    def test_load_creates_default_and_save_round_trip(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config" / "settings.yaml"
            store = ConfigStore(config_path=config_path)

            loaded = store.load()
            self.assertTrue(config_path.exists())
            self.assertEqual(loaded.news.cache_ttl_minutes, 30)
            self.assertEqual(loaded.sentiment.default_provider, "cohere")
            self.assertEqual(sorted(loaded.generation_provider_map()), ["cohere", "mock"])

            updated = loaded.model_copy(
                update={"presentation": loaded.presentation.model_copy(update={"articles_per_tab": 4})}
            )
            store.save(updated)

            reloaded = store.load()
            self.assertEqual(reloaded.presentation.articles_per_tab, 4)
            self.assertEqual(reloaded.config_file, config_path)

    def test_patch_merges_nested_sections(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = ConfigStore(config_path=Path(tmpdir) / "settings.yaml")

            patched = store.patch({"portfolio": {"seed": 99, "min_stocks": 8, "max_stocks": 4}})

            self.assertEqual(patched.portfolio.seed, 99)
            # Inverted bounds are swapped on normalization.
            self.assertEqual(patched.portfolio.min_stocks, 4)
            self.assertEqual(patched.portfolio.max_stocks, 8)
            self.assertAlmostEqual(patched.portfolio.fetch_delay_seconds, 0.8)
            self.assertEqual(store.load().portfolio.seed, 99)

    def test_empty_provider_list_is_backfilled(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = ConfigStore(config_path=Path(tmpdir) / "settings.yaml")

            patched = store.patch({"sentiment": {"providers": []}})

            self.assertEqual([item.provider_id for item in patched.sentiment.providers], ["cohere", "mock"])


if __name__ == "__main__":
    unittest.main()
