"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""
# mypy: disable-error-code=no-untyped-def
# pylint: disable=invalid-name

from unittest import mock

from specsplit.config import VERSION
from specsplit.main import ExitCodes
from specsplit_test.helpers import SpecSplitTestCase, describe_source, specsplit

SOURCES = {
    "catalog_test.go": describe_source("Catalog represents a store of bundles"),
    "csv_test.go": describe_source("ClusterServiceVersion", "CSV"),
    "gc_test.go": describe_source("Garbage collection for dependent resources"),
    "install_plan_test.go": describe_source(
        "Install Plan", "Install Plan with CSVs across multiple catalog sources",
    ),
    "subscription_test.go": describe_source("Subscription"),
    "suite_test.go": "package e2e\n\nfunc TestEndToEnd(t *testing.T) {}\n",
}

LABELED_SOURCES = {
    "a_test.go": (
        'var _ = Describe("Catalog", Label("Catalog"), func() {})\n'
        'var _ = Describe("GC", Label("GarbageCollection", "Slow"), func() {})\n'
    ),
    "b_test.go": 'var _ = Describe("Subscription", Label("Subscription"), func() {})\n',
}


class CliTest(SpecSplitTestCase):

    def test_single_chunk(self):
        test_dir = self.make_test_dir(SOURCES)
        result = specsplit(f"--chunks=1 --print-chunk=0 {test_dir}")
        self.assertEqual(result.returncode, 0)
        self.assertEqual(
            result.stdout,
            "(CSV|Catalog represents a store of bundles|ClusterServiceVersion"
            "|Garbage collection for dependent resources|Install Plan|Subscription) .*\n",
        )

    def test_chunks_cover_everything(self):
        test_dir = self.make_test_dir(SOURCES)
        debug_result = specsplit(f"--print-debug {test_dir}")
        self.assertEqual(debug_result.returncode, 0)
        all_prefixes = debug_result.stdout.splitlines()
        self.assertEqual(len(all_prefixes), 6)

        chunks = []
        for idx in range(3):
            result = specsplit(f"--chunks=3 --print-chunk={idx} {test_dir}")
            self.assertEqual(result.returncode, 0)
            regexp = result.stdout.strip()
            self.assertTrue(regexp.endswith(" .*"))
            chunk = regexp.removesuffix(" .*")
            if chunk.startswith("("):
                chunk = chunk[1:-1]
            chunks.append(chunk.split("|"))
        self.assertPartition(chunks, all_prefixes)

    def test_same_output_on_every_run(self):
        test_dir = self.make_test_dir(SOURCES)
        results = {
            specsplit(f"--chunks=3 --print-chunk=1 {test_dir}").stdout
            for _ in range(3)
        }
        self.assertEqual(len(results), 1)

    def test_debug(self):
        test_dir = self.make_test_dir(SOURCES)
        result = specsplit(f"--print-debug --chunks=2 --print-chunk=1 {test_dir}")
        self.assertEqual(
            result.stdout.splitlines(),
            [
                "CSV",
                "Catalog represents a store of bundles",
                "ClusterServiceVersion",
                "Garbage collection for dependent resources",
                "Install Plan",
                "Subscription",
            ],
        )

    def test_labels(self):
        test_dir = self.make_test_dir(LABELED_SOURCES)
        self.assertEqual(
            specsplit(f"--mode=label --chunks=2 --print-chunk=0 {test_dir}").stdout,
            "Catalog || GarbageCollection\n",
        )
        self.assertEqual(
            specsplit(f"--mode=label --chunks=2 --print-chunk=1 {test_dir}").stdout,
            "Slow || Subscription\n",
        )

    def test_pattern(self):
        test_dir = self.make_test_dir(SOURCES)
        result = specsplit(f"--pattern=csv_*.go {test_dir}")
        self.assertEqual(result.stdout, "(CSV|ClusterServiceVersion) .*\n")

    def test_warning_log_level(self):
        test_dir = self.make_test_dir(SOURCES)
        result = specsplit(f"--log-level=warning {test_dir}")
        self.assertEqual(result.returncode, 0)
        self.assertIn("suite_test.go", result.stderr)
        quiet_result = specsplit(f"{test_dir}")
        self.assertEqual(quiet_result.stderr, "")

    def test_version(self):
        result = specsplit("--version")
        self.assertEqual(result.returncode, 0)
        self.assertIn(VERSION, result.stdout)


class CliErrorsTest(SpecSplitTestCase):

    def test_print_chunk_out_of_range(self):
        result = specsplit("--chunks=2 --print-chunk=2 /nonexistent/specsplit")
        self.assertEqual(result.returncode, ExitCodes.CONFIGURATION_ERROR)
        self.assertEqual(result.stdout, "")
        self.assertIn(
            "the chunk to print (2) must be a smaller number than the number of chunks (2)",
            result.stderr,
        )

    def test_missing_test_dir(self):
        result = specsplit("--chunks=2")
        self.assertEqual(result.returncode, ExitCodes.CONFIGURATION_ERROR)
        self.assertIn("test directory required as the argument", result.stderr)

    def test_more_chunks_than_specs(self):
        test_dir = self.make_test_dir(SOURCES)
        result = specsplit(f"--chunks=7 --print-chunk=0 {test_dir}")
        self.assertEqual(result.returncode, ExitCodes.CONFIGURATION_ERROR)
        self.assertEqual(result.stdout, "")
        self.assertIn("have more desired chunks (7) than specs (6)", result.stderr)

    def test_empty_chunk(self):
        test_dir = self.make_test_dir(SOURCES)
        # ceil(6 / 5) == 2, so only 3 chunks get any specs:
        result = specsplit(f"--chunks=5 --print-chunk=4 {test_dir}")
        self.assertEqual(result.returncode, ExitCodes.INTERNAL_ERROR)
        self.assertEqual(result.stdout, "")
        self.assertIn("bug: chunk 4 has no elements", result.stderr)

    def test_unreadable_file(self):
        test_dir = self.make_test_dir(SOURCES)
        (test_dir / "broken_test.go").mkdir()
        result = specsplit(f"{test_dir}")
        self.assertEqual(result.returncode, ExitCodes.EXTRACTION_ERROR)
        self.assertEqual(result.stdout, "")
        self.assertIn("broken_test.go", result.stderr)

    def test_bad_log_level(self):
        test_dir = self.make_test_dir(SOURCES)
        result = specsplit(f"--log-level=loud {test_dir}")
        self.assertEqual(result.returncode, ExitCodes.CONFIGURATION_ERROR)
        self.assertIn("not a valid log level", result.stderr)

    def test_bad_mode(self):
        test_dir = self.make_test_dir(SOURCES)
        result = specsplit(f"--mode=tags {test_dir}")
        self.assertEqual(result.returncode, ExitCodes.USAGE_ERROR)

    def test_not_a_number(self):
        result = specsplit("--chunks=many .")
        self.assertEqual(result.returncode, ExitCodes.USAGE_ERROR)
        self.assertEqual(result.stdout, "")

    def test_unknown_option(self):
        test_dir = self.make_test_dir(SOURCES)
        result = specsplit(f"--bogus {test_dir}")
        self.assertEqual(result.returncode, ExitCodes.USAGE_ERROR)
        self.assertEqual(result.stdout, "")
        self.assertIn(":: error: unrecognized arguments: --bogus", result.stderr)

    def test_bug_is_not_a_configuration_error(self):
        test_dir = self.make_test_dir(SOURCES)
        with (
                mock.patch("specsplit.main.run", side_effect=ValueError("bug")),
                self.assertRaises(ValueError),
        ):
            specsplit(f"{test_dir}")


class CliConfigTest(SpecSplitTestCase):

    def test_config_defaults(self):
        test_dir = self.make_test_dir(LABELED_SOURCES)
        config_path = test_dir / "specsplit.conf"
        config_path.write_text(
            "[split]\nChunks = 2\nPrintChunk = 1\nMode = label\n", encoding="utf-8",
        )
        result = specsplit(f"--specsplit-config={config_path} {test_dir}")
        self.assertEqual(result.stdout, "Slow || Subscription\n")
        result = specsplit(f"--specsplit-config={config_path} --print-chunk=0 {test_dir}")
        self.assertEqual(result.stdout, "Catalog || GarbageCollection\n")

    def test_broken_config(self):
        test_dir = self.make_test_dir({})
        config_path = test_dir / "specsplit.conf"
        config_path.write_text("[split]\nChunks = many\n", encoding="utf-8")
        result = specsplit(f"--specsplit-config={config_path} {test_dir}")
        self.assertEqual(result.returncode, ExitCodes.CONFIGURATION_ERROR)
        self.assertIn("is not a number", result.stderr)
