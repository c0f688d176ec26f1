"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

import contextlib
import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING
from unittest import TestCase, mock

from specsplit.args import CachedArgs
from specsplit.config import SpecSplitConfig
from specsplit.logging_extras import DEFAULT_LOG_LEVEL, LogLevel
from specsplit.main import main
from specsplit.specprint import ColorMode

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from typing import IO, Any, NoReturn


def log_stderr(line: str) -> None:
    sys.__stderr__.write(line + "\n")  # type: ignore[union-attr]
    sys.__stderr__.flush()  # type: ignore[union-attr]


class CmdResult:

    stdout: str
    stderr: str

    def __init__(
            self,
            returncode: int | None = None,
            stdout: str | None = None,
            stderr: str | None = None,
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""

    def __repr__(self) -> str:
        return (
            f"<{self.returncode}>:\n"
            f"{self.stderr}\n"
            f"{self.stdout}\n"
        )


class FakeExit(Exception):  # noqa: N818
    pass


class InterceptSysOutput:

    stdout_text: str
    stderr_text: str
    returncode: int | None = None

    _exited = False

    _patcher_stdout: "mock._patch[IO[str]]"
    _patcher_stderr: "mock._patch[IO[str]]"
    _patcher_exit: "mock._patch[Callable[..., NoReturn]]"
    patchers: "Sequence[mock._patch[Any]]"

    def _fake_exit(self, code: int = 0) -> "NoReturn":
        self.returncode = code
        raise FakeExit

    def __init__(self) -> None:
        self.out_file = tempfile.TemporaryFile("w+", encoding="UTF-8")  # noqa: SIM115
        self.err_file = tempfile.TemporaryFile("w+", encoding="UTF-8")  # noqa: SIM115
        self.out_file.isatty = lambda: False  # type: ignore[method-assign]
        self.err_file.isatty = lambda: False  # type: ignore[method-assign]

        self._patcher_stdout = mock.patch("sys.stdout", new=self.out_file)
        self._patcher_stderr = mock.patch("sys.stderr", new=self.err_file)
        self._patcher_exit = mock.patch("sys.exit", new=self._fake_exit)
        self.patchers = [
            self._patcher_stdout,
            self._patcher_stderr,
            self._patcher_exit,
        ]

    def __enter__(self) -> "InterceptSysOutput":
        for patcher in self.patchers:
            patcher.start()
        return self

    def __exit__(self, *_exc_details: object) -> None:
        if self._exited:
            return
        for patcher in self.patchers:
            patcher.stop()

        self.out_file.flush()
        self.err_file.flush()
        self.out_file.seek(0)
        self.err_file.seek(0)
        self.stdout_text = self.out_file.read()
        self.stderr_text = self.err_file.read()
        self.out_file.close()
        self.err_file.close()

        self._exited = True


def reset_state() -> None:
    CachedArgs.args = None
    SpecSplitConfig.reset()
    LogLevel.set_name(DEFAULT_LOG_LEVEL)
    ColorMode.set_value("never")


def specsplit(cmd: str, *, print_on_fails: bool = False) -> CmdResult:
    new_args = ["specsplit", *cmd.split(" ")]
    intercepted = InterceptSysOutput()
    try:
        with (
                intercepted,
                contextlib.suppress(FakeExit),
                mock.patch("sys.argv", new=new_args),
        ):
            reset_state()
            main(embed=True)
    finally:
        reset_state()

    result = CmdResult(
        returncode=intercepted.returncode,
        stdout=intercepted.stdout_text,
        stderr=intercepted.stderr_text,
    )
    if print_on_fails and (intercepted.returncode != 0):
        log_stderr(str(result))
    return result


def write_sources(directory: Path, sources: dict[str, str]) -> None:
    for file_name, text in sources.items():
        (directory / file_name).write_text(text, encoding="utf-8")


def describe_source(*names: str, package: str = "e2e") -> str:
    return "\n".join([
        f"package {package}",
        "",
        *(
            f'var _ = Describe("{name}", func() {{\n\tIt("works", func() {{}})\n}})\n'
            for name in names
        ),
    ])


class SpecSplitTestCase(TestCase):
    # pylint: disable=invalid-name

    def setUp(self) -> None:
        super().setUp()
        reset_state()
        # never pick up a real user config:
        self._config_root_patcher = mock.patch(
            "specsplit.config.ConfigRoot.value",
            new=Path(tempfile.gettempdir()) / "specsplit_test_no_config",
            create=True,
        )
        self._config_root_patcher.start()

    def tearDown(self) -> None:
        self._config_root_patcher.stop()
        reset_state()
        super().tearDown()

    def make_test_dir(self, sources: dict[str, str]) -> Path:
        temp_dir = tempfile.TemporaryDirectory()  # pylint: disable=consider-using-with
        self.addCleanup(temp_dir.cleanup)
        path = Path(temp_dir.name)
        write_sources(path, sources)
        return path

    def assertPartition(  # noqa: N802
            self, chunks: "Sequence[Sequence[str]]", items: "Sequence[str]",
    ) -> None:
        flat = [item for chunk in chunks for item in chunk]
        self.assertEqual(len(flat), len(set(flat)), f"duplicated items in {chunks}")
        self.assertEqual(set(flat), set(items))