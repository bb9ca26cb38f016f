# topmark:header:start
#
#   project      : GsiPatch
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Pytest configuration for the GsiPatch test suite.

This file sets up global fixtures and logging for test runs and provides the
shared test doubles:

- `FakeRunner`: a recording `CommandRunner` that answers ``getprop`` from a
  dict and lets tests make selected commands fail.
- `make_config`: a frozen `Config` whose paths live under ``tmp_path``.
- `RW_SYSTEM_SAMPLE`: an excerpt of a phh ``rw-system.sh``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from hypothesis import settings

from gsipatch.config import Config, MutableConfig, logging
from gsipatch.constants import ENV_CONFIG_PATH, ENV_LOG_LEVEL
from gsipatch.system.commands import CommandResult

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


settings.register_profile("long", max_examples=2000, deadline=None)

# Excerpt of rw-system.sh from a phh-based Android 11 GSI.
RW_SYSTEM_SAMPLE: str = """\
#!/system/bin/sh

#Uncomment me to output sh -x of this script to /cache/phh/logs
#if [ -z "$debug" ];then
#	mkdir -p /cache/phh
#	debug=1 exec sh -x "$(readlink -f -- "$0")" > /cache/phh/logs 2>&1
#fi

vndk="$(getprop persist.sys.vndk)"
[ -z "$vndk" ] && vndk="$(getprop ro.vndk.version |grep -oE '^[0-9]+')"

if mount -o remount,rw /system; then
    resize2fs "$(grep ' /system ' /proc/mounts | cut -d ' ' -f 1)" || true
else
    mount -o remount,rw /
    major="$(stat -c '%D' /.|sed -E 's/^([0-9a-f]+)([0-9a-f]{2})$/\\1/g')"
    minor="$(stat -c '%D' /.|sed -E 's/^([0-9a-f]+)([0-9a-f]{2})$/\\2/g')"
    mknod /dev/tmp-phh b "$((0x$major))" "$((0x$minor))"
    resize2fs /dev/root || true
    resize2fs /dev/tmp-phh || true
fi
mount -o remount,ro /system || true
mount -o remount,ro / || true

if [ "$vndk" -ge 30 ];then
    mount -o bind /system/system_ext/apex/com.android.media.swcodec/lib64/libstagefright_foundation.so /system/lib64/libstagefright_foundation.so
fi

setprop sys.phh.uninstall-ota false
"""

# Lines from "if mount -o remount,rw /system; then" through "mount -o remount,ro / || true".
RW_SYSTEM_REGION_LINES: int = 12


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.fixture`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.fixture`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return cast("Callable[[F], F]", pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Ensure the developer's shell does not leak config or log level into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        tmp_path (Path): Per-test temporary directory.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
    monkeypatch.setattr(
        "gsipatch.config.model.DEFAULT_CONFIG_PATH", str(tmp_path / "no-such-gsipatch.toml")
    )


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so failures come with full context.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


class FakeRunner:
    """Recording `CommandRunner` for driver tests.

    Args:
        props (Mapping[str, str] | None): ``getprop`` answers; defaults describe a
            stock (non system-as-root) device booted into TWRP.
        failures (Mapping[str, int] | None): Command-line prefixes mapped to the
            return code to report, e.g. ``{"resize2fs": 8}``.
    """

    def __init__(
        self,
        *,
        props: Mapping[str, str] | None = None,
        failures: Mapping[str, int] | None = None,
    ) -> None:
        self.props: dict[str, str] = {"ro.twrp.boot": "1", "ro.twrp.sar": ""}
        self.props.update(props or {})
        self.failures: dict[str, int] = dict(failures or {})
        self.calls: list[tuple[str, ...]] = []

    def run(self, argv: Sequence[str]) -> CommandResult:
        """Record ``argv`` and return a canned result."""
        args: tuple[str, ...] = tuple(argv)
        self.calls.append(args)
        if args[0] == "getprop":
            return CommandResult(argv=args, returncode=0, stdout=self.props.get(args[1], "") + "\n")
        line: str = " ".join(args)
        for prefix, rc in self.failures.items():
            if line.startswith(prefix):
                return CommandResult(argv=args, returncode=rc, stderr=f"{args[0]}: failed")
        return CommandResult(argv=args, returncode=0)

    def commands(self, tool: str) -> list[tuple[str, ...]]:
        """Return the recorded invocations of ``tool``."""
        return [c for c in self.calls if c[0] == tool]

    def lines(self) -> list[str]:
        """Return the recorded invocations as command-line strings, skipping getprop."""
        return [" ".join(c) for c in self.calls if c[0] != "getprop"]


def make_config(root: Path, **overrides: Any) -> Config:
    """Return a frozen `Config` whose filesystem paths live under ``root``.

    Args:
        root (Path): Directory standing in for the device root.
        **overrides (Any): Attribute overrides applied before freezing.

    Returns:
        Config: Immutable configuration for the test.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    m.script = str(root / "system" / "bin" / "rw-system.sh")
    m.backup = str(root / "system" / "bin" / "rw-system.bak")
    m.system_mount = str(root / "system")
    m.system_root = str(root / "system_root")
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def write_script(config: Config, text: str = RW_SYSTEM_SAMPLE, mode: int = 0o644) -> Path:
    """Create the target script described by ``config`` with ``text``."""
    path = Path(config.script)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8", newline="")
    path.chmod(mode)
    return path


@fixture
def fake_runner() -> FakeRunner:
    """A `FakeRunner` for a stock device in TWRP where every command succeeds."""
    return FakeRunner()


@fixture
def device_root(tmp_path: Path) -> Path:
    """An empty directory standing in for the device root."""
    root = tmp_path / "device"
    root.mkdir()
    return root


@fixture
def as_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend the tests run with an effective uid of 0."""
    monkeypatch.setattr("gsipatch.system.device.os.geteuid", lambda: 0)
