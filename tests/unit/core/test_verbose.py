# tests/unit/core/test_verbose.py
# Unit tests for diagnostic events routed through the reporter registry

from unittest.mock import MagicMock

from helpkit.core.output import (
    DiagnosticLevel,
    NullReporter,
    Reporter,
    get_reporter,
    set_reporter,
)
from helpkit.core.verbose import (
    cleanup_verbose,
    vlog_config,
    vlog_file_read,
    vlog_lookup,
    vlog_render,
    vlog_resource,
)

VERBOSE = DiagnosticLevel.VERBOSE
DEBUG = DiagnosticLevel.DEBUG


def _recording_reporter() -> MagicMock:
    reporter = MagicMock()
    set_reporter(reporter)
    return reporter


# * Null reporter is registered by default & drops events
def test_default_reporter_is_null():
    assert isinstance(get_reporter(), NullReporter)
    assert isinstance(get_reporter(), Reporter)
    vlog_lookup("build", found=True)


def test_vlog_lookup_messages():
    reporter = _recording_reporter()

    vlog_lookup(None, found=True)
    vlog_lookup("build", found=True)
    vlog_lookup("deploy", found=False)

    assert [c.args for c in reporter.emit.call_args_list] == [
        (VERBOSE, "LOOKUP", "No command requested"),
        (VERBOSE, "LOOKUP", "Command 'build' found in manifest"),
        (VERBOSE, "LOOKUP", "Command 'deploy' not in manifest"),
    ]


# * Hits only at DEBUG; misses at VERBOSE
def test_vlog_resource_levels():
    reporter = _recording_reporter()

    vlog_resource("Foo", "en", found=True)
    vlog_resource("Bar", "es", found=False)

    assert [c.args for c in reporter.emit.call_args_list] == [
        (DEBUG, "RESOURCE", "Foo (en)"),
        (VERBOSE, "RESOURCE", "Missing resource 'Bar' for locale 'es'"),
    ]


def test_vlog_render_detail():
    reporter = _recording_reporter()

    vlog_render("command", "build")
    vlog_render("general")

    assert [c.args[2] for c in reporter.emit.call_args_list] == [
        "Rendering command usage (build)",
        "Rendering general usage",
    ]


def test_vlog_file_read_and_config(tmp_path):
    reporter = _recording_reporter()

    vlog_file_read(tmp_path / "m.json", 1234)
    vlog_config("locale", "es")

    assert reporter.emit.call_args_list[0].args == (
        VERBOSE,
        "FILE",
        f"Read: {tmp_path / 'm.json'} (1,234 bytes)",
    )
    assert reporter.emit.call_args_list[1].args == (VERBOSE, "CONFIG", "locale = es")


# * Cleanup closes the active reporter & restores the null one
def test_cleanup_verbose():
    reporter = _recording_reporter()

    cleanup_verbose()

    reporter.close.assert_called_once_with()
    assert isinstance(get_reporter(), NullReporter)
