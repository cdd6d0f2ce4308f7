"""Tests for logging configuration, hooks and unwrap diagnostics."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from tagged_adt import Err, Nothing, Ok, UnwrapError
from tagged_adt._logging import (
    LOGGER_NAME,
    add_log_hook,
    configure_logging,
    get_logger,
    is_configured,
    remove_log_hook,
    reset_logging,
)

pytestmark = pytest.mark.usefixtures('reset_library_state')


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('tagged_adt.test').info('Test message', extra_field='extra_value')

        test_entries = [e for e in received if e.get('event') == 'Test message']
        assert len(test_entries) == 1
        assert test_entries[0]['extra_field'] == 'extra_value'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append(event_dict['event'])

        configure_logging(level='DEBUG')
        add_log_hook(hook)
        get_logger('tagged_adt.test').info('First')
        remove_log_hook(hook)
        get_logger('tagged_adt.test').info('Second')

        assert calls == ['First']

    def test_failing_hook_does_not_break_logging(self) -> None:
        """A raising hook does not stop later hooks."""
        received: list[dict[str, Any]] = []

        def broken(_event_dict: dict[str, Any]) -> None:
            raise ValueError('hook failure')

        configure_logging(level='DEBUG')
        add_log_hook(broken)
        add_log_hook(received.append)
        get_logger('tagged_adt.test').warning('still logged')

        assert [e['event'] for e in received] == ['still logged']

    def test_level_filters_events(self) -> None:
        """Events below the configured level never reach hooks."""
        received: list[dict[str, Any]] = []

        configure_logging(level='WARNING')
        add_log_hook(received.append)
        get_logger('tagged_adt.test').debug('hidden')

        assert received == []


class TestUnwrapDiagnostics:
    """Unwrap failures are logged only once logging is configured."""

    def test_silent_when_unconfigured(self) -> None:
        """No event is emitted before configuration."""
        received: list[dict[str, Any]] = []
        add_log_hook(received.append)

        assert not is_configured()
        with pytest.raises(UnwrapError):
            Nothing.get()
        assert received == []

    def test_unwrap_failure_logged(self) -> None:
        """A failed get() emits an unwrap_failed debug event."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        with pytest.raises(UnwrapError):
            Nothing.get()

        entries = [e for e in received if e.get('event') == 'unwrap_failed']
        assert len(entries) == 1
        assert entries[0]['operation'] == 'get'
        assert entries[0]['variant'] == 'NONE'
        assert entries[0]['expected'] == 'SOME'
        assert entries[0]['level'] == 'debug'

    def test_result_unwrap_failures_logged(self) -> None:
        """get_ok() and get_err() report their operation."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        with pytest.raises(UnwrapError):
            Err('x').get_ok()
        with pytest.raises(UnwrapError):
            Ok('x').get_err()

        operations = [e['operation'] for e in received if e.get('event') == 'unwrap_failed']
        assert operations == ['get_ok', 'get_err']

    def test_total_operations_do_not_log(self) -> None:
        """Successful and total operations emit nothing."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        assert Nothing.unwrap_or(1) == 1
        assert Ok(2).get_ok() == 2

        assert received == []


class TestHandlerPlacement:
    """configure_logging owns the tagged_adt logger and nothing above it."""

    def test_root_handlers_untouched(self) -> None:
        """The host application's root handlers and level survive configuration."""
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        previous_level = root.level
        try:
            configure_logging(level='DEBUG')
            assert host_handler in root.handlers
            assert root.level == previous_level
        finally:
            root.removeHandler(host_handler)

    def test_library_logger_gets_single_handler(self) -> None:
        """Reconfiguring replaces the library handler instead of stacking another."""
        library_logger = logging.getLogger(LOGGER_NAME)
        before = list(library_logger.handlers)

        configure_logging(level='DEBUG')
        configure_logging(level='INFO', json_output=False)

        added = [h for h in library_logger.handlers if h not in before]
        assert len(added) == 1
        assert library_logger.level == logging.INFO
        assert library_logger.propagate is False

    def test_reset_detaches_handler(self) -> None:
        """reset_logging() restores the library logger to its defaults."""
        library_logger = logging.getLogger(LOGGER_NAME)
        before = list(library_logger.handlers)

        configure_logging(level='DEBUG')
        reset_logging()

        assert library_logger.handlers == before
        assert library_logger.level == logging.NOTSET
        assert library_logger.propagate is True
        assert not is_configured()
