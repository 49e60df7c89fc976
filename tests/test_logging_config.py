"""Tests for logging setup and sensitive data masking."""

import logging

from svcutil.logging_config import SensitiveDataFilter, set_correlation_id, setup_logging


def make_record(msg, args=()):
    return logging.LogRecord('test', logging.INFO, __file__, 1, msg, args, None)


def test_filter_masks_bearer_tokens():
    record = make_record('GET /files Authorization: Bearer svc_secret123')

    SensitiveDataFilter().filter(record)

    assert 'svc_secret123' not in record.getMessage()
    assert '***MASKED***' in record.getMessage()


def test_filter_masks_query_tokens_in_args():
    record = make_record('GET %s', ('/download?token=abc123&page=2',))

    SensitiveDataFilter().filter(record)

    message = record.getMessage()
    assert 'abc123' not in message
    assert 'page=2' in message


def test_filter_leaves_plain_messages_alone():
    record = make_record('Persisted 5 bytes to /data/a.txt')

    SensitiveDataFilter().filter(record)

    assert record.getMessage() == 'Persisted 5 bytes to /data/a.txt'


def test_setup_logging_is_idempotent():
    logger = setup_logging('svcutil-test-component', log_level='debug')
    assert logger.level == logging.DEBUG

    again = setup_logging('svcutil-test-component')

    assert logger is again
    assert len(logger.handlers) == 1
    assert not logger.propagate


def test_setup_logging_unknown_level_falls_back_to_info():
    logger = setup_logging('svcutil-test-fallback', log_level='chatty')

    assert logger.level == logging.INFO


def test_set_correlation_id_updates_format():
    logger = setup_logging('svcutil-test-correlation')

    set_correlation_id(logger, 'req-42')

    record = make_record('hello')
    assert '[req-42]' in logger.handlers[0].format(record)
