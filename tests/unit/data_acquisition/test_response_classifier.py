import pytest

from data_acquisition.stock_data.response_classifier import ResponseClassifier, ResponseKind


@pytest.fixture
def classifier():
    return ResponseClassifier()


def test_error_message_is_hard_error(classifier):
    result = classifier.classify({'Error Message': 'Invalid API call. Please retry or visit the documentation.'})

    assert result.kind is ResponseKind.HARD_ERROR
    assert result.message.startswith('Invalid API call')
    assert not result.is_retryable


def test_error_message_wins_over_advisory(classifier):
    result = classifier.classify({'Error Message': 'bad', 'Note': 'API call frequency exceeded'})
    assert result.kind is ResponseKind.HARD_ERROR


@pytest.mark.parametrize("field_name, text", [
    ('Note', 'Thank you for using Alpha Vantage! Our standard API call frequency is 5 calls per minute.'),
    ('Note', 'FREQUENCY limit reached'),
    ('Information', 'You have exceeded the daily CALL LIMIT for this key.'),
])
def test_quota_advisory_is_rate_limited(classifier, field_name, text):
    result = classifier.classify({field_name: text})

    assert result.kind is ResponseKind.RATE_LIMITED
    assert result.message == text
    assert result.is_retryable


def test_non_quota_advisory_is_ambiguous(classifier):
    result = classifier.classify({'Information': 'Premium endpoint'})

    assert result.kind is ResponseKind.AMBIGUOUS_ADVISORY
    assert result.message == 'Premium endpoint'
    assert result.is_retryable


def test_any_quota_advisory_marks_rate_limited(classifier):
    result = classifier.classify({'Note': 'Premium endpoint', 'Information': 'api call frequency exceeded'})
    assert result.kind is ResponseKind.RATE_LIMITED


def test_plain_payload_is_success(classifier):
    payload = {'Symbol': 'IBM', 'Name': 'International Business Machines'}
    result = classifier.classify(payload)

    assert result.kind is ResponseKind.SUCCESS
    assert result.payload is payload


def test_empty_advisory_is_ignored(classifier):
    assert classifier.classify({'Note': '', 'symbol': 'IBM'}).kind is ResponseKind.SUCCESS
