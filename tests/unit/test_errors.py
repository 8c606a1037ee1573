from core.errors import (
    USER_MESSAGES,
    AuthenticationError,
    ErrorCode,
    ItineraryPersistenceError,
    NotFoundError,
    PersistenceError,
    SmartTripError,
    ValidationError,
)


def test_all_error_codes_have_user_message():
    for code in ErrorCode:
        assert code in USER_MESSAGES


def test_default_code_is_internal_error():
    assert SmartTripError("boom").code == ErrorCode.INTERNAL_ERROR


def test_user_message_lookup():
    err = SmartTripError("trip 42 missing for user 7", code=ErrorCode.TRIP_NOT_FOUND)
    assert err.user_message == "Trip not found."


def test_subclasses_inherit_user_message():
    assert AuthenticationError("no user", code=ErrorCode.AUTH_FAILED).user_message == USER_MESSAGES[ErrorCode.AUTH_FAILED]
    assert NotFoundError("x", code=ErrorCode.ITINERARY_ITEM_NOT_FOUND).user_message == USER_MESSAGES[ErrorCode.ITINERARY_ITEM_NOT_FOUND]
    assert PersistenceError("x", code=ErrorCode.DATABASE_ERROR).user_message == USER_MESSAGES[ErrorCode.DATABASE_ERROR]
    assert ValidationError("bad", code=ErrorCode.INVALID_REQUEST).user_message == USER_MESSAGES[ErrorCode.INVALID_REQUEST]


def test_itinerary_persistence_error_carries_progress():
    err = ItineraryPersistenceError("Saved 2 of 5 itinerary items", created=["a", "b"], failed_index=2)
    assert isinstance(err, PersistenceError)
    assert err.code == ErrorCode.PARTIAL_ITINERARY
    assert err.created == ["a", "b"]
    assert err.failed_index == 2


def test_user_message_never_exposes_internal_message():
    internal = "duplicate key value violates unique constraint \"users_email_key\""
    err = PersistenceError(internal, code=ErrorCode.DATABASE_ERROR)
    assert internal not in err.user_message
