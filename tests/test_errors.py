from errors import FileTooLarge, GrayifyError, InvalidInput, ProcessingFailure, UnsupportedFileType


def test_default_user_messages():
    assert UnsupportedFileType().user_message == "Please select a valid image file."
    assert FileTooLarge().user_message == "File size too large. Please select an image smaller than 10MB."
    assert ProcessingFailure().user_message == "Error processing image. Please try again."
    assert InvalidInput().user_message == ProcessingFailure.user_message


def test_user_message_override_is_per_instance():
    err = FileTooLarge("too big", user_message="smaller than 5MB please")
    assert err.user_message == "smaller than 5MB please"
    assert str(err) == "too big"
    assert FileTooLarge().user_message.endswith("10MB.")


def test_message_defaults_to_user_message():
    assert str(GrayifyError()) == GrayifyError.user_message
