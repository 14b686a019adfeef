class ScoreError(Exception):
    """Base for every recoverable failure raised while scoring a sheet."""

    kind = "error"
    user_message = "Something went wrong while reading the response sheet."


class ParseError(ScoreError):
    kind = "parse"
    user_message = "Unrecognized document: this does not look like a response sheet."


class MalformedDateError(ScoreError):
    kind = "date"
    user_message = "Could not determine the exam date from the response sheet."


class UnknownShiftError(ScoreError):
    kind = "shift"
    user_message = "Could not determine the exam shift from the response sheet."


class KeyNotFoundError(ScoreError):
    kind = "key"
    user_message = "Results are not yet available for this session."

    def __init__(self, exam_id):
        super().__init__(f"No answer key published for {exam_id}")
        self.exam_id = exam_id


class AnswerKeyLoadError(ScoreError):
    kind = "keys"
    user_message = "Answer keys could not be loaded."


class FetchError(ScoreError):
    kind = "fetch"
    user_message = "Invalid URL or server error."
