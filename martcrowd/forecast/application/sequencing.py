"""
Submission sequence numbers.
"""
import itertools


class SubmissionSequencer:
    """
    Issues monotonically increasing sequence numbers, one per submission.
    The most recently issued number identifies the only result allowed to
    reach the display.
    """

    def __init__(self):
        self._counter = itertools.count(1)
        self._latest = 0

    def issue(self) -> int:
        self._latest = next(self._counter)
        return self._latest

    @property
    def latest(self) -> int:
        return self._latest

    def is_latest(self, sequence: int) -> bool:
        return sequence == self._latest
