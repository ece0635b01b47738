from collections.abc import Sequence
from typing import Protocol

from crosslist.models import ClassificationResult


class ClassificationService(Protocol):
    """One round trip to a name classifier.

    Implementations raise ClassificationError subclasses on transport,
    credential or parse failures and leave the failure policy to the batcher.
    """

    def submit(self, names: Sequence[str]) -> list[ClassificationResult]:
        ...
