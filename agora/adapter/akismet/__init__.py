"""Akismet spam check adapter."""

from .client import (
    AkismetError,
    AkismetSpamClassifier,
    MockAkismetSpamClassifier,
    RealAkismetSpamClassifier,
)

__all__ = [
    "AkismetError",
    "AkismetSpamClassifier",
    "MockAkismetSpamClassifier",
    "RealAkismetSpamClassifier",
]
